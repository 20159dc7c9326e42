from __future__ import annotations

import errno
import json
import os
import shutil
from pathlib import Path
from typing import Any


def read_json(path: Path) -> Any | None:
    """
    Read JSON from disk.

    Returns None for missing or blank files. File-system errors surface as
    OSError, unparseable content as ValueError (JSONDecodeError / UnicodeDecodeError).
    """
    if not path.exists():
        return None
    raw = path.read_text(encoding="utf-8")
    if not raw.strip():
        return None
    return json.loads(raw)


def write_json(
    path: Path,
    payload: Any,
    *,
    atomic: bool = True,
    indent: int = 2,
    sort_keys: bool = False,
) -> None:
    """
    Write JSON to disk.

    atomic=True writes to a sibling temp file then replaces the target, so readers
    never see a half-written document. atomic=False truncates and rewrites in place.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not atomic:
        with path.open("w", encoding="utf-8") as f:
            _dump(payload, f, indent=indent, sort_keys=sort_keys)
        return

    exists = path.exists()
    # Renaming only needs a writable directory; honor the target's own permissions.
    if exists and not os.access(path, os.W_OK):
        raise PermissionError(errno.EACCES, "file is not writable", str(path))

    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            _dump(payload, f, indent=indent, sort_keys=sort_keys)
            f.flush()
            os.fsync(f.fileno())
        if exists:
            shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def _dump(payload: Any, f, *, indent: int, sort_keys: bool) -> None:
    json.dump(payload, f, indent=indent, sort_keys=sort_keys, ensure_ascii=False)
    f.write("\n")
