from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from persistence.paths import default_datasource


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    # Backing JSON file
    datasource: Path
    atomic_writes: bool
    json_indent: int

    # Logging
    log_level: str


def get_settings() -> Settings:
    raw_datasource = os.getenv("SAFETYNET_DATASOURCE", "").strip()
    datasource = Path(raw_datasource).expanduser() if raw_datasource else default_datasource()

    # Crash-safe temp-file-and-rename unless explicitly turned off.
    atomic_writes = _env_bool("SAFETYNET_ATOMIC_WRITES", True)
    json_indent = max(0, _env_int("SAFETYNET_JSON_INDENT", 2))

    log_level = (os.getenv("LOG_LEVEL", "INFO").strip() or "INFO").upper()

    return Settings(
        datasource=datasource,
        atomic_writes=atomic_writes,
        json_indent=json_indent,
        log_level=log_level,
    )
