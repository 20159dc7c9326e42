from __future__ import annotations

import logging
from contextlib import AbstractContextManager
from pathlib import Path

from pydantic import ValidationError

from json_store import read_json, write_json

from .errors import StoreIOError
from .interfaces import DocumentStore
from .locks import GLOBAL_PATH_LOCKS
from .models import MISSING_DOCUMENT, Document, MissingDocument

logger = logging.getLogger(__name__)


class DiskJsonDocumentStore(DocumentStore):
    """
    Stores the whole datastore as a single JSON document on disk at a fixed path.

    - Missing/blank file reads as MISSING_DOCUMENT.
    - Unreadable, unparseable or structurally broken files raise StoreIOError.
    - Writes report success as a bool; atomic (temp file + rename) unless disabled.
    """

    def __init__(self, path: Path, *, atomic: bool = True, indent: int = 2):
        self._path = path
        self._atomic = atomic
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def locked(self) -> AbstractContextManager:
        return GLOBAL_PATH_LOCKS.lock_for(self._path)

    def read_document(self) -> Document | MissingDocument:
        logger.debug("Reading JSON file %s", self._path)
        with self.locked():
            try:
                raw = read_json(self._path)
            except (OSError, ValueError) as e:
                logger.error("Error while reading JSON file %s: %r", self._path, e)
                raise StoreIOError(self._path, str(e)) from e

        if raw is None:
            logger.warning("JSON file %s is missing or empty", self._path)
            return MISSING_DOCUMENT
        if not isinstance(raw, dict):
            logger.error("JSON file %s does not hold an object at its root", self._path)
            raise StoreIOError(self._path, "root is not a JSON object")
        try:
            return Document.from_disk_doc(raw)
        except ValidationError as e:
            logger.error("JSON file %s has collections that are not arrays of objects: %s", self._path, e)
            raise StoreIOError(self._path, "collections are not arrays of objects") from e

    def write_document(self, document: Document) -> bool:
        payload = document.to_disk_doc()
        with self.locked():
            try:
                write_json(self._path, payload, atomic=self._atomic, indent=self._indent)
            except OSError as e:
                logger.error("Failed to write data into file %s: %r", self._path, e)
                return False
        logger.debug("Wrote JSON file %s", self._path)
        return True
