from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Protocol

from .models import Document, MissingDocument


class DocumentStore(Protocol):
    """
    A single JSON document persisted as a whole: read it, overwrite it.
    """

    def read_document(self) -> Document | MissingDocument:
        """Parse the full document; MISSING_DOCUMENT when there is nothing stored yet."""
        ...

    def write_document(self, document: Document) -> bool:
        """Persist the full document; True only if the write completed."""
        ...

    def locked(self) -> AbstractContextManager:
        """Hold exclusive access across a read-modify-write cycle."""
        ...
