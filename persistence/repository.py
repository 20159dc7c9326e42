from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

from .collection_accessor import CollectionAccessor
from .errors import MalformedCollectionError, Outcome, StoreIOError
from .interfaces import DocumentStore
from .models import Document, Entity, MissingDocument

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)
Matcher = Callable[[E], bool]


def same_text(a: str | None, b: str | None) -> bool:
    """Case-insensitive equality used by every natural-key match."""
    if a is None or b is None:
        return a is b
    return a.casefold() == b.casefold()


class JsonCollectionRepository(ABC, Generic[E]):
    """
    CRUD over one collection of the JSON document.

    Every call re-reads the whole document; mutations splice the changed collection
    back and overwrite the file while holding the store lock, so nothing is cached
    between calls and in-process writers cannot interleave.

    Subclasses define the natural key through `key_of` and `same_key`.
    """

    label = "record"

    def __init__(self, store: DocumentStore, collection: CollectionAccessor[E]):
        self._store = store
        self._collection = collection

    # --- natural key policy -------------------------------------------------

    @abstractmethod
    def key_of(self, entity: E) -> str:
        """Human-readable natural key, used in logs and outcomes."""

    @abstractmethod
    def same_key(self, a: E, b: E) -> bool:
        """True when both entities share a natural key."""

    # --- queries ------------------------------------------------------------

    def find_all(self) -> list[E]:
        try:
            entities = self._collection.get(self._store.read_document())
        except (StoreIOError, MalformedCollectionError) as e:
            logger.error("Could not read %s: %s", self._collection.name, e)
            return []
        if not entities:
            logger.debug("No %s found.", self._collection.name)
        return entities

    def find_by(self, matcher: Matcher) -> list[E]:
        found = [e for e in self.find_all() if matcher(e)]
        logger.debug("Found %d %s matching.", len(found), self._collection.name)
        return found

    def find_first(self, matcher: Matcher) -> E | None:
        return next((e for e in self.find_all() if matcher(e)), None)

    # --- mutations ----------------------------------------------------------

    def save(self, entity: E) -> Outcome[E]:
        key = self.key_of(entity)
        with self._store.locked():
            current = self._read_for_update(key)
            if current is None:
                return Outcome.persistence_failure(key, f"Failed to save {self.label} {key}.")
            document, entities = current
            entities.append(entity)
            if not self._write_back(document, entities):
                logger.error("Failed to save new %s %s.", self.label, key)
                return Outcome.persistence_failure(key, f"Failed to save {self.label} {key}.")
        logger.info("Saved new %s %s.", self.label, key)
        return Outcome.success(entity, key=key)

    def update(self, entity: E) -> Outcome[E]:
        key = self.key_of(entity)
        with self._store.locked():
            current = self._read_for_update(key)
            if current is None:
                return Outcome.persistence_failure(key, f"Failed to update {self.label} {key}.")
            document, entities = current
            index = next((i for i, e in enumerate(entities) if self.same_key(e, entity)), None)
            if index is None:
                logger.error("There is no %s %s to update.", self.label, key)
                return Outcome.not_found(key)
            entities[index] = entity
            if not self._write_back(document, entities):
                logger.error("Error when updating JSON file for %s %s.", self.label, key)
                return Outcome.persistence_failure(key, f"Failed to update {self.label} {key}.")
        logger.info("Updated %s %s.", self.label, key)
        return Outcome.success(entity, key=key)

    def delete_where(self, matcher: Matcher, key: str) -> Outcome[list[E]]:
        """
        Remove every element matching `matcher`.

        NOT_FOUND is reported before anything is written when nothing matches.
        """
        with self._store.locked():
            current = self._read_for_update(key)
            if current is None:
                return Outcome.persistence_failure(key, f"Failed to delete {self.label} {key}.")
            document, entities = current
            doomed = [e for e in entities if matcher(e)]
            if not doomed:
                logger.error("There is no %s %s.", self.label, key)
                return Outcome.not_found(key)
            kept = [e for e in entities if not matcher(e)]
            if not self._write_back(document, kept):
                logger.error("Error when updating JSON file after deletion of %s %s.", self.label, key)
                return Outcome.persistence_failure(key, f"Failed to delete {self.label} {key}.")
        logger.info("Deleted %d %s for %s.", len(doomed), self._collection.name, key)
        return Outcome.success(doomed, key=key)

    # --- helpers ------------------------------------------------------------

    def _read_for_update(self, key: str) -> tuple[Document, list[E]] | None:
        # An unreadable file or collection must never be overwritten with partial data.
        try:
            document = self._store.read_document()
            if isinstance(document, MissingDocument):
                document = Document()
            return document, self._collection.get(document)
        except (StoreIOError, MalformedCollectionError) as e:
            logger.error("Refusing to modify %s for %s: %s", self._collection.name, key, e)
            return None

    def _write_back(self, document: Document, entities: list[E]) -> bool:
        return self._store.write_document(self._collection.replace(document, entities))
