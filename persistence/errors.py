from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Generic, TypeVar

T = TypeVar("T")


class RepositoryError(Exception):
    """Base class for datastore failures."""


class StoreIOError(RepositoryError):
    """The backing file could not be read or written."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedCollectionError(RepositoryError):
    """A collection holds records that do not fit its entity type."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


class NotFoundError(RepositoryError):
    def __init__(self, key: str):
        super().__init__(f"No record matches {key}.")
        self.key = key


class PersistenceError(RepositoryError):
    pass


class OutcomeKind(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    PERSISTENCE_FAILURE = "persistence_failure"


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of a mutating repository call.

    NOT_FOUND means the read succeeded and nothing matched `key`; nothing was written.
    PERSISTENCE_FAILURE means the write-back did not complete; the mutation is lost.
    """

    kind: OutcomeKind
    value: T | None = None
    key: str | None = None
    message: str = ""

    @classmethod
    def success(cls, value: T, *, key: str | None = None) -> "Outcome[T]":
        return cls(OutcomeKind.OK, value=value, key=key)

    @classmethod
    def not_found(cls, key: str) -> "Outcome[T]":
        return cls(OutcomeKind.NOT_FOUND, key=key, message=f"No record matches {key}.")

    @classmethod
    def persistence_failure(cls, key: str, message: str) -> "Outcome[T]":
        return cls(OutcomeKind.PERSISTENCE_FAILURE, key=key, message=message)

    @property
    def ok(self) -> bool:
        return self.kind is OutcomeKind.OK

    def unwrap(self) -> T:
        if self.kind is OutcomeKind.NOT_FOUND:
            raise NotFoundError(self.key or "")
        if self.kind is OutcomeKind.PERSISTENCE_FAILURE:
            raise PersistenceError(self.message)
        return self.value  # type: ignore[return-value]
