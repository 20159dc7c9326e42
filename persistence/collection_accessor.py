from __future__ import annotations

from typing import Generic, Iterable, TypeVar

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedCollectionError
from .models import Document, Entity, MissingDocument

E = TypeVar("E", bound=Entity)


class CollectionAccessor(Generic[E]):
    """
    Typed view of one named collection inside the document.

    Records are validated only here, one collection at a time.
    """

    def __init__(self, name: str, entity_type: type[E]):
        if name not in Document.model_fields:
            raise ValueError(f"Unknown collection: {name!r}")
        self._name = name
        self._entity_type = entity_type
        self._adapter = TypeAdapter(list[entity_type])

    @property
    def name(self) -> str:
        return self._name

    @property
    def entity_type(self) -> type[E]:
        return self._entity_type

    def get(self, document: Document | MissingDocument) -> list[E]:
        if isinstance(document, MissingDocument):
            return []
        try:
            # Fresh list: callers mutate it before splicing it back.
            return list(self._adapter.validate_python(getattr(document, self._name)))
        except ValidationError as e:
            raise MalformedCollectionError(self._name, str(e)) from e

    def replace(self, document: Document, entities: Iterable[E]) -> Document:
        raw = self._adapter.dump_python(list(entities), mode="json")
        return document.model_copy(update={self._name: raw})
