from __future__ import annotations

from .collection_accessor import CollectionAccessor
from .errors import Outcome
from .interfaces import DocumentStore
from .models import MedicalRecord
from .persons import named
from .repository import JsonCollectionRepository


class MedicalRecordRepository(JsonCollectionRepository[MedicalRecord]):
    """Medical records, keyed like persons by first and last name."""

    label = "medical record"

    def __init__(self, store: DocumentStore):
        super().__init__(store, CollectionAccessor("medicalrecords", MedicalRecord))

    def key_of(self, entity: MedicalRecord) -> str:
        return f"{entity.firstName} {entity.lastName}"

    def same_key(self, a: MedicalRecord, b: MedicalRecord) -> bool:
        return named(b.firstName, b.lastName)(a)

    def find_by_name(self, first_name: str, last_name: str) -> MedicalRecord | None:
        return self.find_first(named(first_name, last_name))

    def delete_by_name(self, first_name: str, last_name: str) -> Outcome[list[MedicalRecord]]:
        return self.delete_where(named(first_name, last_name), key=f"{first_name} {last_name}")
