from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from .disk_store import DiskJsonDocumentStore
from .errors import Outcome
from .firestations import FirestationRepository
from .medical_records import MedicalRecordRepository
from .models import Firestation, MedicalRecord, Person
from .persons import PersonRepository


class FirestationRepositoryProtocol(Protocol):
    def find_all(self) -> list[Firestation]: ...
    def find_by_address(self, address: str) -> Firestation | None: ...
    def find_by_station_number(self, station_number: int) -> list[Firestation]: ...

    def save(self, entity: Firestation) -> Outcome[Firestation]: ...
    def update(self, entity: Firestation) -> Outcome[Firestation]: ...
    def delete_by_address(self, address: str) -> Outcome[list[Firestation]]: ...
    def delete_by_station_number(self, station_number: int) -> Outcome[list[Firestation]]: ...


class PersonRepositoryProtocol(Protocol):
    """
    Resident lookups used by the alert views, plus CRUD keyed by full name.
    """

    def find_all(self) -> list[Person]: ...
    def find_by_name(self, first_name: str, last_name: str) -> Person | None: ...
    def find_by_address(self, address: str) -> list[Person]: ...
    def find_by_city(self, city: str) -> list[Person]: ...

    def save(self, entity: Person) -> Outcome[Person]: ...
    def update(self, entity: Person) -> Outcome[Person]: ...
    def delete_by_name(self, first_name: str, last_name: str) -> Outcome[list[Person]]: ...


class MedicalRecordRepositoryProtocol(Protocol):
    def find_all(self) -> list[MedicalRecord]: ...
    def find_by_name(self, first_name: str, last_name: str) -> MedicalRecord | None: ...

    def save(self, entity: MedicalRecord) -> Outcome[MedicalRecord]: ...
    def update(self, entity: MedicalRecord) -> Outcome[MedicalRecord]: ...
    def delete_by_name(self, first_name: str, last_name: str) -> Outcome[list[MedicalRecord]]: ...


@dataclass(frozen=True)
class Repositories:
    store: DiskJsonDocumentStore
    persons: PersonRepositoryProtocol
    firestations: FirestationRepositoryProtocol
    medical_records: MedicalRecordRepositoryProtocol


def build_repositories(store: DiskJsonDocumentStore) -> Repositories:
    """All repositories share one store, hence one lock on the backing file."""
    return Repositories(
        store=store,
        persons=PersonRepository(store),
        firestations=FirestationRepository(store),
        medical_records=MedicalRecordRepository(store),
    )
