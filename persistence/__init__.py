from __future__ import annotations

from .disk_store import DiskJsonDocumentStore
from .errors import (
    MalformedCollectionError,
    NotFoundError,
    Outcome,
    OutcomeKind,
    PersistenceError,
    RepositoryError,
    StoreIOError,
)
from .firestations import FirestationRepository
from .medical_records import MedicalRecordRepository
from .models import MISSING_DOCUMENT, Document, Firestation, MedicalRecord, Person
from .persons import PersonRepository
from .repositories import Repositories, build_repositories

__all__ = [
    "DiskJsonDocumentStore",
    "Document",
    "MISSING_DOCUMENT",
    "Firestation",
    "Person",
    "MedicalRecord",
    "FirestationRepository",
    "PersonRepository",
    "MedicalRecordRepository",
    "Repositories",
    "build_repositories",
    "Outcome",
    "OutcomeKind",
    "RepositoryError",
    "StoreIOError",
    "MalformedCollectionError",
    "NotFoundError",
    "PersistenceError",
]
