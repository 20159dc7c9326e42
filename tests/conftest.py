from __future__ import annotations

import json
from pathlib import Path
import sys


import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import persistence...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


SAMPLE_DOC = {
    "persons": [
        {
            "firstName": "John",
            "lastName": "Boyd",
            "address": "1509 Culver St",
            "city": "Culver",
            "zip": "97451",
            "phone": "841-874-6512",
            "email": "jaboyd@email.com",
        },
        {
            "firstName": "Tenley",
            "lastName": "Boyd",
            "address": "1509 Culver St",
            "city": "Culver",
            "zip": "97451",
            "phone": "841-874-6512",
            "email": "tenz@email.com",
        },
        {
            "firstName": "Peter",
            "lastName": "Duncan",
            "address": "644 Gershwin Cir",
            "city": "Culver",
            "zip": "97451",
            "phone": "841-874-6512",
            "email": "jaboyd@email.com",
        },
    ],
    "firestations": [
        {"address": "1509 Culver St", "station": "3"},
        {"address": "834 Binoc Ave", "station": "3"},
        {"address": "644 Gershwin Cir", "station": "5"},
    ],
    "medicalrecords": [
        {
            "firstName": "John",
            "lastName": "Boyd",
            "birthdate": "03/06/1984",
            "medications": ["aznol:350mg", "hydrapermazol:100mg"],
            "allergies": ["nillacilan"],
        },
        {
            "firstName": "Tenley",
            "lastName": "Boyd",
            "birthdate": "02/18/2012",
            "medications": [],
            "allergies": ["peanut"],
        },
    ],
}


@pytest.fixture
def datasource(tmp_path: Path) -> Path:
    """
    A sandboxed copy of the sample data file so tests never touch real ./data.
    """
    path = tmp_path / "data.json"
    path.write_text(json.dumps(SAMPLE_DOC, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def store(datasource: Path):
    from persistence.disk_store import DiskJsonDocumentStore

    return DiskJsonDocumentStore(datasource)


@pytest.fixture
def firestations(store):
    from persistence.firestations import FirestationRepository

    return FirestationRepository(store)


@pytest.fixture
def persons(store):
    from persistence.persons import PersonRepository

    return PersonRepository(store)


@pytest.fixture
def medical_records(store):
    from persistence.medical_records import MedicalRecordRepository

    return MedicalRecordRepository(store)
