from __future__ import annotations

import json
import os
import stat

import pytest

from persistence.disk_store import DiskJsonDocumentStore
from persistence.errors import StoreIOError
from persistence.models import MISSING_DOCUMENT, Document


def test_missing_or_blank_file_reads_as_missing_marker(tmp_path):
    store = DiskJsonDocumentStore(tmp_path / "data.json")
    doc = store.read_document()
    assert doc is MISSING_DOCUMENT
    assert doc is not None
    assert not doc

    (tmp_path / "data.json").write_text("", encoding="utf-8")
    assert store.read_document() is MISSING_DOCUMENT


def test_read_keeps_records_as_stored(store):
    doc = store.read_document()
    assert isinstance(doc, Document)
    assert len(doc.persons) == 3
    # Field types are checked per collection on access, not by the store.
    assert doc.firestations[0] == {"address": "1509 Culver St", "station": "3"}


def test_bad_record_fields_do_not_fail_the_read(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps({"firestations": [{"station": "three"}], "medicalrecords": [{"birthdate": "31/12/2000"}]}),
        encoding="utf-8",
    )
    doc = DiskJsonDocumentStore(path).read_document()
    assert doc.firestations == [{"station": "three"}]


@pytest.mark.parametrize(
    "content",
    [
        '{"firestations": [',
        "[1, 2, 3]",
        '{"firestations": 5}',
        '{"persons": [1, 2]}',
    ],
)
def test_unreadable_documents_raise_store_io_error(tmp_path, content):
    path = tmp_path / "data.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(StoreIOError) as exc_info:
        DiskJsonDocumentStore(path).read_document()
    assert exc_info.value.path == path


def test_directory_in_place_of_file_raises_store_io_error(tmp_path):
    with pytest.raises(StoreIOError):
        DiskJsonDocumentStore(tmp_path).read_document()


def test_null_collection_reads_as_empty(tmp_path):
    path = tmp_path / "data.json"
    path.write_text('{"persons": null}', encoding="utf-8")
    doc = DiskJsonDocumentStore(path).read_document()
    assert doc.persons == []
    assert doc.firestations == []


def test_write_then_read_and_unknown_keys_survive(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps({"firestations": [], "metadata": {"version": 2}, "notes": "keep me"}),
        encoding="utf-8",
    )
    store = DiskJsonDocumentStore(path)
    doc = store.read_document()

    assert store.write_document(doc) is True

    on_disk = json.loads(path.read_text(encoding="utf-8"))
    assert on_disk["metadata"] == {"version": 2}
    assert on_disk["notes"] == "keep me"
    assert on_disk["persons"] == []
    assert on_disk["medicalrecords"] == []


def test_write_failure_returns_false(store, datasource, monkeypatch: pytest.MonkeyPatch):
    before = datasource.read_bytes()

    def _unwritable(*args, **kwargs):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr("persistence.disk_store.write_json", _unwritable)
    assert store.write_document(Document()) is False
    assert datasource.read_bytes() == before


def test_atomic_write_refuses_a_file_without_write_access(store, datasource, monkeypatch: pytest.MonkeyPatch):
    before = datasource.read_bytes()
    real_access = os.access

    def _no_write_access(path, mode, *args, **kwargs):
        if mode == os.W_OK and str(path) == str(datasource):
            return False
        return real_access(path, mode, *args, **kwargs)

    monkeypatch.setattr(os, "access", _no_write_access)

    assert store.write_document(Document()) is False
    assert datasource.read_bytes() == before
    assert not datasource.with_suffix(".json.tmp").exists()


def test_atomic_write_keeps_file_permissions(store, datasource):
    datasource.chmod(0o600)
    assert store.write_document(store.read_document()) is True
    assert stat.S_IMODE(datasource.stat().st_mode) == 0o600


def test_in_place_store_writes_without_temp_file(tmp_path):
    path = tmp_path / "data.json"
    store = DiskJsonDocumentStore(path, atomic=False, indent=0)
    assert store.write_document(Document()) is True
    assert json.loads(path.read_text(encoding="utf-8")) == {"persons": [], "firestations": [], "medicalrecords": []}
    assert not (tmp_path / "data.json.tmp").exists()
