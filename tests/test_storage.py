"""
Patient store tests - file layout, identity and timestamps
"""
import json
import logging

import pytest

from patient_intake.database.schemas import PatientRecord
from patient_intake.database.storage import (
    PatientStore,
    RecordNotFoundError,
    CorruptRecordError,
    StoreIOError,
)


def test_save_creates_directory_and_file(store, patients_dir):
    """Saving creates data dir and <id>.json with indented JSON"""
    record = store.save(PatientRecord(first_name="Jane", surname="Doe"))

    assert record.id.startswith("PAT_")
    path = patients_dir / f"{record.id}.json"
    assert path.exists()

    text = path.read_text(encoding="utf-8")
    assert '\n  "first_name": "Jane"' in text
    data = json.loads(text)
    assert data["id"] == record.id
    assert data["surname"] == "Doe"
    assert data["insurance_member_number"] == ""
    assert "created_at" in data and "updated_at" in data


def test_round_trip_unicode_and_empty(store):
    """Any string round-trips, including empty and non-ASCII text"""
    record = PatientRecord(
        first_name="Zoë",
        surname="O'Brien",
        address="東京都 1-2-3\nLine two",
        clinical_history="",
        allergies="<peanuts> & \"shellfish\"",
    )
    saved = store.save(record)

    loaded = store.load(saved.id)
    assert loaded.model_dump() == saved.model_dump()


def test_timestamps_on_first_and_later_save(store):
    """created_at set once; updated_at refreshed and never before created_at"""
    record = store.save(PatientRecord(first_name="Jane"))
    created = record.created_at
    assert created is not None
    assert record.updated_at == created

    record.first_name = "Janet"
    store.save(record)

    loaded = store.load(record.id)
    assert loaded.first_name == "Janet"
    assert loaded.created_at == created
    assert loaded.updated_at >= loaded.created_at


def test_explicit_id_overwrites(store, patients_dir):
    """Saving twice with one identifier keeps a single file"""
    store.save(PatientRecord(id="PAT_fixed", first_name="First"))
    store.save(PatientRecord(id="PAT_fixed", first_name="Second"))

    assert [p.name for p in patients_dir.glob("*.json")] == ["PAT_fixed.json"]
    assert store.load("PAT_fixed").first_name == "Second"

    ids = [r.id for r in store.list_all()]
    assert ids == ["PAT_fixed"]


def test_generated_ids_are_distinct(store):
    """Back-to-back saves without identifier get different identifiers"""
    first = store.save(PatientRecord(first_name="A"))
    second = store.save(PatientRecord(first_name="B"))
    assert first.id != second.id


def test_generate_id_monotonic(store, monkeypatch):
    """A stalled clock still yields increasing identifiers"""
    monkeypatch.setattr("patient_intake.database.storage.time.time_ns", lambda: 1000)
    assert store.generate_id() == "PAT_1000"
    assert store.generate_id() == "PAT_1001"


def test_no_temp_files_left(store, patients_dir):
    store.save(PatientRecord(first_name="Jane"))
    assert list(patients_dir.glob("*.tmp")) == []


def test_load_missing(store):
    """Unknown identifier is NotFound, never Corrupt"""
    with pytest.raises(RecordNotFoundError):
        store.load("does-not-exist")


def test_load_rejects_path_traversal(store, tmp_path):
    (tmp_path / "secret.json").write_text('{"first_name": "x"}')
    with pytest.raises(RecordNotFoundError):
        store.load("../../secret")


def test_save_rejects_unsafe_id(store):
    with pytest.raises(StoreIOError):
        store.save(PatientRecord(id="../escape"))


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '{"first_name": 42}'])
def test_load_corrupt(store, patients_dir, content):
    patients_dir.mkdir(parents=True)
    (patients_dir / "PAT_bad.json").write_text(content)

    with pytest.raises(CorruptRecordError):
        store.load("PAT_bad")


def test_save_directory_error(tmp_path):
    """A file where the directory should be is an IO error"""
    blocker = tmp_path / "patients"
    blocker.write_text("not a directory")

    with pytest.raises(StoreIOError):
        PatientStore(blocker).save(PatientRecord(first_name="Jane"))


def test_list_all_missing_directory(store):
    assert store.list_all() == []


def test_list_all_skips_invalid_file(store, patients_dir, caplog):
    """N valid files + one invalid file -> N records and one diagnostic"""
    saved_ids = {store.save(PatientRecord(first_name=name)).id for name in ("A", "B", "C")}
    (patients_dir / "PAT_broken.json").write_text("{oops")

    with caplog.at_level(logging.WARNING, logger="patient_intake.database.storage"):
        records = store.list_all()

    assert {r.id for r in records} == saved_ids
    warnings = [
        r for r in caplog.records
        if r.name == "patient_intake.database.storage" and r.levelno == logging.WARNING
    ]
    assert len(warnings) == 1
    assert "PAT_broken.json" in warnings[0].getMessage()


def test_list_all_ignores_non_json_files(store, patients_dir):
    store.save(PatientRecord(first_name="A"))
    (patients_dir / "notes.txt").write_text("ignore me")

    assert len(store.list_all()) == 1
