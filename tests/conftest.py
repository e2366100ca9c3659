"""
Shared fixtures: temp patient store, fresh last-record cell, test client
"""
import pytest
from fastapi.testclient import TestClient

from patient_intake.main import app
from patient_intake.api.utils import get_store, get_last_record
from patient_intake.database.storage import PatientStore
from patient_intake.database.cache import LastRecordCell


@pytest.fixture
def patients_dir(tmp_path):
    """Directory the store writes to (not created up front)"""
    return tmp_path / "data" / "patients"


@pytest.fixture
def store(patients_dir):
    return PatientStore(patients_dir)


@pytest.fixture
def last_record():
    return LastRecordCell()


@pytest.fixture
def client(store, last_record):
    """Test client wired to the temp store and cell"""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_last_record] = lambda: last_record
    yield TestClient(app)
    app.dependency_overrides.clear()
