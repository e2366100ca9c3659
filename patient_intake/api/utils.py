"""
Shared dependencies for API endpoints
"""
from patient_intake.core.config import PATIENTS_DIR
from patient_intake.database.storage import PatientStore
from patient_intake.database.cache import LastRecordCell, get_last_record_cell

_store = PatientStore(PATIENTS_DIR)


def get_store() -> PatientStore:
    """
    Process-wide patient store (override in tests via app.dependency_overrides)
    """
    return _store


def get_last_record() -> LastRecordCell:
    """
    Process-wide last-submitted record cell
    """
    return get_last_record_cell()
