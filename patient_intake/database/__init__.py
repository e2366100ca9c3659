"""
Database module

Contains the record model, the JSON file store and the last-record cell.
"""

# Export schemas
from patient_intake.database.schemas import PatientRecord, INTAKE_FORM_FIELDS

# Export storage
from patient_intake.database.storage import (
    PatientStore,
    StoreError,
    StoreIOError,
    RecordNotFoundError,
    CorruptRecordError,
)

from patient_intake.database.cache import LastRecordCell, get_last_record_cell

__all__ = [
    # Schemas
    "PatientRecord",
    "INTAKE_FORM_FIELDS",
    # Storage
    "PatientStore",
    "StoreError",
    "StoreIOError",
    "RecordNotFoundError",
    "CorruptRecordError",
    # Cache
    "LastRecordCell",
    "get_last_record_cell",
]
