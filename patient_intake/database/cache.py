"""
In-memory holder for the most recently submitted record
Used as the PDF fallback when no identifier is requested
"""
from typing import Optional
from threading import Lock

from patient_intake.database.schemas import PatientRecord


class LastRecordCell:
    """
    Thread-safe single-value cell (last writer wins, lost on restart)
    """
    def __init__(self):
        self._record: Optional[PatientRecord] = None
        self._lock = Lock()

    def get(self) -> Optional[PatientRecord]:
        """Return a copy of the held record, or None if nothing was submitted"""
        with self._lock:
            if self._record is None:
                return None
            return self._record.model_copy()

    def set(self, record: PatientRecord):
        with self._lock:
            self._record = record.model_copy()

    def clear(self):
        with self._lock:
            self._record = None


# Process-wide cell
_last_record = LastRecordCell()


def get_last_record_cell() -> LastRecordCell:
    return _last_record
