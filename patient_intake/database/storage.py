"""
Simple JSON file storage

- One JSON file per patient record: <base_dir>/<id>.json
- Writes go to a temp file and are renamed into place
- A record that fails to load is skipped when listing, not fatal
"""
import json
import logging
import os
import re
import tempfile
import time
from datetime import datetime, timezone
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from patient_intake.database.schemas import PatientRecord

logger = logging.getLogger(__name__)

ID_PREFIX = "PAT_"
DIR_MODE = 0o755

# Identifiers become file names, so keep them to a safe character set
_SAFE_ID = re.compile(r"^[A-Za-z0-9_.-]+$")


class StoreError(Exception):
    """Base class for record store failures"""


class StoreIOError(StoreError):
    """Directory or file could not be created, read or written"""


class RecordNotFoundError(StoreError):
    """No record exists for the requested identifier"""

    def __init__(self, record_id: str):
        super().__init__(f"patient not found: {record_id}")
        self.record_id = record_id


class CorruptRecordError(StoreError):
    """Stored content could not be decoded into a PatientRecord"""

    def __init__(self, record_id: str, reason: str):
        super().__init__(f"error reading patient data for {record_id}: {reason}")
        self.record_id = record_id


def _is_safe_id(record_id: str) -> bool:
    return bool(_SAFE_ID.match(record_id)) and record_id not in (".", "..")


def read_json(filepath: Path) -> Dict[str, Any]:
    """
    Read a JSON document from disk

    Raises FileNotFoundError / json.JSONDecodeError / OSError to the caller
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        return json.load(f)


def write_json(filepath: Path, data: Dict[str, Any]):
    """
    Write data to a JSON file (indented), replacing any existing file atomically
    """
    fd, tmp_path = tempfile.mkstemp(
        dir=filepath.parent, prefix=f".{filepath.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.replace(tmp_path, filepath)
    except Exception:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


class PatientStore:
    """
    Maps patient identifiers to JSON files under a single directory
    """

    def __init__(self, base_dir: Union[str, Path]):
        self.base_dir = Path(base_dir)
        self._id_lock = Lock()
        self._last_id_ns = 0

    def generate_id(self) -> str:
        """
        Prefix + nanosecond timestamp, strictly increasing within the process
        """
        with self._id_lock:
            now_ns = time.time_ns()
            if now_ns <= self._last_id_ns:
                now_ns = self._last_id_ns + 1
            self._last_id_ns = now_ns
        return f"{ID_PREFIX}{now_ns}"

    def _record_path(self, record_id: str) -> Path:
        return self.base_dir / f"{record_id}.json"

    def save(self, record: PatientRecord) -> PatientRecord:
        """
        Save a record, overwriting any record with the same identifier

        Assigns an identifier when empty, refreshes updated_at and sets
        created_at on first save. The passed record is updated in place
        and returned.
        """
        try:
            os.makedirs(self.base_dir, mode=DIR_MODE, exist_ok=True)
        except OSError as e:
            raise StoreIOError(f"error creating directory {self.base_dir}: {e}") from e

        if not record.id:
            record.id = self.generate_id()
        elif not _is_safe_id(record.id):
            raise StoreIOError(f"invalid patient identifier: {record.id!r}")

        record.updated_at = datetime.now(timezone.utc)
        if record.created_at is None:
            record.created_at = record.updated_at

        try:
            write_json(self._record_path(record.id), record.model_dump(mode="json"))
        except OSError as e:
            raise StoreIOError(f"error writing patient {record.id}: {e}") from e

        return record

    def load(self, record_id: str) -> PatientRecord:
        """
        Load one record by identifier
        """
        if not record_id or not _is_safe_id(record_id):
            raise RecordNotFoundError(record_id)

        try:
            data = read_json(self._record_path(record_id))
        except FileNotFoundError as e:
            raise RecordNotFoundError(record_id) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CorruptRecordError(record_id, str(e)) from e
        except OSError as e:
            raise StoreIOError(f"error reading patient {record_id}: {e}") from e

        try:
            return PatientRecord.model_validate(data)
        except ValidationError as e:
            raise CorruptRecordError(record_id, str(e)) from e

    def list_all(self) -> List[PatientRecord]:
        """
        Load every stored record, skipping (and logging) any that fail

        Order follows directory enumeration and is not sorted.
        """
        if not self.base_dir.exists():
            return []

        try:
            files = list(self.base_dir.glob("*.json"))
        except OSError as e:
            raise StoreIOError(f"error reading patient files: {e}") from e

        records = []
        for path in files:
            record_id = path.stem
            try:
                records.append(self.load(record_id))
            except StoreError as e:
                logger.warning("Skipping patient file %s: %s", path.name, e)
        return records
