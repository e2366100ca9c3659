"""
Intake form submission

Maps submitted form fields onto a PatientRecord and persists it.
No field-level validation: every value is accepted as text.
"""
from typing import Any, Mapping

from patient_intake.database.schemas import PatientRecord, INTAKE_FORM_FIELDS
from patient_intake.database.storage import PatientStore
from patient_intake.database.cache import LastRecordCell


class IntakeParseError(Exception):
    """The submission body could not be decoded into form fields"""


def record_from_form(form_fields: Mapping[str, Any]) -> PatientRecord:
    """
    Build a record from form fields

    Unknown fields are ignored; missing or non-text values (e.g. uploads) become "".
    """
    values = {}
    for form_name, attribute in INTAKE_FORM_FIELDS.items():
        value = form_fields.get(form_name, "")
        values[attribute] = value if isinstance(value, str) else ""
    return PatientRecord(**values)


def submit_intake(
    form_fields: Mapping[str, Any],
    store: PatientStore,
    last_record: LastRecordCell,
) -> PatientRecord:
    """
    Save a submitted intake form and remember it as the last record

    Store errors propagate; the last record is only replaced after a successful save.
    """
    record = record_from_form(form_fields)
    saved = store.save(record)
    last_record.set(saved)
    return saved
