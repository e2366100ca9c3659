"""
Patient record PDF rendering

Lays out one labeled row per field on an A4 page and converts the
HTML to PDF with xhtml2pdf. Page breaks are left to the PDF engine.
"""
from io import BytesIO
from typing import List, Optional, Tuple

from xhtml2pdf import pisa

from patient_intake.core.templating import render_template
from patient_intake.database.schemas import PatientRecord
from patient_intake.database.storage import PatientStore
from patient_intake.database.cache import LastRecordCell

DOCUMENT_TITLE = "Patient Record"
DOCUMENT_FILENAME = "patient_record.pdf"


class DocumentEncodeError(Exception):
    """The PDF engine failed to produce output"""


def document_fields(record: PatientRecord) -> List[Tuple[str, str]]:
    """
    Ordered (label, value) rows printed on the document
    """
    return [
        ("ID", record.id),
        ("Full Name", record.full_name),
        ("Date of Birth", record.dob),
        ("Gender", record.gender),
        ("Phone", record.phone),
        ("Email", record.email),
        ("Address", record.address),
        ("Next of Kin", record.nok_name),
        ("Relationship", record.nok_relationship),
        ("NOK Contact", record.nok_contact),
        ("Marital Status", record.marital_status),
        ("Insurance Provider", record.insurance_provider),
        ("Member Number", record.insurance_member_number),
        ("Clinical History", record.clinical_history),
        ("Allergies", record.allergies),
        ("Assessments", record.assessments),
        ("Treatment Plan", record.treatment_plan),
        ("Medication", record.medication),
        ("Referrals", record.referrals),
        ("Test Results", record.test_results),
        ("Consultation Date & Time", record.consultation_datetime),
        ("Consultation Place", record.consultation_place),
        ("Reaction to Treatment", record.patient_reaction),
    ]


def render_document_html(record: PatientRecord) -> str:
    return render_template(
        "patient_record.html",
        title=DOCUMENT_TITLE,
        fields=document_fields(record),
    )


def render_document(record: PatientRecord) -> bytes:
    """
    Render a record as PDF bytes

    Raises DocumentEncodeError if xhtml2pdf reports an error.
    """
    html = render_document_html(record)

    pdf_buffer = BytesIO()
    pisa_status = pisa.CreatePDF(
        BytesIO(html.encode('utf-8')),
        dest=pdf_buffer,
        encoding='utf-8'
    )

    if pisa_status.err:
        raise DocumentEncodeError(f"PDF generation failed: {pisa_status.err}")

    return pdf_buffer.getvalue()


def render_by_identifier(
    record_id: Optional[str],
    store: PatientStore,
    last_record: LastRecordCell,
) -> bytes:
    """
    Render the record with the given identifier, or the last submitted one

    With no identifier and nothing submitted yet, an all-blank document is
    rendered. Store errors (RecordNotFoundError etc.) propagate.
    """
    if record_id:
        record = store.load(record_id)
    else:
        record = last_record.get() or PatientRecord()
    return render_document(record)
