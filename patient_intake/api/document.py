"""
PDF document endpoint
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from patient_intake.database.storage import PatientStore, StoreError, RecordNotFoundError
from patient_intake.database.cache import LastRecordCell
from patient_intake.services.document import (
    DOCUMENT_FILENAME,
    DocumentEncodeError,
    render_by_identifier,
)
from patient_intake.api.utils import get_store, get_last_record

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/pdf")
def patient_pdf(
    record_id: Optional[str] = Query(None, alias="id"),
    store: PatientStore = Depends(get_store),
    last_record: LastRecordCell = Depends(get_last_record),
):
    """
    Render a patient record as PDF

    With ?id=... the stored record is rendered (404 if it does not exist).
    Without it, the last record submitted to this process is rendered
    (blank if none yet).
    """
    try:
        pdf_bytes = render_by_identifier(record_id, store, last_record)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Patient not found")
    except StoreError as e:
        logger.error("Error loading patient %s: %s", record_id, e)
        raise HTTPException(status_code=500, detail="Error loading patient record")
    except DocumentEncodeError as e:
        logger.error("Failed to generate PDF: %s", e)
        raise HTTPException(status_code=500, detail="Failed to generate PDF")

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"inline; filename={DOCUMENT_FILENAME}"},
    )
