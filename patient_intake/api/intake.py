"""
Intake form endpoints
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse
from starlette.formparsers import MultiPartException

from patient_intake.core.templating import templates
from patient_intake.database.storage import PatientStore, StoreError
from patient_intake.database.cache import LastRecordCell
from patient_intake.services.intake import IntakeParseError, submit_intake
from patient_intake.api.utils import get_store, get_last_record

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_form(request: Request):
    try:
        return await request.form()
    except (MultiPartException, ValueError) as e:
        raise IntakeParseError(str(e)) from e


@router.get("/", response_class=HTMLResponse)
async def intake_form(request: Request):
    """
    Blank intake form
    """
    return templates.TemplateResponse(request, "form.html")


@router.post("/finish", response_class=HTMLResponse)
async def finish_intake(
    request: Request,
    store: PatientStore = Depends(get_store),
    last_record: LastRecordCell = Depends(get_last_record),
):
    """
    Save submitted intake form

    Every field is optional free text. Returns 400 only if the body cannot
    be decoded into form fields at all.
    """
    try:
        form = await _read_form(request)
    except IntakeParseError as e:
        logger.warning("Could not parse intake form: %s", e)
        raise HTTPException(status_code=400, detail="Parse error")

    try:
        record = submit_intake(form, store, last_record)
    except StoreError as e:
        logger.error("Error saving patient record: %s", e)
        raise HTTPException(status_code=500, detail="Error saving patient record")
    finally:
        # Releases spooled multipart upload files
        await form.close()

    logger.info("Saved patient record with ID: %s", record.id)
    return templates.TemplateResponse(request, "result.html", {"record_id": record.id})
