"""
Patient listing endpoint
"""
import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse

from patient_intake.database.storage import PatientStore, StoreError
from patient_intake.services.listing import render_listing
from patient_intake.api.utils import get_store

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/patients", response_class=HTMLResponse)
def list_patients(store: PatientStore = Depends(get_store)):
    """
    List every saved patient with a link to its PDF

    Files that cannot be read are skipped (and logged) rather than failing the page.
    """
    try:
        return HTMLResponse(render_listing(store))
    except StoreError as e:
        logger.error("Error loading patients: %s", e)
        raise HTTPException(status_code=500, detail="Error loading patients")
