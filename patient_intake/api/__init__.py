# API routes
from fastapi import APIRouter
from patient_intake.api.intake import router as intake_router
from patient_intake.api.document import router as document_router
from patient_intake.api.patients import router as patients_router

# Combine all routers
router = APIRouter()
router.include_router(intake_router)
router.include_router(document_router)
router.include_router(patients_router)

__all__ = ["router"]
