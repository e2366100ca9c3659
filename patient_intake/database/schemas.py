"""
Patient record data model

- One flat record per intake submission
- All intake fields are free text (no validation, empty allowed)
- Field names are the persisted JSON keys
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict


class PatientRecord(BaseModel):
    """
    Patient intake record (persisted to disk as data/patients/<id>.json)
    """
    model_config = ConfigDict(extra="ignore")
    id: str                       = Field("", description="Patient identifier (generated on first save when empty)")
    first_name: str               = Field("", description="First name")
    middle_name: str              = Field("", description="Middle name")
    surname: str                  = Field("", description="Surname")
    dob: str                      = Field("", description="Date of birth (free text)")
    gender: str                   = Field("", description="Gender")
    phone: str                    = Field("", description="Phone number")
    email: str                    = Field("", description="Email address")
    address: str                  = Field("", description="Postal address")
    nok_name: str                 = Field("", description="Next of kin name")
    nok_relationship: str         = Field("", description="Next of kin relationship to patient")
    nok_contact: str              = Field("", description="Next of kin contact details")
    marital_status: str           = Field("", description="Marital status")
    insurance_provider: str       = Field("", description="Insurance provider")
    insurance_member_number: str  = Field("", description="Insurance member number")
    clinical_history: str         = Field("", description="Clinical history")
    allergies: str                = Field("", description="Known allergies")
    assessments: str              = Field("", description="Assessments")
    treatment_plan: str           = Field("", description="Treatment plan")
    medication: str               = Field("", description="Medication")
    referrals: str                = Field("", description="Referrals")
    test_results: str             = Field("", description="Test results")
    consultation_datetime: str    = Field("", description="Consultation date and time (free text)")
    consultation_place: str       = Field("", description="Consultation place")
    patient_reaction: str         = Field("", description="Patient reaction to treatment")
    created_at: Optional[datetime] = Field(None, description="Set once on first save")
    updated_at: Optional[datetime] = Field(None, description="Set on every save")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.middle_name} {self.surname}"


# Intake form field name -> record attribute
INTAKE_FORM_FIELDS = {
    "first_name": "first_name",
    "middle_name": "middle_name",
    "surname": "surname",
    "dob": "dob",
    "gender": "gender",
    "phone": "phone",
    "email": "email",
    "address": "address",
    "next_of_kin": "nok_name",
    "relationship": "nok_relationship",
    "kin_contact": "nok_contact",
    "marital_status": "marital_status",
    "insurance_provider": "insurance_provider",
    "member_number": "insurance_member_number",
    "clinical_history": "clinical_history",
    "allergies": "allergies",
    "assessments": "assessments",
    "treatment_plan": "treatment_plan",
    "medication": "medication",
    "referrals": "referrals",
    "test_results": "test_results",
    "consultation_datetime": "consultation_datetime",
    "consultation_place": "consultation_place",
    "patient_reaction": "patient_reaction",
}
