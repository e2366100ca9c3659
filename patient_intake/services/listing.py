"""
Patient listing page
"""
from patient_intake.core.templating import render_template
from patient_intake.database.storage import PatientStore

CREATED_FORMAT = "%Y-%m-%d %H:%M"


def render_listing(store: PatientStore) -> str:
    """
    HTML summary of every stored record, in directory order

    Unreadable files are skipped by the store; a failure to enumerate the
    directory raises StoreIOError.
    """
    patients = store.list_all()
    return render_template(
        "patients.html",
        patients=patients,
        created_format=CREATED_FORMAT,
    )
