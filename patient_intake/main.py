"""
FastAPI app

- Intake form, PDF rendering and patient listing on a single router
- Static assets served from the package static/ directory
- Basic health check
"""
import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file before reading config
project_root = Path(__file__).parent.parent
load_dotenv(dotenv_path=project_root / '.env')

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from patient_intake.api import router
from patient_intake.api.middleware import TimingMiddleware
from patient_intake.core.config import HOST, LOG_LEVEL, PATIENTS_DIR, PORT, STATIC_DIR

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Patient Intake")

# Logs request duration and status for all requests
app.add_middleware(TimingMiddleware)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

app.include_router(router)


@app.get("/health")
async def health():
    """
    Basic health check
    """
    return {"status": "ok"}


def run():
    """
    Start the server on HOST:PORT
    """
    import uvicorn

    print(f"Server running on http://{HOST}:{PORT}")
    print("Features:")
    print("  /patients - View all saved patient records")
    print("  /pdf?id=<patient_id> - Generate PDF for specific patient")
    print(f"Patient records will be saved in {PATIENTS_DIR}/")

    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
