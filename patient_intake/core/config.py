"""
Basic configuration

- Storage directory, listen address and log level from environment variables
- Defaults match a local single-process deployment
"""
import os
from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

# One <id>.json file per patient
PATIENTS_DIR = os.getenv("PATIENTS_DIR", "data/patients")

HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
