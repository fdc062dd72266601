# slotsync/settings.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent

APP_ENV = os.getenv("APP_ENV", "development")
PORT = int(os.getenv("PORT", "3000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Comma-separated list of frontends allowed to call the API
ALLOWED_ORIGINS = [
    o.strip()
    for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000,http://localhost:3001").split(",")
    if o.strip()
]

# Credential pair for the simulated scheduling system (Basic Auth)
MOCK_API_EMAIL = os.getenv("MOCK_API_EMAIL", "admin@example.com")
MOCK_API_PASSWORD = os.getenv("MOCK_API_PASSWORD", "admin123")
MOCK_API_BASE_URL = os.getenv("MOCK_API_BASE_URL", f"http://localhost:{PORT}")
UPSTREAM_TIMEOUT = float(os.getenv("UPSTREAM_TIMEOUT", "10"))

APPOINTMENTS_PATH = Path(
    os.getenv("APPOINTMENTS_PATH", str(PACKAGE_DIR / "data" / "appointments.json"))
)
