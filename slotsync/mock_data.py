import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from slotsync.settings import APPOINTMENTS_PATH

log = logging.getLogger(__name__)

FORMATS = ["A", "B", "C"]
SLOT_MINUTES = 30

# Used when the data file is missing or empty
FAKE_APPOINTMENTS: List[Dict[str, Any]] = [
    {"id": "1", "date": "2025-07-20", "doctorId": "d1001", "doctorName": "Dr. Smith",
     "slots": ["09:00", "10:30", "13:15", "14:45"], "appointmentType": "NewPatient"},
    {"id": "2", "date": "2025-07-21", "doctorId": "d1002", "doctorName": "Dr. Lee",
     "slots": ["10:00", "11:00", "15:30"], "appointmentType": "General"},
    {"id": "3", "date": "2025-07-22", "doctorId": "d1003", "doctorName": "Dr. Johnson",
     "slots": ["08:30", "09:30", "11:15", "16:00"], "appointmentType": "Cleaning"},
    {"id": "4", "date": "2025-07-23", "doctorId": "d1001", "doctorName": "Dr. Smith",
     "slots": ["09:15", "12:00", "14:30"], "appointmentType": "Emergency"},
    {"id": "5", "date": "2025-07-24", "doctorId": "d1002", "doctorName": "Dr. Lee",
     "slots": ["10:45", "13:30", "15:15"], "appointmentType": "Consultation"},
]


class MockDataSource:
    """
    Stand-in for the third-party scheduling system.
    Reads clean appointments from disk and re-shapes each one into one of
    three inconsistent formats, cycling A, B, C by record index.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path else APPOINTMENTS_PATH

    def load_appointments(self) -> List[Dict[str, Any]]:
        log.info("loading appointments from %s", self.path)
        if not self.path.exists():
            log.warning("appointments file not found at %s", self.path)
            return []
        try:
            parsed = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            log.exception("failed to load appointments from %s", self.path)
            return []
        appointments = parsed.get("appointments") if isinstance(parsed, dict) else None
        return appointments or []

    def generate_messy_response(self) -> List[Dict[str, Any]]:
        appointments = self.load_appointments()
        if not appointments:
            log.warning("no appointments found, generating fake data")
            appointments = [dict(a) for a in FAKE_APPOINTMENTS]

        out = []
        for i, appt in enumerate(appointments):
            fmt = FORMATS[i % len(FORMATS)]
            if fmt == "A":
                out.append(gen_format_a(appt))
            elif fmt == "B":
                out.append(gen_format_b(appt))
            else:
                out.append(gen_format_c(appt))

        log.info("generated %d appointment records using %d messy formats", len(out), len(FORMATS))
        return out


# --- Per-format generators ---

def gen_format_a(appt: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "date": appt["date"],
        "times": list(appt["slots"]),
        "doctor": {"name": appt["doctorName"], "id": appt["doctorId"]},
        "type": appt["appointmentType"],
    }


def gen_format_b(appt: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "available_on": appt["date"].replace("-", "/"),   # different date format
        "slots": [{"start": t, "end": add_minutes(t, SLOT_MINUTES)} for t in appt["slots"]],
        "provider": appt["doctorName"],
        "category": appt["appointmentType"],
    }


def gen_format_c(appt: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "appointment_day": appt["date"],
        "free_slots": list(appt["slots"]),
        "physician_name": appt["doctorName"],
        "physician_code": appt["doctorId"],
        "service_type": appt["appointmentType"],
        "duration_minutes": SLOT_MINUTES,
    }


def add_minutes(hhmm: str, minutes: int) -> str:
    """Add minutes to an "HH:MM" string. Hours past 23 are not wrapped."""
    h, m = (int(x) for x in hhmm.split(":"))
    total = h * 60 + m + minutes
    return f"{total // 60:02d}:{total % 60:02d}"
