# tests/conftest.py
import json
import pytest
from fastapi.testclient import TestClient

from slotsync.main import app
from slotsync.mock_data import MockDataSource
from slotsync.routers.mock_api import get_mock_data_source
from slotsync.upstream import UpstreamError, get_slot_source


class EmulatorSource:
    """In-process stand-in for HttpSlotSource (no network, no self-calls)."""

    def __init__(self, emulator: MockDataSource):
        self.emulator = emulator

    def fetch(self):
        return self.emulator.generate_messy_response()


class StaticSource:
    def __init__(self, records):
        self.records = records

    def fetch(self):
        return list(self.records)


class BrokenSource:
    def fetch(self):
        raise UpstreamError("Mock API responded with 503: Service Unavailable")


# --- Small, predictable appointment file for the whole suite ---
@pytest.fixture
def appointments_file(tmp_path):
    path = tmp_path / "appointments.json"
    path.write_text(json.dumps({"appointments": [
        {"id": "1", "date": "2025-07-20", "doctorId": "d1001", "doctorName": "Dr. Smith",
         "slots": ["09:00", "10:30", "13:15"], "appointmentType": "NewPatient"},
        {"id": "2", "date": "2025-07-21", "doctorId": "d1002", "doctorName": "Dr. Lee",
         "slots": ["10:00", "11:00"], "appointmentType": "General"},
        {"id": "3", "date": "2025-07-22", "doctorId": "d1003", "doctorName": "Dr. Johnson",
         "slots": ["08:30", "09:30", "11:15", "16:00"], "appointmentType": "Cleaning"},
        {"id": "4", "date": "2025-07-23", "doctorId": "d1001", "doctorName": "Dr. Smith",
         "slots": ["09:15"], "appointmentType": "Emergency"},
    ]}))
    return path


@pytest.fixture
def emulator(appointments_file):
    return MockDataSource(appointments_file)


# --- Override FastAPI's upstream dependencies ---
@pytest.fixture(autouse=True)
def override_sources(emulator):
    app.dependency_overrides[get_mock_data_source] = lambda: emulator
    app.dependency_overrides[get_slot_source] = lambda: EmulatorSource(emulator)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def use_source():
    """Swap the upstream for a given source object inside one test."""
    def _use(source):
        app.dependency_overrides[get_slot_source] = lambda: source
    return _use


# --- One well-formed record per format ---
@pytest.fixture
def record_a():
    return {
        "date": "2025-07-20",
        "times": ["09:00", "10:30", "13:15"],
        "doctor": {"name": "Dr. Smith", "id": "d1001"},
        "type": "NewPatient",
    }


@pytest.fixture
def record_b():
    return {
        "available_on": "2025/07/21",
        "slots": [{"start": "10:00", "end": "10:30"}, {"start": "11:00", "end": "11:30"}],
        "provider": "Dr. Lee",
        "category": "General",
    }


@pytest.fixture
def record_c():
    return {
        "appointment_day": "2025-07-22",
        "free_slots": ["08:30", "09:30", "11:15"],
        "physician_name": "Dr. Johnson",
        "physician_code": "d1003",
        "service_type": "Cleaning",
        "duration_minutes": 30,
    }
