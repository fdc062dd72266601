from slotsync.mock_data import FAKE_APPOINTMENTS, MockDataSource, add_minutes
from slotsync.normalizers import SlotNormalizer, detect_format, validate_normalized_data


def test_formats_cycle_by_index(emulator):
    records = emulator.generate_messy_response()
    assert [detect_format(r) for r in records] == ["A", "B", "C", "A"]


def test_format_shapes(emulator):
    a, b, c, _ = emulator.generate_messy_response()
    assert a["doctor"] == {"name": "Dr. Smith", "id": "d1001"}
    assert a["type"] == "NewPatient"
    assert b["available_on"] == "2025/07/21"
    assert b["slots"][0] == {"start": "10:00", "end": "10:30"}
    assert b["category"] == "General"
    assert c["physician_code"] == "d1003"
    assert c["service_type"] == "Cleaning"
    assert c["duration_minutes"] == 30


def test_emulator_output_normalizes_cleanly(emulator):
    slots = SlotNormalizer().normalize(emulator.generate_messy_response())
    assert len(slots) == 10
    assert validate_normalized_data(slots)
    assert [s.date for s in slots if s.provider == "Dr. Lee"] == ["2025-07-21", "2025-07-21"]


def test_missing_file_falls_back_to_fake_data(tmp_path):
    records = MockDataSource(tmp_path / "nope.json").generate_messy_response()
    assert len(records) == len(FAKE_APPOINTMENTS)


def test_unreadable_file_falls_back_to_fake_data(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json")
    records = MockDataSource(bad).generate_messy_response()
    assert len(records) == len(FAKE_APPOINTMENTS)


def test_bundled_data_file_loads():
    assert len(MockDataSource().load_appointments()) > 0


def test_add_minutes():
    assert add_minutes("09:00", 30) == "09:30"
    assert add_minutes("10:45", 30) == "11:15"
    assert add_minutes("23:45", 30) == "24:15"
