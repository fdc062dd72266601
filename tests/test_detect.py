import logging

import pytest
from pydantic import ValidationError

from slotsync.models import FormatA, FormatB, FormatC
from slotsync.normalizers import UnknownFormat, detect_format, parse_record


def test_detects_each_format(record_a, record_b, record_c):
    assert detect_format(record_a) == "A"
    assert detect_format(record_b) == "B"
    assert detect_format(record_c) == "C"


def test_minimal_records_are_detected():
    assert detect_format({"date": "2025-07-20", "times": [], "doctor": {"name": "X"}}) == "A"
    assert detect_format({"available_on": "2025/07/20", "slots": [], "provider": "X"}) == "B"
    assert detect_format({"appointment_day": "2025-07-20", "free_slots": [], "physician_name": "X"}) == "C"


@pytest.mark.parametrize("rec", [
    {},
    {"invalid": "data"},
    {"date": "2025-07-20", "times": ["09:00"]},                              # no doctor
    {"date": "2025-07-20", "times": ["09:00"], "doctor": {"id": "d1"}},      # doctor without name
    {"date": "2025-07-20", "times": "09:00", "doctor": {"name": "X"}},       # times not a list
    {"date": "", "times": ["09:00"], "doctor": {"name": "X"}},               # empty date
    {"available_on": "2025/07/21", "slots": None, "provider": "X"},
    {"appointment_day": "2025-07-22", "free_slots": ["08:30"], "physician_name": ""},
    None,
    "2025-07-20",
    ["date", "times", "doctor"],
])
def test_unrecognized_shapes(rec):
    assert detect_format(rec) is None


def test_first_match_wins_and_warns(record_a, record_b, caplog):
    caplog.set_level(logging.WARNING)
    both = {**record_b, **record_a}
    assert detect_format(both) == "A"
    assert "several formats" in caplog.text


def test_parse_record_returns_typed_variant(record_a, record_b, record_c):
    a, b, c = parse_record(record_a), parse_record(record_b), parse_record(record_c)
    assert isinstance(a, FormatA) and a.doctor.name == "Dr. Smith"
    assert isinstance(b, FormatB) and b.slots[0].end == "10:30"
    assert isinstance(c, FormatC) and c.duration_minutes == 30


def test_parse_record_ignores_unknown_fields(record_c):
    record_c["upstream_extra"] = {"nested": True}
    assert parse_record(record_c).physician_name == "Dr. Johnson"


def test_parse_record_unknown_raises():
    with pytest.raises(UnknownFormat):
        parse_record({"invalid": "data"})


def test_parse_record_malformed_raises_validation_error():
    with pytest.raises(ValidationError):
        parse_record({"appointment_day": "2025-07-22", "free_slots": [830], "physician_name": "X"})


def test_unknown_format_names_keys_of_any_mapping():
    from types import MappingProxyType

    rec = MappingProxyType({"invalid": "data", "other": 1})
    assert detect_format(rec) is None
    with pytest.raises(UnknownFormat, match=r"keys=\['invalid', 'other'\]"):
        parse_record(rec)
