import logging
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Tuple

from slotsync.models import FormatA, FormatB, FormatC
from .errors import UnknownFormat
from .types import ParsedRecord, RecordFormat

log = logging.getLogger(__name__)


# --- Shape predicates (field presence only, there is no type tag) ---

def is_format_a(rec: Mapping) -> bool:
    """Format A: has 'date', a 'times' list and 'doctor.name'."""
    doctor = rec.get("doctor")
    return (
        bool(rec.get("date"))
        and isinstance(rec.get("times"), list)
        and isinstance(doctor, Mapping)
        and bool(doctor.get("name"))
    )


def is_format_b(rec: Mapping) -> bool:
    """Format B: has 'available_on', a 'slots' list and 'provider'."""
    return (
        bool(rec.get("available_on"))
        and isinstance(rec.get("slots"), list)
        and bool(rec.get("provider"))
    )


def is_format_c(rec: Mapping) -> bool:
    """Format C: has 'appointment_day', a 'free_slots' list and 'physician_name'."""
    return (
        bool(rec.get("appointment_day"))
        and isinstance(rec.get("free_slots"), list)
        and bool(rec.get("physician_name"))
    )


# Evaluation order matters only for records crafted to match several shapes
DETECTORS: List[Tuple[RecordFormat, Callable[[Mapping], bool], type]] = [
    ("A", is_format_a, FormatA),
    ("B", is_format_b, FormatB),
    ("C", is_format_c, FormatC),
]


def detect_format(rec: Any) -> Optional[RecordFormat]:
    """
    Classify an untyped record by its shape.
    Returns "A", "B", "C", or None if it doesn't match any known shape.
    First match wins (A -> B -> C).
    """
    if not isinstance(rec, Mapping):
        return None
    matches = [fmt for fmt, pred, _ in DETECTORS if pred(rec)]
    if not matches:
        return None
    if len(matches) > 1:
        log.warning("record matches several formats %s; using %s", matches, matches[0])
    return matches[0]


def parse_record(rec: Any) -> ParsedRecord:
    """
    Detect the record's format and parse it into the matching model.
    Raises UnknownFormat when no shape matches, and pydantic's
    ValidationError when the shape matches but the contents are malformed
    (e.g. a non-string time entry).
    """
    fmt = detect_format(rec)
    for name, _, model in DETECTORS:
        if name == fmt:
            return model.model_validate(rec)
    raise UnknownFormat(rec)
