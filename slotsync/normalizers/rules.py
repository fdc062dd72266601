import re
from typing import List

from slotsync.models import FormatA, FormatB, FormatC, UnifiedSlot
from .types import ParsedRecord

CANONICAL_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def map_record(rec: ParsedRecord) -> List[UnifiedSlot]:
    """
    Turn one parsed upstream record into unified slots:
    one slot per time entry, in the record's original order.
    An empty time list gives an empty result.
    """
    match rec:
        case FormatA():
            return map_format_a(rec)
        case FormatB():
            return map_format_b(rec)
        case FormatC():
            return map_format_c(rec)
    raise TypeError(f"unsupported record type: {type(rec).__name__}")


def map_format_a(rec: FormatA) -> List[UnifiedSlot]:
    """
    Input:  {date: "2025-07-20", times: ["09:00", "10:30"], doctor: {name: "Dr. Smith"}}
    Output: [{date: "2025-07-20", start_time: "09:00", provider: "Dr. Smith"}, ...]
    """
    day = normalize_date(rec.date)
    return [UnifiedSlot(date=day, start_time=t, provider=rec.doctor.name) for t in rec.times]


def map_format_b(rec: FormatB) -> List[UnifiedSlot]:
    """
    Input:  {available_on: "2025/07/21", slots: [{start: "10:00", end: "10:30"}], provider: "Dr. Lee"}
    Output: [{date: "2025-07-21", start_time: "10:00", provider: "Dr. Lee"}]
    """
    day = normalize_date(rec.available_on)
    # `end` is not part of the unified shape
    return [UnifiedSlot(date=day, start_time=s.start, provider=rec.provider) for s in rec.slots]


def map_format_c(rec: FormatC) -> List[UnifiedSlot]:
    day = normalize_date(rec.appointment_day)
    return [UnifiedSlot(date=day, start_time=t, provider=rec.physician_name) for t in rec.free_slots]


# --- Field helpers ---

def normalize_date(s: str) -> str:
    """
    Bring upstream dates to YYYY-MM-DD by swapping '/' separators for '-'.
    Purely textual: "2025/07/21" -> "2025-07-21", anything else is returned as is.
    """
    if "/" in s:
        return s.replace("/", "-")
    return s


def is_canonical_date(s: str) -> bool:
    """True if `s` looks like YYYY-MM-DD (shape only, no calendar check)."""
    return bool(CANONICAL_DATE.match(s))
