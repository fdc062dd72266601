from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict


# -----------------------------
# Raw upstream shapes (the three "messy" formats)
# -----------------------------
class _RawRecord(BaseModel):
    # Upstream may add fields at any time; keep only what we know.
    # Descriptive fields are carried as-is and never fail a record.
    model_config = ConfigDict(extra="ignore")


class Doctor(_RawRecord):
    name: str
    id: Optional[Any] = None


class FormatA(_RawRecord):
    # {date, times[], doctor{name,id}, type}
    date: str
    times: List[str]
    doctor: Doctor
    type: Optional[Any] = None


class TimeRange(_RawRecord):
    start: str
    end: Optional[Any] = None   # dropped during normalization


class FormatB(_RawRecord):
    # {available_on, slots[{start,end}], provider, category}
    available_on: str
    slots: List[TimeRange]
    provider: str
    category: Optional[Any] = None


class FormatC(_RawRecord):
    # {appointment_day, free_slots[], physician_name, physician_code, service_type, duration_minutes}
    appointment_day: str
    free_slots: List[str]
    physician_name: str
    physician_code: Optional[Any] = None
    service_type: Optional[Any] = None
    duration_minutes: Optional[Any] = None


# -----------------------------
# Unified outbound shape
# -----------------------------
class UnifiedSlot(BaseModel):
    date: str          # YYYY-MM-DD
    start_time: str    # HH:MM, 24h
    provider: str


# -----------------------------
# Response metadata
# -----------------------------
class Pagination(BaseModel):
    page: int
    limit: int
    total: int
    pages: int

