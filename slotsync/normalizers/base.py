# slotsync/normalizers/base.py
from typing import List, Protocol, Sequence

from slotsync.models import UnifiedSlot
from .types import Record


class Normalizer(Protocol):
    def normalize(self, records: Sequence[Record]) -> List[UnifiedSlot]:
        """Return NEW unified slots for `records`. Do not mutate the input."""
        ...
