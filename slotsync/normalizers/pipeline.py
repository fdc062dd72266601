import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from pydantic import BaseModel, ValidationError

from slotsync.models import UnifiedSlot
from .base import Normalizer
from .detect import parse_record
from .errors import NormalizationError, UnknownFormat
from .rules import is_canonical_date, map_record
from .types import Record

log = logging.getLogger(__name__)


@dataclass
class NormalizationReport:
    """Slots produced by one normalization run plus the records that were dropped."""
    slots: List[UnifiedSlot] = field(default_factory=list)
    errors: List[Dict[str, Any]] = field(default_factory=list)


class SlotNormalizer(Normalizer):
    """
    Turns a batch of messy upstream records into unified slots.

    Each record is detected, parsed and mapped on its own. A record that
    can't be handled is logged and skipped; it never aborts the batch.
    Output order is record order, then the record's own slot order.
    """

    def normalize(self, records: Sequence[Record]) -> List[UnifiedSlot]:
        return self.normalize_with_report(records).slots

    def normalize_with_report(self, records: Sequence[Record]) -> NormalizationReport:
        report = NormalizationReport()
        log.info("processing %d upstream records", len(records))

        for i, rec in enumerate(records):
            try:
                slots = map_record(parse_record(rec))
            except UnknownFormat as e:
                e.index = i
                log.warning("skipping record %d: %s", i, e)
                report.errors.append({"index": i, "error": str(e)})
                continue
            except (ValidationError, NormalizationError, TypeError, ValueError) as e:
                log.warning("skipping malformed record %d: %s", i, e)
                report.errors.append({"index": i, "error": str(e)})
                continue
            except Exception as e:
                # one bad record must not take the batch down
                log.exception("unexpected failure on record %d", i)
                report.errors.append({"index": i, "error": str(e)})
                continue

            for s in slots:
                if not is_canonical_date(s.date):
                    log.debug("record %d has non-canonical date %r", i, s.date)
            # all-or-nothing per record
            report.slots.extend(slots)

        log.info(
            "normalized %d slots (%d records skipped)", len(report.slots), len(report.errors)
        )
        return report


def get_default_normalizer() -> Normalizer:
    """
    Factory for the normalizer used by the API.
    Returns a fresh instance; normalizers hold no state between calls.
    """
    return SlotNormalizer()


def validate_normalized_data(slots: Sequence[Any]) -> bool:
    """
    Post-condition check: every slot has non-empty string `date`,
    `start_time` and `provider`. An empty sequence is valid.
    """
    for slot in slots:
        if isinstance(slot, BaseModel):
            slot = slot.model_dump()
        if not isinstance(slot, Mapping):
            return False
        for key in ("date", "start_time", "provider"):
            value = slot.get(key)
            if not isinstance(value, str) or not value:
                return False
    return True
