from .pipeline import (
    get_default_normalizer,
    NormalizationReport,
    SlotNormalizer,
    validate_normalized_data,
)
from .detect import detect_format, parse_record
from .rules import map_record, normalize_date
from .errors import NormalizationError, UnknownFormat
from .types import ParsedRecord, Record, RecordFormat
from .base import Normalizer

__all__ = [
    "get_default_normalizer",
    "NormalizationReport",
    "SlotNormalizer",
    "validate_normalized_data",
    "detect_format",
    "parse_record",
    "map_record",
    "normalize_date",
    "NormalizationError",
    "UnknownFormat",
    "ParsedRecord",
    "Record",
    "RecordFormat",
    "Normalizer",
]
