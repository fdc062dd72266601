from collections.abc import Mapping
from typing import Any


class NormalizationError(Exception):
    """Raised when a single upstream record cannot be normalized."""


class UnknownFormat(NormalizationError):
    """Raised when a record matches none of the known upstream shapes."""

    def __init__(self, record: Any, index: int | None = None):
        self.record = record
        self.index = index
        keys = sorted(str(k) for k in record.keys()) if isinstance(record, Mapping) else type(record).__name__
        super().__init__(f"Unknown format detected (keys={keys})")
