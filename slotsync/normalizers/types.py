# slotsync/normalizers/types.py
from typing import Any, Dict, Literal, Union

from slotsync.models import FormatA, FormatB, FormatC

RecordFormat = Literal["A", "B", "C"]
Record = Dict[str, Any]                       # untyped upstream record
ParsedRecord = Union[FormatA, FormatB, FormatC]
