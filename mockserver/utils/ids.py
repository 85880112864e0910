from __future__ import annotations

import math
import re
from typing import Any, Union

from ..exceptions import InvalidIdError, MalformedRecordError

Number = Union[int, float]

# ASCII decimal literal: no digit separators, no Unicode digits, no inf/nan
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def normalize_number(value: Number) -> Number:
    """Integral floats become ints so ids are written as `2`, not `2.0`."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def parse_id(value: str) -> Number:
    text = str(value).strip(" \t\r\n")
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidIdError(f"id must be numeric, got {value!r}")
    n = float(text)
    if not math.isfinite(n):
        raise InvalidIdError(f"id must be finite, got {value!r}")
    return normalize_number(n)


def record_id(record: Any) -> Number:
    if not isinstance(record, dict):
        raise MalformedRecordError(f"record must be an object, got {type(record).__name__}")
    if "id" not in record:
        raise MalformedRecordError("record has no id")
    rid = record["id"]
    if isinstance(rid, bool) or not isinstance(rid, (int, float)):
        raise MalformedRecordError(f"record id must be a number, got {rid!r}")
    return rid
