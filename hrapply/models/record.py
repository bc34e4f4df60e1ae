"""
Application Record helpers
The record is a flat camelCase mapping; only a handful of fields are typed
"""

import re
from typing import Any, Dict, Optional

# Integer columns; empty or missing input is stored as NULL
INTEGER_FIELDS = (
    "age",
    "height",
    "weight",
    "family1Age",
    "family2Age",
    "family3Age",
    "family4Age",
    "numberOfChildren",
)

# Set by the server on submission, never taken from the client
SERVER_FIELDS = ("id", "created_at", "status")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a value

    "35" -> 35, "35 years" -> 35, 35.9 -> 35, "abc" -> None, "" -> None.
    A raw numeric 0 is kept; any other value whose leading integer is 0
    ("0", "0 kids", 0.5) is stored as None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)) and value == 0:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value) or None
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1)) or None


def coerce_integer_fields(record: Dict[str, Any]) -> Dict[str, Any]:
    """Return a copy of the record with every integer field parsed or set to None"""
    coerced = dict(record)
    for field in INTEGER_FIELDS:
        coerced[field] = parse_int(coerced.get(field))
    return coerced


def blank(value: Any) -> str:
    """Printable form of a record value; falsy values print as nothing"""
    if value is None or value is False or value == "" or value == 0:
        return ""
    return str(value)
