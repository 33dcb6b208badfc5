"""
Field rule catalog used by the product routes.

Each rule is pure and reports at most one message. The parse helpers
are shared with the interface layer, which coerces raw values once a
request has passed validation.
"""

import math
import re
from typing import Any, Optional

# Same shapes accepted by common web validators: no leading zeros for
# integers, optional sign, optional fractional part for numbers.
_INTEGER_PATTERN = re.compile(r"^[-+]?(0|[1-9][0-9]*)$")
_NUMERIC_PATTERN = re.compile(r"^[-+]?([0-9]*\.)?[0-9]+$")


def parse_int(value: Any) -> Optional[int]:
    """Return value as an int, or None if it is not an integer literal."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.match(value):
        try:
            return int(value)
        except ValueError:
            # Past the interpreter's digit limit for int(str).
            return None
    return None


def parse_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str) and not _NUMERIC_PATTERN.match(value):
        return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        number = float(value)
    except OverflowError:
        # Integers too large for a double.
        return None
    return number if math.isfinite(number) else None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def integer(field: str, value: Any) -> list[str]:
    """The value must parse as an integer."""
    if parse_int(value) is None:
        return [f"invalid {field}"]
    return []


def not_empty(field: str, value: Any) -> list[str]:
    """The value must be a string that is non-empty after trimming."""
    if not isinstance(value, str) or not value.strip():
        return [f"{field} must not be empty"]
    return []


def required(field: str, value: Any) -> list[str]:
    """The value must be present and not blank."""
    if _is_blank(value):
        return [f"{field} required"]
    return []


def numeric(field: str, value: Any) -> list[str]:
    """The value must parse as a number."""
    if parse_number(value) is None:
        return [f"{field} must be numeric"]
    return []


def positive(field: str, value: Any) -> list[str]:
    """The parsed value must be strictly greater than zero."""
    number = parse_number(value)
    if number is None or number <= 0:
        return [f"{field} must be positive"]
    return []


def boolean(field: str, value: Any) -> list[str]:
    """The value must be a JSON boolean literal."""
    if not isinstance(value, bool):
        return [f"invalid {field} value"]
    return []
