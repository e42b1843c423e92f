import math
import re
from decimal import Decimal

from .errors import InvalidInputError

_YM_RE = re.compile(r"[0-9]{4}-(0[1-9]|1[0-2])")


def validate_ym(ym: str | None) -> str | None:
    """'YYYY-MM' -> same string; None passes through (latest month)."""
    if ym is None:
        return None
    if not isinstance(ym, str) or not _YM_RE.fullmatch(ym):
        raise InvalidInputError(f"date must be YYYY-MM, got {ym!r}")
    return ym


def format_coordinate(value: float) -> str:
    # repr is the shortest text that parses back to the same float; "f" keeps it
    # positional, then pad to at least 6 places
    whole, _, frac = format(Decimal(repr(float(value))), "f").partition(".")
    return f"{whole}.{frac.ljust(6, '0')}"


def require_finite(name: str, value: float, low: float, high: float) -> float:
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from None
    if not math.isfinite(value) or not low <= value <= high:
        raise InvalidInputError(f"{name} must be within [{low}, {high}], got {value!r}")
    return value


def require_id(name: str, value) -> str:
    text = "" if value is None else str(value)
    if not text.strip():
        raise InvalidInputError(f"{name} must not be empty")
    return text
