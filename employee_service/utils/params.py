"""Request parameter parsing helpers."""

import re
from typing import Optional

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Return the 64-bit integer spelled by ``raw`` or None.

    Accepts an optional sign followed by ASCII digits only; surrounding
    whitespace, underscores, decimals, exponents and values outside the
    int64 range are rejected.
    """
    if raw is None or not _INTEGER_RE.fullmatch(raw):
        return None
    # int64 has at most 19 significant digits.
    if len(raw.lstrip("+-").lstrip("0")) > 19:
        return None
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


def positive_int_or_default(raw: Optional[str], default: int) -> int:
    value = parse_int(raw)
    if value is None or value <= 0:
        return default
    return value


def pagination(page: Optional[str], limit: Optional[str]) -> tuple[int, int]:
    """Resolve raw ``page``/``limit`` query values to (page, limit)."""
    return (
        positive_int_or_default(page, DEFAULT_PAGE),
        positive_int_or_default(limit, DEFAULT_LIMIT),
    )
