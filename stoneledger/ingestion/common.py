"""Total normalizers that turn loosely-typed sheet cells into clean values.

None of these functions raise: a malformed cell always becomes a safe default.
"""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

# Leading float literal, read the way a lenient float parser reads "12.5 USD".
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_CURRENCY_NOISE = re.compile(r"[$,]")


def clean_cell(value: Any) -> str:
    """Coerce a cell to trimmed text; ``None`` becomes an empty string."""

    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


def _leading_float(text: str) -> float | None:
    match = _LEADING_NUMBER.match(text)
    if not match:
        return None
    number = float(match.group(1))
    return number if math.isfinite(number) else None


def _round_half_away(number: float) -> int:
    if not math.isfinite(number):
        return 0
    return int(Decimal(repr(number)).to_integral_value(rounding=ROUND_HALF_UP))


def _to_number(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
        return number if math.isfinite(number) else None
    return _leading_float(_CURRENCY_NOISE.sub("", str(value)))


def parse_currency(value: Any) -> int:
    """Return a currency cell as non-negative integer cents.

    Numbers are taken as decimal amounts; strings may carry ``$`` and
    thousands separators. Blank or unreadable cells are 0.
    """

    number = _to_number(value)
    if number is None:
        return 0
    return max(_round_half_away(number * 100), 0)


def parse_days(value: Any) -> int:
    """Return a duration cell as a whole, non-negative number of days."""

    number = _to_number(value)
    if number is None:
        return 0
    return max(_round_half_away(number), 0)


def parse_date(value: Any) -> str:
    """Convert ``M/D/Y`` or ``M/D/YY`` to ``YYYY-MM-DD``.

    Anything that is not three slash-separated parts comes back unchanged,
    so callers must not assume the result is ISO formatted.
    """

    text = clean_cell(value)
    if not text:
        return ""
    parts = text.split("/")
    if len(parts) != 3:
        return text
    month, day, year = parts
    full_year = f"20{year}" if len(year) == 2 else year
    return f"{full_year}-{month.rjust(2, '0')}-{day.rjust(2, '0')}"
