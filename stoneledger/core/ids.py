"""Deterministic short identifiers derived from arbitrary text."""
from __future__ import annotations

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_UINT32 = 0xFFFFFFFF


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_DIGITS[remainder])
    return "".join(reversed(digits))


def generate_id(text: str) -> str:
    """Return a stable base-36 id for ``text``.

    Uses the 31-multiplier rolling hash over UTF-16 code units, truncated to a
    signed 32-bit integer, so ids match the ones the dashboard already links to.
    """

    encoded = text.encode("utf-16-le", "surrogatepass")
    value = 0
    for index in range(0, len(encoded), 2):
        code_unit = encoded[index] | (encoded[index + 1] << 8)
        value = (((value << 5) - value) + code_unit) & _UINT32
    if value > 0x7FFFFFFF:
        value -= 1 << 32
    return _to_base36(abs(value))


def company_id(name: str) -> str:
    """Return the id shared by every spelling of a company name that differs only in case or padding."""

    return generate_id(name.strip().lower())
