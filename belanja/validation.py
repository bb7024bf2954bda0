"""Input parsing and validation helpers."""

from __future__ import annotations

import re

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LOW_STOCK_THRESHOLD = 10

_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_DIGITS = re.compile(r"[0-9]+")
_USERNAME = re.compile(r"[A-Za-z0-9]{3,}")


class InputError(ValueError):
    """Raised when user input cannot be interpreted."""


def parse_int(text: str) -> int:
    """Read a leading 32-bit integer, ignoring leading whitespace and trailing text."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise InputError("Input bukan angka yang valid.")
    value = int(match.group(1))
    if not INT_MIN <= value <= INT_MAX:
        raise InputError("Angka terlalu besar atau kecil.")
    return value


def safe_divide(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("Kesalahan: Pembagian dengan nol.")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def is_number(text: str) -> bool:
    """True if text is non-empty and made only of ASCII digits."""
    return _DIGITS.fullmatch(text) is not None


def split(text: str, delimiter: str) -> list[str]:
    """Split on a delimiter; a trailing delimiter yields no final empty field."""
    if not text:
        return []
    parts = text.split(delimiter)
    if parts[-1] == "":
        parts.pop()
    return parts


def is_valid_username(username: str) -> bool:
    """At least three characters, ASCII letters and digits only."""
    return _USERNAME.fullmatch(username) is not None


def is_low_stock(stock: int) -> bool:
    return stock < LOW_STOCK_THRESHOLD