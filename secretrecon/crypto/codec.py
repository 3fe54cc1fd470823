"""Share value codec: digit strings in radix 2..36 <-> field elements.

Digits are ``0-9`` followed by case-insensitive ``a-z``.  Values are
accumulated digit by digit on Python ints rather than via ``int(s, base)``,
which refuses strings longer than ``sys.get_int_max_str_digits()`` for
non-power-of-two bases.
"""

from __future__ import annotations

from typing import Dict, List

from secretrecon.config import MAX_RADIX, MIN_RADIX
from secretrecon.crypto import field
from secretrecon.crypto.errors import InvalidDigitError, InvalidRadixError

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

_DIGIT_VALUES: Dict[str, int] = {c: i for i, c in enumerate(ALPHABET)}
_DIGIT_VALUES.update({c.upper(): i for i, c in enumerate(ALPHABET)})


def check_radix(radix: int) -> int:
    """Return *radix* if it is a supported base, else raise ``InvalidRadixError``."""
    if isinstance(radix, bool) or not isinstance(radix, int):
        raise InvalidRadixError(radix)
    if not MIN_RADIX <= radix <= MAX_RADIX:
        raise InvalidRadixError(radix)
    return radix


def parse(digits: str, radix: int) -> int:
    """Parse *digits* as an unsigned integer in base *radix*, without reduction."""
    check_radix(radix)
    if not digits:
        raise InvalidDigitError(digits, radix)
    value = 0
    for pos, ch in enumerate(digits):
        d = _DIGIT_VALUES.get(ch)
        if d is None or d >= radix:
            raise InvalidDigitError(digits, radix, pos)
        value = value * radix + d
    return value


def decode(digits: str, radix: int) -> int:
    """Decode a share's y-value into a field element."""
    return field.reduce(parse(digits, radix))


def encode(value: int, radix: int) -> str:
    """Render a non-negative integer in base *radix* (lowercase digits)."""
    check_radix(radix)
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    if value == 0:
        return "0"
    out: List[str] = []
    while value:
        value, d = divmod(value, radix)
        out.append(ALPHABET[d])
    return "".join(reversed(out))
