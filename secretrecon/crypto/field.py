"""Prime-field arithmetic F_p.

All values are Python ints reduced mod PRIME.
"""

from __future__ import annotations

from typing import Tuple

from secretrecon.config import PRIME
from secretrecon.crypto.errors import NoInverseError


def add(a: int, b: int) -> int:
    """Field addition."""
    return (a + b) % PRIME


def sub(a: int, b: int) -> int:
    """Field subtraction."""
    return (a - b) % PRIME


def mul(a: int, b: int) -> int:
    """Field multiplication."""
    return (a * b) % PRIME


def neg(a: int) -> int:
    """Additive inverse."""
    return (-a) % PRIME


def reduce(a: int) -> int:
    """Reduce an integer into [0, PRIME).

    Python's ``%`` takes the sign of the divisor, so negative *a* never
    yields a negative residue.
    """
    return a % PRIME


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``g = gcd(a, b) = a*x + b*y``.

    Iterative form of the extended Euclidean algorithm; for ``a == 0``
    this gives ``(b, 0, 1)``.
    """
    old_r, r = b, a
    old_s, s = 1, 0   # coefficients of b
    old_t, t = 0, 1   # coefficients of a
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_t, old_s


def inv(a: int) -> int:
    """Multiplicative inverse via the extended Euclidean algorithm."""
    a = reduce(a)
    g, x, _ = extended_gcd(a, PRIME)
    if g != 1:
        raise NoInverseError(f"{a} has no inverse mod p (gcd={g})")
    return reduce(x)
