"""Shamir (K-of-N) secret reconstruction over F_p.

API
---
reconstruct(points, k=None)      -> secret   (exactly k distinct-x points)
select_points(points, k)         -> first k points
cross_check(points, k)           -> (first-k secret, last-k secret)
reconstruct_checked(points, k)   -> secret, or InconsistentSharesError
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from secretrecon.crypto import field
from secretrecon.crypto.errors import DegenerateShareSetError, InconsistentSharesError

Point = Tuple[int, int]


def _check_share_set(points: Sequence[Point], k: Optional[int]) -> None:
    if not points:
        raise DegenerateShareSetError("Need at least one point")
    if k is not None and len(points) != k:
        raise DegenerateShareSetError(
            f"Expected exactly k={k} points, got {len(points)}"
        )
    seen = set()
    for x, _ in points:
        xr = field.reduce(x)
        if xr in seen:
            raise DegenerateShareSetError(f"Duplicate x-coordinate {x}")
        seen.add(xr)


def reconstruct(points: Sequence[Point], k: Optional[int] = None) -> int:
    """Reconstruct secret from *points* using Lagrange interpolation at x=0.

    If *k* is given the share set must contain exactly *k* points.
    """
    _check_share_set(points, k)
    n = len(points)
    secret = 0
    for j in range(n):
        xj, yj = points[j]
        num = 1
        den = 1
        for m in range(n):
            if m == j:
                continue
            xm = points[m][0]
            num = field.mul(num, field.neg(xm))          # (0 - x_m)
            den = field.mul(den, field.sub(xj, xm))      # (x_j - x_m)
        lagrange = field.mul(num, field.inv(den))
        secret = field.add(secret, field.mul(field.reduce(yj), lagrange))
    return secret


def select_points(points: Sequence[Point], k: int) -> List[Point]:
    """Return the first *k* points in iteration order."""
    if k < 1:
        raise DegenerateShareSetError(f"Invalid threshold: k={k}")
    if len(points) < k:
        raise DegenerateShareSetError(
            f"Need {k} points, only {len(points)} available"
        )
    return list(points[:k])


def cross_check(points: Sequence[Point], k: int) -> Tuple[int, int]:
    """Reconstruct from the first *k* and the last *k* points.

    Both values agree when every point lies on one degree-(k-1)
    polynomial.  Requires more than *k* points.
    """
    if len(points) <= k:
        raise DegenerateShareSetError(
            f"Cross-check needs more than k={k} points, got {len(points)}"
        )
    primary = reconstruct(select_points(points, k), k)
    alternate = reconstruct(list(points[-k:]), k)
    return primary, alternate


def reconstruct_checked(points: Sequence[Point], k: int) -> int:
    """Like ``reconstruct(select_points(points, k))`` but rejects inconsistent extras."""
    if len(points) <= k:
        return reconstruct(select_points(points, k), k)
    primary, alternate = cross_check(points, k)
    if primary != alternate:
        raise InconsistentSharesError(primary, alternate)
    return primary
