"""Share-file intake.

A share file is a JSON object of the form::

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

Every key other than ``keys`` is a share index (the x-coordinate); its
``value`` is the y-coordinate written in radix ``base``.  Shares keep the
file's iteration order, and reconstruction uses the first ``k`` of them.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Set, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from secretrecon.crypto import codec, shamir
from secretrecon.crypto.errors import CaseFormatError, DegenerateShareSetError, InvalidRadixError
from secretrecon.crypto.shamir import Point


class ThresholdKeys(BaseModel):
    """The ``keys`` block: total shares and threshold."""

    n: int = Field(ge=1)  # informational only
    k: int = Field(ge=1)


class ShareSpec(BaseModel):
    """One raw share entry as it appears in the file."""

    base: Union[int, str]
    value: str


class Share(BaseModel):
    """A share with its radix resolved to an int."""

    model_config = ConfigDict(frozen=True)

    index: int = Field(gt=0)
    radix: int
    digits: str

    def point(self) -> Point:
        return (self.index, codec.decode(self.digits, self.radix))


class ReconstructionCase(BaseModel):
    """Parsed share file."""

    n: int
    k: int
    shares: List[Share]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ReconstructionCase":
        if not isinstance(data, dict):
            raise CaseFormatError("Share file must be a JSON object")
        if "keys" not in data:
            raise CaseFormatError("Missing 'keys' block")
        try:
            keys = ThresholdKeys.model_validate(data["keys"])
        except ValidationError as exc:
            raise CaseFormatError(f"Invalid 'keys' block: {exc}") from exc

        shares: List[Share] = []
        seen: Set[int] = set()
        for key, entry in data.items():
            if key == "keys":
                continue
            # Entries without base/value are not shares; skip them.
            if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
                continue
            if not (key.isascii() and key.isdecimal()) or int(key) == 0:
                raise CaseFormatError(f"Share index must be a positive integer, got {key!r}")
            if int(key) in seen:
                raise CaseFormatError(f"Duplicate share index {int(key)} (key {key!r})")
            seen.add(int(key))
            try:
                raw = ShareSpec.model_validate(entry)
            except ValidationError as exc:
                raise CaseFormatError(f"Invalid share {key!r}: {exc}") from exc
            shares.append(
                Share(index=int(key), radix=_parse_radix(raw.base), digits=raw.value)
            )
        return cls(n=keys.n, k=keys.k, shares=shares)

    def points(self) -> List[Point]:
        """Decode every share into an ``(x, y)`` point, in file order."""
        return [s.point() for s in self.shares]

    def digest(self) -> str:
        """Content address of the case (used by the audit log)."""
        canonical = json.dumps(self.model_dump(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(canonical.encode()).hexdigest()


class ReconstructionResult(BaseModel):
    """Outcome of solving one case."""

    n: int
    k: int
    points_available: int
    points_used: List[Tuple[int, int]]
    secret: int
    # None when there were no extra shares to cross-check against
    consistent: Optional[bool] = None


def _parse_radix(base: Union[int, str]) -> int:
    if isinstance(base, str):
        text = base.strip()
        if not (text.isascii() and text.isdecimal()):
            raise InvalidRadixError(base)
        base = int(text)
    return codec.check_radix(base)


def load_case(path: Union[str, Path]) -> ReconstructionCase:
    """Read and parse a share file."""
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CaseFormatError(f"{path}: invalid JSON ({exc})") from exc
    return ReconstructionCase.from_dict(data)


def solve(case: ReconstructionCase, verify: bool = False) -> ReconstructionResult:
    """Recover the secret of *case* from its first k shares.

    With *verify* the extra shares must agree
    (``InconsistentSharesError`` otherwise); without it the agreement is
    only reported in ``consistent``. Extra shares that repeat an
    x-coordinate mod p count as inconsistent.
    """
    points = case.points()
    selected = shamir.select_points(points, case.k)
    consistent: Optional[bool] = None
    if verify:
        secret = shamir.reconstruct_checked(points, case.k)
        if len(points) > case.k:
            consistent = True
    else:
        secret = shamir.reconstruct(selected, case.k)
        if len(points) > case.k:
            try:
                primary, alternate = shamir.cross_check(points, case.k)
            except DegenerateShareSetError:
                # extra shares collide with each other mod p
                consistent = False
            else:
                consistent = primary == alternate
    return ReconstructionResult(
        n=case.n,
        k=case.k,
        points_available=len(points),
        points_used=selected,
        secret=secret,
        consistent=consistent,
    )
