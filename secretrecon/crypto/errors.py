"""Error taxonomy for share decoding and secret reconstruction.

Every error is terminal for the call that raised it: inputs are
deterministic, so retrying reproduces the same failure.
"""

from __future__ import annotations


class ReconstructionError(Exception):
    """Base class for all SecretRecon errors."""


class InvalidRadixError(ReconstructionError, ValueError):
    """Radix is not an integer in [MIN_RADIX, MAX_RADIX]."""

    def __init__(self, radix: object) -> None:
        self.radix = radix
        super().__init__(f"Unsupported radix {radix!r} (expected 2..36)")


class InvalidDigitError(ReconstructionError, ValueError):
    """A character of the digit string is not a digit of the radix."""

    def __init__(self, digits: str, radix: int, position: int | None = None) -> None:
        self.digits = digits
        self.radix = radix
        self.position = position
        if position is None:
            msg = f"Empty digit string for radix {radix}"
        else:
            msg = (
                f"Invalid digit {digits[position]!r} at position {position} "
                f"for radix {radix}"
            )
        super().__init__(msg)


class NoInverseError(ReconstructionError, ZeroDivisionError):
    """Modular inverse requested for a value congruent to 0 mod PRIME."""


class DegenerateShareSetError(ReconstructionError, ValueError):
    """Share set is empty, has the wrong size, or repeats an x-coordinate."""


class InconsistentSharesError(ReconstructionError):
    """Two k-subsets of the same share set disagree on the secret."""

    def __init__(self, primary: int, alternate: int) -> None:
        self.primary = primary
        self.alternate = alternate
        super().__init__(
            "Shares do not lie on a single polynomial: "
            f"first k give {primary}, last k give {alternate}"
        )


class CaseFormatError(ReconstructionError, ValueError):
    """Share file / request body does not have the expected shape."""
