"""Exception hierarchy for share decoding and secret reconstruction.

Every failure is fatal for the run that raised it; nothing here is retried,
since reconstruction is a pure function of its input.
"""


class ReconstructionError(Exception):
    """Base class for everything sharelock raises."""


class DecodeError(ReconstructionError, ValueError):
    """A share value is not valid in its declared base, or the base is unsupported."""

    def __init__(self, message: str, value=None, base=None):
        super().__init__(message)
        self.value = value
        self.base = base


class InsufficientSharesError(ReconstructionError):
    """Fewer points than the threshold were supplied."""

    def __init__(self, have: int, need: int):
        super().__init__(f"Need at least {need} shares, got {have}")
        self.have = have
        self.need = need


class NonIntegerResultError(ReconstructionError):
    """The interpolated value at zero did not reduce to an integer.

    Well-formed shares always interpolate to an integer, so this signals
    corrupted data or an arithmetic bug rather than a user input mistake.
    """

    def __init__(self, value):
        super().__init__(f"Interpolation at x=0 is not an integer: {value}")
        self.value = value


class DuplicateShareError(ReconstructionError, ValueError):
    """Two points share the same x-coordinate."""

    def __init__(self, x: int):
        super().__init__(f"Duplicate share identifier x={x}")
        self.x = x


class RecordError(ReconstructionError, ValueError):
    """The input record is malformed."""
