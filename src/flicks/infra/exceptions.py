"""
Custom exceptions for flicks.

The derivation of the tick denominator has a single failure mode: the
constraint set admits no integer under the bound. Overflow of the 64-bit
accumulator is reported as a specialisation of that failure.
"""


class FlicksError(Exception):
    """Base exception for all flicks errors."""

    pass


class DenominatorNotFoundError(FlicksError):
    """Raised when no denominator satisfies every constraint under the bound."""

    def __init__(self, message: str, *, upper_bound: int | None = None) -> None:
        super().__init__(message)
        self.upper_bound = upper_bound


class DenominatorOverflowError(DenominatorNotFoundError):
    """Raised when LCM accumulation leaves the signed 64-bit range."""

    pass
