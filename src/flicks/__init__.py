"""
Flicks: an exact integer time unit for frame and sample timing.

One flick is 1/705600000 of a second. See :mod:`flicks.duration` for the
value type and :mod:`flicks.solver` for how the denominator is derived.
"""

from .duration import (
    FLICKS_PER_SECOND,
    MIN_TIME,
    ONE_NINETIETH_OF_SECOND,
    ONE_SECOND,
    ONE_TWENTY_FOURTH_OF_SECOND,
    ZERO,
    Flicks,
    flicks_cast,
    flicks_hash,
    frame_duration,
    from_nanoseconds,
    from_timedelta,
    to_flicks,
    to_nanoseconds,
    to_seconds,
    to_timedelta,
)
from .infra.exceptions import DenominatorNotFoundError, DenominatorOverflowError, FlicksError

__version__ = "0.1.0"

__all__ = [
    "FLICKS_PER_SECOND",
    "MIN_TIME",
    "ONE_NINETIETH_OF_SECOND",
    "ONE_SECOND",
    "ONE_TWENTY_FOURTH_OF_SECOND",
    "ZERO",
    "DenominatorNotFoundError",
    "DenominatorOverflowError",
    "Flicks",
    "FlicksError",
    "flicks_cast",
    "flicks_hash",
    "frame_duration",
    "from_nanoseconds",
    "from_timedelta",
    "to_flicks",
    "to_nanoseconds",
    "to_seconds",
    "to_timedelta",
]
