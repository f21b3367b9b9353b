"""
The flick: an exact integer unit of time.

A flick (frame-tick) is exactly 1/705600000 of a second. It is the smallest
unit larger than a nanosecond that represents, as a whole number of ticks,
one frame at 24, 25, 30, 48, 50, 60, 90, 100 and 120 Hz (and 1/1000
divisions of each), one sample at the common audio rates from 8 kHz to
192 kHz, and one frame at the NTSC rates ``base * 1000/1001``::

    1/24 fps frame:        29400000 flicks
    1/25 fps frame:        28224000 flicks
    1/30 fps frame:        23520000 flicks
    1/48 fps frame:        14700000 flicks
    1/50 fps frame:        14112000 flicks
    1/60 fps frame:        11760000 flicks
    1/90 fps frame:         7840000 flicks
    1/100 fps frame:        7056000 flicks
    1/120 fps frame:        5880000 flicks
    1/8000 fps frame:         88200 flicks
    1/16000 fps frame:        44100 flicks
    1/22050 fps frame:        32000 flicks
    1/24000 fps frame:        29400 flicks
    1/32000 fps frame:        22050 flicks
    1/44100 fps frame:        16000 flicks
    1/48000 fps frame:        14700 flicks
    1/88200 fps frame:         8000 flicks
    1/96000 fps frame:         7350 flicks
    1/192000 fps frame:        3675 flicks

    1001/24000 (~23.976) fps frame:   29429400 flicks
    1001/30000 (~29.970) fps frame:   23543520 flicks
    1001/60000 (~59.940) fps frame:   11771760 flicks
    1001/120000 (~119.880) fps frame:  5885880 flicks

The denominator is a literal here. ``flicks.solver.solve`` re-derives it
from ``flicks.constraints.DESIGN_CONSTRAINTS`` and the test suite checks
they agree.

Conversions from real or foreign-resolution values round to the nearest
tick, ties toward zero. Conversions between flicks and any rate in the
design set are exact.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from datetime import timedelta
from fractions import Fraction
from numbers import Integral, Rational

FLICKS_PER_SECOND = 705_600_000

# Ticks are stored as signed 64-bit counts.
INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)

NANOSECONDS_PER_SECOND = 1_000_000_000
MICROSECONDS_PER_SECOND = 1_000_000

_HALF = Fraction(1, 2)


def _round_half_toward_zero(value: Fraction) -> int:
    whole = int(value)  # truncates toward zero
    if abs(value - whole) > _HALF:
        whole += 1 if value > 0 else -1
    return whole


@dataclass(frozen=True, order=True)
class Flicks:
    """A signed count of flicks with exact integer arithmetic."""

    count: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", operator.index(self.count))

    def __hash__(self) -> int:
        return hash(self.count)

    def __bool__(self) -> bool:
        return self.count != 0

    def __add__(self, other: object) -> Flicks:
        if isinstance(other, Flicks):
            return Flicks(self.count + other.count)
        return NotImplemented

    def __sub__(self, other: object) -> Flicks:
        if isinstance(other, Flicks):
            return Flicks(self.count - other.count)
        return NotImplemented

    def __neg__(self) -> Flicks:
        return Flicks(-self.count)

    def __pos__(self) -> Flicks:
        return self

    def __abs__(self) -> Flicks:
        return Flicks(abs(self.count))

    def __mul__(self, other: object) -> Flicks:
        if isinstance(other, Integral) and not isinstance(other, bool):
            return Flicks(self.count * int(other))
        return NotImplemented

    __rmul__ = __mul__

    def __floordiv__(self, other: object) -> Flicks | int:
        # Flicks // Flicks counts whole steps; Flicks // int splits a span.
        if isinstance(other, Flicks):
            return self.count // other.count
        if isinstance(other, Integral) and not isinstance(other, bool):
            return Flicks(self.count // int(other))
        return NotImplemented

    def __mod__(self, other: object) -> Flicks:
        if isinstance(other, Flicks):
            return Flicks(self.count % other.count)
        if isinstance(other, Integral) and not isinstance(other, bool):
            return Flicks(self.count % int(other))
        return NotImplemented


def flicks_hash(value: Flicks) -> int:
    """Hash of the raw tick count; equal to ``hash(value)``."""
    return hash(value.count)


def to_seconds(value: Flicks) -> float:
    """Convert flicks to seconds as a float."""
    return value.count / FLICKS_PER_SECOND


def to_flicks(seconds: float | Rational) -> Flicks:
    """Convert seconds to flicks, rounding to the nearest tick.

    The product is formed exactly from the binary value of ``seconds``, so
    any tick count below 2**52 survives ``to_flicks(to_seconds(t))``.
    """
    if isinstance(seconds, float) and not math.isfinite(seconds):
        raise ValueError(f"cannot convert non-finite seconds to flicks: {seconds!r}")
    return Flicks(_round_half_toward_zero(Fraction(seconds) * FLICKS_PER_SECOND))


def flicks_cast(count: float | Rational, ticks_per_second: int | Rational) -> Flicks:
    """Convert ``count`` units of ``1/ticks_per_second`` seconds to flicks.

    ``ticks_per_second`` may be a :class:`fractions.Fraction` such as
    ``Fraction(30000, 1001)``. The result is exact whenever the source unit
    is a whole number of flicks.
    """
    if isinstance(count, float) and not math.isfinite(count):
        raise ValueError(f"cannot convert non-finite count to flicks: {count!r}")
    rate = Fraction(ticks_per_second)
    if rate <= 0:
        raise ValueError("ticks_per_second must be greater than zero")
    return Flicks(_round_half_toward_zero(Fraction(count) * FLICKS_PER_SECOND / rate))


def frame_duration(rate: int | Rational) -> Flicks:
    """Length of one frame (or sample) at ``rate`` per second."""
    return flicks_cast(1, rate)


def from_nanoseconds(nanoseconds: int) -> Flicks:
    """Convert an integer nanosecond count, e.g. from ``time.monotonic_ns()``."""
    return flicks_cast(nanoseconds, NANOSECONDS_PER_SECOND)


def to_nanoseconds(value: Flicks) -> int:
    return _round_half_toward_zero(Fraction(value.count * NANOSECONDS_PER_SECOND, FLICKS_PER_SECOND))


def from_timedelta(delta: timedelta) -> Flicks:
    microseconds = (delta.days * 86400 + delta.seconds) * MICROSECONDS_PER_SECOND + delta.microseconds
    return flicks_cast(microseconds, MICROSECONDS_PER_SECOND)


def to_timedelta(value: Flicks) -> timedelta:
    """Convert to a timedelta; sub-microsecond remainders are rounded."""
    microseconds = _round_half_toward_zero(
        Fraction(value.count * MICROSECONDS_PER_SECOND, FLICKS_PER_SECOND)
    )
    return timedelta(microseconds=microseconds)


# Useful constants
ZERO = Flicks(0)
ONE_SECOND = flicks_cast(1, 1)
ONE_TWENTY_FOURTH_OF_SECOND = flicks_cast(1, 24)
ONE_NINETIETH_OF_SECOND = flicks_cast(1, 90)
MIN_TIME = Flicks(INT64_MIN)
