"""
Rate constraints the flick denominator has to satisfy.

Two kinds of constraint exist:

- ``RateMeasure``: a plain divisor. Frame rates are scaled by 1000 so a
  simulation can take 1000 substeps per frame and still land on whole ticks;
  audio sample rates are used as-is.
- ``NtscApproxMeasure``: an NTSC-style rate ``base * 1000/1001``. Such a rate
  hits 1000 frames every ``base * 1001`` seconds, so the per-frame tick count
  ``1001 * (n // (base * 1000))`` has to divide ``n * 1001`` exactly.

``DESIGN_CONSTRAINTS`` is the fixed set the published denominator was derived
from. Its order is stable so reports and scans are reproducible.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Iterable, Protocol, runtime_checkable

# Frame rates are multiplied by this for sub-frame headroom.
SUBSTEPS_PER_FRAME = 1000

# NTSC rates are ``base * NTSC_NUMERATOR / NTSC_DENOMINATOR``.
NTSC_NUMERATOR = 1000
NTSC_DENOMINATOR = 1001

FRAME_RATES: tuple[int, ...] = (24, 25, 30, 48, 50, 60, 90, 100, 120)
NTSC_BASES: tuple[int, ...] = (24, 30, 60, 120)
AUDIO_SAMPLE_RATES: tuple[int, ...] = (
    8000,
    16000,
    22050,
    24000,
    32000,
    44100,
    48000,
    88200,
    96000,
    192000,
)


@runtime_checkable
class RateConstraint(Protocol):
    """Protocol implemented by every rate constraint."""

    @property
    def label(self) -> str:
        """Short human-readable name, e.g. ``"24 fps x1000"``."""

    @property
    def rate(self) -> Fraction:
        """Events per second this constraint describes."""

    def is_satisfied_by(self, n: int) -> bool:
        """Return True when ``n`` ticks per second satisfies the constraint."""

    def ticks_per_frame(self, n: int) -> int:
        """Ticks in one event at this rate, given ``n`` ticks per second."""


@dataclass(frozen=True)
class RateMeasure:
    """Exact divisor constraint: ``n % divisor == 0``."""

    divisor: int
    kind: str = "frame"

    def __post_init__(self) -> None:
        if self.divisor <= 0:
            raise ValueError("divisor must be greater than zero")

    @property
    def label(self) -> str:
        if self.kind == "frame" and self.divisor % SUBSTEPS_PER_FRAME == 0:
            return f"{self.divisor // SUBSTEPS_PER_FRAME} fps x{SUBSTEPS_PER_FRAME}"
        if self.kind == "audio":
            return f"{self.divisor} Hz audio"
        return f"1/{self.divisor}"

    @property
    def rate(self) -> Fraction:
        return Fraction(self.divisor)

    def is_satisfied_by(self, n: int) -> bool:
        # This directly tests that the division is even
        return n % self.divisor == 0

    def ticks_per_frame(self, n: int) -> int:
        return n // self.divisor


@dataclass(frozen=True)
class NtscApproxMeasure:
    """Approximate-rate constraint for ``base * 1000/1001`` frames per second."""

    base: int

    def __post_init__(self) -> None:
        if self.base <= 0:
            raise ValueError("base must be greater than zero")

    @property
    def label(self) -> str:
        return f"{self.base} * {NTSC_NUMERATOR}/{NTSC_DENOMINATOR} fps"

    @property
    def rate(self) -> Fraction:
        return Fraction(self.base * NTSC_NUMERATOR, NTSC_DENOMINATOR)

    def ticks_per_frame(self, n: int) -> int:
        return NTSC_DENOMINATOR * (n // (self.base * NTSC_NUMERATOR))

    def is_satisfied_by(self, n: int) -> bool:
        units_per_frame = self.ticks_per_frame(n)
        if units_per_frame == 0:
            return False
        return (n * NTSC_DENOMINATOR) % units_per_frame == 0


def frame_rate_measures(rates: Iterable[int] = FRAME_RATES) -> tuple[RateMeasure, ...]:
    return tuple(RateMeasure(rate * SUBSTEPS_PER_FRAME, kind="frame") for rate in rates)


def audio_rate_measures(rates: Iterable[int] = AUDIO_SAMPLE_RATES) -> tuple[RateMeasure, ...]:
    return tuple(RateMeasure(rate, kind="audio") for rate in rates)


def ntsc_measures(bases: Iterable[int] = NTSC_BASES) -> tuple[NtscApproxMeasure, ...]:
    return tuple(NtscApproxMeasure(base) for base in bases)


def simple_divisors(constraints: Iterable[RateConstraint]) -> tuple[int, ...]:
    """Divisors of every ``RateMeasure`` in ``constraints``, in order."""
    return tuple(c.divisor for c in constraints if isinstance(c, RateMeasure))


def approximate_bases(constraints: Iterable[RateConstraint]) -> tuple[NtscApproxMeasure, ...]:
    """Every ``NtscApproxMeasure`` in ``constraints``, in order."""
    return tuple(c for c in constraints if isinstance(c, NtscApproxMeasure))


DESIGN_CONSTRAINTS: tuple[RateConstraint, ...] = (
    *frame_rate_measures(),
    *ntsc_measures(),
    *audio_rate_measures(),
)
