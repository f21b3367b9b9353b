"""
Why nanoseconds are not enough.

Walking a timeline in whole frame steps only works when one frame is a whole
number of time units. At 24 fps a frame is 41666666.67 ns, so integer
nanosecond stepping truncates every frame, takes one step too many over six
seconds, and lands on a whole second only at zero. The same walk in flicks is
exact.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

from .duration import FLICKS_PER_SECOND, NANOSECONDS_PER_SECOND


@dataclass(frozen=True)
class IterationReport:
    unit: str
    units_per_second: int
    frames_per_second: int
    seconds: int
    units_per_frame: int
    iterations: int
    second_boundaries: int

    @property
    def expected_iterations(self) -> int:
        return self.frames_per_second * self.seconds

    @property
    def exact(self) -> bool:
        """Frames tile a second exactly and the walk visited the right count."""
        return (
            self.units_per_frame * self.frames_per_second == self.units_per_second
            and self.iterations == self.expected_iterations
            and self.second_boundaries == self.seconds
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["expected_iterations"] = self.expected_iterations
        data["exact"] = self.exact
        return data


def iterate_frames(
    units_per_second: int,
    frames_per_second: int,
    seconds: int,
    *,
    unit: str = "units",
) -> IterationReport:
    """Step from zero to ``seconds`` in integer frame increments and count."""
    if units_per_second <= 0 or frames_per_second <= 0 or seconds <= 0:
        raise ValueError("units_per_second, frames_per_second and seconds must be positive")
    units_per_frame = units_per_second // frames_per_second
    if units_per_frame == 0:
        raise ValueError(f"{unit} are too coarse for {frames_per_second} fps")

    end = seconds * units_per_second
    iterations = 0
    second_boundaries = 0
    for t in range(0, end, units_per_frame):
        if t % units_per_second == 0:
            second_boundaries += 1
        iterations += 1

    return IterationReport(
        unit=unit,
        units_per_second=units_per_second,
        frames_per_second=frames_per_second,
        seconds=seconds,
        units_per_frame=units_per_frame,
        iterations=iterations,
        second_boundaries=second_boundaries,
    )


def compare(frames_per_second: int = 24, seconds: int = 6) -> tuple[IterationReport, IterationReport]:
    """Run the same walk in nanoseconds and in flicks."""
    return (
        iterate_frames(NANOSECONDS_PER_SECOND, frames_per_second, seconds, unit="nanoseconds"),
        iterate_frames(FLICKS_PER_SECOND, frames_per_second, seconds, unit="flicks"),
    )
