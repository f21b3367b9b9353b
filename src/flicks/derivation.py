"""
Derivation report: the table of ticks per frame for every design rate.

This is the printable evidence behind the constant in ``flicks.duration``:
solve the constraint set, then list how many ticks one frame (or sample)
takes at each rate.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Iterable

from .constraints import DESIGN_CONSTRAINTS, NtscApproxMeasure, RateConstraint, RateMeasure
from .solver import DEFAULT_UPPER_BOUND, solve


@dataclass(frozen=True)
class DerivationRow:
    """One line of the derivation table."""

    label: str
    rate_numerator: int
    rate_denominator: int
    ticks_per_frame: int
    exact: bool
    approximate: bool

    @property
    def rate(self) -> float:
        return self.rate_numerator / self.rate_denominator

    def line(self) -> str:
        if self.approximate:
            # 1001/30000 (~29.970) fps frame:
            return (
                f"{self.rate_denominator}/{self.rate_numerator} (~{self.rate:.3f}) "
                f"fps frame:     {self.ticks_per_frame} flicks"
            )
        return f"1/{self.rate_numerator} fps frame:     {self.ticks_per_frame} flicks"


@dataclass(frozen=True)
class Derivation:
    denominator: int
    upper_bound: int
    rows: tuple[DerivationRow, ...]

    def lines(self) -> list[str]:
        """Report lines: plain rates first, then the NTSC rates."""
        lines = [f"Value = {self.denominator}"]
        lines.extend(row.line() for row in self.rows if not row.approximate)
        lines.append("")
        lines.extend(row.line() for row in self.rows if row.approximate)
        return lines

    def to_dict(self) -> dict[str, Any]:
        return {
            "denominator": self.denominator,
            "upper_bound": self.upper_bound,
            "rows": [asdict(row) for row in self.rows],
        }


def _row(constraint: RateConstraint, denominator: int) -> DerivationRow:
    rate = constraint.rate
    if isinstance(constraint, RateMeasure) and constraint.kind == "frame":
        # Frame measures carry the x1000 substep factor; report per frame.
        rate = rate / 1000
    ticks = denominator * rate.denominator // rate.numerator
    return DerivationRow(
        label=constraint.label,
        rate_numerator=rate.numerator,
        rate_denominator=rate.denominator,
        ticks_per_frame=ticks,
        exact=ticks * rate.numerator == denominator * rate.denominator,
        approximate=isinstance(constraint, NtscApproxMeasure),
    )


def derive(
    constraints: Iterable[RateConstraint] = DESIGN_CONSTRAINTS,
    upper_bound: int = DEFAULT_UPPER_BOUND,
) -> Derivation:
    """Solve ``constraints`` and tabulate ticks per frame for each rate.

    A rate that appears more than once is listed at its first appearance.
    """
    constraints = tuple(constraints)
    denominator = solve(constraints, upper_bound)

    rows: list[DerivationRow] = []
    seen: set[tuple[int, int, bool]] = set()
    for constraint in constraints:
        row = _row(constraint, denominator)
        key = (row.rate_numerator, row.rate_denominator, row.approximate)
        if key in seen:
            continue
        seen.add(key)
        rows.append(row)
    return Derivation(denominator=denominator, upper_bound=upper_bound, rows=tuple(rows))
