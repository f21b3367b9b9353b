"""
Derivation of the flick denominator.

The production path is :func:`solve`: the least common multiple of every
plain divisor is by construction the smallest integer they all divide, so
no search is needed. NTSC-style constraints are not divisibility rules and
are checked against that LCM afterwards.

All arithmetic stays inside the signed 64-bit range the tick count is stored
in; leaving it is reported as :class:`DenominatorOverflowError`.

:func:`scan_denominator` is the exhaustive cross-check used by the test
suite. It is never used to define the constant.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from .constraints import (
    NTSC_DENOMINATOR,
    RateConstraint,
    approximate_bases,
    simple_divisors,
)
from .duration import INT64_MAX, INT64_MIN, NANOSECONDS_PER_SECOND
from .infra.exceptions import DenominatorNotFoundError, DenominatorOverflowError

DEFAULT_UPPER_BOUND = NANOSECONDS_PER_SECOND

_log = structlog.get_logger(__name__)


def _check_int64(value: int, what: str) -> int:
    if value > INT64_MAX or value < INT64_MIN:
        raise DenominatorOverflowError(f"{what} overflows a signed 64-bit integer: {value}")
    return value


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm. ``gcd(0, 0) == 0``."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple of two positive integers within int64.

    Computed as ``a // gcd(a, b) * b`` so the intermediate never exceeds the
    result.
    """
    if a <= 0 or b <= 0:
        raise ValueError("lcm is only defined here for positive integers")
    _check_int64(a, "lcm operand")
    _check_int64(b, "lcm operand")
    return _check_int64(a // gcd(a, b) * b, f"lcm({a}, {b})")


def lcm_of(values: Iterable[int]) -> int:
    """Fold :func:`lcm` over ``values``. The LCM of nothing is 1."""
    result = 1
    for value in values:
        result = lcm(result, value)
    return result


def satisfies_all(n: int, constraints: Iterable[RateConstraint]) -> bool:
    """Return True when ``n`` ticks per second satisfies every constraint."""
    return all(constraint.is_satisfied_by(n) for constraint in constraints)


def solve(
    constraints: Iterable[RateConstraint],
    upper_bound: int = DEFAULT_UPPER_BOUND,
) -> int:
    """Return the smallest ticks-per-second value satisfying ``constraints``.

    Raises:
        DenominatorNotFoundError: the LCM of the plain divisors exceeds
            ``upper_bound``, overflows int64, or fails an NTSC check.
    """
    if upper_bound <= 0:
        raise ValueError("upper_bound must be greater than zero")
    constraints = tuple(constraints)
    divisors = simple_divisors(constraints)

    try:
        n = lcm_of(divisors)
    except DenominatorOverflowError as exc:
        _log.warning("denominator_overflow", divisors=len(divisors), error=str(exc))
        raise DenominatorOverflowError(str(exc), upper_bound=upper_bound) from exc

    if n > upper_bound:
        _log.warning("denominator_above_bound", lcm=n, upper_bound=upper_bound)
        raise DenominatorNotFoundError(
            f"LCM of rate divisors ({n}) exceeds upper bound {upper_bound}",
            upper_bound=upper_bound,
        )

    for approx in approximate_bases(constraints):
        _check_int64(n * NTSC_DENOMINATOR, f"{n} * {NTSC_DENOMINATOR}")
        if not approx.is_satisfied_by(n):
            _log.warning("ntsc_check_failed", denominator=n, base=approx.base)
            raise DenominatorNotFoundError(
                f"{n} ticks per second cannot exactly represent {approx.label}",
                upper_bound=upper_bound,
            )

    _log.info(
        "denominator_solved",
        denominator=n,
        divisors=len(divisors),
        approximate=len(constraints) - len(divisors),
    )
    return n


def scan_denominator(
    constraints: Iterable[RateConstraint],
    upper_bound: int = DEFAULT_UPPER_BOUND,
    *,
    descending: bool = False,
    step: int | None = None,
) -> int:
    """Exhaustively search for a denominator by testing candidates one by one.

    Only multiples of ``step`` are visited. ``step`` defaults to the largest
    plain divisor, which every solution is a multiple of, so the scan stays
    complete while touching a few thousand candidates instead of a billion.
    Pass ``step=1`` for the literal integer-by-integer scan.

    Ascending returns the smallest solution; descending returns the largest
    one not above ``upper_bound``.
    """
    if upper_bound <= 0:
        raise ValueError("upper_bound must be greater than zero")
    constraints = tuple(constraints)
    if step is None:
        step = max(simple_divisors(constraints), default=1)
    if step <= 0:
        raise ValueError("step must be greater than zero")

    if descending:
        candidates = range(upper_bound - upper_bound % step, 0, -step)
    else:
        candidates = range(step, upper_bound + 1, step)

    for candidate in candidates:
        if satisfies_all(candidate, constraints):
            return candidate

    raise DenominatorNotFoundError(
        f"no denominator up to {upper_bound} satisfies all {len(constraints)} constraints",
        upper_bound=upper_bound,
    )


def verify_minimal(n: int, constraints: Iterable[RateConstraint]) -> bool:
    """True when ``n`` satisfies ``constraints`` and no smaller positive value does."""
    constraints = tuple(constraints)
    if n <= 0 or not satisfies_all(n, constraints):
        return False
    return scan_denominator(constraints, n) == n
