"""
Nanosecond versus flick stepping.

At 24 fps a nanosecond frame is truncated to 41666666 ns: six seconds take
145 steps and only t=0 lands on a whole second.
"""

from __future__ import annotations

import pytest

from flicks.motivation import compare, iterate_frames


def test_nanoseconds_drift_at_24_fps():
    nanos, _ = compare(24, 6)
    assert nanos.unit == "nanoseconds"
    assert nanos.units_per_frame == 41_666_666
    assert nanos.units_per_frame * 24 != 1_000_000_000
    assert nanos.iterations == 145
    assert nanos.second_boundaries == 1
    assert not nanos.exact


def test_flicks_are_exact_at_24_fps():
    _, flicks = compare(24, 6)
    assert flicks.unit == "flicks"
    assert flicks.units_per_frame == 29_400_000
    assert flicks.iterations == flicks.expected_iterations == 144
    assert flicks.second_boundaries == 6
    assert flicks.exact


@pytest.mark.parametrize("fps", [24, 25, 30, 48, 50, 60, 90, 100, 120])
def test_flicks_exact_for_all_design_frame_rates(fps):
    _, flicks = compare(fps, 2)
    assert flicks.exact


def test_nanoseconds_fine_when_rate_divides_a_billion():
    nanos, _ = compare(25, 3)
    assert nanos.exact


def test_to_dict_includes_derived_fields():
    data = compare()[1].to_dict()
    assert data["exact"] is True
    assert data["expected_iterations"] == 144


@pytest.mark.parametrize("args", [(0, 24, 1), (1000, 0, 1), (1000, 24, 0)])
def test_non_positive_arguments_are_rejected(args):
    with pytest.raises(ValueError):
        iterate_frames(*args)


def test_unit_too_coarse_for_rate():
    with pytest.raises(ValueError, match="too coarse"):
        iterate_frames(10, 24, 1, unit="centiseconds")
