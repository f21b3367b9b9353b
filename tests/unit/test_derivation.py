"""Derivation report tests."""

from __future__ import annotations

import pytest

from flicks.constraints import RateMeasure
from flicks.derivation import derive
from flicks.duration import FLICKS_PER_SECOND
from flicks.infra.exceptions import DenominatorNotFoundError


def test_derive_design_set():
    result = derive()
    assert result.denominator == FLICKS_PER_SECOND
    assert result.upper_bound == 1_000_000_000
    assert len(result.rows) == 23
    assert all(row.exact for row in result.rows)


def test_lines_match_published_table():
    lines = derive().lines()
    assert lines[0] == "Value = 705600000"
    assert lines[1] == "1/24 fps frame:     29400000 flicks"
    assert "1/90 fps frame:     7840000 flicks" in lines
    assert "1/48000 fps frame:     14700 flicks" in lines
    assert "1/192000 fps frame:     3675 flicks" in lines
    assert lines[20] == ""
    assert lines[21:] == [
        "1001/24000 (~23.976) fps frame:     29429400 flicks",
        "1001/30000 (~29.970) fps frame:     23543520 flicks",
        "1001/60000 (~59.940) fps frame:     11771760 flicks",
        "1001/120000 (~119.880) fps frame:     5885880 flicks",
    ]


def test_frame_rows_report_per_frame_not_per_substep():
    row = derive().rows[0]
    assert row.label == "24 fps x1000"
    assert row.rate_numerator == 24
    assert row.ticks_per_frame == 29_400_000


def test_duplicate_rates_are_listed_once():
    constraints = [RateMeasure(8, kind="audio"), RateMeasure(8, kind="audio"), RateMeasure(5, kind="audio")]
    result = derive(constraints, upper_bound=1000)
    assert result.denominator == 40
    assert [row.ticks_per_frame for row in result.rows] == [5, 8]


def test_to_dict():
    data = derive().to_dict()
    assert data["denominator"] == FLICKS_PER_SECOND
    assert data["rows"][0]["ticks_per_frame"] == 29_400_000
    assert {"label", "rate_numerator", "rate_denominator", "exact", "approximate"} <= set(data["rows"][0])


def test_derive_propagates_not_found():
    with pytest.raises(DenominatorNotFoundError):
        derive(upper_bound=1000)
