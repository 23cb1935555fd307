"""Tests for lower-bound frequency lookup."""

from __future__ import annotations

import pytest

from frd_analyzer.analysis.lookup import find_freq, point_at_or_above
from frd_analyzer.models.frames import DataPoint, Series


def _decade_series() -> Series:
    """Frequencies 0, 10, ..., 90 with level equal to frequency."""
    return Series(points=tuple(DataPoint(k * 10.0, k * 10.0, 0.0) for k in range(10)))


def test_empty_series_returns_end() -> None:
    s = Series()
    assert find_freq(s, 0.0) == len(s) == 0
    assert find_freq(s, -1e9) == 0
    assert find_freq([], 5.0) == 0


def test_single_element() -> None:
    s = Series(points=(DataPoint(10.0, 10.0, 10.0),))
    idx = find_freq(s, 0.0)
    assert idx != len(s)
    assert s[idx].freq_hz == 10.0
    assert find_freq(s, 10.0) == 0
    assert find_freq(s, 10.5) == len(s)


@pytest.mark.parametrize(
    "target, expected_freq",
    [
        (-10.0, 0.0),
        (45.0, 50.0),
        (50.0, 50.0),
        (55.0, 60.0),
        (90.0, 90.0),
    ],
)
def test_multiple_elements(target: float, expected_freq: float) -> None:
    s = _decade_series()
    idx = find_freq(s, target)
    assert idx != len(s)
    assert s[idx].freq_hz == expected_freq


def test_past_end() -> None:
    s = _decade_series()
    assert find_freq(s, 100.0) == len(s)
    assert point_at_or_above(s, 100.0) is None


def test_ties_resolve_to_first() -> None:
    s = Series(
        points=(
            DataPoint(10.0, 1.0, 0.0),
            DataPoint(20.0, 2.0, 0.0),
            DataPoint(20.0, 3.0, 0.0),
            DataPoint(20.0, 4.0, 0.0),
            DataPoint(30.0, 5.0, 0.0),
        )
    )
    assert find_freq(s, 20.0) == 1
    assert find_freq(s, 15.0) == 1
    assert find_freq(s, 20.000001) == 4


def test_plain_list_of_points() -> None:
    pts = [DataPoint(1.0, 0.0, 0.0), DataPoint(2.0, 0.0, 0.0)]
    assert find_freq(pts, 1.5) == 1
    assert point_at_or_above(pts, 1.5) == pts[1]


def test_point_at_or_above() -> None:
    s = _decade_series()
    p = point_at_or_above(s, 45.0)
    assert p == DataPoint(50.0, 50.0, 0.0)


def test_frequency_array_is_built_once() -> None:
    s = _decade_series()
    f = s.frequencies
    assert s.frequencies is f
    assert not f.flags.writeable
    find_freq(s, 45.0)
    assert s.frequencies is f


def test_frozen_series_still_compares_by_value() -> None:
    a = _decade_series()
    b = _decade_series()
    a.frequencies  # populate the cache on one side only
    assert a == b


def test_plain_list_matches_series_lookup() -> None:
    pts = [DataPoint(float(f), 0.0, 0.0) for f in (0, 0, 5, 5, 5, 10, 20, 20, 40)]
    s = Series(points=tuple(pts))
    for target in (-1.0, 0.0, 2.5, 5.0, 7.0, 10.0, 20.0, 30.0, 40.0, 41.0):
        assert find_freq(pts, target) == find_freq(s, target)
