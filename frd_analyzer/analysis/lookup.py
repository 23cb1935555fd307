"""Frequency lookup on sorted series.

Functions
---------
find_freq
    Lower-bound index of a frequency.
point_at_or_above
    The DataPoint at that index, or None.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import numpy as np

from frd_analyzer.models.frames import DataPoint, Series


def _lower_bound(points: Sequence[DataPoint], freq: float) -> int:
    lo, hi = 0, len(points)
    while lo < hi:
        mid = (lo + hi) // 2
        if points[mid].freq_hz < freq:
            lo = mid + 1
        else:
            hi = mid
    return lo


def find_freq(series: Union[Series, Sequence[DataPoint]], freq: float) -> int:
    """Index of the first point whose frequency is not less than ``freq``.

    Parameters
    ----------
    series:
        Points sorted ascending by ``freq_hz``. This is not checked and the data is
        never re-sorted; on unsorted input the result is meaningless.
    freq:
        Frequency [Hz] to look up.

    Returns
    -------
    int
        Position in ``series``. ``len(series)`` means not found: ``freq`` is above
        every frequency, or the series is empty. With repeated frequencies the
        first of them is returned.
    """
    if isinstance(series, Series):
        # frequencies is cached on the Series
        return int(np.searchsorted(series.frequencies, float(freq), side="left"))
    return _lower_bound(series, float(freq))


def point_at_or_above(series: Union[Series, Sequence[DataPoint]], freq: float) -> Optional[DataPoint]:
    idx = find_freq(series, freq)
    if idx == len(series):
        return None
    return series[idx]
