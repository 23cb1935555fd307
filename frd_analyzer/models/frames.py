from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator, Optional, Tuple, Union, overload

import numpy as np
import pandas as pd


FRAME_COLUMNS: Tuple[str, str, str] = ("freq_hz", "level_db", "phase_deg")


@dataclass(frozen=True)
class DataPoint:
    """One line of an FRD file.

    Attributes
    ----------
    freq_hz:
        Frequency [Hz].
    level_db:
        Magnitude [dB SPL].
    phase_deg:
        Phase [deg].

    Units are documentation only; nothing is checked.
    """

    freq_hz: float
    level_db: float
    phase_deg: float

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.freq_hz, self.level_db, self.phase_deg)

    def __str__(self) -> str:
        return f"{self.freq_hz:g}Hz {self.level_db:g}dB {self.phase_deg:g}deg"


@dataclass(frozen=True)
class Series:
    """
    In-memory representation of one FRD file after parsing.

    Notes
    - points keep input order; they are expected ascending by freq_hz but this is
      not enforced (see is_sorted()). Frequency lookup requires it.
    - header holds the comment/header lines skipped by the parser, in order.
    - source is whatever name the series was read from (path or import name).
    """
    points: Tuple[DataPoint, ...] = ()
    source: Optional[str] = None
    header: Tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[DataPoint]:
        return iter(self.points)

    @overload
    def __getitem__(self, index: int) -> DataPoint: ...

    @overload
    def __getitem__(self, index: slice) -> Tuple[DataPoint, ...]: ...

    def __getitem__(self, index: Union[int, slice]):
        return self.points[index]

    def _column(self, name: str) -> np.ndarray:
        a = np.fromiter((getattr(p, name) for p in self.points), dtype=np.float64, count=len(self.points))
        a.setflags(write=False)
        return a

    # computed on first access, read-only
    @cached_property
    def frequencies(self) -> np.ndarray:
        return self._column("freq_hz")

    @cached_property
    def levels(self) -> np.ndarray:
        return self._column("level_db")

    @cached_property
    def phases(self) -> np.ndarray:
        return self._column("phase_deg")

    def is_sorted(self) -> bool:
        """True when frequencies are non-decreasing (empty and single-point series included)."""
        f = self.frequencies
        return bool(np.all(f[1:] >= f[:-1]))

    def to_frame(self) -> pd.DataFrame:
        """Return a float64 DataFrame with columns freq_hz, level_db, phase_deg."""
        return pd.DataFrame(
            {
                "freq_hz": self.frequencies.copy(),
                "level_db": self.levels.copy(),
                "phase_deg": self.phases.copy(),
            },
            columns=list(FRAME_COLUMNS),
        )
