from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

import pandas as pd

from frd_analyzer.models.frames import FRAME_COLUMNS, Series


@dataclass(frozen=True)
class PolarDataset:
    """
    Ordered collection of Series, one per measurement angle/position.

    Notes
    - series[i] comes from the i-th source after sorting by trailing filename number.
    - keys[i] is that source's numeric key, or None when its name carries none.
    - No cross-series invariant: series may have different lengths or frequency grids.
    """
    series: Tuple[Series, ...] = ()
    keys: Tuple[Optional[float], ...] = ()

    def __len__(self) -> int:
        return len(self.series)

    def __iter__(self) -> Iterator[Series]:
        return iter(self.series)

    def __getitem__(self, index: int) -> Series:
        return self.series[index]

    @property
    def names(self) -> List[Optional[str]]:
        return [s.source for s in self.series]

    def to_frame(self) -> pd.DataFrame:
        """
        Long-format table of the whole dataset.

        Columns: position, source, key, freq_hz, level_db, phase_deg.
        An empty dataset gives an empty frame with the same columns.
        """
        cols = ["position", "source", "key", *FRAME_COLUMNS]
        frames = []
        for pos, s in enumerate(self.series):
            df = s.to_frame()
            key = self.keys[pos] if pos < len(self.keys) else None
            df.insert(0, "key", key)
            df.insert(0, "source", s.source)
            df.insert(0, "position", pos)
            frames.append(df)
        if not frames:
            return pd.DataFrame(columns=cols)
        return pd.concat(frames, ignore_index=True)[cols]
