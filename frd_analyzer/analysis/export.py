from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Union

from frd_analyzer.models.frames import DataPoint, Series


DEFAULT_HEADER = "Freq [Hz]\tdBSPL\tPhase [Deg]"


def _fmt(x: float, precision: Optional[int]) -> str:
    if precision is None:
        return repr(float(x))
    return f"{x:.{precision}f}"


def format_point(point: DataPoint, precision: Optional[int] = None) -> str:
    """
    One FRD data line, tab separated.

    precision=None writes repr() of each float, which reads back to the same value.
    """
    return "\t".join(_fmt(v, precision) for v in point.as_tuple())


def format_series(
    series: Union[Series, Iterable[DataPoint]],
    *,
    header: Optional[str] = DEFAULT_HEADER,
    precision: Optional[int] = None,
) -> List[str]:
    """
    FRD lines for a series (no line terminators).

    header must start with a letter so the parser treats it as a comment; pass None
    to write data lines only.
    """
    if header is not None and not (header and header[0].isalpha()):
        raise ValueError(f"header must start with a letter, got {header!r}")
    lines = [header] if header is not None else []
    lines.extend(format_point(p, precision) for p in series)
    return lines


def write_frd(
    series: Union[Series, Iterable[DataPoint]],
    file_path: str | Path,
    *,
    header: Optional[str] = DEFAULT_HEADER,
    precision: Optional[int] = None,
) -> Path:
    path = Path(file_path).expanduser()
    lines = format_series(series, header=header, precision=precision)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        for line in lines:
            f.write(line + "\n")
    return path
