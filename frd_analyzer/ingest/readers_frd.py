from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional
import math
import re

from frd_analyzer.models.frames import DataPoint, Series


# sign, digits with optional fraction (or fraction only), optional exponent
_FLOAT_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ParseError(ValueError):
    """
    A data line did not yield three numeric tokens.

    Attributes
    ----------
    line:
        The offending raw line, without its line terminator.
    line_number:
        1-based position of the line in its input, if known.
    source:
        Name of the input (file path or import name), if known.
    """

    def __init__(self, line: str, line_number: Optional[int] = None, source: Optional[str] = None):
        self.line = line
        self.line_number = line_number
        self.source = source
        super().__init__(self._message())

    def __reduce__(self):
        return (type(self), (self.line, self.line_number, self.source))

    def _message(self) -> str:
        msg = f"Invalid input in line: {self.line}"
        where = []
        if self.source is not None:
            where.append(str(self.source))
        if self.line_number is not None:
            where.append(f"line {self.line_number}")
        if where:
            msg += f" ({', '.join(where)})"
        return msg


@dataclass(frozen=True)
class FrdReaderConfig:
    """
    Reader configuration for FRD text files.

    encoding / errors:
      Passed to open() by read_frd(). The parser itself only sees str lines.
    skip_whitespace_lines:
      - False: a line made only of spaces/tabs is a data line and fails with ParseError.
      - True: such a line is skipped like an empty line.
    keep_header:
      Keep skipped comment/header lines on Series.header.
    """
    encoding: str = "utf-8"
    errors: str = "replace"
    skip_whitespace_lines: bool = False
    keep_header: bool = True


def _is_comment(line: str) -> bool:
    # Only the first character decides. Callers must not pass an empty line.
    return line[0].isalpha()


def _parse_float(token: str) -> Optional[float]:
    if not _FLOAT_RE.fullmatch(token):
        return None
    value = float(token)
    # out of double range
    if math.isinf(value):
        return None
    return value


def parse_lines(
    lines: Iterable[str],
    *,
    source: Optional[str] = None,
    config: Optional[FrdReaderConfig] = None,
) -> Series:
    """
    Parse FRD text into a Series.

    Expected input::

        Freq [Hz]       dBSPL           Phase [Deg]
        10.00           75.18           83.73

    Any line whose first character is a letter is a comment and is skipped,
    wherever it appears. Empty lines are skipped. Every other line must start
    with three whitespace-separated numbers (freq, level, phase); further tokens
    are ignored.

    Raises ParseError on the first bad data line. Nothing parsed before it is
    returned.
    """
    cfg = config or FrdReaderConfig()
    points: List[DataPoint] = []
    header: List[str] = []

    for n, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        if _is_comment(line):
            if cfg.keep_header:
                header.append(line)
            continue

        tokens = line.split()
        if not tokens and cfg.skip_whitespace_lines:
            continue
        if len(tokens) < 3:
            raise ParseError(line, line_number=n, source=source)

        values = [_parse_float(tok) for tok in tokens[:3]]
        if any(v is None for v in values):
            raise ParseError(line, line_number=n, source=source)

        points.append(DataPoint(freq_hz=values[0], level_db=values[1], phase_deg=values[2]))

    return Series(points=tuple(points), source=source, header=tuple(header))


def parse_text(text: str, *, source: Optional[str] = None, config: Optional[FrdReaderConfig] = None) -> Series:
    """Parse a whole FRD document held in one string."""
    return parse_lines(text.splitlines(), source=source, config=config)


def read_frd(file_path: str | Path, config: Optional[FrdReaderConfig] = None) -> Series:
    """
    Read and parse one FRD file.

    The file is closed on every exit path, including a ParseError.
    """
    cfg = config or FrdReaderConfig()
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise FileNotFoundError(str(path))
    with path.open("r", encoding=cfg.encoding, errors=cfg.errors, newline="") as f:
        return parse_lines(f, source=str(path), config=cfg)
