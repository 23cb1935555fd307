"""FRD Analyzer -- Python tooling for loudspeaker frequency-response (FRD) measurements.

This package provides tools for:
- Parsing FRD text files (frequency, level, phase per line) into Series
- Looking up frequencies in sorted series (lower bound)
- Importing a folder of per-angle FRD files as a PolarDataset ordered by the
  number at the end of each filename
- Writing series back to FRD text

Key principles:
- Strict input: a malformed data line fails the whole parse, nothing partial is returned
- No interpolation, filtering or resampling: values are kept exactly as read
- Filesystem access is confined to read_frd, PolarDiscovery and write_frd

Main subpackages:
- analysis: Frequency lookup, FRD export
- ingest: FRD reader, filename ordering, polar import, folder discovery
- models: Data models (DataPoint, Series, PolarDataset)
"""

from .analysis import find_freq, format_series, point_at_or_above, write_frd
from .ingest import (
    FrdReaderConfig,
    ParseError,
    PolarDiscovery,
    import_polar,
    import_polar_directory,
    parse_lines,
    parse_text,
    read_frd,
    trailing_number,
)
from .models import DataPoint, PolarDataset, Series

__all__ = [
    "DataPoint",
    "Series",
    "PolarDataset",
    "ParseError",
    "FrdReaderConfig",
    "parse_lines",
    "parse_text",
    "read_frd",
    "trailing_number",
    "import_polar",
    "import_polar_directory",
    "PolarDiscovery",
    "find_freq",
    "point_at_or_above",
    "format_series",
    "write_frd",
]
