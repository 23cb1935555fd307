"""Analysis package.

Design principle:
  - Ingest produces Series / PolarDataset objects.
  - Analysis consumes them and never modifies the measured values.
"""

from .lookup import find_freq, point_at_or_above
from .export import format_point, format_series, write_frd

__all__ = [
    "find_freq",
    "point_at_or_above",
    "format_point",
    "format_series",
    "write_frd",
]
