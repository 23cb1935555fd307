"""Ingest package - FRD readers and polar dataset import.

This package handles:
- Parsing FRD text (any iterable of lines) into Series
- Ordering source names by the number at the end of the filename
- Importing named sources as a PolarDataset
- Listing and reading a measurement folder

Key objects:
- parse_lines / read_frd: line parser, raises ParseError
- import_polar: ordered, fail-fast import of (name, content) pairs
- PolarDiscovery: folder adapter feeding import_polar

Design principle:
- Parsing never touches the filesystem; only read_frd and PolarDiscovery open files
- The first bad data line aborts the whole import
"""
from .readers_frd import FrdReaderConfig, ParseError, parse_lines, parse_text, read_frd
from .ordering import polar_sort_key, sort_sources, trailing_number, trailing_number_less
from .polar import import_polar
from .discovery import PolarDiscovery, import_polar_directory

__all__ = [
    "FrdReaderConfig",
    "ParseError",
    "parse_lines",
    "parse_text",
    "read_frd",
    "polar_sort_key",
    "sort_sources",
    "trailing_number",
    "trailing_number_less",
    "import_polar",
    "PolarDiscovery",
    "import_polar_directory",
]
