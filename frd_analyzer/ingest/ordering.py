"""Filename ordering for polar datasets.

Polar measurements are usually exported one file per angle, with the angle at
the end of the filename (``woofer_hor_0.txt``, ``woofer_hor_10.txt``, ...).
Lexical order puts ``10`` before ``2``; the helpers here order by the number.

Policy
------
- key = trailing run of ``[0-9.-]`` in the basename (path and extension removed),
  parsed as a float. No run, or a run that is not a number, means no key.
- names without a key come first, then keyed names by ascending key.
- equal keys (and keyless names) keep their input order.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple, TypeVar
import re

T = TypeVar("T")

_KEY_CHARS = frozenset("0123456789.-")
_NUMBER_RE = re.compile(r"-?(?:\d+\.?\d*|\.\d+)")


def _basename_without_extension(name: str) -> str:
    cut = max(name.rfind("/"), name.rfind("\\"))
    base = name[cut + 1:]
    dot = base.rfind(".")
    if dot != -1:
        base = base[:dot]
    return base


def _trailing_run(base: str) -> str:
    i = len(base)
    while i > 0 and base[i - 1] in _KEY_CHARS:
        i -= 1
    return base[i:]


def trailing_number(name: str) -> Optional[float]:
    """
    Numeric suffix of a filename, or None.

    >>> trailing_number("meas/speaker_10.txt")
    10.0
    >>> trailing_number("hor-30.frd")
    -30.0
    >>> trailing_number("readme.txt") is None
    True
    """
    run = _trailing_run(_basename_without_extension(name))
    if not _NUMBER_RE.fullmatch(run):
        return None
    return float(run)


def polar_sort_key(name: str) -> Tuple[int, float]:
    """Total-order key: (0, 0.0) for keyless names, (1, key) otherwise."""
    key = trailing_number(name)
    if key is None:
        return (0, 0.0)
    return (1, key)


def trailing_number_less(a: str, b: str) -> bool:
    """Strict weak ordering on names: keyless < keyed, keyed by ascending key."""
    ka = trailing_number(a)
    kb = trailing_number(b)
    if kb is None:
        return False
    if ka is None:
        return True
    return ka < kb


def sort_sources(items: Sequence[T], name_of: Callable[[T], str] = lambda x: x[0]) -> List[T]:
    """
    Stable sort of items by the trailing number of their name.

    name_of extracts the filename from an item; the default takes item[0], which fits
    (name, content) pairs.
    """
    return sorted(items, key=lambda item: polar_sort_key(name_of(item)))
