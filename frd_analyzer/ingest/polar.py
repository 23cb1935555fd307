from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union
import logging

from frd_analyzer.ingest.ordering import sort_sources, trailing_number
from frd_analyzer.ingest.readers_frd import FrdReaderConfig, parse_lines
from frd_analyzer.models.frames import Series
from frd_analyzer.models.polar import PolarDataset

logger = logging.getLogger(__name__)

Content = Union[str, Iterable[str]]


def _as_lines(content: Content) -> Iterable[str]:
    # A bare string would iterate character by character.
    if isinstance(content, str):
        return content.splitlines()
    return content


def import_polar(
    sources: Iterable[Tuple[str, Content]],
    *,
    config: Optional[FrdReaderConfig] = None,
) -> PolarDataset:
    """
    Build a PolarDataset from named FRD sources.

    sources:
      (name, content) pairs. content is an iterable of lines (list, open text file,
      generator) or one string holding the whole file.

    Sources are ordered by the trailing number in their name (see
    frd_analyzer.ingest.ordering) and parsed in that order.

    Fail-fast: the first ParseError propagates (its source is the failing name), later
    sources are not read and no partial dataset is returned.
    """
    ordered = sort_sources(list(sources))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("polar import order: %s", [name for name, _ in ordered])

    series: List[Series] = []
    keys: List[Optional[float]] = []
    for name, content in ordered:
        series.append(parse_lines(_as_lines(content), source=name, config=config))
        keys.append(trailing_number(name))

    logger.info("imported %d polar series", len(series))
    return PolarDataset(series=tuple(series), keys=tuple(keys))
