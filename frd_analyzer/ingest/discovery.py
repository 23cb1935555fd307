from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple
import logging

from frd_analyzer.ingest.ordering import sort_sources
from frd_analyzer.ingest.polar import import_polar
from frd_analyzer.ingest.readers_frd import FrdReaderConfig
from frd_analyzer.models.polar import PolarDataset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PolarDiscovery:
    """
    Filesystem adapter for polar datasets: one folder, one FRD file per angle.

    Only regular files directly inside the folder are considered (no recursion).
    Hidden files (leading '.') are ignored.

    extensions:
      Accepted suffixes, compared case-insensitively. The default (empty tuple) accepts
      every file, whatever its suffix. With a filter, other files are left out silently.
    reader_config:
      Used both to decode the files and to parse them.
    """
    extensions: Tuple[str, ...] = ()
    reader_config: FrdReaderConfig = field(default_factory=FrdReaderConfig)

    def list_sources(self, folder: str | Path) -> List[Path]:
        """Matching files in folder, in polar order (trailing filename number)."""
        root = Path(folder).expanduser().resolve()
        if not root.exists() or not root.is_dir():
            raise FileNotFoundError(f"Not a directory: {root}")

        wanted = {e.lower() for e in self.extensions}
        files: List[Path] = []
        for p in sorted(root.iterdir()):
            if not p.is_file() or p.name.startswith("."):
                continue
            if wanted and p.suffix.lower() not in wanted:
                continue
            files.append(p)
        return sort_sources(files, name_of=lambda p: p.name)

    def read_sources(self, folder: str | Path) -> List[Tuple[str, List[str]]]:
        """(name, lines) for every matching file; each file is closed before the next is opened."""
        cfg = self.reader_config
        out: List[Tuple[str, List[str]]] = []
        for p in self.list_sources(folder):
            with p.open("r", encoding=cfg.encoding, errors=cfg.errors, newline="") as f:
                lines = f.readlines()
            logger.debug("read %s (%d lines)", p, len(lines))
            out.append((str(p), lines))
        return out

    def load(self, folder: str | Path) -> PolarDataset:
        return import_polar(self.read_sources(folder), config=self.reader_config)


def import_polar_directory(
    folder: str | Path,
    *,
    extensions: Optional[Tuple[str, ...]] = None,
    config: Optional[FrdReaderConfig] = None,
) -> PolarDataset:
    """Load every FRD file in folder as a PolarDataset ordered by trailing filename number."""
    kw = {}
    if extensions is not None:
        kw["extensions"] = tuple(extensions)
    if config is not None:
        kw["reader_config"] = config
    return PolarDiscovery(**kw).load(folder)
