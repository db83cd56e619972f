"""Context artifact generation: index, full dump and drift detection."""

from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from ..config import ContextConfig
from ..logging import get_logger
from .dumper import Dumper
from .indexer import Indexer
from .scanner import DirectoryScanner, PathFilter

_logger = get_logger("context")


def build_context(root: Path | str, config: ContextConfig | None = None) -> Tuple[Path, Path]:
    """Regenerate both context artifacts, index first."""
    config = config or ContextConfig()
    index_path = Indexer(config).write(root)
    dump_path = Dumper(config).write(root)
    return index_path, dump_path


def check_drift(root: Path | str, config: ContextConfig | None = None) -> List[str]:
    """Return the artifact names whose on-disk content differs from a fresh render.

    Nothing is written; a missing artifact counts as drift.
    """
    config = config or ContextConfig()
    root_path = Path(root).expanduser().resolve()
    indexer = Indexer(config)
    dumper = Dumper(config)
    expected = {
        config.index_output: indexer.render(indexer.build(root_path)),
        config.dump_output: dumper.render(dumper.build(root_path)),
    }

    stale: List[str] = []
    for name, content in expected.items():
        path = root_path / name
        try:
            with path.open("r", encoding="utf-8", newline="") as handle:
                current = handle.read()
        except FileNotFoundError:
            _logger.debug("%s is missing", name)
            stale.append(name)
            continue
        if current != content:
            _logger.debug("%s is out of date", name)
            stale.append(name)
    return stale


__all__ = [
    "DirectoryScanner",
    "Dumper",
    "Indexer",
    "PathFilter",
    "build_context",
    "check_drift",
]
