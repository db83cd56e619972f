"""Builds the lightweight context index (llms.txt)."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from ..config import ContextConfig
from ..logging import get_logger
from ..models import Manifest
from .scanner import DirectoryScanner, PathFilter


def _link_lines(paths: Sequence[str]) -> str:
    return "\n".join(f"- [{path}]({path})" for path in paths)


class Indexer:
    """Scans a project and renders a two-section documentation/source listing."""

    def __init__(self, config: ContextConfig | None = None) -> None:
        self.config = config or ContextConfig()
        self.scanner = DirectoryScanner(PathFilter(self.config.ignore))
        self.logger = get_logger("context.indexer")

    def build(self, root: Path | str) -> Manifest:
        """Return the manifest for ``root`` without writing anything."""
        root_path = Path(root).expanduser().resolve()
        extensions = tuple(self.config.index_extensions)
        files = [
            rel_path
            for rel_path in self.scanner.scan(root_path)
            if extensions and rel_path.rsplit("/", 1)[-1].endswith(extensions)
        ]
        self.logger.debug("Indexer matched %d files under %s", len(files), root_path)

        docs = [
            path
            for path in files
            if path.startswith(self.config.docs_root) or path.endswith(".md")
        ]
        src = [path for path in files if path.startswith(self.config.src_root)]
        return Manifest(root=str(root_path), docs=docs, src=src)

    def render(self, manifest: Manifest) -> str:
        return (
            "# Context Index\n"
            "## Docs\n"
            f"{_link_lines(manifest.docs)}\n"
            "## Src\n"
            f"{_link_lines(manifest.src)}"
        )

    def write(self, root: Path | str) -> Path:
        """Regenerate the index file under ``root`` and return its path."""
        root_path = Path(root).expanduser().resolve()
        output = root_path / self.config.index_output
        content = self.render(self.build(root_path))
        output.write_text(content, encoding="utf-8", newline="")
        self.logger.info("Context index updated.")
        return output


__all__ = ["Indexer"]
