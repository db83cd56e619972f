"""Builds the full project snapshot (llms-full.txt)."""

from __future__ import annotations

from pathlib import Path

from ..config import ContextConfig
from ..logging import get_logger
from ..models import Snapshot, SnapshotBlock
from .scanner import DirectoryScanner, PathFilter


class Dumper:
    """Concatenates every small text file of a project into one tagged blob."""

    def __init__(self, config: ContextConfig | None = None) -> None:
        self.config = config or ContextConfig()
        self.scanner = DirectoryScanner(PathFilter(self.config.dump_ignore))
        self.logger = get_logger("context.dumper")

    def build(self, root: Path | str) -> Snapshot:
        """Read all accepted files under ``root`` in traversal order.

        Oversized and image files are recorded in ``Snapshot.skipped``.
        Read and decode errors propagate and abort the whole dump.
        """
        root_path = Path(root).expanduser().resolve()
        snapshot = Snapshot(root=str(root_path))
        suffixes = tuple(suffix.lower() for suffix in self.config.binary_suffixes)

        for rel_path in self.scanner.scan(root_path):
            path = root_path / rel_path
            size = path.stat().st_size
            if size >= self.config.max_file_bytes:
                self.logger.debug("Skipping %s (%d bytes)", rel_path, size)
                snapshot.skipped.append(rel_path)
                continue
            if suffixes and rel_path.lower().endswith(suffixes):
                self.logger.debug("Skipping binary file %s", rel_path)
                snapshot.skipped.append(rel_path)
                continue
            with path.open("r", encoding="utf-8", newline="") as handle:
                content = handle.read()
            snapshot.blocks.append(SnapshotBlock(path=rel_path, content=content))

        self.logger.debug(
            "Dumper captured %d files, skipped %d", len(snapshot.blocks), len(snapshot.skipped)
        )
        return snapshot

    def render(self, snapshot: Snapshot) -> str:
        blocks = "\n".join(
            f'<file path="{block.path}">\n{block.content}\n</file>' for block in snapshot.blocks
        )
        return f"<project>\n{blocks}\n</project>"

    def write(self, root: Path | str) -> Path:
        """Regenerate the snapshot file under ``root`` and return its path."""
        root_path = Path(root).expanduser().resolve()
        output = root_path / self.config.dump_output
        content = self.render(self.build(root_path))
        output.write_text(content, encoding="utf-8", newline="")
        self.logger.info("Full dump generated.")
        return output


__all__ = ["Dumper"]
