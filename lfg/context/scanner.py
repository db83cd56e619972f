"""Directory traversal and ignore filtering shared by the indexer and dumper."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, Tuple


class PathFilter:
    """Rejects relative paths that contain any ignore token.

    Tokens are plain substrings rather than path segments, so ``scripts``
    also rejects ``scripts-backup/notes.md`` and ``docs/old_scripts.md``.
    """

    def __init__(self, tokens: Iterable[str]) -> None:
        self.tokens: Tuple[str, ...] = tuple(token for token in tokens if token)

    def is_ignored(self, rel_path: str) -> bool:
        return any(token in rel_path for token in self.tokens)


def _raise(exc: OSError) -> None:
    raise exc


class DirectoryScanner:
    """Walks a directory tree depth-first and yields relative file paths."""

    def __init__(self, path_filter: PathFilter) -> None:
        self.path_filter = path_filter

    def scan(self, root: Path | str) -> Iterator[str]:
        """Yield POSIX paths relative to ``root`` for every accepted file.

        Entries are visited in sorted name order so an unchanged tree always
        produces the same sequence. Rejected directories are not descended.
        """
        root_path = Path(root)
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")

        for dirpath, dirnames, filenames in os.walk(root_path, onerror=_raise):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(root_path).as_posix() if current_dir != root_path else ""

            kept_dirs = []
            for name in sorted(dirnames):
                rel_path = f"{rel_dir}/{name}" if rel_dir else name
                if self.path_filter.is_ignored(rel_path):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
                if self.path_filter.is_ignored(rel_path):
                    continue
                yield rel_path


__all__ = ["DirectoryScanner", "PathFilter"]
