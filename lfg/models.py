"""Core data models shared across lfg components."""

from dataclasses import dataclass, field
from typing import List


@dataclass
class Manifest:
    """Documentation and source listing produced by the indexer.

    Entries are relative POSIX paths in scan order. The two groups are
    built from independent predicates, so a path may appear in both or in
    neither.
    """

    root: str
    docs: List[str] = field(default_factory=list)
    src: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class SnapshotBlock:
    """A single file captured in a snapshot."""

    path: str
    content: str


@dataclass
class Snapshot:
    """Ordered file contents produced by the dumper."""

    root: str
    blocks: List[SnapshotBlock] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
