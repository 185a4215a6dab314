"""Read-only result types returned by the namespace engine.

These are snapshots: mutating the tree after one was produced does not
change it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from .config import NodeKind


@dataclass(frozen=True)
class Descriptor:
    """Metadata snapshot of a single entry.

    Attributes:
        name: Entry name
        kind: NodeKind of the entry
        size: Content length in bytes (0 for directories)
        created_at: Creation timestamp
        modified_at: Last content write (equals created_at until written)
        path: Absolute path at the time of the snapshot
    """
    name: str
    kind: NodeKind
    size: int
    created_at: datetime
    modified_at: datetime
    path: str

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY


@dataclass(frozen=True)
class TreeStats:
    """Aggregate counts over the whole tree.

    dir_count includes the root. indexed_entries is 0 when the path index
    is disabled; otherwise it always equals total_nodes.
    """
    file_count: int
    dir_count: int
    total_bytes: int
    indexed_entries: int = 0

    @property
    def total_nodes(self) -> int:
        return self.file_count + self.dir_count


@dataclass(frozen=True)
class RenderRow:
    """One line of a tree diagram, described structurally.

    Attributes:
        name: Entry name (the root's display name for depth 0)
        kind: NodeKind of the entry
        depth: 0 for the root
        is_last: Whether this is the last sibling at its level
        is_cursor: Whether this is the current directory
        size: Byte size for files, None for directories
        path: Absolute path
        ancestors_last: is_last flag of every ancestor between the root
            (exclusive) and this row (exclusive), outermost first
    """
    name: str
    kind: NodeKind
    depth: int
    is_last: bool
    is_cursor: bool
    size: Optional[int]
    path: str
    ancestors_last: Tuple[bool, ...] = ()
