"""The namespace engine.

NamespaceTree owns the root directory, tracks the cursor (current
directory) that relative names are resolved against, and keeps the path
index in step with every structural change.

Every operation is synchronous and single-threaded. Fallible operations
validate everything first and only then mutate, so a raised NamespaceError
leaves the tree, cursor and index untouched. The engine never prints;
callers render results and errors themselves.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from .api import find_file_paths, get_tree_stats, render_rows
from .config import NamespaceConfig, NodeKind
from .core.adapter import NamespaceAdapter
from .core.collector import DescriptorCollector
from .core.node import NamespaceNode
from .descriptors import Descriptor, RenderRow, TreeStats
from .errors import (
    AlreadyExistsError,
    ConfigurationError,
    DirectoryNotEmptyError,
    DirectoryNotFoundError,
    EntryNotFoundError,
    InvalidNameError,
    NotADirectoryEntryError,
    NotAFileError,
)
from .index import PathIndex
from .paths import ROOT_PATH, SEPARATOR, absolute_path, join_path, split_path

logger = logging.getLogger(__name__)

PARENT = ".."
CURRENT = "."
RESERVED_NAMES = frozenset([PARENT, CURRENT])


def validate_name(name: str) -> None:
    """Check that name can be used for a new entry.

    Raises:
        InvalidNameError: If name is empty, contains the separator, or is
            one of the navigation names "." and ".."
    """
    if not name:
        raise InvalidNameError(name, "name cannot be empty")
    if SEPARATOR in name:
        raise InvalidNameError(name, f"name cannot contain {SEPARATOR!r}")
    if name in RESERVED_NAMES:
        raise InvalidNameError(name, "name is reserved for navigation")


class NamespaceTree:
    """In-memory tree of directories and files with a movable cursor.

    Example:
        >>> tree = NamespaceTree()
        >>> tree.create_directory("docs")
        >>> tree.change_directory("docs")
        >>> tree.create_file("notes.txt", "hello")
        >>> tree.current_path()
        '/docs'
        >>> tree.search("notes")
        ['/docs/notes.txt']
    """

    def __init__(self,
                 config: Optional[NamespaceConfig] = None,
                 clock: Callable[[], datetime] = datetime.now):
        """Create a tree holding only the root directory.

        Args:
            config: Engine configuration (defaults to NamespaceConfig())
            clock: Source of created/modified timestamps

        Raises:
            ConfigurationError: If config fails validation
        """
        self.config = config or NamespaceConfig()
        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._clock = clock
        self.adapter = NamespaceAdapter(self.config.sibling_order)
        self.root = NamespaceNode(self.config.root_name, NodeKind.DIRECTORY, clock=clock)
        self._cursor = self.root
        self._index: Optional[PathIndex] = (
            PathIndex(self.root, self.adapter) if self.config.use_index else None
        )
        self._descriptors = DescriptorCollector(self.adapter, self.config.encoding)

    @property
    def cursor(self) -> NamespaceNode:
        """The current directory."""
        return self._cursor

    @property
    def index(self) -> Optional[PathIndex]:
        """The path index, or None when disabled by configuration."""
        return self._index

    # Resolution

    def resolve_child(self, name: str) -> Optional[NamespaceNode]:
        """Return the cursor's child named exactly name, or None.

        Single-level, case-sensitive, no wildcards.
        """
        return self._cursor.child(name)

    def _resolve_file(self, name: str) -> NamespaceNode:
        node = self.resolve_child(name)
        if node is None:
            raise EntryNotFoundError(name, f"File '{name}' not found")
        if node.is_directory:
            raise NotAFileError(name)
        return node

    def _resolve_entry(self, name: str) -> NamespaceNode:
        node = self.resolve_child(name)
        if node is None:
            raise EntryNotFoundError(name)
        return node

    # Structure

    def create_file(self, name: str, content: str = "") -> None:
        """Create a file in the current directory.

        Raises:
            InvalidNameError: If name is not usable
            AlreadyExistsError: If the current directory already has name
        """
        self._create_entry(name, NodeKind.FILE, content)

    def create_directory(self, name: str) -> None:
        """Create an empty directory in the current directory.

        Raises:
            InvalidNameError: If name is not usable
            AlreadyExistsError: If the current directory already has name
        """
        self._create_entry(name, NodeKind.DIRECTORY, "")

    def _create_entry(self, name: str, kind: NodeKind, content: str) -> None:
        validate_name(name)
        path = join_path(self.current_path(), name)
        if self._cursor.has_child(name) or (self._index is not None and path in self._index):
            raise AlreadyExistsError(name)

        node = NamespaceNode(name, kind, content, clock=self._clock)
        self._cursor.attach(node)
        if self._index is not None:
            self._index.register(node, path)
        logger.debug("Created %s %s", kind.value, path)

    def delete_entry(self, name: str) -> None:
        """Delete a file or an empty directory from the current directory.

        Raises:
            EntryNotFoundError: If name does not exist
            DirectoryNotEmptyError: If name is a directory with children
        """
        node = self._resolve_entry(name)
        if node.is_directory and not node.is_leaf():
            raise DirectoryNotEmptyError(name, node.child_count)

        path = absolute_path(node)
        # Index entries are dropped while the subtree is still attached
        if self._index is not None:
            self._index.unregister_subtree(node)
        self._cursor.detach(node)
        node.release()
        logger.debug("Deleted %s %s", node.kind.value, path)

    # Navigation

    def change_directory(self, target: str) -> None:
        """Move the cursor.

        ".." goes to the parent, "/" goes to the root, anything else must
        name a child directory of the cursor.

        Raises:
            DirectoryNotFoundError: If target cannot be entered (including
                ".." at the root); NotADirectoryEntryError if it is a file
        """
        if target == PARENT:
            parent = self._cursor.parent
            if parent is None:
                raise DirectoryNotFoundError(target, "Already at root")
            destination = parent
        elif target == ROOT_PATH:
            destination = self.root
        else:
            destination = self.resolve_child(target)
            if destination is None:
                raise DirectoryNotFoundError(target)
            if not destination.is_directory:
                raise NotADirectoryEntryError(target)

        self._cursor = destination
        logger.debug("Cursor moved to %s", self.current_path())

    def current_path(self) -> str:
        """Absolute path of the cursor."""
        return absolute_path(self._cursor)

    def path_of(self, node: NamespaceNode) -> str:
        """Absolute path of any node."""
        return absolute_path(node)

    # Content

    def write_file(self, name: str, content: str) -> None:
        """Replace a file's content and refresh its modified time.

        Raises:
            EntryNotFoundError: If name does not exist
            NotAFileError: If name is a directory
        """
        node = self._resolve_file(name)
        node.write(content, self._clock())
        logger.debug("Wrote %d characters to %s", len(content), absolute_path(node))

    def read_file(self, name: str) -> str:
        """Return a file's content verbatim (possibly the empty string).

        Raises:
            EntryNotFoundError: If name does not exist
            NotAFileError: If name is a directory
        """
        return self._resolve_file(name).content

    def info(self, name: str) -> Descriptor:
        """Describe a child of the cursor, file or directory.

        Raises:
            EntryNotFoundError: If name does not exist
        """
        return self._descriptors.collect(self._resolve_entry(name), 0)

    def list_children(self) -> List[Descriptor]:
        """Describe the cursor's children in the configured sibling order."""
        return [self._descriptors.collect(child, 1)
                for child in self.adapter.get_children(self._cursor)]

    # Whole-tree queries

    def search(self, term: str) -> List[str]:
        """Paths of all files, anywhere in the tree, whose name contains term.

        Always searches from the root regardless of the cursor.
        """
        return find_file_paths(self.root, self.adapter, term)

    def stats(self) -> TreeStats:
        """File count, directory count (root included) and total bytes."""
        indexed = len(self._index) if self._index is not None else 0
        return get_tree_stats(self.root, self.adapter, self.config.encoding, indexed)

    def render(self, max_depth: Optional[int] = None) -> List[RenderRow]:
        """Structural description of the whole tree for a presentation layer."""
        return render_rows(self.root, self.adapter, cursor=self._cursor,
                           encoding=self.config.encoding, max_depth=max_depth)

    def lookup(self, path: str) -> Optional[NamespaceNode]:
        """Find a node by absolute path.

        O(1) through the index; walks down from the root when the index is
        disabled.
        """
        if self._index is not None:
            return self._index.lookup(path)

        segments = split_path(path)
        if segments is None:
            return None
        node = self.root
        for segment in segments:
            node = node.child(segment)
            if node is None:
                return None
        return node

    def exists(self, path: str) -> bool:
        return self.lookup(path) is not None
