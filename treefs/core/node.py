"""NamespaceNode for treefs.

The node is intentionally kept simple - it's primarily a data container
that owns its children. Ordering of children for display and search is
delegated to the NamespaceAdapter, and mutation rules (name validation,
non-empty checks, index upkeep) are enforced by NamespaceTree.
"""

import weakref
from datetime import datetime
from typing import Callable, Dict, Iterator, Optional

from ..config import NodeKind
from ..errors import AlreadyExistsError
from ..paths import absolute_path


class NamespaceNode:
    """A single directory or file entry.

    Ownership flows strictly from parent to children: a directory holds
    strong references to its children in a name-keyed dict (insertion
    ordered, O(1) exact-name resolution), while each child keeps only a
    weak reference back to its parent.
    """

    def __init__(self,
                 name: str,
                 kind: NodeKind,
                 content: str = "",
                 clock: Callable[[], datetime] = datetime.now):
        """Initialize a detached node.

        Args:
            name: Entry name, unique among its future siblings
            kind: NodeKind.DIRECTORY or NodeKind.FILE
            content: Initial text payload (ignored for directories)
            clock: Source of timestamps
        """
        self.name = name
        self._kind = kind
        self.content = content if kind is NodeKind.FILE else ""
        self.created_at = clock()
        self.modified_at = self.created_at
        self._parent_ref: Optional[weakref.ReferenceType] = None
        self._children: Dict[str, 'NamespaceNode'] = {}

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def is_directory(self) -> bool:
        return self._kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self._kind is NodeKind.FILE

    @property
    def parent(self) -> Optional['NamespaceNode']:
        """The owning directory, or None for the root."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def identifier(self) -> str:
        """Return the absolute path as unique identifier."""
        return absolute_path(self)

    def is_leaf(self) -> bool:
        """Check if this node has no children (files always are leaves)."""
        return not self._children

    def byte_size(self, encoding: str = "utf-8") -> int:
        """Return the byte length of the content; 0 for directories."""
        if self.is_directory:
            return 0
        return len(self.content.encode(encoding))

    # Children

    def children(self) -> Iterator['NamespaceNode']:
        """Iterate children in insertion order."""
        return iter(list(self._children.values()))

    def child(self, name: str) -> Optional['NamespaceNode']:
        """Return the child with exactly this name, or None."""
        return self._children.get(name)

    def has_child(self, name: str) -> bool:
        return name in self._children

    @property
    def child_count(self) -> int:
        return len(self._children)

    def attach(self, child: 'NamespaceNode') -> None:
        """Make child owned by this directory.

        Raises:
            TypeError: If this node is a file
            AlreadyExistsError: If a sibling already uses child's name
        """
        if not self.is_directory:
            raise TypeError(f"cannot attach children to file {self.name!r}")
        if child.name in self._children:
            raise AlreadyExistsError(child.name)
        self._children[child.name] = child
        child._parent_ref = weakref.ref(self)

    def detach(self, child: 'NamespaceNode') -> None:
        """Drop ownership of child.

        Raises:
            KeyError: If child is not one of this node's children
        """
        if self._children.get(child.name) is not child:
            raise KeyError(child.name)
        del self._children[child.name]
        child._parent_ref = None

    def release(self) -> None:
        """Release the whole subtree below this node, children first."""
        stack = [(self, False)]
        while stack:
            node, expanded = stack.pop()
            if expanded:
                for child in node._children.values():
                    child._parent_ref = None
                node._children.clear()
            else:
                stack.append((node, True))
                stack.extend((child, False) for child in node._children.values())

    # Content

    def write(self, content: str, when: datetime) -> None:
        """Replace the content and refresh modified_at."""
        self.content = content
        self.modified_at = when

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"NamespaceNode(name={self.name!r}, kind={self._kind.value})"
