"""NamespaceAdapter for treefs.

The adapter provides the navigation logic for namespace trees, decoupling
the node representation from the traversal mechanism. It is also the single
place where the sibling ordering policy is applied, so every traversal
(listing, rendering, search) sees children in the same order.
"""

from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ..config import SiblingOrder
from .node import NamespaceNode


def _name_key(node: NamespaceNode) -> str:
    return node.name


def _dirs_first_key(node: NamespaceNode) -> Tuple[int, str]:
    return (0 if node.is_directory else 1, node.name)


_SORT_KEYS: Dict[SiblingOrder, Optional[Callable]] = {
    SiblingOrder.DIRECTORIES_FIRST: _dirs_first_key,
    SiblingOrder.ALPHABETICAL: _name_key,
    SiblingOrder.INSERTION: None,
}


class NamespaceAdapter:
    """Adapter for navigating an in-memory namespace tree.

    Traversers and collectors only ever reach children through
    get_children(), which makes the ordering policy impossible to bypass.
    """

    def __init__(self, order: SiblingOrder = SiblingOrder.DIRECTORIES_FIRST):
        """Initialize adapter.

        Args:
            order: Sibling ordering policy applied by get_children()
        """
        self.order = order
        self._sort_key = _SORT_KEYS[order]

    def get_children(self, node: NamespaceNode) -> Iterator[NamespaceNode]:
        """Get an iterator of child nodes in policy order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child nodes (empty for files)
        """
        return iter(self.ordered_children(node))

    def ordered_children(self, node: NamespaceNode) -> List[NamespaceNode]:
        """Materialized form of get_children()."""
        children = list(node.children())
        if self._sort_key is not None:
            children.sort(key=self._sort_key)
        return children

    def get_parent(self, node: NamespaceNode) -> Optional[NamespaceNode]:
        """Get the parent node of the given node.

        Returns:
            Parent node or None if node is root
        """
        return node.parent

    def get_depth(self, node: NamespaceNode) -> int:
        """Calculate the depth of a node in the tree.

        Walks up to root.

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = self.get_parent(node)
        while current is not None:
            depth += 1
            current = self.get_parent(current)
        return depth

    def get_siblings(self, node: NamespaceNode) -> Iterator[NamespaceNode]:
        """Get siblings of the given node (excluding the node itself).

        Returns:
            Iterator yielding sibling nodes in policy order
        """
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings
        return (child for child in self.get_children(parent) if child is not node)

    def is_last_sibling(self, node: NamespaceNode) -> bool:
        """Check if node comes last among its siblings in policy order."""
        parent = self.get_parent(node)
        if parent is None:
            return True
        ordered = self.ordered_children(parent)
        return bool(ordered) and ordered[-1] is node

    def subtree_size(self, node: NamespaceNode) -> int:
        """Count the nodes in the subtree rooted at node (node included)."""
        count = 1
        for child in node.children():
            count += self.subtree_size(child)
        return count
