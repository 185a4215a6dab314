"""Path index for O(1) existence checks.

The index maps every absolute path to its node. NamespaceTree updates it
inside the same operation as the structural change it mirrors: creation
registers exactly one path, deletion drops the deleted node's path and the
path of every descendant.
"""

import logging
from typing import Dict, Iterator, Optional

from .core.adapter import NamespaceAdapter
from .core.node import NamespaceNode
from .core.traverser import DepthFirstPostOrderTraverser
from .paths import ROOT_PATH, absolute_path

logger = logging.getLogger(__name__)


class PathIndex:
    """Mapping from absolute path to node, kept in step with the tree."""

    def __init__(self, root: NamespaceNode, adapter: NamespaceAdapter):
        """Create an index holding only the root.

        Args:
            root: Root directory of the tree, registered under "/"
            adapter: Adapter used to enumerate subtrees on removal
        """
        self._entries: Dict[str, NamespaceNode] = {ROOT_PATH: root}
        self._traverser = DepthFirstPostOrderTraverser(adapter)

    def register(self, node: NamespaceNode, path: Optional[str] = None) -> str:
        """Add node under its absolute path.

        Args:
            node: A node already attached to the tree
            path: Precomputed absolute path, if the caller has it

        Returns:
            The path the node was registered under

        Raises:
            KeyError: If the path is already taken by another node
        """
        path = path or absolute_path(node)
        existing = self._entries.get(path)
        if existing is not None and existing is not node:
            raise KeyError(path)
        self._entries[path] = node
        return path

    def unregister_subtree(self, node: NamespaceNode) -> int:
        """Remove node and all of its descendants.

        Must be called while node is still attached, so that paths still
        resolve.

        Returns:
            Number of entries removed
        """
        removed = 0
        for descendant, _ in self._traverser.traverse(node):
            if self._entries.pop(absolute_path(descendant), None) is not None:
                removed += 1
        logger.debug("Index dropped %d entries under %s", removed, absolute_path(node))
        return removed

    def lookup(self, path: str) -> Optional[NamespaceNode]:
        """Return the node at path, or None."""
        return self._entries.get(path)

    def paths(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __contains__(self, path: object) -> bool:
        return path in self._entries

    def __len__(self) -> int:
        return len(self._entries)
