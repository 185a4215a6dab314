"""Tree traversal strategies for treefs.

Traversers implement different algorithms for walking through a namespace.
They reach children only through the NamespaceAdapter, so every walk
honours the configured sibling order.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Optional, Set, Tuple

from .adapter import NamespaceAdapter
from .node import NamespaceNode


class Position(NamedTuple):
    """Where a node sits in a pre-order walk.

    ancestors_last holds, for each ancestor below the walk root, whether
    that ancestor was the last of its siblings. A renderer needs it to
    decide between a vertical bar and blank space at each indent level.
    """
    node: NamespaceNode
    depth: int
    is_last: bool
    ancestors_last: Tuple[bool, ...]


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: NamespaceAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: NamespaceAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: NamespaceNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NamespaceNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: NamespaceNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NamespaceNode, int]]:
        queue: Deque[Tuple[NamespaceNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, the first child's whole subtree before
    the second child. Used for search and rendering.
    """

    def traverse(self,
                 root: NamespaceNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NamespaceNode, int]]:
        for position in self.positions(root, max_depth):
            if self._should_yield(position.depth, min_depth, max_depth):
                yield (position.node, position.depth)

    def positions(self,
                  root: NamespaceNode,
                  max_depth: Optional[int] = None) -> Iterator[Position]:
        """Walk pre-order, yielding each node with its sibling position.

        Uses an explicit stack, so depth is not bounded by the
        interpreter's recursion limit.
        """
        visited: Set[int] = set()
        stack: List[Position] = [Position(root, 0, True, ())]

        while stack:
            position = stack.pop()
            node, depth = position.node, position.depth

            # Skip if already visited
            if id(node) in visited:
                continue
            visited.add(id(node))

            yield position

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                children = self.adapter.ordered_children(node)
                lineage = position.ancestors_last + (position.is_last,) if depth > 0 else ()
                last_index = len(children) - 1
                # Push in reverse so the first child is popped first
                for index in range(last_index, -1, -1):
                    stack.append(Position(children[index], depth + 1,
                                          index == last_index, lineage))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before parent. Good for releasing subtrees and for
    aggregates such as statistics.
    """

    def traverse(self,
                 root: NamespaceNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[NamespaceNode, int]]:
        visited: Set[int] = set()
        # Each entry: (node, depth, children_expanded)
        stack: List[Tuple[NamespaceNode, int, bool]] = [(root, 0, False)]

        while stack:
            node, depth, expanded = stack.pop()

            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            if id(node) in visited:
                continue
            visited.add(id(node))

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth) and not node.is_leaf():
                for child in reversed(self.adapter.ordered_children(node)):
                    stack.append((child, depth + 1, False))


# Factory function for creating traversers by name
def create_traverser(strategy: str, adapter: NamespaceAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post)
        adapter: NamespaceAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
