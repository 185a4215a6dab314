"""High-level API for treefs traversals.

This module provides simple, functional interfaces for the read-only walks
the engine performs (search, statistics, rendering). These functions wrap
the traverser and collector classes for ease of use in simple cases.
"""

from typing import Any, Callable, Iterator, List, Optional, Tuple, Union

from .config import NodeKind
from .core.adapter import NamespaceAdapter
from .core.collector import DataCollector, PathCollector, RenderCollector
from .core.node import NamespaceNode
from .core.traverser import (
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    TreeTraverser,
    create_traverser,
)
from .descriptors import RenderRow, TreeStats


def traverse_tree(
    root: NamespaceNode,
    adapter: NamespaceAdapter,
    strategy: Union[str, TreeTraverser] = "dfs_pre",
    max_depth: Optional[int] = None,
    min_depth: int = 0,
) -> Iterator[Tuple[NamespaceNode, int]]:
    """Simple interface for tree traversal.

    Args:
        root: Starting node for traversal
        adapter: Adapter carrying the sibling order
        strategy: Strategy name (bfs, dfs_pre, dfs_post) or a traverser
        max_depth: Maximum depth to traverse
        min_depth: Minimum depth before yielding nodes

    Yields:
        Tuples of (node, depth)

    Example:
        >>> for node, depth in traverse_tree(tree.root, tree.adapter):
        ...     print("  " * depth + node.name)
    """
    traverser = strategy if isinstance(strategy, TreeTraverser) else create_traverser(strategy, adapter)
    yield from traverser.traverse(root, max_depth=max_depth, min_depth=min_depth)


def collect_tree_data(
    root: NamespaceNode,
    adapter: NamespaceAdapter,
    collector: DataCollector,
    **kwargs
) -> Iterator[Tuple[NamespaceNode, Any]]:
    """Traverse tree and collect data with the given collector.

    Args:
        root: Starting node for traversal
        adapter: Adapter carrying the sibling order
        collector: What to extract from each node
        **kwargs: Additional traversal options (see traverse_tree)

    Yields:
        Tuples of (node, collected_data)
    """
    for node, depth in traverse_tree(root, adapter, **kwargs):
        yield node, collector.collect(node, depth)


def count_nodes(root: NamespaceNode, adapter: NamespaceAdapter, **kwargs) -> int:
    """Count nodes in a tree (root included)."""
    count = 0
    for _ in traverse_tree(root, adapter, **kwargs):
        count += 1
    return count


def find_nodes(
    root: NamespaceNode,
    adapter: NamespaceAdapter,
    predicate: Callable[[NamespaceNode], bool],
    **kwargs
) -> Iterator[NamespaceNode]:
    """Find nodes that match a predicate, in traversal order."""
    for node, _ in traverse_tree(root, adapter, **kwargs):
        if predicate(node):
            yield node


def find_file_paths(root: NamespaceNode, adapter: NamespaceAdapter, term: str) -> List[str]:
    """Absolute paths of every file whose name contains term.

    The walk is pre-order, so a directory's whole subtree is reported
    before its next sibling. Matching is a case-sensitive substring test;
    directories are never candidates.

    Args:
        root: Where to start (the engine always passes the tree root)
        adapter: Adapter carrying the sibling order
        term: Substring to look for

    Returns:
        Matching paths, empty when nothing matches
    """
    collector = PathCollector(adapter)
    return [
        collector.collect(node, 0)
        for node in find_nodes(root, adapter, lambda n: n.is_file and term in n.name)
    ]


def get_tree_stats(root: NamespaceNode,
                   adapter: NamespaceAdapter,
                   encoding: str = "utf-8",
                   indexed_entries: int = 0) -> TreeStats:
    """Count files, directories (root included) and total content bytes.

    Args:
        root: Root of the tree to measure
        adapter: Adapter used for the post-order walk
        encoding: Encoding used to measure content size
        indexed_entries: Index size to report alongside the counts

    Returns:
        TreeStats snapshot
    """
    files = dirs = total = 0
    for node, _ in DepthFirstPostOrderTraverser(adapter).traverse(root):
        if node.kind is NodeKind.DIRECTORY:
            dirs += 1
        else:
            files += 1
            total += node.byte_size(encoding)
    return TreeStats(file_count=files, dir_count=dirs, total_bytes=total,
                     indexed_entries=indexed_entries)


def render_rows(root: NamespaceNode,
                adapter: NamespaceAdapter,
                cursor: Optional[NamespaceNode] = None,
                encoding: str = "utf-8",
                max_depth: Optional[int] = None) -> List[RenderRow]:
    """Structural description of the tree, one row per node in pre-order."""
    collector = RenderCollector(adapter, cursor=cursor, encoding=encoding)
    traverser = DepthFirstPreOrderTraverser(adapter)
    return [collector.collect_position(p) for p in traverser.positions(root, max_depth)]
