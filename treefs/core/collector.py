"""Data collection strategies for treefs.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce paths, descriptors or render rows.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from ..descriptors import Descriptor, RenderRow
from ..paths import absolute_path
from .adapter import NamespaceAdapter
from .node import NamespaceNode
from .traverser import Position


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: NamespaceAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: NamespaceAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: NamespaceNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class PathCollector(DataCollector):
    """Collects the absolute path of each node."""

    def collect(self, node: NamespaceNode, depth: int) -> str:
        """Return absolute path (O(depth))."""
        return absolute_path(node)


class DescriptorCollector(DataCollector):
    """Collects a Descriptor snapshot of each node."""

    def __init__(self, adapter: NamespaceAdapter, encoding: str = "utf-8"):
        super().__init__(adapter)
        self.encoding = encoding

    def collect(self, node: NamespaceNode, depth: int) -> Descriptor:
        return Descriptor(
            name=node.name,
            kind=node.kind,
            size=node.byte_size(self.encoding),
            created_at=node.created_at,
            modified_at=node.modified_at,
            path=absolute_path(node),
        )


class RenderCollector(DataCollector):
    """Turns pre-order positions into RenderRows.

    Works on Position values rather than bare nodes because connector
    drawing needs the sibling information the traverser tracked.
    """

    def __init__(self,
                 adapter: NamespaceAdapter,
                 cursor: Optional[NamespaceNode] = None,
                 encoding: str = "utf-8"):
        super().__init__(adapter)
        self.cursor = cursor
        self.encoding = encoding

    def collect(self, node: NamespaceNode, depth: int) -> RenderRow:
        """Collect a row for a node reached outside a pre-order walk.

        Sibling positions of the ancestors are recomputed by walking up,
        which costs O(depth * siblings).
        """
        lineage = []
        ancestor = self.adapter.get_parent(node)
        while ancestor is not None and self.adapter.get_parent(ancestor) is not None:
            lineage.append(self.adapter.is_last_sibling(ancestor))
            ancestor = self.adapter.get_parent(ancestor)
        lineage.reverse()
        return self.collect_position(
            Position(node, depth, self.adapter.is_last_sibling(node), tuple(lineage))
        )

    def collect_position(self, position: Position) -> RenderRow:
        node = position.node
        return RenderRow(
            name=node.name,
            kind=node.kind,
            depth=position.depth,
            is_last=position.is_last,
            is_cursor=node is self.cursor,
            size=node.byte_size(self.encoding) if node.is_file else None,
            path=absolute_path(node),
            ancestors_last=position.ancestors_last,
        )


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function.

    Allows custom data collection logic without subclassing.
    """

    def __init__(self, adapter: NamespaceAdapter,
                 collect_func: Callable[[NamespaceNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: NamespaceAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: NamespaceNode, depth: int) -> Any:
        """Use custom function to collect data."""
        return self.collect_func(node, depth)
