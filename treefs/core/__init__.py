"""Core abstractions for treefs.

This package contains the node container, the adapter that navigates it,
and the traversal and collection strategies built on top of the adapter.
"""

from .node import NamespaceNode
from .adapter import NamespaceAdapter
from .traverser import (
    Position,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    PathCollector,
    DescriptorCollector,
    RenderCollector,
    CustomCollector,
)

__all__ = [
    "NamespaceNode",
    "NamespaceAdapter",
    "Position",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "create_traverser",
    "DataCollector",
    "PathCollector",
    "DescriptorCollector",
    "RenderCollector",
    "CustomCollector",
]
