"""treefs - In-memory hierarchical namespace engine.

treefs keeps a tree of named directories and files in memory and offers
creation, navigation, mutation, deletion, search and statistics against a
movable cursor, with an optional path index for O(1) lookups.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treefs import NamespaceTree

    tree = NamespaceTree()
    tree.create_directory("docs")
    tree.change_directory("docs")
    tree.create_file("report.txt", "hello")
    tree.search("report")        # ['/docs/report.txt']
━━━━━━━━━━━━━━━━━━━━━━━━━━

The engine returns data and raises treefs.errors exceptions; it never
prints. The treefs.shell package is a thin text front end on top of it.
"""

__version__ = "0.1.0"

from .config import NamespaceConfig, NodeKind, SiblingOrder
from .descriptors import Descriptor, RenderRow, TreeStats
from .errors import (
    NamespaceError,
    ConfigurationError,
    InvalidNameError,
    AlreadyExistsError,
    EntryNotFoundError,
    DirectoryNotFoundError,
    NotADirectoryEntryError,
    NotAFileError,
    DirectoryNotEmptyError,
)
from .index import PathIndex
from .tree import NamespaceTree, validate_name

__all__ = [
    "__version__",
    # Engine
    "NamespaceTree",
    "validate_name",
    "PathIndex",
    # Config
    "NamespaceConfig",
    "NodeKind",
    "SiblingOrder",
    # Results
    "Descriptor",
    "RenderRow",
    "TreeStats",
    # Errors
    "NamespaceError",
    "ConfigurationError",
    "InvalidNameError",
    "AlreadyExistsError",
    "EntryNotFoundError",
    "DirectoryNotFoundError",
    "NotADirectoryEntryError",
    "NotAFileError",
    "DirectoryNotEmptyError",
]
