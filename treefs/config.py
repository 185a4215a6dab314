"""Configuration system for treefs.

This module defines how callers tune a NamespaceTree: the sibling ordering
policy shared by listing, rendering and search, whether the path index is
maintained, and how file sizes are measured.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from .paths import SEPARATOR


class NodeKind(Enum):
    """The two kinds of namespace entries. Fixed at creation time."""
    DIRECTORY = "directory"
    FILE = "file"


class SiblingOrder(Enum):
    """How the children of a directory are ordered when enumerated.

    The chosen policy applies to every enumeration the engine performs
    (list_children, render, search), so their outputs always agree.
    """
    DIRECTORIES_FIRST = "dirs_first"   # Directories, then files, each by name
    ALPHABETICAL = "alpha"             # By name, kinds mixed
    INSERTION = "insertion"            # Creation order


@dataclass
class NamespaceConfig:
    """Complete configuration for a NamespaceTree.

    The defaults give deterministic output (directories first, then
    alphabetical) and O(1) path lookups through the index.
    """

    sibling_order: SiblingOrder = SiblingOrder.DIRECTORIES_FIRST
    use_index: bool = True
    root_name: str = "root"     # Display name only, never part of a path
    encoding: str = "utf-8"     # Used to measure file size in bytes

    # Convenience constructors for common configurations

    @classmethod
    def insertion_ordered(cls) -> 'NamespaceConfig':
        """Create config that enumerates children in creation order.

        Returns:
            NamespaceConfig using SiblingOrder.INSERTION
        """
        return cls(sibling_order=SiblingOrder.INSERTION)

    @classmethod
    def unindexed(cls) -> 'NamespaceConfig':
        """Create config without the path index.

        Path lookups then walk down from the root instead.

        Returns:
            NamespaceConfig with use_index disabled
        """
        return cls(use_index=False)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.sibling_order, SiblingOrder):
            errors.append("sibling_order must be a SiblingOrder value")

        if not self.root_name:
            errors.append("root_name cannot be empty")
        elif SEPARATOR in self.root_name:
            errors.append(f"root_name cannot contain {SEPARATOR!r}")

        try:
            "".encode(self.encoding)
        except LookupError:
            errors.append(f"unknown encoding: {self.encoding}")

        return errors


def parse_sibling_order(order) -> SiblingOrder:
    """Parse a sibling order from string or enum.

    Args:
        order: SiblingOrder value or one of its names/aliases

    Returns:
        SiblingOrder enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, SiblingOrder):
        return order

    order_map = {
        'dirs_first': SiblingOrder.DIRECTORIES_FIRST,
        'directories_first': SiblingOrder.DIRECTORIES_FIRST,
        'alpha': SiblingOrder.ALPHABETICAL,
        'alphabetical': SiblingOrder.ALPHABETICAL,
        'insertion': SiblingOrder.INSERTION,
    }

    key = str(order).lower()
    if key in order_map:
        return order_map[key]

    raise ValueError(
        f"Unknown sibling order: {order}. "
        f"Choose from: {', '.join(order_map.keys())}"
    )
