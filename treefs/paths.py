"""Absolute path resolution for namespace nodes.

Paths are built by walking parent links up to the root, so resolution is
O(depth) and never mutates anything. The root renders as exactly "/" and
no other path carries a trailing separator.
"""

from typing import List, Optional

SEPARATOR = "/"
ROOT_PATH = SEPARATOR


def path_segments(node) -> List[str]:
    """Return the names from the root (exclusive) down to node (inclusive).

    Args:
        node: Any namespace node

    Returns:
        List of names; empty for the root
    """
    segments = []
    current = node
    while current.parent is not None:
        segments.append(current.name)
        current = current.parent
    segments.reverse()
    return segments


def absolute_path(node) -> str:
    """Return the canonical absolute path of node."""
    return ROOT_PATH + SEPARATOR.join(path_segments(node))


def join_path(parent_path: str, name: str) -> str:
    """Append one name to an absolute directory path.

    Args:
        parent_path: Absolute path of the containing directory
        name: Child name (must not contain the separator)

    Returns:
        Absolute path of the child
    """
    if parent_path == ROOT_PATH:
        return ROOT_PATH + name
    return parent_path + SEPARATOR + name


def split_path(path: str) -> Optional[List[str]]:
    """Split an absolute path into its names.

    Args:
        path: Absolute path such as "/a/b"

    Returns:
        List of names (empty for "/"), or None if path is not absolute
        or contains empty segments
    """
    if not path.startswith(ROOT_PATH):
        return None
    if path == ROOT_PATH:
        return []
    segments = path[1:].split(SEPARATOR)
    if any(not segment for segment in segments):
        return None
    return segments
