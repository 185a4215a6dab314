"""Error types raised by the namespace engine.

Every engine operation either returns its result or raises one of these.
A raised error always means nothing was changed: the tree, the cursor and
the path index are left exactly as they were before the call.
"""

from typing import Optional


class NamespaceError(Exception):
    """Base class for all namespace engine failures.

    Attributes:
        name: The entry name (or path) the failed operation was about
    """

    def __init__(self, message: str, name: Optional[str] = None):
        super().__init__(message)
        self.name = name


class ConfigurationError(NamespaceError):
    """Raised when a NamespaceConfig fails validation."""
    pass


class InvalidNameError(NamespaceError):
    """Raised for an empty name or a name containing the separator."""

    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid name {name!r}: {reason}", name)
        self.reason = reason


class AlreadyExistsError(NamespaceError):
    """Raised when a sibling with the same name already exists."""

    def __init__(self, name: str):
        super().__init__(f"'{name}' already exists", name)


class EntryNotFoundError(NamespaceError):
    """Raised when a name does not resolve to an entry of the needed kind."""

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(message or f"'{name}' not found", name)


class DirectoryNotFoundError(EntryNotFoundError):
    """Raised when a directory change cannot be resolved.

    This also covers moving to the parent while already at the root.
    """

    def __init__(self, name: str, message: Optional[str] = None):
        super().__init__(name, message or f"Directory '{name}' not found")


class NotADirectoryEntryError(DirectoryNotFoundError):
    """Raised when a directory change targets a file."""

    def __init__(self, name: str):
        super().__init__(name, f"'{name}' is not a directory")


class NotAFileError(EntryNotFoundError):
    """Raised when reading or writing a name that is a directory."""

    def __init__(self, name: str):
        super().__init__(name, f"'{name}' is a directory, not a file")


class DirectoryNotEmptyError(NamespaceError):
    """Raised when deleting a directory that still has children."""

    def __init__(self, name: str, child_count: int):
        super().__init__(
            f"Directory '{name}' is not empty ({child_count} entries)", name
        )
        self.child_count = child_count
