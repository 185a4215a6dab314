"""Text front end for treefs.

Thin presentation layer: parses command lines, calls NamespaceTree, and
formats results and errors as text. All namespace logic lives in the
engine.
"""

from .commands import CommandShell
from .formatting import format_tree, format_listing, format_info, format_stats
from .logging_config import LoggingConfig, configure_logging

__all__ = [
    "CommandShell",
    "format_tree",
    "format_listing",
    "format_info",
    "format_stats",
    "LoggingConfig",
    "configure_logging",
]
