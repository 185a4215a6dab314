"""Plain-text renderings of engine results."""

from typing import Iterable, List

from ..descriptors import Descriptor, RenderRow, TreeStats

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
BLANK = "    "
CURSOR_MARKER = "  <- you are here"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_tree(rows: Iterable[RenderRow]) -> List[str]:
    """Draw RenderRows as connector lines.

    The root row is printed as "/" and every other row is indented with
    pipes or blanks according to its ancestors' sibling positions.
    """
    lines = []
    for row in rows:
        if row.depth == 0:
            line = "/"
        else:
            prefix = "".join(BLANK if last else PIPE for last in row.ancestors_last)
            connector = LAST_BRANCH if row.is_last else BRANCH
            label = f"{row.name}/" if row.size is None else row.name
            line = f"{prefix}{connector}{label}"
            if row.size:
                line += f" ({row.size} bytes)"
        if row.is_cursor:
            line += CURSOR_MARKER
        lines.append(line)
    return lines


def format_listing(path: str, entries: List[Descriptor]) -> List[str]:
    """Directory listing in the [DIR]/[FILE] style."""
    lines = [f"--- Directory: {path} ---"]
    if not entries:
        lines.append("(empty)")
        return lines
    for entry in entries:
        if entry.is_directory:
            lines.append(f"[DIR]  {entry.name}")
        elif entry.size:
            lines.append(f"[FILE] {entry.name} ({entry.size} bytes)")
        else:
            lines.append(f"[FILE] {entry.name}")
    return lines


def format_info(descriptor: Descriptor) -> List[str]:
    kind = "Directory" if descriptor.is_directory else "File"
    return [
        "--- Info ---",
        f"Name: {descriptor.name}",
        f"Path: {descriptor.path}",
        f"Type: {kind}",
        f"Size: {descriptor.size} bytes",
        f"Created: {descriptor.created_at.strftime(TIMESTAMP_FORMAT)}",
        f"Modified: {descriptor.modified_at.strftime(TIMESTAMP_FORMAT)}",
    ]


def format_stats(stats: TreeStats) -> List[str]:
    return [
        "--- Statistics ---",
        f"Total Files: {stats.file_count}",
        f"Total Directories: {stats.dir_count}",
        f"Total Size: {stats.total_bytes} bytes",
        f"Indexed Entries: {stats.indexed_entries}",
    ]


def format_search(term: str, paths: List[str]) -> List[str]:
    if not paths:
        return [f"No files matching '{term}'"]
    return [f"Found: {path}" for path in paths]


def format_content(name: str, content: str) -> List[str]:
    lines = [f"--- Content of {name} ---"]
    lines.extend(content.splitlines() if content else ["(empty)"])
    return lines
