"""Line-oriented command interpreter on top of NamespaceTree.

CommandShell turns one command line into engine calls and returns the text
to show. Engine errors become "Error: ..." lines; nothing a user types can
raise out of execute().
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from ..errors import NamespaceError
from ..tree import NamespaceTree
from . import formatting

logger = logging.getLogger(__name__)

# Alternate spellings accepted for each command
ALIASES: Dict[str, str] = {
    'list': 'ls',
    'createfolder': 'mkdir',
    'openfolder': 'cd',
    'createfile': 'touch',
    'editfile': 'write',
    'nano': 'write',
    'view': 'cat',
    'delete': 'rm',
    'findfile': 'find',
    'details': 'stat',
    'where': 'pwd',
    'report': 'info',
    'quit': 'exit',
}

QUOTES = ("\"", "'")


def unquote(text: str) -> str:
    """Strip one pair of matching surrounding quotes, if present."""
    if len(text) >= 2 and text[0] in QUOTES and text[-1] == text[0]:
        return text[1:-1]
    return text


def split_operand(text: str) -> Tuple[str, str]:
    """Split off the first operand and return (operand, rest).

    A leading quoted operand runs to its closing quote and may contain
    spaces; otherwise the operand ends at the first space. Nothing else
    is interpreted, so apostrophes and backslashes stay as typed.
    """
    if text[:1] in QUOTES:
        end = text.find(text[0], 1)
        if end > 0:
            return text[1:end], text[end + 1:].strip()
    operand, _, rest = text.partition(" ")
    return operand, rest.strip()


HELP_TEXT = [
    "AVAILABLE COMMANDS:",
    "  ls                     - List current directory",
    "  mkdir NAME             - Create directory",
    "  cd NAME                - Change directory (.. for parent, / for root)",
    "  touch NAME             - Create empty file",
    "  write NAME CONTENT     - Replace file content (\\n for newlines)",
    "  cat NAME               - Show file content",
    "  rm NAME                - Delete file or empty directory",
    "  find TERM              - Search all files by name",
    "  stat NAME              - Show entry details",
    "  pwd                    - Show current path",
    "  tree                   - Show tree diagram",
    "  livetree               - Toggle tree diagram after each change",
    "  info                   - Show statistics",
    "  exit                   - Quit",
]


class CommandShell:
    """Executes text commands against a NamespaceTree.

    Attributes:
        tree: The engine being driven
        live_tree: When True, mutating commands append the tree diagram
        finished: Set once exit/quit has been executed
    """

    def __init__(self, tree: Optional[NamespaceTree] = None):
        self.tree = tree or NamespaceTree()
        self.live_tree = False
        self.finished = False
        self._handlers: Dict[str, Callable[[str], List[str]]] = {
            'ls': self._ls,
            'mkdir': self._mkdir,
            'cd': self._cd,
            'touch': self._touch,
            'write': self._write,
            'cat': self._cat,
            'rm': self._rm,
            'find': self._find,
            'stat': self._stat,
            'pwd': self._pwd,
            'tree': self._tree,
            'livetree': self._livetree,
            'info': self._info,
            'help': self._help,
            'exit': self._exit,
        }
        self._needs_operand = {'mkdir', 'cd', 'touch', 'write', 'cat', 'rm', 'find', 'stat'}
        self._mutating = {'mkdir', 'cd', 'touch', 'write', 'rm'}
        self._raw_operand = {'write'}

    @property
    def prompt(self) -> str:
        return f"treefs:{self.tree.current_path()}$ "

    def execute(self, line: str) -> str:
        """Run one command line and return its output (possibly empty)."""
        line = line.strip()
        if not line:
            return ""

        word, _, args = line.partition(" ")
        command = ALIASES.get(word, word)
        handler = self._handlers.get(command)
        if handler is None:
            return f"Command not found: {word}"
        if command in self._needs_operand and not args.strip():
            return f"{word}: missing operand"

        args = args.strip()
        if command not in self._raw_operand:
            args = unquote(args)

        try:
            output = handler(args)
        except NamespaceError as e:
            logger.debug("%s failed: %s", command, e)
            return f"Error: {e}"

        if self.live_tree and command in self._mutating:
            output = output + [""] + formatting.format_tree(self.tree.render())
        return "\n".join(output)

    # Handlers return output lines and let NamespaceError propagate

    def _ls(self, args: str) -> List[str]:
        return formatting.format_listing(self.tree.current_path(), self.tree.list_children())

    def _mkdir(self, name: str) -> List[str]:
        self.tree.create_directory(name)
        return [f"Directory '{name}' created"]

    def _cd(self, target: str) -> List[str]:
        self.tree.change_directory(target)
        return [self.tree.current_path()]

    def _touch(self, name: str) -> List[str]:
        self.tree.create_file(name)
        return [f"File '{name}' created"]

    def _write(self, args: str) -> List[str]:
        name, rest = split_operand(args)
        content = unquote(rest).replace("\\n", "\n")
        self.tree.write_file(name, content)
        size = len(content.encode(self.tree.config.encoding))
        return [f"File '{name}' written ({size} bytes)"]

    def _cat(self, name: str) -> List[str]:
        return formatting.format_content(name, self.tree.read_file(name))

    def _rm(self, name: str) -> List[str]:
        self.tree.delete_entry(name)
        return [f"'{name}' deleted"]

    def _find(self, term: str) -> List[str]:
        return formatting.format_search(term, self.tree.search(term))

    def _stat(self, name: str) -> List[str]:
        return formatting.format_info(self.tree.info(name))

    def _pwd(self, args: str) -> List[str]:
        return [self.tree.current_path()]

    def _tree(self, args: str) -> List[str]:
        return formatting.format_tree(self.tree.render())

    def _livetree(self, args: str) -> List[str]:
        self.live_tree = not self.live_tree
        return [f"Live tree {'enabled' if self.live_tree else 'disabled'}"]

    def _info(self, args: str) -> List[str]:
        return formatting.format_stats(self.tree.stats())

    def _help(self, args: str) -> List[str]:
        return list(HELP_TEXT)

    def _exit(self, args: str) -> List[str]:
        self.finished = True
        return ["Goodbye!"]
