"""Command line entry point for treefs.

Usage:
    treefs                      # Interactive session on stdin
    treefs --script demo.txt    # Run commands from a file
    treefs --order insertion --no-index --log-level DEBUG
"""

import argparse
import sys
from typing import Iterable, List, Optional, TextIO

from ..config import NamespaceConfig, SiblingOrder, parse_sibling_order
from ..tree import NamespaceTree
from .commands import CommandShell
from .logging_config import LoggingConfig, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="treefs",
        description="In-memory file system shell",
    )
    parser.add_argument("--script", metavar="FILE",
                        help="Read commands from FILE instead of stdin")
    parser.add_argument("--order", default=SiblingOrder.DIRECTORIES_FIRST.value,
                        choices=[order.value for order in SiblingOrder],
                        help="Sibling order for ls, tree and find")
    parser.add_argument("--no-index", action="store_true",
                        help="Disable the path index")
    parser.add_argument("--log-level", default="WARNING",
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


def run_session(shell: CommandShell,
                lines: Iterable[str],
                out: TextIO,
                interactive: bool = False) -> None:
    """Feed lines to the shell until input ends or exit is executed."""
    if interactive:
        out.write(shell.prompt)
        out.flush()
    for line in lines:
        output = shell.execute(line)
        if output:
            out.write(output + "\n")
        if shell.finished:
            break
        if interactive:
            out.write(shell.prompt)
            out.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(LoggingConfig(level=args.log_level))

    config = NamespaceConfig(
        sibling_order=parse_sibling_order(args.order),
        use_index=not args.no_index,
    )
    shell = CommandShell(NamespaceTree(config))

    if args.script:
        with open(args.script, encoding="utf-8") as script:
            run_session(shell, script, sys.stdout)
    else:
        run_session(shell, sys.stdin, sys.stdout, interactive=sys.stdin.isatty())
    return 0


if __name__ == "__main__":
    sys.exit(main())
