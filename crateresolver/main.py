"""Main CLI entry point for crateresolver.

Provides commands: resolve, targets, classify
"""

import argparse
import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from crateresolver.cli.classify import classify_command
from crateresolver.cli.resolve import resolve_command
from crateresolver.cli.targets import targets_command

logger = logging.getLogger("crateresolver.cli")


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Setup logging configuration with Rich integration.

    Args:
        verbose: Enable verbose logging.
        console: Rich Console instance for coordinated output (optional).
    """
    if verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        log_time_format="[%H:%M:%S]",
    )

    logging.basicConfig(
        level=level,
        format="[%(name)s] [%(levelname)s] %(message)s",
        handlers=[handler],
    )


def _add_config_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        help=(
            "Optional resolver configuration. Can be a path to a TOML/JSON "
            "file or an inline TOML/JSON string. When omitted, built-in "
            "defaults are used."
        ),
    )


def main() -> int:
    """Main CLI entry point.

    Returns:
        int: Exit code.
    """
    parser = argparse.ArgumentParser(
        description="Crateresolver - resolve the Cargo target a source file belongs to",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve checker configuration for a source file",
    )
    resolve_parser.add_argument(
        "file",
        help="Source file to resolve",
    )
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    _add_config_argument(resolve_parser)

    targets_parser = subparsers.add_parser(
        "targets",
        help="List targets declared by the project enclosing a file",
    )
    targets_parser.add_argument(
        "file",
        help="Any file or directory inside the project",
    )
    targets_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the targets as JSON",
    )
    _add_config_argument(targets_parser)

    classify_parser = subparsers.add_parser(
        "classify",
        help="Show the layout classification of a path",
    )
    classify_parser.add_argument(
        "path",
        help="Path relative to the project root (or absolute with --root)",
    )
    classify_parser.add_argument(
        "--root",
        help="Project root used to relativize the path",
    )

    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.command == "resolve":
        return resolve_command(args)
    elif args.command == "targets":
        return targets_command(args)
    elif args.command == "classify":
        return classify_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
