"""Classify command: show the layout role of a path."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from crateresolver.cargo.layout import classify_path
from crateresolver.utils.path_utils import relative_posix

logger = logging.getLogger("crateresolver.cli.classify")


def classify_command(args, console: Optional[Console] = None) -> int:
    """Execute classify command.

    Without ``--root`` the path is taken as already relative to the
    project root. With ``--root`` it is made relative first.

    Returns:
        int: Exit code (1 if the path lies outside ``--root``).
    """
    console = console or Console()
    path = args.path
    root = getattr(args, "root", None)

    if root:
        try:
            path = relative_posix(Path(root) / path, root)
        except ValueError:
            logger.error("%s is not inside %s", args.path, root)
            return 1

    console.print(f"{path}: {classify_path(path).value}", highlight=False)
    return 0
