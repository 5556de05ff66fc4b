"""Targets command: list the targets declared by the enclosing project."""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from crateresolver.cargo.locator import find_project_root
from crateresolver.cargo.metadata import CargoMetadataReader
from crateresolver.core.errors import ResolutionError
from crateresolver.runtime.config_loader import load_resolver_config

logger = logging.getLogger("crateresolver.cli.targets")


def targets_command(args, console: Optional[Console] = None) -> int:
    """Execute targets command.

    Args:
        args: Parsed command-line arguments.
        console: Rich console for output (defaults to stdout).

    Returns:
        int: Exit code.
    """
    console = console or Console()
    try:
        config = load_resolver_config(getattr(args, "config", None), file_path=args.file)
    except (ValidationError, ValueError, OSError) as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    try:
        project_root = find_project_root(args.file, config.manifest_name)
        targets = CargoMetadataReader(config).read_targets(project_root)
    except ResolutionError as e:
        console.print(f"[bold red]{type(e).__name__}[/]: {e}", highlight=False)
        return 1

    if getattr(args, "json", False):
        payload = [
            {
                "kind": target.kind.value,
                "name": target.name,
                "src_path": str(target.source_path),
                "raw_kinds": list(target.raw_kinds),
            }
            for target in targets
        ]
        console.print_json(json.dumps(payload))
        return 0

    table = Table(title=str(project_root))
    table.add_column("#", justify="right")
    table.add_column("kind")
    table.add_column("name", style="bold")
    table.add_column("source")
    for idx, target in enumerate(targets):
        table.add_row(
            str(idx),
            ",".join(target.raw_kinds) or target.kind.value,
            target.name,
            str(target.source_path),
        )
    console.print(table)
    return 0
