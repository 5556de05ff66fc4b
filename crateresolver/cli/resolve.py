"""Resolve command implementation."""

from __future__ import annotations

import json
import logging
from typing import Optional

from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from crateresolver.core.models import ResolutionResult
from crateresolver.runtime.config_loader import load_resolver_config
from crateresolver.runtime.resolver import TargetResolver

logger = logging.getLogger("crateresolver.cli.resolve")

EXIT_OK = 0
EXIT_RESOLUTION_ERROR = 1
EXIT_CONFIG_ERROR = 2


def resolve_command(args, console: Optional[Console] = None) -> int:
    """Execute resolve command.

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
        return EXIT_CONFIG_ERROR

    result = TargetResolver(config).resolve(args.file)

    if getattr(args, "json", False):
        console.print_json(json.dumps(result_to_dict(result)))
    else:
        _render(result, console)

    return EXIT_OK if result.success else EXIT_RESOLUTION_ERROR


def result_to_dict(result: ResolutionResult) -> dict:
    """Return a JSON-serializable view of a resolution result."""
    data = {
        "file": str(result.file_path),
        "success": result.success,
        "config": result.config.to_dict() if result.config else None,
        "error": None,
        "warnings": list(result.warnings),
    }
    if result.error is not None:
        data["error"] = {
            "type": type(result.error).__name__,
            "message": str(result.error),
        }
    return data


def _render(result: ResolutionResult, console: Console) -> None:
    if result.error is not None:
        console.print(
            f"[bold red]{type(result.error).__name__}[/]: {result.error}",
            highlight=False,
        )
        return

    cfg = result.config
    table = Table(title=str(result.file_path), show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("project root", str(cfg.project_root))
    table.add_row("classification", cfg.classification.value)
    table.add_row("crate root", str(cfg.crate_root) if cfg.crate_root else "-")
    table.add_row("crate kind", cfg.crate_kind.value)
    table.add_row("binary name", cfg.binary_name or "-")
    table.add_row("check tests", "yes" if cfg.check_tests else "no")
    table.add_row("search paths", "\n".join(str(p) for p in cfg.library_search_paths))
    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]warning[/]: {warning}", highlight=False)
