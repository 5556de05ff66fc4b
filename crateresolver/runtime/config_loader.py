"""Resolver configuration loading.

Settings are layered, later layers winning:

1. built-in ``ResolverConfig`` defaults,
2. the ``[package.metadata.crateresolver]`` table of the project's
   ``Cargo.toml`` (or ``[workspace.metadata.crateresolver]``),
3. an explicit source given on the command line: a ``.toml``/``.json`` file
   or an inline TOML/JSON string.
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Union

from crateresolver.cargo.locator import find_project_root
from crateresolver.config.schema import ResolverConfig
from crateresolver.core.errors import NoProjectFound

logger = logging.getLogger("crateresolver.runtime.config_loader")

METADATA_KEY = "crateresolver"


def read_config_source(source: Union[str, Path]) -> Dict[str, Any]:
    """Parse an explicit configuration file or inline string.

    Raises:
        ValueError: If the text is not valid TOML/JSON or not a mapping.
        OSError: If the file exists but cannot be read.
    """
    path = Path(source)
    try:
        is_file = path.is_file()
    except OSError:
        # Inline text longer than the platform's path limit
        is_file = False

    if is_file:
        text = path.read_text(encoding="utf-8")
        as_json = path.suffix.lower() == ".json"
        logger.info("Loading configuration from file: %s", path)
    else:
        text = str(source)
        as_json = text.lstrip().startswith(("{", "["))
        logger.info("Loading configuration from inline string")

    if as_json:
        data = json.loads(text)
    else:
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ValueError(f"Invalid TOML configuration: {e}") from e

    if not isinstance(data, dict):
        raise ValueError("Top-level configuration must be a mapping/dict")
    return data


def read_manifest_settings(manifest_path: Path) -> Dict[str, Any]:
    """Return the ``crateresolver`` metadata table of a ``Cargo.toml``.

    The package table takes precedence over the workspace table. A manifest
    that cannot be read or parsed contributes nothing; cargo itself reports
    that problem when the targets are read.

    Raises:
        ValueError: If the metadata entry exists but is not a table.
    """
    try:
        manifest = tomllib.loads(manifest_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring settings in unreadable manifest %s: %s", manifest_path, e)
        return {}

    for section in ("package", "workspace"):
        table = manifest.get(section)
        metadata = table.get("metadata") if isinstance(table, dict) else None
        if not isinstance(metadata, dict) or METADATA_KEY not in metadata:
            continue
        settings = metadata[METADATA_KEY]
        if not isinstance(settings, dict):
            raise ValueError(
                f"[{section}.metadata.{METADATA_KEY}] in {manifest_path} must be a table"
            )
        logger.debug("Using [%s.metadata.%s] from %s", section, METADATA_KEY, manifest_path)
        return settings
    return {}


def load_resolver_config(
    source: Optional[Union[str, Path]] = None,
    file_path: Optional[Union[str, Path]] = None,
) -> ResolverConfig:
    """Build the effective ResolverConfig.

    Args:
        source: Optional explicit configuration file or inline TOML/JSON.
        file_path: File being resolved; when given, settings from its
            project's manifest are layered under ``source``.

    Returns:
        ResolverConfig instance.

    Raises:
        ValueError: If a configuration source is malformed.
        pydantic.ValidationError: If a setting fails validation.
    """
    explicit = read_config_source(source) if source is not None else {}
    config = ResolverConfig.from_dict(explicit)
    if file_path is None:
        return config

    try:
        project_root = find_project_root(file_path, config.manifest_name)
    except NoProjectFound:
        return config

    settings = read_manifest_settings(project_root / config.manifest_name)
    if not settings:
        return config
    return ResolverConfig.from_dict({**settings, **explicit})


__all__ = ["load_resolver_config", "read_config_source", "read_manifest_settings"]
