"""Project root discovery.

A project root is the nearest ancestor directory that directly contains the
manifest file (``Cargo.toml``).
"""

import logging
from pathlib import Path
from typing import Union

from crateresolver.core.errors import NoProjectFound
from crateresolver.utils.path_utils import iter_ancestors, normalize_path

logger = logging.getLogger("crateresolver.cargo.locator")


def find_project_root(
    file_path: Union[Path, str], manifest_name: str = "Cargo.toml"
) -> Path:
    """Locate the project root enclosing ``file_path``.

    Args:
        file_path: Source file (or directory) being resolved.
        manifest_name: Manifest file name that marks a project root.

    Returns:
        Path: Absolute path of the nearest directory containing the manifest.

    Raises:
        NoProjectFound: If no ancestor up to the filesystem root has one.
    """
    path = normalize_path(file_path)
    start = path if path.is_dir() else path.parent

    for directory in iter_ancestors(start):
        if (directory / manifest_name).is_file():
            logger.debug("Project root for %s: %s", path, directory)
            return directory

    raise NoProjectFound(path, manifest_name)


__all__ = ["find_project_root"]
