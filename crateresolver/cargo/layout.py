"""Cargo directory-layout conventions.

Classifies a file by where it lives in the project (``src/main.rs``,
``tests/``, ``benches/`` ...) and, for ordinary module files, finds the crate
root they are compiled into.
"""

import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple, Union

from crateresolver.core.models import PathClassification
from crateresolver.utils.path_utils import iter_ancestors, normalize_path

logger = logging.getLogger("crateresolver.cargo.layout")

LIBRARY_ROOT_FILE = "lib.rs"
EXECUTABLE_ROOT_FILE = "main.rs"

# Ordered (predicate, classification) table; first match wins.
CLASSIFICATION_RULES: List[Tuple[Callable[[str], bool], PathClassification]] = [
    (
        lambda p: p == "src/main.rs" or p.startswith("src/bin/"),
        PathClassification.EXECUTABLE,
    ),
    (lambda p: p.startswith("tests/"), PathClassification.TEST),
    (lambda p: p.startswith("benches/"), PathClassification.BENCH),
    (lambda p: p.startswith("examples/"), PathClassification.EXAMPLE),
    (lambda p: p == "src/lib.rs", PathClassification.LIBRARY_ROOT),
]


def classify_path(relative_path: Union[str, Path]) -> PathClassification:
    """Classify a path relative to the project root.

    Args:
        relative_path: Root-relative path; backslashes are normalized.

    Returns:
        PathClassification: The first matching rule, or ORDINARY_MODULE.
    """
    normalized = str(relative_path).replace("\\", "/")
    if normalized.startswith("./"):
        normalized = normalized[2:]

    for predicate, classification in CLASSIFICATION_RULES:
        if predicate(normalized):
            return classification
    return PathClassification.ORDINARY_MODULE


def find_crate_root(
    file_path: Union[Path, str], project_root: Union[Path, str]
) -> Optional[Path]:
    """Find the crate root that an ordinary module file belongs to.

    Searches the file's ancestor directories, up to and including the
    project root, for the nearest ``lib.rs``. If there is none, repeats the
    search for ``main.rs``.

    Args:
        file_path: Absolute path of the module file.
        project_root: Project root bounding the search.

    Returns:
        Optional[Path]: Crate root file, or None if the file is orphaned.
    """
    path = normalize_path(file_path)
    root = normalize_path(project_root)

    for root_file in (LIBRARY_ROOT_FILE, EXECUTABLE_ROOT_FILE):
        for directory in iter_ancestors(path.parent, stop=root):
            candidate = directory / root_file
            if candidate.is_file():
                logger.debug("Crate root for %s: %s", path, candidate)
                return candidate

    logger.debug("No crate root found for %s", path)
    return None


__all__ = ["CLASSIFICATION_RULES", "classify_path", "find_crate_root"]
