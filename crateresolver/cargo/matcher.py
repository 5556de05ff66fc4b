"""Match a file against the declared targets."""

import logging
from pathlib import Path
from typing import Sequence, Union

from crateresolver.core.models import Target
from crateresolver.utils.path_utils import normalize_path

logger = logging.getLogger("crateresolver.cargo.matcher")


def match_target(file_path: Union[Path, str], targets: Sequence[Target]) -> Target:
    """Pick the target a file belongs to.

    Returns the target whose source path is the file itself. Files that are
    not a target's entry point (module children) inherit the first declared
    target. With several binaries this fallback may be wrong; it is a
    best-effort guess, not an error.

    Args:
        file_path: File being resolved.
        targets: Declared targets in manifest order.

    Returns:
        Target: The exact match, or the first target.

    Raises:
        ValueError: If ``targets`` is empty.
    """
    if not targets:
        raise ValueError("match_target requires at least one target")

    path = normalize_path(file_path)
    for target in targets:
        if normalize_path(target.source_path) == path:
            logger.debug("Exact target match for %s: %s", path, target.name)
            return target

    default = targets[0]
    logger.debug("No exact target match for %s; defaulting to %s", path, default.name)
    return default


__all__ = ["match_target"]
