"""Target resolution pipeline.

Combines the directory-layout view of a file with the manifest's declared
targets into a single ``ResolvedConfiguration``:

    file -> project root -> classification (+ crate root search)
         -> manifest targets -> matched target
         -> derived configuration

Every call re-derives the result from scratch. Nothing is cached between
calls, so repeated resolutions of an unchanged tree yield equal results.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

from crateresolver.cargo.layout import classify_path, find_crate_root
from crateresolver.cargo.locator import find_project_root
from crateresolver.cargo.matcher import match_target
from crateresolver.cargo.metadata import CargoMetadataReader
from crateresolver.config.schema import ResolverConfig
from crateresolver.core.errors import NoCrateRootFound, ResolutionError
from crateresolver.core.models import (
    PathClassification,
    ResolutionResult,
    ResolvedConfiguration,
    Target,
    TargetKind,
)
from crateresolver.utils.path_utils import normalize_path, relative_posix

logger = logging.getLogger("crateresolver.runtime.resolver")


def derive_configuration(
    project_root: Path,
    relative_path: str,
    classification: PathClassification,
    crate_root: Optional[Path],
    target: Target,
    config: Optional[ResolverConfig] = None,
) -> ResolvedConfiguration:
    """Build the checker configuration for one file.

    The matched target's kind decides the crate kind, even when the path
    layout suggests otherwise. ``crate_root`` is only consulted for
    ordinary modules; root-convention files are their own crate root.

    Args:
        project_root: Directory containing the manifest.
        relative_path: File path relative to ``project_root``.
        classification: Layout classification of ``relative_path``.
        crate_root: Crate root found for an ordinary module (may be None).
        target: Target matched from the manifest.
        config: Resolver configuration (build output layout).

    Returns:
        ResolvedConfiguration: Fresh, immutable configuration record.
    """
    config = config or ResolverConfig.default()

    if classification.is_crate_root:
        crate_root = project_root / relative_path

    crate_kind = target.kind
    binary_name = target.name if crate_kind is TargetKind.BINARY else None

    output_dir = project_root / config.target_dir / config.profile
    return ResolvedConfiguration(
        project_root=project_root,
        classification=classification,
        crate_root=crate_root,
        check_tests=classification is not PathClassification.EXECUTABLE,
        crate_kind=crate_kind,
        binary_name=binary_name,
        library_search_paths=(output_dir, output_dir / "deps"),
    )


class TargetResolver:
    """Resolve source files to checker configurations.

    Holds only configuration and the manifest reader; no resolution state
    survives between calls.
    """

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        reader: Optional[CargoMetadataReader] = None,
    ) -> None:
        self.config = config or ResolverConfig.default()
        self.reader = reader or CargoMetadataReader(self.config)

    def resolve(self, file_path: Union[Path, str]) -> ResolutionResult:
        """Resolve ``file_path``.

        Resolution errors are returned in the result rather than raised.

        Args:
            file_path: Source file to resolve.

        Returns:
            ResolutionResult: Configuration on success, error otherwise.
        """
        path = normalize_path(file_path)
        result = ResolutionResult(file_path=path)
        try:
            result.config = self._resolve(path, result)
        except ResolutionError as e:
            logger.warning("Cannot resolve %s: %s", path, e)
            result.error = e
        return result

    def _resolve(self, path: Path, result: ResolutionResult) -> ResolvedConfiguration:
        project_root = find_project_root(path, self.config.manifest_name)
        relative_path = relative_posix(path, project_root)
        classification = classify_path(relative_path)
        logger.debug("Classified %s as %s", relative_path, classification.value)

        crate_root: Optional[Path] = None
        if not classification.is_crate_root:
            crate_root = find_crate_root(path, project_root)
            if crate_root is None:
                warning = NoCrateRootFound(path)
                logger.info("%s", warning)
                result.warnings.append(str(warning))

        targets = self.reader.read_targets(project_root)
        target = match_target(path, targets)

        config = derive_configuration(
            project_root,
            relative_path,
            classification,
            crate_root,
            target,
            self.config,
        )
        logger.info(
            "Resolved %s: crate_root=%s kind=%s bin=%s check_tests=%s",
            relative_path,
            config.crate_root,
            config.crate_kind.value,
            config.binary_name,
            config.check_tests,
        )
        return config


def resolve(
    file_path: Union[Path, str], config: Optional[ResolverConfig] = None
) -> ResolutionResult:
    """Resolve a single file with a one-off ``TargetResolver``."""
    return TargetResolver(config).resolve(file_path)


__all__ = ["TargetResolver", "derive_configuration", "resolve"]
