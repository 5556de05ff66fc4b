"""Core types shared across the resolution pipeline.

Targets come from the manifest, classifications come from the directory
layout, and both are reconciled into a ``ResolvedConfiguration``.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from crateresolver.core.errors import ResolutionError


class TargetKind(Enum):
    """Crate kind as seen by the checker."""

    LIBRARY = "lib"
    BINARY = "bin"

    @classmethod
    def from_manifest_kinds(cls, kinds) -> "TargetKind":
        """Map a manifest ``kind`` collection to a TargetKind.

        Any collection containing ``"bin"`` is a binary; everything else
        (lib, rlib, proc-macro, test, example, ...) is treated as a library.
        """
        return cls.BINARY if "bin" in kinds else cls.LIBRARY


class PathClassification(Enum):
    """Directory-convention role of a file relative to the project root."""

    EXECUTABLE = "executable"
    TEST = "test"
    BENCH = "bench"
    EXAMPLE = "example"
    LIBRARY_ROOT = "library_root"
    ORDINARY_MODULE = "ordinary_module"

    @property
    def is_crate_root(self) -> bool:
        """Whether files with this role are themselves compilation entry points."""
        return self is not PathClassification.ORDINARY_MODULE


@dataclass(frozen=True)
class Target:
    """A declared build target.

    Attributes:
        kind: Library or binary.
        name: Target name as declared in the manifest.
        source_path: Absolute path of the target's entry source file.
        raw_kinds: The unmodified ``kind`` values reported by the manifest tool.
    """

    kind: TargetKind
    name: str
    source_path: Path
    raw_kinds: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResolvedConfiguration:
    """Checker configuration for a single source file.

    ``binary_name`` is set if and only if ``crate_kind`` is BINARY.
    """

    project_root: Path
    classification: PathClassification
    crate_root: Optional[Path]
    check_tests: bool
    crate_kind: TargetKind
    binary_name: Optional[str]
    library_search_paths: Tuple[Path, Path]

    def __post_init__(self) -> None:
        if (self.crate_kind is TargetKind.BINARY) != (self.binary_name is not None):
            raise ValueError(
                f"binary_name must be set exactly when crate_kind is binary "
                f"(crate_kind={self.crate_kind.value}, binary_name={self.binary_name!r})"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view of the configuration."""
        return {
            "project_root": str(self.project_root),
            "classification": self.classification.value,
            "crate_root": str(self.crate_root) if self.crate_root is not None else None,
            "check_tests": self.check_tests,
            "crate_kind": self.crate_kind.value,
            "binary_name": self.binary_name,
            "library_search_paths": [str(p) for p in self.library_search_paths],
        }


@dataclass
class ResolutionResult:
    """Outcome of resolving one file.

    Attributes:
        file_path: The file that was resolved.
        config: Resolved configuration, None on failure.
        error: The error that stopped resolution, None on success.
        warnings: Soft conditions encountered (e.g. no crate root found).
    """

    file_path: Path
    config: Optional[ResolvedConfiguration] = None
    error: Optional[ResolutionError] = None
    warnings: List[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return self.error is None and self.config is not None


__all__ = [
    "TargetKind",
    "PathClassification",
    "Target",
    "ResolvedConfiguration",
    "ResolutionResult",
]
