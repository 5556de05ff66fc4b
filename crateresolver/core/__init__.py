"""Core types and errors for crate resolution."""

from .errors import (
    ManifestParseFailed,
    ManifestReadFailed,
    NoCrateRootFound,
    NoProjectFound,
    ResolutionError,
)
from .models import (
    PathClassification,
    ResolutionResult,
    ResolvedConfiguration,
    Target,
    TargetKind,
)

__all__ = [
    "ResolutionError",
    "NoProjectFound",
    "ManifestReadFailed",
    "ManifestParseFailed",
    "NoCrateRootFound",
    "PathClassification",
    "ResolutionResult",
    "ResolvedConfiguration",
    "Target",
    "TargetKind",
]
