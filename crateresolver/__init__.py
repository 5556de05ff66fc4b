"""crateresolver - find the Cargo target a source file belongs to.

The library entry point is :func:`resolve`, which returns a
:class:`ResolutionResult` holding either a :class:`ResolvedConfiguration`
or the :class:`ResolutionError` that prevented resolution.
"""

from crateresolver.config.schema import ResolverConfig
from crateresolver.core.errors import (
    ManifestParseFailed,
    ManifestReadFailed,
    NoCrateRootFound,
    NoProjectFound,
    ResolutionError,
)
from crateresolver.core.models import (
    PathClassification,
    ResolutionResult,
    ResolvedConfiguration,
    Target,
    TargetKind,
)
from crateresolver.runtime.resolver import TargetResolver, resolve

__version__ = "0.1.0"

__all__ = [
    "ResolverConfig",
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
    "TargetResolver",
    "resolve",
]
