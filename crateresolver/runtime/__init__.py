"""Resolution pipeline and configuration loading."""

from .config_loader import load_resolver_config
from .resolver import TargetResolver, derive_configuration, resolve

__all__ = [
    "TargetResolver",
    "derive_configuration",
    "load_resolver_config",
    "resolve",
]
