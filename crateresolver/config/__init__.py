"""Configuration schema and validation for crateresolver."""

from .schema import ResolverConfig

__all__ = [
    "ResolverConfig",
]
