"""Cargo project discovery, manifest reading and layout conventions."""

from .layout import classify_path, find_crate_root
from .locator import find_project_root
from .matcher import match_target
from .metadata import CargoMetadataReader, parse_targets

__all__ = [
    "CargoMetadataReader",
    "classify_path",
    "find_crate_root",
    "find_project_root",
    "match_target",
    "parse_targets",
]
