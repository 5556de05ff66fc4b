"""Configuration schema definitions using Pydantic for validation.

The resolver itself is stateless; this model only carries the tool and
layout conventions it relies on (manifest file name, introspection command,
build output directory). Using Pydantic ensures configuration errors are
caught early with clear error messages.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, Field, field_validator


class ResolverConfig(BaseModel):
    """Top-level configuration for target resolution.

    Attributes:
        manifest_name: File whose presence marks a project root.
        cargo_command: Executable of the package manager.
        manifest_args: Subcommand and flags that print the manifest as JSON.
        manifest_timeout: Timeout for the introspection command (seconds).
        target_dir: Build output directory relative to the project root.
        profile: Build profile directory inside ``target_dir``.
    """

    manifest_name: str = "Cargo.toml"
    cargo_command: str = "cargo"
    manifest_args: List[str] = Field(default_factory=lambda: ["read-manifest"])
    manifest_timeout: float = Field(default=30.0, ge=1.0, le=600.0)
    target_dir: str = "target"
    profile: str = "debug"

    model_config = {"frozen": True}

    @field_validator("manifest_args")
    @classmethod
    def validate_manifest_args(cls, v: List[str]) -> List[str]:
        """Require at least the introspection subcommand."""
        if not v:
            raise ValueError("manifest_args must contain at least one argument")
        return v

    @field_validator("manifest_name", "cargo_command", "target_dir", "profile")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        """Reject empty or whitespace-only values."""
        if not v or not v.strip():
            raise ValueError("value must be a non-empty string")
        return v

    @field_validator("manifest_name", "target_dir", "profile")
    @classmethod
    def validate_single_segment(cls, v: str) -> str:
        if "/" in v or "\\" in v or v in {".", ".."}:
            raise ValueError(f"Invalid path segment: {v!r}")
        return v

    def manifest_command(self) -> List[str]:
        """Return the full argv of the manifest-introspection command."""
        return [self.cargo_command, *self.manifest_args]

    @classmethod
    def default(cls) -> "ResolverConfig":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolverConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary.

        Returns:
            ResolverConfig instance.

        Raises:
            ValidationError: If configuration is invalid.
        """
        return cls.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
