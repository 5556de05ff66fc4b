"""Resolution error hierarchy.

All failures the resolver can report to its caller derive from
``ResolutionError``. They are raised inside the pipeline and caught at the
``TargetResolver.resolve`` boundary, where they are returned as part of a
``ResolutionResult`` instead of propagating.
"""

from typing import Optional, Sequence


class ResolutionError(Exception):
    """Base class for expected resolution failures.

    These errors describe conditions the consumer can act on (skip
    configuring the file, alert the user) rather than programming errors.
    """

    pass


class NoProjectFound(ResolutionError):
    """No ancestor directory of the file contains a manifest file."""

    def __init__(self, file_path, manifest_name: str = "Cargo.toml") -> None:
        self.file_path = file_path
        self.manifest_name = manifest_name
        super().__init__(f"No {manifest_name} found in any ancestor of {file_path}")


class ManifestReadFailed(ResolutionError):
    """The manifest-introspection command could not be run or exited non-zero.

    Attributes:
        command: The argv that was executed.
        returncode: Process exit status, or None when it never completed.
        stderr: Captured standard error (may be empty).
    """

    def __init__(
        self,
        message: str,
        command: Sequence[str] = (),
        returncode: Optional[int] = None,
        stderr: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(message)


class ManifestParseFailed(ResolutionError):
    """The manifest-introspection output is not a usable target document."""

    pass


class NoCrateRootFound(ResolutionError):
    """An ordinary module has no lib.rs or main.rs in its ancestry.

    This is a soft condition: the resolver records it as a warning and
    still produces a configuration with an empty crate root.
    """

    def __init__(self, file_path) -> None:
        self.file_path = file_path
        super().__init__(f"No crate root (lib.rs or main.rs) found above {file_path}")


__all__ = [
    "ResolutionError",
    "NoProjectFound",
    "ManifestReadFailed",
    "ManifestParseFailed",
    "NoCrateRootFound",
]
