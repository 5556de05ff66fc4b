"""Manifest target reader.

Runs the package manager's manifest-introspection command (``cargo
read-manifest`` by default) and parses its JSON output into an ordered list
of ``Target`` records. Process mechanics stay in this module; the rest of
the pipeline only sees parsed targets.
"""

from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from crateresolver.config.schema import ResolverConfig
from crateresolver.core.errors import ManifestParseFailed, ManifestReadFailed
from crateresolver.core.models import Target, TargetKind
from crateresolver.utils.path_utils import normalize_path

logger = logging.getLogger("crateresolver.cargo.metadata")


class CargoMetadataReader:
    """Read declared build targets for a project.

    Each call to ``read_targets`` runs the introspection command exactly
    once. Nothing is cached between calls.
    """

    def __init__(self, config: Optional[ResolverConfig] = None) -> None:
        self.config = config or ResolverConfig.default()

    def read_targets(self, project_root: Path) -> List[Target]:
        """Return the targets declared by the project's manifest.

        Args:
            project_root: Directory containing the manifest.

        Returns:
            List[Target]: Declared targets in manifest order (never empty).

        Raises:
            ManifestReadFailed: If the command cannot run, times out, or exits non-zero.
            ManifestParseFailed: If the output is not a valid target document.
        """
        raw = self.run_manifest_command(project_root)
        try:
            stdout = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ManifestParseFailed(
                f"Manifest command output in {project_root} is not valid UTF-8: {e}"
            ) from e

        try:
            document = json.loads(stdout)
        except (json.JSONDecodeError, RecursionError) as e:
            raise ManifestParseFailed(
                f"Invalid JSON from manifest command in {project_root}: {e}"
            ) from e

        targets = parse_targets(document, project_root, self.config.manifest_name)
        logger.debug(
            "Read %d target(s) for %s: %s",
            len(targets),
            project_root,
            ", ".join(t.name for t in targets),
        )
        return targets

    def run_manifest_command(self, project_root: Path) -> bytes:
        """Run the introspection command in ``project_root`` and return raw stdout."""
        cmd = self.config.manifest_command()
        timeout = self.config.manifest_timeout
        logger.debug("Running manifest command: %s (cwd=%s)", " ".join(cmd), project_root)

        try:
            result = subprocess.run(
                cmd,
                cwd=str(project_root),
                stdin=subprocess.DEVNULL,
                capture_output=True,
                timeout=timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            logger.error("Manifest command timed out after %ss: %s", timeout, " ".join(cmd))
            raise ManifestReadFailed(
                f"Manifest command timed out after {timeout}s", command=cmd
            ) from e
        except OSError as e:
            logger.error("Failed to launch manifest command %s: %s", cmd[0], e)
            raise ManifestReadFailed(
                f"Failed to launch {cmd[0]}: {e}", command=cmd
            ) from e

        if result.returncode != 0:
            stderr = (result.stderr or b"").decode("utf-8", errors="replace").strip()
            logger.error(
                "Manifest command exited with %d: %s", result.returncode, stderr
            )
            raise ManifestReadFailed(
                f"{' '.join(cmd)} exited with status {result.returncode}",
                command=cmd,
                returncode=result.returncode,
                stderr=stderr,
            )

        return result.stdout or b""


def parse_targets(
    document: Any, project_root: Path, manifest_name: str = "Cargo.toml"
) -> List[Target]:
    """Parse a manifest-introspection document into targets.

    Accepts either a single-package document with a top-level ``targets``
    list (``cargo read-manifest``) or a workspace document with a
    ``packages`` list (``cargo metadata``). For the latter, the package whose
    ``manifest_path`` is the project's manifest is used, falling back to the
    first package.

    Raises:
        ManifestParseFailed: If the document shape is invalid or declares no targets.
    """
    if not isinstance(document, dict):
        raise ManifestParseFailed("Manifest document must be a JSON object")

    package = _select_package(document, project_root, manifest_name)
    raw_targets = package.get("targets")
    if not isinstance(raw_targets, list):
        raise ManifestParseFailed("Manifest document has no 'targets' list")

    targets = [_parse_target(entry, project_root) for entry in raw_targets]
    if not targets:
        raise ManifestParseFailed(f"Manifest in {project_root} declares no targets")
    return targets


def _select_package(
    document: Dict[str, Any], project_root: Path, manifest_name: str
) -> Mapping[str, Any]:
    if "targets" in document or "packages" not in document:
        return document

    packages = document["packages"]
    if not isinstance(packages, list) or not packages:
        raise ManifestParseFailed("Manifest document has an empty 'packages' list")

    manifest_path = normalize_path(project_root / manifest_name)
    for package in packages:
        if not isinstance(package, dict):
            raise ManifestParseFailed("Package entries must be JSON objects")
        path = package.get("manifest_path")
        if path and normalize_path(path) == manifest_path:
            return package

    logger.debug("No package matches %s; using first package", manifest_path)
    return packages[0]


def _parse_target(entry: Any, project_root: Path) -> Target:
    if not isinstance(entry, dict):
        raise ManifestParseFailed(f"Target entry must be a JSON object, got {entry!r}")

    try:
        kinds = entry["kind"]
        name = entry["name"]
        src_path = entry["src_path"]
    except KeyError as e:
        raise ManifestParseFailed(f"Target entry missing field {e}: {entry!r}") from e

    if isinstance(kinds, str):
        kinds = [kinds]
    if not isinstance(kinds, list) or not all(isinstance(k, str) for k in kinds):
        raise ManifestParseFailed(f"Target 'kind' must be a list of strings: {kinds!r}")
    if not isinstance(name, str) or not isinstance(src_path, str):
        raise ManifestParseFailed(f"Target 'name' and 'src_path' must be strings: {entry!r}")

    source = Path(src_path)
    if not source.is_absolute():
        source = project_root / source

    return Target(
        kind=TargetKind.from_manifest_kinds(kinds),
        name=name,
        source_path=normalize_path(source),
        raw_kinds=tuple(kinds),
    )


__all__ = ["CargoMetadataReader", "parse_targets"]
