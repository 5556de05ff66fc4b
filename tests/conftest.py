"""Shared fixtures: on-disk Cargo layouts and a fake ``cargo`` process."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path
from types import SimpleNamespace
from typing import Callable, Dict, List, Optional, Union

import pytest

from crateresolver.cargo import metadata as metadata_module


def write_files(root: Path, files: List[str]) -> None:
    """Create empty source files (and their directories) under ``root``."""
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("", encoding="utf-8")


@pytest.fixture
def cargo_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a Cargo project with the given source files."""

    def _make(files: List[str], name: str = "proj") -> Path:
        root = (tmp_path / name).resolve()
        root.mkdir(parents=True, exist_ok=True)
        (root / "Cargo.toml").write_text(
            f'[package]\nname = "{name}"\nversion = "0.1.0"\n', encoding="utf-8"
        )
        write_files(root, files)
        return root

    return _make


class FakeCargo:
    """Stand-in for ``subprocess.run`` that answers manifest commands."""

    def __init__(self) -> None:
        self.documents: Dict[Path, object] = {}
        self.stdout: Optional[Union[str, bytes]] = None
        self.returncode = 0
        self.stderr = ""
        self.raise_exc: Optional[BaseException] = None
        self.calls: List[SimpleNamespace] = []

    def set_targets(self, root: Path, targets: List[tuple]) -> None:
        """Register ``(kinds, name, relative_src)`` targets for ``root``."""
        self.documents[root] = {
            "name": root.name,
            "targets": [
                {"kind": list(kinds), "name": name, "src_path": str(root / src)}
                for kinds, name, src in targets
            ],
        }

    def __call__(self, cmd, cwd=None, **kwargs):
        self.calls.append(SimpleNamespace(cmd=list(cmd), cwd=cwd, kwargs=kwargs))
        if self.raise_exc is not None:
            raise self.raise_exc
        if self.stdout is not None:
            stdout = self.stdout
        else:
            stdout = json.dumps(self.documents.get(Path(cwd), {"targets": []}))
        if isinstance(stdout, str):
            stdout = stdout.encode("utf-8")
        stderr = self.stderr
        if isinstance(stderr, str):
            stderr = stderr.encode("utf-8")
        return subprocess.CompletedProcess(
            args=cmd, returncode=self.returncode, stdout=stdout, stderr=stderr
        )


@pytest.fixture
def fake_cargo(monkeypatch: pytest.MonkeyPatch) -> FakeCargo:
    """Replace the manifest command runner with a ``FakeCargo``."""
    fake = FakeCargo()
    monkeypatch.setattr(metadata_module.subprocess, "run", fake)
    return fake
