"""Tests for crateresolver CLI entrypoints."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

import crateresolver.main as main
from crateresolver.cli.classify import classify_command
from crateresolver.cli.resolve import resolve_command
from crateresolver.cli.targets import targets_command


def _console() -> Console:
    return Console(record=True, width=200, color_system=None)


def test_main_dispatches_resolve_command(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Verify that `main` parses args and dispatches resolve_command."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)

    captured: dict[str, object] = {}

    def fake_resolve_command(args) -> int:
        captured["args"] = args
        return 0

    monkeypatch.setattr(main, "resolve_command", fake_resolve_command)
    target = str(tmp_path / "src" / "lib.rs")
    monkeypatch.setattr(sys, "argv", ["crateresolver", "resolve", target, "--json"])

    exit_code = main.main()

    assert exit_code == 0
    parsed = captured["args"]
    assert parsed.file == target
    assert parsed.json is True
    assert parsed.config is None


def test_main_requires_command(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Ensure missing subcommands make the CLI print help and fail."""

    monkeypatch.setattr(main, "setup_logging", lambda *a, **k: None)
    monkeypatch.setattr(sys, "argv", ["crateresolver"])

    exit_code = main.main()

    assert exit_code == 1
    assert "Crateresolver" in capsys.readouterr().out


def test_resolve_command_json_output(cargo_project, fake_cargo) -> None:
    root = cargo_project(["src/lib.rs", "src/bin/foo-cli.rs"], name="foo")
    fake_cargo.set_targets(
        root,
        [(["lib"], "foo", "src/lib.rs"), (["bin"], "foo-cli", "src/bin/foo-cli.rs")],
    )
    console = _console()
    args = SimpleNamespace(file=str(root / "src/bin/foo-cli.rs"), json=True, config=None)

    exit_code = resolve_command(args, console=console)

    assert exit_code == 0
    payload = json.loads(console.export_text())
    assert payload["success"] is True
    assert payload["config"]["crate_kind"] == "bin"
    assert payload["config"]["binary_name"] == "foo-cli"
    assert payload["config"]["check_tests"] is False


def test_resolve_command_table_output(cargo_project, fake_cargo) -> None:
    root = cargo_project(["src/lib.rs"], name="foo")
    fake_cargo.set_targets(root, [(["lib"], "foo", "src/lib.rs")])
    console = _console()
    args = SimpleNamespace(file=str(root / "src/lib.rs"), json=False, config=None)

    assert resolve_command(args, console=console) == 0
    output = console.export_text()
    assert "library_root" in output
    assert "check tests" in output


def test_resolve_command_reads_manifest_settings(cargo_project, fake_cargo) -> None:
    root = cargo_project(["src/lib.rs"], name="foo")
    with (root / "Cargo.toml").open("a", encoding="utf-8") as fh:
        fh.write('\n[package.metadata.crateresolver]\nprofile = "release"\n')
    fake_cargo.set_targets(root, [(["lib"], "foo", "src/lib.rs")])
    console = _console()
    args = SimpleNamespace(file=str(root / "src/lib.rs"), json=True, config=None)

    assert resolve_command(args, console=console) == 0
    payload = json.loads(console.export_text())
    assert payload["config"]["library_search_paths"] == [
        str(root / "target" / "release"),
        str(root / "target" / "release" / "deps"),
    ]


def test_resolve_command_reports_error(tmp_path: Path, fake_cargo) -> None:
    source = tmp_path / "loose.rs"
    source.write_text("", encoding="utf-8")
    console = _console()
    args = SimpleNamespace(
        file=str(source), json=False, config='manifest_name = "Nope.toml"'
    )

    assert resolve_command(args, console=console) == 1
    assert "NoProjectFound" in console.export_text()


def test_resolve_command_bad_config(tmp_path: Path) -> None:
    args = SimpleNamespace(file=str(tmp_path), json=False, config='{"manifest_args": []}')

    assert resolve_command(args, console=_console()) == 2


def test_targets_command_lists_targets(cargo_project, fake_cargo) -> None:
    root = cargo_project(["src/lib.rs", "src/bin/foo-cli.rs"], name="foo")
    fake_cargo.set_targets(
        root,
        [(["lib"], "foo", "src/lib.rs"), (["bin"], "foo-cli", "src/bin/foo-cli.rs")],
    )
    console = _console()
    args = SimpleNamespace(file=str(root), json=True, config=None)

    assert targets_command(args, console=console) == 0
    payload = json.loads(console.export_text())
    assert [t["name"] for t in payload] == ["foo", "foo-cli"]


def test_targets_command_manifest_failure(cargo_project, fake_cargo) -> None:
    root = cargo_project(["src/lib.rs"])
    fake_cargo.returncode = 101
    console = _console()
    args = SimpleNamespace(file=str(root), json=False, config=None)

    assert targets_command(args, console=console) == 1
    assert "ManifestReadFailed" in console.export_text()


def test_classify_command(tmp_path: Path) -> None:
    console = _console()

    assert classify_command(SimpleNamespace(path="benches/speed.rs", root=None), console) == 0
    assert "bench" in console.export_text()


def test_classify_command_outside_root(tmp_path: Path) -> None:
    args = SimpleNamespace(path="/elsewhere/file.rs", root=str(tmp_path))

    assert classify_command(args, _console()) == 1
