"""Tests for searchdeck init command."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from typer.testing import CliRunner

from searchdeck.cli.main import app
from searchdeck.core.registry import DEFAULT_ENGINES

runner = CliRunner()


def test_init_creates_config_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """init writes searchdeck.config.yaml with the built-in engines."""
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["init", "--default-terms", "hello"])
    assert result.exit_code == 0

    config_file = tmp_path / "searchdeck.config.yaml"
    data = yaml.safe_load(config_file.read_text(encoding="utf-8"))
    assert [e["name"] for e in data["engines"]] == [e.name for e in DEFAULT_ENGINES]
    assert data["options"]["default_search_terms"] == "hello"


def test_init_config_round_trips(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """The written file passes validate."""
    monkeypatch.chdir(tmp_path)
    runner.invoke(app, ["init"])

    result = runner.invoke(app, ["validate", "searchdeck.config.yaml"])
    assert result.exit_code == 0
    assert "13 configured engine(s), 11 enabled" in result.output


def test_init_refuses_overwrite(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "searchdeck.config.yaml").write_text("options: {}\n", encoding="utf-8")

    result = runner.invoke(app, ["init"])
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_init_force(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "searchdeck.config.yaml").write_text("options: {}\n", encoding="utf-8")

    result = runner.invoke(app, ["init", "--force"])
    assert result.exit_code == 0
    assert "engines" in (tmp_path / "searchdeck.config.yaml").read_text(encoding="utf-8")
