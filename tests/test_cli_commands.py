from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from maec_v5.cli.app import app
from maec_v5.cli.deps import reset_container
from maec_v5.domain import extract_type_from_id, generate_maec_id


def _env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MAEC_ENV", "test")
    monkeypatch.setenv("MAEC_RESOLVER_POLICY", "kind-first")
    monkeypatch.setenv("MAEC_JSON_INDENT", "2")
    reset_container()


def _scaffold(runner: CliRunner, path: Path) -> None:
    result = runner.invoke(
        app,
        ["scaffold", str(path), "--family", "TestMalware", "--labels", "trojan, dropper"],
    )
    assert result.exit_code == 0, result.output
    assert path.exists()


def test_new_id(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()

    result = runner.invoke(app, ["new-id", "malware-family"])

    assert result.exit_code == 0, result.output
    assert extract_type_from_id(result.stdout.strip()) == "malware-family"


def test_validate_id(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    behavior_id = generate_maec_id("behavior")

    ok = runner.invoke(app, ["validate-id", behavior_id, "--type", "behavior"])
    assert ok.exit_code == 0, ok.output
    assert "Valid behavior identifier" in ok.stdout

    assert runner.invoke(app, ["validate-id", "package-notauuid"]).exit_code == 1
    assert runner.invoke(app, ["validate-id", behavior_id, "--type", "collection"]).exit_code == 1


def test_scaffold_then_validate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    path = tmp_path / "package.json"
    _scaffold(runner, path)

    result = runner.invoke(app, ["validate", str(path)])

    assert result.exit_code == 0, result.output
    assert "Valid package" in result.stdout
    assert "(1 objects)" in result.stdout

    document = json.loads(path.read_text(encoding="utf-8"))
    family = document["maec_objects"][0]
    assert family["name"] == {"value": "TestMalware"}
    assert family["labels"] == ["trojan", "dropper"]


def test_summary_counts_objects(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    path = tmp_path / "package.json"
    _scaffold(runner, path)

    result = runner.invoke(app, ["summary", str(path)])

    assert result.exit_code == 0, result.output
    assert "malware-family: 1" in result.stdout
    assert "relationships: 0" in result.stdout


def test_format_reencodes(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    path = tmp_path / "package.json"
    _scaffold(runner, path)
    output = tmp_path / "formatted.json"

    printed = runner.invoke(app, ["format", str(path)])
    assert printed.exit_code == 0, printed.output
    assert json.loads(printed.stdout)["type"] == "package"

    written = runner.invoke(app, ["format", str(path), "--output", str(output)])
    assert written.exit_code == 0, written.output
    assert json.loads(output.read_text(encoding="utf-8")) == json.loads(printed.stdout)


def test_invalid_documents_exit_nonzero(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    runner = CliRunner()
    broken = tmp_path / "broken.json"
    broken.write_text('{"type": "package", "id": "package-notauuid"}', encoding="utf-8")

    assert runner.invoke(app, ["validate", str(broken)]).exit_code == 1
    assert runner.invoke(app, ["validate", str(tmp_path / "missing.json")]).exit_code == 1
    assert runner.invoke(app, ["summary", str(broken)]).exit_code == 1


def test_env_file_overrides_settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    _env(monkeypatch, tmp_path)
    (tmp_path / ".env").write_text("MAEC_RESOLVER_POLICY=structural\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["show-settings"])

    assert result.exit_code == 0, result.output
    assert "structural" in result.stdout
    assert "test" in result.stdout
    reset_container()
