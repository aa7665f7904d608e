from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from namecombo.cli import app


@pytest.fixture(autouse=True)
def _no_env_locale(monkeypatch: Any) -> None:
    monkeypatch.delenv("NAMECOMBO_LOCALE", raising=False)


def test_unknown_combo() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Nickame", "--nickname", "Würzli"])
    assert result.exit_code == 2
    assert "illegal name combination" in result.stderr


def test_unknown_case() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Nickname", "--nickname", "Würzli", "-c", "vocative"])
    assert result.exit_code == 2
    assert "illegal grammatical case" in result.stderr


def test_unknown_gender() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Polite", "--gender", "martian"])
    assert result.exit_code == 2


def test_missing_names_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.yml"
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Name", "--names", str(missing)])
    assert result.exit_code == 3
    assert str(missing) in result.stderr


def test_unsupported_extension(tmp_path: Path) -> None:
    path = tmp_path / "names.bin"
    path.write_text("data", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Name", "--names", str(path)])
    assert result.exit_code == 3


@pytest.mark.parametrize(
    "name,body",
    [
        ("bad.json", "{not json"),
        ("bad.yml", "forenames: [a\nsurname: : :\n"),
    ],
)
def test_malformed_names_file(tmp_path: Path, name: str, body: str) -> None:
    path = tmp_path / name
    path.write_text(body, encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Name", "--names", str(path)])
    assert result.exit_code == 3
    assert str(path) in result.stderr


def test_bad_config(tmp_path: Path) -> None:
    bad_cfg = tmp_path / "bad.yml"
    bad_cfg.write_text("unknown: true\n", encoding="utf-8")
    runner = CliRunner()
    result = runner.invoke(
        app, ["render", "Nickname", "--nickname", "Würzli", "--config", str(bad_cfg)]
    )
    assert result.exit_code == 4


def test_missing_element() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Polite", "--surname", "Würzinger"])
    assert result.exit_code == 5
    assert "missing name element: gender" in result.stderr


def test_not_expressionable() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Polite", "--gender", "neutral", "-l", "de"])
    assert result.exit_code == 5
    assert "not expressionable" in result.stderr


def test_unsupported_locale() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["render", "Nickname", "--nickname", "Würzli", "-l", "fr"])
    assert result.exit_code == 5
    assert "unsupported locale" in result.stderr


def test_all_with_empty_record() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["all"])
    assert result.exit_code == 5
    assert "no combination applies" in result.stderr


def test_all_unsupported_locale() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["all", "--nickname", "Würzli", "-l", "fr"])
    assert result.exit_code == 5
