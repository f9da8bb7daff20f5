# tests/test_cli.py

from __future__ import annotations

import json

from typer.testing import CliRunner

from gedcom_graph.cli.app import app
from gedcom_graph.utils import mock_file_path

runner = CliRunner()

FAMILY = str(mock_file_path("family.ged"))
FICTIONAL = str(mock_file_path("fictional.ged"))


def test_stats_command() -> None:
    result = runner.invoke(app, ["stats", FAMILY])
    assert result.exit_code == 0
    assert "Individuals" in result.output
    assert "GREGORIAN" in result.output


def test_find_command() -> None:
    result = runner.invoke(app, ["find", FAMILY, "jones"])
    assert result.exit_code == 0
    assert "@I2@" in result.output

    result = runner.invoke(app, ["find", FAMILY, "zebedee"])
    assert result.exit_code == 0
    assert "No individuals match" in result.output


def test_roots_command() -> None:
    result = runner.invoke(app, ["roots", FAMILY])
    assert result.exit_code == 0
    assert "3 root individual(s)" in result.output


def test_relatives_command() -> None:
    result = runner.invoke(app, ["relatives", FAMILY, "@I3@"])
    assert result.exit_code == 0
    for expected in ("father", "mother", "spouse", "child", "sibling"):
        assert expected in result.output


def test_unknown_individual_exits_with_error() -> None:
    result = runner.invoke(app, ["relatives", FAMILY, "@NOPE@"])
    assert result.exit_code == 1
    assert "Individual not found" in result.output


def test_ancestors_and_descendants_commands() -> None:
    result = runner.invoke(app, ["ancestors", FAMILY, "@I6@", "--depth", "1"])
    assert result.exit_code == 0
    assert "Robert Smith Jr." in result.output
    assert "John Smith" not in result.output

    result = runner.invoke(app, ["descendants", FAMILY, "@I1@"])
    assert result.exit_code == 0
    assert "Daniel Smith" in result.output


def test_age_command_with_fictional_date() -> None:
    result = runner.invoke(app, ["age", FICTIONAL, "@I1@", "--calendar", "AG", "--year", "10191"])
    assert result.exit_code == 0
    assert "Paul Atreides: 16" in result.output


def test_age_command_without_current_date() -> None:
    result = runner.invoke(app, ["age", FICTIONAL, "@I1@"])
    assert result.exit_code == 0
    assert "cannot be computed" in result.output


def test_age_command_rejects_bad_month() -> None:
    result = runner.invoke(
        app, ["age", FICTIONAL, "@I1@", "--calendar", "AG", "--year", "10191", "--month", "13"]
    )
    assert result.exit_code == 2


def test_export_command_to_file(tmp_path) -> None:
    out = tmp_path / "family.json"
    result = runner.invoke(app, ["export", FAMILY, "--out", str(out), "--pretty"])
    assert result.exit_code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["counts"]["individuals"] == 6


def test_missing_file_is_rejected(tmp_path) -> None:
    result = runner.invoke(app, ["stats", str(tmp_path / "missing.ged")])
    assert result.exit_code != 0


def test_depth_is_capped_by_configured_limit(tmp_path) -> None:
    lines = ["0 HEAD", "1 CHAR UTF-8"]
    for k in range(30):
        lines += [f"0 @I{k}@ INDI", f"1 NAME Gen{k} /Line/"]
        if k:
            lines.append(f"1 FAMC @F{k}@")
    for k in range(1, 30):
        lines += [f"0 @F{k}@ FAM", f"1 HUSB @I{k - 1}@", f"1 CHIL @I{k}@"]
    lines.append("0 TRLR")
    path = tmp_path / "line.ged"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    result = runner.invoke(app, ["ancestors", str(path), "@I29@", "--depth", "2000"])
    assert result.exit_code == 0
    assert "Depth limited to 20 generations" in result.output
    assert "Gen9 Line @I9@" in result.output
    assert "Gen8 Line @I8@" not in result.output
