"""Tests for the ttyask CLI commands."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from ttyask.cli.main import build_demo, cli
from ttyask.config import PromptConfig
from ttyask.inquirer import Inquirer
from ttyask.terminal.scripted import ScriptedTerminal


def _write(tmp_path: Path, data: dict) -> str:
    path = tmp_path / "questions.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        result = CliRunner().invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "interactive terminal questionnaires" in result.output
        assert "demo" in result.output
        assert "run" in result.output

    def test_version(self) -> None:
        result = CliRunner().invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output


# ---------------------------------------------------------------------------
# run command
# ---------------------------------------------------------------------------


class TestRunCommand:
    def test_prints_answers(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            {
                "questions": [
                    {"key": "name", "prompt": "Name?"},
                    {"key": "age", "prompt": "Age?", "type": "integer"},
                ]
            },
        )
        result = CliRunner().invoke(cli, ["run", path, "--no-color"], input="Ada\nold\n36\n")
        assert result.exit_code == 0
        assert "name: Ada\nage: 36\n" in result.output

    def test_json_output(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {"questions": [{"key": "name", "prompt": "Name?"}]})
        result = CliRunner().invoke(cli, ["run", path, "--json"], input="Ada\n")
        assert result.exit_code == 0
        payload = result.output[result.output.index("{"):]
        assert json.loads(payload) == {"name": "Ada"}

    def test_closed_input_exits_cleanly(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {"questions": [{"key": "name", "prompt": "Name?"}]})
        result = CliRunner().invoke(cli, ["run", path], input="")
        assert result.exit_code == 0
        assert "name:" not in result.output

    def test_bad_questionnaire(self, tmp_path: Path) -> None:
        path = _write(tmp_path, {"questions": [{"key": "c", "prompt": "p", "choices": []}]})
        result = CliRunner().invoke(cli, ["run", path])
        assert result.exit_code == 1
        assert "one or more choices" in result.output

    def test_missing_file(self, tmp_path: Path) -> None:
        result = CliRunner().invoke(cli, ["run", str(tmp_path / "nope.json")])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# demo questionnaire
# ---------------------------------------------------------------------------


class TestDemo:
    def test_demo_help(self) -> None:
        result = CliRunner().invoke(cli, ["demo", "--help"])
        assert result.exit_code == 0
        assert "cake-order" in result.output

    def test_demo_questionnaire(self) -> None:
        term = ScriptedTerminal(
            lines=["order", "three", "3", "maybe", "y", "555", "123456789"],
            keys="\r" + "\x1b[A\r" + "hunter2\r",
        )
        inquirer = build_demo(Inquirer("demo", terminal=term, config=PromptConfig(color=False)))
        inquirer.ask()
        assert inquirer.answers() == {
            "query": "order",
            "birthday": "yes",
            "candles": "3",
            "type": "Red velvet",
            "delivery": "y",
            "number": "123456789",
            "password": "hunter2",
        }
