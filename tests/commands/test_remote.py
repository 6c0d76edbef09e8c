"""Tests for the remote command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from patternctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestPress:
    def test_light_on(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "press", "1"])
        assert result.exit_code == 0
        assert "The light is on" in result.output

    def test_unassigned_is_not_an_error(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "press", "9"])
        assert result.exit_code == 0
        assert "No command assigned to that button" in result.output

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "remote", "press", "4"])
        data = json.loads(result.output)
        assert data["data"] == {
            "token": "4",
            "status": "executed",
            "command": "Turn fan off",
            "message": "The fan is off",
            "device": "fan",
        }


@pytest.mark.usefixtures("_isolated_cwd")
class TestButtons:
    def test_menu(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "buttons"])
        assert result.exit_code == 0
        assert "1. Turn light on" in result.output
        assert "4. Turn fan off" in result.output


@pytest.mark.usefixtures("_isolated_cwd")
class TestRun:
    def test_loop_until_no(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "run"], input="1\ny\n9\n\n3\nN\n")
        assert result.exit_code == 0, result.output
        assert result.output.count("Press a remote control button:") == 3
        assert "The light is on" in result.output
        assert "No command assigned to that button" in result.output
        assert "The fan is on" in result.output
        assert "presses: 3" in result.output
        assert "unassigned: 1" in result.output

    def test_any_answer_but_n_continues(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "run"], input="1\nmaybe\n1\nn\n")
        assert result.exit_code == 0
        assert result.output.count("The light is on") == 2

    def test_state_carries_across_presses(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["remote", "run"], input="3\ny\n1\nn\n")
        assert "fan: on" in result.output
        assert "light: on" in result.output

    def test_refuses_without_prompts(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--no-interact", "remote", "run"])
        assert result.exit_code == 1
        assert "remote press" in result.output
