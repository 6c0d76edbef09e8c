"""Tests for format_result and OutputSettings."""

import json

from patternctl.output.formatters import OutputSettings, format_result
from patternctl.services.result import ServiceResult


def _press(message: str = "The light is on") -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="press_button",
        data={"token": "1", "status": "executed", "message": message, "device": "light"},
    )


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert (s.json_output, s.quiet, s.verbose) == (False, False, False)


class TestFormatResult:
    def test_json(self) -> None:
        data = json.loads(format_result(_press(), settings=OutputSettings(json_output=True)))
        assert data["ok"] is True
        assert data["data"]["message"] == "The light is on"

    def test_json_beats_quiet(self) -> None:
        out = format_result(_press(), settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(out)["op"] == "press_button"

    def test_quiet(self) -> None:
        assert format_result(_press(), settings=OutputSettings(quiet=True)) == "The light is on"

    def test_human_default(self) -> None:
        assert format_result(_press()) == "The light is on"

    def test_quiet_error(self) -> None:
        result = ServiceResult.failure("show_tree", "NOT_A_DIRECTORY", "Not a directory: x")
        out = format_result(result, settings=OutputSettings(quiet=True))
        assert out == "ERROR: show_tree: Not a directory: x"
