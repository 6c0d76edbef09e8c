"""Tests for the command dispatch table."""

import pytest

from patternctl.domain.commands import (
    UNASSIGNED_MESSAGE,
    CommandTable,
    DeviceCommand,
    DispatchStatus,
)
from patternctl.domain.devices import DeviceAction, Fan, Light


class CountingCommand:
    """Command double recording how often it ran."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.calls = 0

    def execute(self) -> str:
        self.calls += 1
        return f"{self.name} ran"

    def describe(self) -> str:
        return self.name


@pytest.fixture
def light() -> Light:
    return Light()


@pytest.fixture
def table(light: Light) -> CommandTable:
    t = CommandTable()
    t.register("1", DeviceCommand(light, DeviceAction.ON))
    t.register("2", DeviceCommand(light, DeviceAction.OFF))
    return t


class TestDeviceCommand:
    def test_execute_acts_on_receiver(self, light: Light) -> None:
        assert DeviceCommand(light, DeviceAction.ON).execute() == "The light is on"
        assert light.is_on

    def test_immutable(self, light: Light) -> None:
        cmd = DeviceCommand(light, DeviceAction.ON)
        with pytest.raises(AttributeError):
            cmd.action = DeviceAction.OFF  # type: ignore[misc]

    def test_describe_defaults_from_receiver(self) -> None:
        assert DeviceCommand(Fan(), DeviceAction.OFF).describe() == "Turn fan off"

    def test_describe_prefers_label(self, light: Light) -> None:
        assert DeviceCommand(light, DeviceAction.ON, label="Lights!").describe() == "Lights!"

    def test_string_action_is_coerced(self, light: Light) -> None:
        command = DeviceCommand(light, "on")  # type: ignore[arg-type]
        assert command.action is DeviceAction.ON
        assert command.execute() == "The light is on"
        assert light.is_on is True

    @pytest.mark.parametrize("action", ["ON", "toggle", ""])
    def test_unknown_action_rejected(self, light: Light, action: str) -> None:
        with pytest.raises(ValueError):
            DeviceCommand(light, action)  # type: ignore[arg-type]


class TestCommandTable:
    def test_invoke_bound_token(self, table: CommandTable, light: Light) -> None:
        outcome = table.invoke("1")
        assert outcome.status is DispatchStatus.EXECUTED
        assert outcome.message == "The light is on"
        assert outcome.command == "Turn light on"
        assert light.is_on

    def test_invoke_unbound_token(self, table: CommandTable) -> None:
        outcome = table.invoke("9")
        assert outcome.status is DispatchStatus.UNASSIGNED
        assert outcome.message == UNASSIGNED_MESSAGE
        assert outcome.command is None

    def test_invoke_on_empty_table_never_raises(self) -> None:
        assert CommandTable().invoke("").status is DispatchStatus.UNASSIGNED

    def test_register_then_invoke_runs_once(self) -> None:
        table = CommandTable()
        cmd = CountingCommand("probe")
        table.register("x", cmd)
        table.invoke("x")
        assert cmd.calls == 1

    def test_reregister_replaces(self) -> None:
        table = CommandTable()
        old, new = CountingCommand("old"), CountingCommand("new")
        table.register("1", old)
        table.register("1", new)
        outcome = table.invoke("1")
        assert outcome.message == "new ran"
        assert (old.calls, new.calls) == (0, 1)
        assert len(table) == 1

    def test_tokens_are_free_form(self) -> None:
        table = CommandTable()
        table.register("power button", CountingCommand("power"))
        assert "power button" in table
        assert table.invoke("power button").status is DispatchStatus.EXECUTED

    def test_bindings_snapshot_in_registration_order(self, table: CommandTable) -> None:
        bindings = table.bindings()
        assert list(bindings) == ["1", "2"]
        bindings.clear()
        assert len(table) == 2

    def test_to_dict(self, table: CommandTable) -> None:
        assert table.invoke("2").to_dict() == {
            "token": "2",
            "status": "executed",
            "command": "Turn light off",
            "message": "The light is off",
        }
