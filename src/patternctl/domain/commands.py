"""Remote-control dispatch table (Command pattern).

A :class:`CommandTable` maps free-form button tokens to immutable
:class:`DeviceCommand` values.  Pressing a button that was never
registered is an ordinary outcome, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Protocol

from patternctl.domain.devices import Device, DeviceAction

logger = logging.getLogger(__name__)

UNASSIGNED_MESSAGE = "No command assigned to that button"


class Command(Protocol):
    def execute(self) -> str: ...

    def describe(self) -> str: ...


@dataclass(frozen=True)
class DeviceCommand:
    """Perform one action on one receiver.  Fixed at construction."""

    receiver: Device
    action: DeviceAction
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "action", DeviceAction(self.action))

    def execute(self) -> str:
        return self.receiver.perform(self.action)

    def describe(self) -> str:
        return self.label or f"Turn {self.receiver.kind} {self.action}"


class DispatchStatus(StrEnum):
    EXECUTED = "executed"
    UNASSIGNED = "unassigned"


@dataclass(frozen=True)
class DispatchOutcome:
    token: str
    status: DispatchStatus
    message: str
    command: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "token": self.token,
            "status": self.status.value,
            "command": self.command,
            "message": self.message,
        }


class CommandTable:
    """Button token -> command bindings.  Last registration wins."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    def register(self, token: str, command: Command) -> None:
        if token in self._commands:
            logger.debug("Rebinding button %r to %s", token, command.describe())
        self._commands[token] = command

    def invoke(self, token: str) -> DispatchOutcome:
        command = self._commands.get(token)
        if command is None:
            logger.debug("Button %r has no binding", token)
            return DispatchOutcome(token, DispatchStatus.UNASSIGNED, UNASSIGNED_MESSAGE)
        message = command.execute()
        logger.debug("Button %r executed %s", token, command.describe())
        return DispatchOutcome(
            token,
            DispatchStatus.EXECUTED,
            message,
            command=command.describe(),
        )

    def bindings(self) -> dict[str, Command]:
        """Snapshot of the current bindings in registration order."""
        return dict(self._commands)

    def __contains__(self, token: object) -> bool:
        return token in self._commands

    def __len__(self) -> int:
        return len(self._commands)
