"""Command receivers: simple devices with two mutually exclusive actions.

Devices report every action they perform, including a repeat of the
state they are already in.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar


class DeviceAction(StrEnum):
    """The two actions every device exposes."""

    ON = "on"
    OFF = "off"


class Device:
    """Base receiver.  Subclasses provide the messages and a ``kind`` key."""

    kind: ClassVar[str]
    on_message: ClassVar[str]
    off_message: ClassVar[str]

    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return self.on_message

    def turn_off(self) -> str:
        self.is_on = False
        return self.off_message

    def perform(self, action: DeviceAction) -> str:
        if action is DeviceAction.ON:
            return self.turn_on()
        if action is DeviceAction.OFF:
            return self.turn_off()
        raise ValueError(f"Unknown device action: {action!r}")

    def __repr__(self) -> str:
        state = "on" if self.is_on else "off"
        return f"{type(self).__name__}({state})"


class Light(Device):
    kind = "light"
    on_message = "The light is on"
    off_message = "The light is off"


class Fan(Device):
    kind = "fan"
    on_message = "The fan is on"
    off_message = "The fan is off"


DEVICE_TYPES: dict[str, type[Device]] = {
    Light.kind: Light,
    Fan.kind: Fan,
}


def create_devices() -> dict[str, Device]:
    """One instance of every known device, keyed by kind."""
    return {kind: device_cls() for kind, device_cls in DEVICE_TYPES.items()}
