"""RemoteService — the remote control built from ``[remote.buttons]``.

One service instance owns one :class:`CommandTable` and one instance of
each device, so buttons bound to the same device share its state across
presses (the interactive loop relies on this).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from patternctl.domain.commands import CommandTable, DeviceCommand, DispatchStatus
from patternctl.domain.devices import Device, create_devices
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult
from patternctl.services.telemetry import traced

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings


class RemoteService(BaseService):
    def __init__(
        self,
        settings: PatternSettings,
        devices: dict[str, Device] | None = None,
    ) -> None:
        super().__init__(settings)
        self.devices = devices if devices is not None else create_devices()
        self.table = CommandTable()
        for token, button in settings.remote.buttons.items():
            command = DeviceCommand(
                receiver=self.devices[button.device],
                action=button.action,
                label=button.label,
            )
            self.table.register(token, command)
        self._presses = 0
        self._unassigned = 0

    @traced
    def press(self, token: str) -> ServiceResult:
        """Invoke the command bound to *token*; unbound tokens are reported."""
        outcome = self.table.invoke(token)
        self._presses += 1
        if outcome.status is DispatchStatus.UNASSIGNED:
            self._unassigned += 1
        data = outcome.to_dict()
        button = self._settings.remote.buttons.get(token)
        data["device"] = button.device if button is not None else None
        return ServiceResult(ok=True, op="press_button", data=data)

    def list_buttons(self) -> ServiceResult:
        items = [
            {"token": token, "command": command.describe()}
            for token, command in self.table.bindings().items()
        ]
        return ServiceResult(
            ok=True,
            op="list_buttons",
            data={"items": items, "count": len(items)},
        )

    def summary(self) -> ServiceResult:
        """Totals for the presses handled by this instance."""
        return ServiceResult(
            ok=True,
            op="remote_session",
            data={
                "presses": self._presses,
                "unassigned": self._unassigned,
                "devices": {kind: d.is_on for kind, d in self.devices.items()},
            },
        )
