"""ConnectionService — drives the single connection guard.

The guard is never looked up globally; callers hand in a provider that
returns the process-wide handle (``AppContext.connection`` in the CLI).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from patternctl.domain.connection import MESSAGES, ConnectionGuard, ConnectionStatus
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings


def _step(action: str, status: ConnectionStatus) -> dict[str, str]:
    return {"action": action, "status": status.value, "message": MESSAGES[status]}


class ConnectionService(BaseService):
    def __init__(
        self,
        settings: PatternSettings,
        provider: Callable[[], ConnectionGuard],
    ) -> None:
        super().__init__(settings)
        self._provider = provider

    def connect(self) -> ServiceResult:
        guard = self._provider()
        return ServiceResult(
            ok=True,
            op="connection",
            data={"name": guard.name, "steps": [_step("connect", guard.connect())]},
        )

    def disconnect(self) -> ServiceResult:
        guard = self._provider()
        return ServiceResult(
            ok=True,
            op="connection",
            data={"name": guard.name, "steps": [_step("disconnect", guard.disconnect())]},
        )

    def demo(self) -> ServiceResult:
        """Connect, connect again through a second lookup, disconnect, reconnect."""
        first = self._provider()
        steps = [_step("connect", first.connect())]

        second = self._provider()
        steps.append(_step("connect", second.connect()))
        same_instance = first is second

        steps.append(_step("disconnect", first.disconnect()))
        steps.append(_step("connect", second.connect()))

        return ServiceResult(
            ok=True,
            op="connection",
            data={
                "name": first.name,
                "same_instance": same_instance,
                "connected": second.is_connected,
                "steps": steps,
            },
        )
