"""Database connection guard (Singleton, redesigned).

There is no private static instance here.  The process owns exactly one
guard through a lazily initialized handle (see
``AppContext.connection``) and passes it to whoever needs it.  The guard
itself only enforces "one live connection at a time".
"""

from __future__ import annotations

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)


class ConnectionStatus(StrEnum):
    CONNECTED = "connected"
    ALREADY_ACTIVE = "already_active"
    DISCONNECTED = "disconnected"


MESSAGES: dict[ConnectionStatus, str] = {
    ConnectionStatus.CONNECTED: "Connected to the database",
    ConnectionStatus.ALREADY_ACTIVE: "A connection is already active",
    ConnectionStatus.DISCONNECTED: "Disconnected from the database",
}


class ConnectionGuard:
    def __init__(self, name: str = "main") -> None:
        self.name = name
        self._connected = False

    @property
    def is_connected(self) -> bool:
        return self._connected

    def connect(self) -> ConnectionStatus:
        if self._connected:
            logger.debug("Connection %s already open", self.name)
            return ConnectionStatus.ALREADY_ACTIVE
        self._connected = True
        logger.debug("Connection %s opened", self.name)
        return ConnectionStatus.CONNECTED

    def disconnect(self) -> ConnectionStatus:
        self._connected = False
        logger.debug("Connection %s closed", self.name)
        return ConnectionStatus.DISCONNECTED
