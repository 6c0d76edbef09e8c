"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, patternctl.toml only contains
overrides.  With no config file at all, every demo runs with the layout of
the classic textbook examples.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from patternctl.domain.approval import build_tiers
from patternctl.domain.devices import DeviceAction

# --- patternctl.toml sections ---


class TierConfig(BaseModel):
    """One entry of ``[approval] tiers``.

    Only the upper bound is configured; the lower bound of each tier is the
    upper bound of the one before it (0 for the first tier), so configured
    chains are contiguous by construction.
    """

    model_config = {"frozen": True}

    name: str
    upper: int | None = None


def _default_tiers() -> list[TierConfig]:
    return [
        TierConfig(name="Supervisor", upper=1000),
        TierConfig(name="Manager", upper=5000),
        TierConfig(name="Director"),
    ]


class ApprovalConfig(BaseModel):
    """[approval] section."""

    model_config = {"frozen": True}

    tiers: list[TierConfig] = Field(default_factory=_default_tiers)
    demo_amounts: list[int] = Field(default_factory=lambda: [500, 3000, 7000])

    @field_validator("tiers")
    @classmethod
    def _tiers_form_a_chain(cls, tiers: list[TierConfig]) -> list[TierConfig]:
        # Raises ValueError for empty, overlapping or misplaced open tiers.
        build_tiers((t.name, t.upper) for t in tiers)
        return tiers


class ButtonConfig(BaseModel):
    """One entry of ``[remote.buttons]``."""

    model_config = {"frozen": True}

    device: Literal["light", "fan"]
    action: DeviceAction
    label: str | None = None


def _default_buttons() -> dict[str, ButtonConfig]:
    return {
        "1": ButtonConfig(device="light", action=DeviceAction.ON, label="Turn light on"),
        "2": ButtonConfig(device="light", action=DeviceAction.OFF, label="Turn light off"),
        "3": ButtonConfig(device="fan", action=DeviceAction.ON, label="Turn fan on"),
        "4": ButtonConfig(device="fan", action=DeviceAction.OFF, label="Turn fan off"),
    }


class RemoteConfig(BaseModel):
    """[remote] section.

    A ``[remote.buttons]`` table replaces the default layout entirely.
    """

    model_config = {"frozen": True}

    buttons: dict[str, ButtonConfig] = Field(default_factory=_default_buttons)


class TreeConfig(BaseModel):
    """[tree] section."""

    model_config = {"frozen": True}

    max_depth: int | None = None
    show_hidden: bool = False


class ConnectionConfig(BaseModel):
    """[connection] section."""

    model_config = {"frozen": True}

    name: str = "main"
