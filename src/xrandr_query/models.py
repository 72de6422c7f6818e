from __future__ import annotations

from pydantic import BaseModel, Field, computed_field


class Mode(BaseModel):
    """One resolution line listed under an output.

    ``default`` mirrors the trailing ``+`` xrandr prints for the preferred
    mode, ``active`` the ``*`` of the mode currently in use.
    """

    model_config = {"frozen": True}

    name: str = Field(min_length=1, description="Mode name, e.g. 1920x1080")
    default: bool = Field(default=False, description="Preferred mode of the output")
    active: bool = Field(default=False, description="Mode currently driving the output")


class Output(BaseModel):
    """A display connector and the modes reported for it."""

    name: str = Field(min_length=1, description="Connector name, e.g. eDP-1")
    connected: bool = Field(description="Whether a display is attached")
    modes: list[Mode] = Field(
        default_factory=list,
        description="Modes in the order xrandr listed them",
    )

    @computed_field
    @property
    def active_mode(self) -> Mode | None:
        """First mode marked active, if any."""
        for mode in self.modes:
            if mode.active:
                return mode
        return None

    @computed_field
    @property
    def default_mode(self) -> Mode | None:
        """First mode marked as preferred, if any."""
        for mode in self.modes:
            if mode.default:
                return mode
        return None

    @property
    def is_active(self) -> bool:
        return self.connected and self.active_mode is not None
