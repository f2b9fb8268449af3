from __future__ import annotations

from typing import Any

from pydantic import ConfigDict

from terminal_commands.core.interfaces.model_bases import DomainModel


class DisplayResponse(DomainModel):
    """The terminal-visible response of a dispatch cycle."""

    model_config = ConfigDict(frozen=True)

    display_text: str = ""
    clear_previous_text: bool = True

    @classmethod
    def from_value(cls, value: Any) -> DisplayResponse:
        """Wrap an arbitrary payload into a response showing its textual form."""
        return cls(display_text=str(value))
