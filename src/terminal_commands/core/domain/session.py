from __future__ import annotations

import uuid
from typing import Any

from terminal_commands.core.domain.interaction_stack import InteractionStack
from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction


class TerminalSession:
    """The host-side session a dispatch cycle executes against.

    Owns the terminal handle and the session's pending interactions, so that
    separate sessions never share continuation state.
    """

    def __init__(
        self,
        terminal: Any = None,
        *,
        session_id: str | None = None,
        interactions: InteractionStack | None = None,
    ) -> None:
        self.session_id = session_id or uuid.uuid4().hex
        self.terminal = terminal
        self.interactions = interactions if interactions is not None else InteractionStack()

    def __repr__(self) -> str:
        return f'<TerminalSession session_id="{self.session_id}">'

    def register_interaction(self, interaction: ITerminalInteraction) -> None:
        """Schedule ``interaction`` to receive the next input line."""
        self.interactions.push(interaction)

    @property
    def has_pending_interaction(self) -> bool:
        return bool(self.interactions)
