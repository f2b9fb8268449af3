from __future__ import annotations

import logging

from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction

logger = logging.getLogger(__name__)


class InteractionStack:
    """Last-in-first-out stack of pending interactions for one session.

    Only the top entry is ever consulted, and it is removed when consulted.
    Entries below it remain until they become the top themselves.
    """

    def __init__(self) -> None:
        self._items: list[ITerminalInteraction] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, interaction: ITerminalInteraction) -> None:
        if not isinstance(interaction, ITerminalInteraction):
            raise TypeError(
                f"Expected an ITerminalInteraction, got {type(interaction).__name__}"
            )
        self._items.append(interaction)
        logger.debug(
            "Registered interaction %s (depth=%d)",
            type(interaction).__name__,
            len(self._items),
        )

    def pop(self) -> ITerminalInteraction | None:
        """Remove and return the top interaction, or None when empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> ITerminalInteraction | None:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()
