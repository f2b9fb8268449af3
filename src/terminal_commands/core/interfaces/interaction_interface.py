from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from terminal_commands.core.di.container import ServiceCollection
    from terminal_commands.core.domain.argument_stream import ArgumentStream
    from terminal_commands.core.domain.display import DisplayResponse
    from terminal_commands.core.interfaces.di_interface import IServiceProvider


class ITerminalInteraction(ABC):
    """A continuation that consumes the next line of terminal input.

    Returning an interaction from a command registers it for the following
    dispatch cycle and shows its ``prompt`` immediately.
    """

    @property
    @abstractmethod
    def services(self) -> ServiceCollection:
        """Services owned by the interaction.

        Each cycle the dispatcher resolves from a copy of this collection
        with its default services added; interaction-owned registrations win.
        The collection itself is never modified by the dispatcher.
        """

    @property
    @abstractmethod
    def prompt(self) -> DisplayResponse:
        """Response shown when the interaction is registered."""

    @abstractmethod
    def handle_terminal_response(
        self, arguments: ArgumentStream, services: IServiceProvider | None = None
    ) -> Any:
        """Handle the next input line.

        Args:
            arguments: Stream over every token of the line
            services: Provider for this cycle; when omitted, the interaction
                resolves from its own collection only

        Returns:
            An ``InteractionOutcome``, or a bare result where ``None`` means
            the interaction declined to handle the input
        """
