"""
Command overload implementation.

A ``CommandOverload`` wraps one callable registered under a command name.
Several overloads may share a name; the dispatcher tries every allowed
overload whose parameters bind and runs them in priority order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from terminal_commands.core.common.exceptions import CommandRegistrationError
from terminal_commands.core.domain.argument_stream import ArgumentStream
from terminal_commands.core.domain.command_results import (
    DisplayResult,
    InteractionOutcome,
    InteractionRequest,
    InteractionStatus,
    NoResult,
    PayloadResult,
)
from terminal_commands.core.domain.commands.attributes import get_command_metadata
from terminal_commands.core.domain.commands.binding import (
    bind_parameters,
    count_stream_parameters,
    inspect_parameters,
)
from terminal_commands.core.domain.commands.converters import ArgumentConverterRegistry
from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.interfaces.di_interface import IServiceProvider
from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction

logger = logging.getLogger(__name__)

Invoker = Callable[[], Any]


class CommandOverload:
    """One registered variant of a terminal command."""

    def __init__(
        self,
        name: str,
        callback: Callable[..., Any],
        *,
        priority: int = 0,
        description: str = "",
        syntax: str = "",
        category: str = "",
        clear_text: bool = True,
        hidden: bool = False,
        predicates: Iterable[Callable[[], bool]] = (),
        converters: ArgumentConverterRegistry | None = None,
    ) -> None:
        if not isinstance(name, str) or not name.strip():
            raise CommandRegistrationError("Command name must be a non-empty string.")
        if not callable(callback):
            raise CommandRegistrationError(
                "Command callback must be callable.", command_name=name
            )

        self.name = name.strip()
        self.callback = callback
        self.priority = int(priority)
        self.description = description
        self.syntax = syntax
        self.category = category
        self.clear_text = clear_text
        self.hidden = hidden
        self._predicates = list(predicates)
        self._converters = converters
        self._parameters = inspect_parameters(callback, converters)
        self._argument_count = count_stream_parameters(self._parameters)

    @classmethod
    def from_callable(
        cls,
        func: Callable[..., Any],
        *,
        converters: ArgumentConverterRegistry | None = None,
    ) -> CommandOverload:
        """Build an overload from a callable decorated with ``terminal_command``.

        Raises:
            CommandRegistrationError: If ``func`` carries no command name
        """
        metadata = get_command_metadata(func)
        if metadata is None or not metadata.is_command:
            raise CommandRegistrationError(
                f"{getattr(func, '__qualname__', func)!r} is not decorated with terminal_command"
            )
        return cls(
            metadata.name or "",
            func,
            priority=metadata.priority,
            description=metadata.description,
            syntax=metadata.syntax,
            category=metadata.category,
            clear_text=metadata.clear_text,
            hidden=metadata.hidden,
            predicates=metadata.predicates,
            converters=converters,
        )

    def __repr__(self) -> str:
        return (
            f"<CommandOverload name={self.name!r} priority={self.priority} "
            f"argument_count={self.argument_count}>"
        )

    @property
    def argument_count(self) -> int:
        """Number of parameters bound from the argument stream."""
        return self._argument_count

    @property
    def usage(self) -> str:
        return f"{self.name} {self.syntax}".strip()

    def check_allowed(self) -> bool:
        return all(predicate() for predicate in self._predicates)

    def try_create_invoker(
        self, arguments: ArgumentStream, services: IServiceProvider
    ) -> Invoker | None:
        """Bind this overload's parameters.

        Returns:
            A zero-argument invoker running the command, or None when the
            arguments do not fit this overload
        """
        bound = bind_parameters(self._parameters, arguments, services, self._converters)
        if bound is None:
            return None

        def invoke() -> Any:
            result = self.callback(*bound.args, **bound.kwargs)
            return self._apply_display_options(result)

        return invoke

    def _apply_display_options(self, result: Any) -> Any:
        if isinstance(result, InteractionOutcome):
            if result.status is not InteractionStatus.SUCCEEDED:
                logger.debug("Command '%s' returned a %s outcome", self.name, result.status.value)
                return None
            result = result.value
        if isinstance(result, PayloadResult):
            result = result.payload
        if result is None or isinstance(
            result,
            (
                DisplayResponse,
                ITerminalInteraction,
                DisplayResult,
                InteractionRequest,
                NoResult,
            ),
        ):
            return result
        return DisplayResponse(display_text=str(result), clear_previous_text=self.clear_text)
