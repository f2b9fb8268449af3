"""
Ready-made terminal interactions.

``TerminalInteraction`` hands the next input line to a callback whose
parameters are bound exactly like a command's. ``ConfirmInteraction`` asks a
yes/no question.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from terminal_commands.core.di.container import ServiceCollection
from terminal_commands.core.domain.argument_stream import ArgumentStream
from terminal_commands.core.domain.command_results import InteractionOutcome
from terminal_commands.core.domain.commands.binding import (
    bind_parameters,
    inspect_parameters,
)
from terminal_commands.core.domain.commands.converters import ArgumentConverterRegistry
from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.interfaces.di_interface import IServiceProvider
from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction

logger = logging.getLogger(__name__)

CONFIRM_WORDS = frozenset({"y", "yes", "c", "confirm"})
DENY_WORDS = frozenset({"n", "no", "d", "deny"})


def _as_prompt(prompt: DisplayResponse | str) -> DisplayResponse:
    if isinstance(prompt, DisplayResponse):
        return prompt
    return DisplayResponse(display_text=prompt)


class TerminalInteraction(ITerminalInteraction):
    """Interaction that forwards the next input line to a handler callable."""

    def __init__(
        self,
        prompt: DisplayResponse | str,
        handler: Callable[..., Any],
        services: ServiceCollection | None = None,
        converters: ArgumentConverterRegistry | None = None,
    ) -> None:
        self._prompt = _as_prompt(prompt)
        self._handler = handler
        self._services = services if services is not None else ServiceCollection()
        self._converters = converters
        self._parameters = inspect_parameters(handler, converters)

    @property
    def services(self) -> ServiceCollection:
        return self._services

    @property
    def prompt(self) -> DisplayResponse:
        return self._prompt

    def handle_terminal_response(
        self, arguments: ArgumentStream, services: IServiceProvider | None = None
    ) -> Any:
        provider = services if services is not None else self._services.build_service_provider()
        bound = bind_parameters(self._parameters, arguments, provider, self._converters)
        if bound is None:
            logger.debug("Interaction handler parameters did not bind; declining")
            return InteractionOutcome.declined()
        return self._handler(*bound.args, **bound.kwargs)


class ConfirmInteraction(ITerminalInteraction):
    """Yes/no question; any other answer is declined and falls through."""

    def __init__(
        self,
        prompt: DisplayResponse | str,
        on_confirm: Callable[[], Any],
        on_deny: Callable[[], Any] | None = None,
    ) -> None:
        self._prompt = _as_prompt(prompt)
        self._on_confirm = on_confirm
        self._on_deny = on_deny
        self._services = ServiceCollection()

    @property
    def services(self) -> ServiceCollection:
        return self._services

    @property
    def prompt(self) -> DisplayResponse:
        return self._prompt

    def handle_terminal_response(
        self, arguments: ArgumentStream, services: IServiceProvider | None = None
    ) -> Any:
        answer = arguments.peek()
        if answer is None:
            return InteractionOutcome.declined()

        word = answer.strip().lower()
        if word in CONFIRM_WORDS:
            arguments.read_next()
            return self._on_confirm()
        if word in DENY_WORDS:
            arguments.read_next()
            if self._on_deny is None:
                return DisplayResponse(display_text="Cancelled.")
            return self._on_deny()
        return InteractionOutcome.declined()
