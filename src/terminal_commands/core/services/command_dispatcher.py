"""
Command dispatcher.

One call to ``try_execute`` is one dispatch cycle:

1. Tokenize the input line. No tokens means no result.
2. If the session has a pending interaction, pop it and let it handle the
   whole token list (the first token is data, not a command name). A
   failure is logged and discarded; an empty result falls through to 3.
3. Look up the overloads registered under the first token. Every allowed
   overload is offered the same argument stream in registration order;
   tokens consumed by an overload that then fails to bind stay consumed.
4. Run the bound candidates by priority, then argument count, and return
   the first non-empty response.

``None`` tells the host to fall back to its own command handling.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from terminal_commands.core.commands.tokenizer import CommandTokenizer
from terminal_commands.core.common.exceptions import InteractionError
from terminal_commands.core.config.app_config import AppConfig
from terminal_commands.core.di.container import ServiceCollection
from terminal_commands.core.domain.argument_stream import ArgumentStream
from terminal_commands.core.domain.command_results import (
    InteractionOutcome,
    InteractionStatus,
)
from terminal_commands.core.domain.commands.comparer import CandidateComparer
from terminal_commands.core.domain.commands.overload import CommandOverload
from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.interfaces.command_registry_interface import ICommandRegistry
from terminal_commands.core.interfaces.di_interface import IServiceProvider
from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction
from terminal_commands.core.services.result_converter import ResultConverter

logger = logging.getLogger(__name__)

Thunk = Callable[[], DisplayResponse | None]


class CommandDispatcher:
    """Resolves terminal input against registered commands and interactions."""

    def __init__(
        self,
        registry: ICommandRegistry,
        config: AppConfig | None = None,
        result_converter: ResultConverter | None = None,
        tokenizer: CommandTokenizer | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or AppConfig()
        self._converter = result_converter or ResultConverter()
        self._tokenizer = tokenizer or CommandTokenizer()

    @property
    def registry(self) -> ICommandRegistry:
        return self._registry

    @property
    def config(self) -> AppConfig:
        return self._config

    def register_interaction(
        self, session: TerminalSession, interaction: ITerminalInteraction
    ) -> None:
        """Push ``interaction`` so it receives the session's next input line."""
        session.register_interaction(interaction)

    def try_execute(self, raw_line: str, session: TerminalSession) -> DisplayResponse | None:
        """Run one dispatch cycle.

        Args:
            raw_line: The line of input as typed
            session: Session the command executes against

        Returns:
            The response to display, or None to fall through to the host
        """
        parts = self._tokenizer.tokenize(raw_line)
        if not parts:
            return None

        if session.interactions:
            response = self._try_interaction(parts, session)
            if response is not None:
                return response

        command_name, command_arguments = parts[0], parts[1:]
        overloads = self._registry.get_overloads(command_name)
        if not overloads:
            return None

        arguments = ArgumentStream(command_arguments)
        services = self._default_services(
            ServiceCollection(), arguments, session
        ).build_service_provider()

        candidates: list[tuple[CommandOverload, Thunk]] = []
        for overload in overloads:
            if not overload.check_allowed():
                continue

            invoker = self._create_invoker(overload, arguments, services)
            if invoker is None:
                continue

            candidates.append((overload, self._pass_through(overload, invoker, session)))

        for _, thunk in CandidateComparer.order(candidates):
            response = thunk()
            if response is not None:
                return response

        return None

    def _try_interaction(
        self, parts: list[str], session: TerminalSession
    ) -> DisplayResponse | None:
        interaction = session.interactions.pop()
        if interaction is None:
            return None

        try:
            # Interactions receive the would-be command name as ordinary data
            arguments = ArgumentStream(parts)
            services = self._default_services(interaction.services.copy(), arguments, session)

            outcome = InteractionOutcome.from_value(
                interaction.handle_terminal_response(
                    arguments, services.build_service_provider()
                )
            )
            if outcome.status is InteractionStatus.SUCCEEDED:
                return self._converter.convert(outcome.value, session.interactions)
        except InteractionError as e:
            outcome = InteractionOutcome.failed(e)
        except Exception as e:
            logger.warning(
                "An error has occurred while executing an interaction: %s",
                e,
                exc_info=self._config.debug,
            )
            return None

        if outcome.status is InteractionStatus.FAILED:
            logger.warning(
                "Interaction %s reported a failure: %s",
                type(interaction).__name__,
                outcome.error,
                exc_info=(
                    outcome.error
                    if self._config.debug and isinstance(outcome.error, BaseException)
                    else False
                ),
            )
        return None

    def _create_invoker(
        self,
        overload: CommandOverload,
        arguments: ArgumentStream,
        services: IServiceProvider,
    ) -> Callable[[], object] | None:
        if self._config.propagate_command_errors:
            return overload.try_create_invoker(arguments, services)
        try:
            return overload.try_create_invoker(arguments, services)
        except Exception as e:
            self._log_command_failure(overload, "binding", e)
            return None

    def _pass_through(
        self,
        overload: CommandOverload,
        invoker: Callable[[], object],
        session: TerminalSession,
    ) -> Thunk:
        def thunk() -> DisplayResponse | None:
            if self._config.propagate_command_errors:
                return self._converter.convert(invoker(), session.interactions)
            try:
                return self._converter.convert(invoker(), session.interactions)
            except Exception as e:
                self._log_command_failure(overload, "execution", e)
                return None

        return thunk

    def _log_command_failure(
        self, overload: CommandOverload, stage: str, error: Exception
    ) -> None:
        logger.warning(
            "Command '%s' failed during %s: %s",
            overload.name,
            stage,
            error,
            exc_info=self._config.debug,
        )

    @staticmethod
    def _default_services(
        services: ServiceCollection,
        arguments: ArgumentStream,
        session: TerminalSession,
    ) -> ServiceCollection:
        """Add the per-cycle services without replacing existing registrations."""
        services.with_services(
            arguments,
            session.terminal,
            arguments.arguments,
            session,
        )
        return services
