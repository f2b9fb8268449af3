"""
Application service registration.

Wires the dispatcher and its collaborators into a ``ServiceCollection``.
"""

from __future__ import annotations

import logging

from terminal_commands.core.commands.tokenizer import CommandTokenizer
from terminal_commands.core.config.app_config import AppConfig
from terminal_commands.core.di.container import ServiceCollection
from terminal_commands.core.domain.commands.converters import (
    ArgumentConverterRegistry,
    create_default_converters,
)
from terminal_commands.core.domain.commands.help_command import HelpCommands
from terminal_commands.core.domain.commands.registry import CommandRegistry, NameComparison
from terminal_commands.core.interfaces.command_registry_interface import ICommandRegistry
from terminal_commands.core.interfaces.di_interface import IServiceProvider
from terminal_commands.core.services.command_dispatcher import CommandDispatcher
from terminal_commands.core.services.result_converter import ResultConverter

logger = logging.getLogger(__name__)


def register_core_services(
    services: ServiceCollection,
    config: AppConfig | None = None,
    *,
    include_help: bool = True,
) -> ServiceCollection:
    """Register the dispatch services.

    Args:
        services: Collection to register into
        config: Application configuration; read from the environment when omitted
        include_help: Register the built-in ``help`` command

    Returns:
        The same collection, for chaining
    """
    app_config = config or AppConfig.from_env()
    services.add_instance(AppConfig, app_config)
    services.add_singleton(
        ArgumentConverterRegistry,
        implementation_factory=lambda _: create_default_converters(),
    )

    def _registry_factory(provider: IServiceProvider) -> CommandRegistry:
        comparison = (
            NameComparison.CASE_SENSITIVE
            if app_config.case_sensitive_names
            else NameComparison.CASE_INSENSITIVE
        )
        registry = CommandRegistry(
            comparison=comparison,
            converters=provider.get_required_service(ArgumentConverterRegistry),
        )
        if include_help:
            registry.register_from(HelpCommands(registry))
        return registry

    services.add_singleton(CommandRegistry, implementation_factory=_registry_factory)
    services.add_singleton(
        ICommandRegistry,
        implementation_factory=lambda provider: provider.get_required_service(CommandRegistry),
    )
    services.add_singleton(ResultConverter)
    services.add_singleton(CommandTokenizer)

    def _dispatcher_factory(provider: IServiceProvider) -> CommandDispatcher:
        return CommandDispatcher(
            provider.get_required_service(ICommandRegistry),
            provider.get_required_service(AppConfig),
            provider.get_required_service(ResultConverter),
            provider.get_required_service(CommandTokenizer),
        )

    services.add_singleton(CommandDispatcher, implementation_factory=_dispatcher_factory)
    logger.debug("Registered core dispatch services")
    return services


def build_service_provider(config: AppConfig | None = None) -> IServiceProvider:
    """Build a provider with the core services registered."""
    services = ServiceCollection()
    register_core_services(services, config)
    return services.build_service_provider()
