"""
Tests for wiring the dispatch services into the container.
"""

from terminal_commands.core.commands.tokenizer import CommandTokenizer
from terminal_commands.core.config.app_config import AppConfig
from terminal_commands.core.di.container import ServiceCollection
from terminal_commands.core.di.services import build_service_provider, register_core_services
from terminal_commands.core.domain.commands.converters import ArgumentConverterRegistry
from terminal_commands.core.domain.commands.registry import CommandRegistry, NameComparison
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.interfaces.command_registry_interface import ICommandRegistry
from terminal_commands.core.services.command_dispatcher import CommandDispatcher


def test_core_services_resolve() -> None:
    config = AppConfig(debug=True)
    provider = build_service_provider(config)

    dispatcher = provider.get_required_service(CommandDispatcher)

    assert provider.get_required_service(AppConfig) is config
    assert dispatcher.config is config
    assert dispatcher.registry is provider.get_required_service(CommandRegistry)
    assert provider.get_required_service(ICommandRegistry) is dispatcher.registry
    assert isinstance(provider.get_service(CommandTokenizer), CommandTokenizer)
    assert isinstance(provider.get_service(ArgumentConverterRegistry), ArgumentConverterRegistry)


def test_help_is_registered_by_default() -> None:
    provider = build_service_provider(AppConfig())
    dispatcher = provider.get_required_service(CommandDispatcher)

    response = dispatcher.try_execute("help", TerminalSession())

    assert response is not None
    assert "- help" in response.display_text


def test_help_can_be_left_out() -> None:
    services = register_core_services(ServiceCollection(), AppConfig(), include_help=False)
    registry = services.build_service_provider().get_required_service(CommandRegistry)

    assert "help" not in registry


def test_case_sensitivity_follows_config() -> None:
    provider = build_service_provider(AppConfig(case_sensitive_names=True))

    registry = provider.get_required_service(CommandRegistry)

    assert registry.comparison is NameComparison.CASE_SENSITIVE
    assert registry.get_overloads("HELP") == []


def test_config_defaults_to_environment(monkeypatch) -> None:
    monkeypatch.setenv("TERMINAL_COMMANDS_DEBUG", "1")

    provider = build_service_provider()

    assert provider.get_required_service(AppConfig).debug is True
