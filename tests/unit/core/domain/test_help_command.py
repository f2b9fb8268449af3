"""
Tests for the built-in help command.
"""

import pytest
from terminal_commands.core.domain.commands.attributes import (
    allowed_caller,
    command_info,
    hidden_command,
    terminal_command,
)
from terminal_commands.core.domain.commands.help_command import HelpCommands
from terminal_commands.core.domain.commands.registry import CommandRegistry
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.services.command_dispatcher import CommandDispatcher


class SampleCommands:
    @terminal_command("scan")
    @command_info("Scan the sector", "[range]")
    def scan(self) -> str:
        return "scanning"

    @terminal_command("scan")
    @command_info("Scan a distance", "<range>")
    def scan_range(self, distance: int) -> str:
        return f"scanning {distance}"

    @terminal_command("debug")
    @hidden_command
    def debug(self) -> str:
        return "debug"

    @terminal_command("admin")
    @allowed_caller(lambda: False)
    def admin(self) -> str:
        return "admin"

    @terminal_command("Alpha")
    def alpha(self) -> str:
        return "alpha"


@pytest.fixture
def help_dispatcher(registry: CommandRegistry) -> CommandDispatcher:
    registry.register_from(HelpCommands(registry))
    registry.register_from(SampleCommands())
    return CommandDispatcher(registry)


def test_help_lists_visible_commands(
    help_dispatcher: CommandDispatcher, session: TerminalSession
) -> None:
    response = help_dispatcher.try_execute("help", session)

    assert response is not None
    assert response.display_text == (
        "Available commands:\n"
        "- Alpha\n"
        "- help - Show available commands or details for a single command\n"
        "- scan - Scan the sector"
    )


def test_help_describes_one_command(
    help_dispatcher: CommandDispatcher, session: TerminalSession
) -> None:
    response = help_dispatcher.try_execute("help scan", session)

    assert response is not None
    assert response.display_text == (
        "> scan [range]\n  Scan the sector\n> scan <range>\n  Scan a distance"
    )


@pytest.mark.parametrize("name", ["debug", "admin", "warp"])
def test_help_for_unlisted_command(
    help_dispatcher: CommandDispatcher, session: TerminalSession, name: str
) -> None:
    response = help_dispatcher.try_execute(f"help {name}", session)

    assert response is not None
    assert response.display_text == f"Unknown command: {name}"


def test_empty_registry_message(registry: CommandRegistry) -> None:
    assert HelpCommands(registry).list_commands() == "No commands available."
