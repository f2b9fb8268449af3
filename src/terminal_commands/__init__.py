"""Text-command dispatch engine with overload resolution and multi-step interactions."""

from terminal_commands.core.commands.tokenizer import CommandTokenizer, tokenize
from terminal_commands.core.config.app_config import AppConfig, load_config
from terminal_commands.core.di.container import ServiceCollection
from terminal_commands.core.domain.argument_stream import ArgumentStream, RawArguments
from terminal_commands.core.domain.command_results import InteractionOutcome
from terminal_commands.core.domain.commands import (
    CommandOverload,
    CommandRegistry,
    NameComparison,
    RemainingText,
    allowed_caller,
    command_info,
    command_priority,
    hidden_command,
    terminal_command,
)
from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.domain.interactions import (
    ConfirmInteraction,
    TerminalInteraction,
)
from terminal_commands.core.domain.session import TerminalSession
from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction
from terminal_commands.core.services.command_dispatcher import CommandDispatcher

__version__ = "0.1.0"

__all__ = [
    "AppConfig",
    "ArgumentStream",
    "CommandDispatcher",
    "CommandOverload",
    "CommandRegistry",
    "CommandTokenizer",
    "ConfirmInteraction",
    "DisplayResponse",
    "ITerminalInteraction",
    "InteractionOutcome",
    "NameComparison",
    "RawArguments",
    "RemainingText",
    "ServiceCollection",
    "TerminalInteraction",
    "TerminalSession",
    "allowed_caller",
    "command_info",
    "command_priority",
    "hidden_command",
    "load_config",
    "terminal_command",
    "tokenize",
]
