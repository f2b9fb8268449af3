"""
Command declaration, binding and lookup.
"""

from terminal_commands.core.domain.commands.attributes import (
    RemainingText,
    allowed_caller,
    command_info,
    command_priority,
    hidden_command,
    terminal_command,
)
from terminal_commands.core.domain.commands.comparer import CandidateComparer
from terminal_commands.core.domain.commands.converters import (
    ArgumentConverterRegistry,
    create_default_converters,
)
from terminal_commands.core.domain.commands.overload import CommandOverload
from terminal_commands.core.domain.commands.registry import (
    CommandRegistry,
    NameComparison,
)

__all__ = [
    "ArgumentConverterRegistry",
    "CandidateComparer",
    "CommandOverload",
    "CommandRegistry",
    "NameComparison",
    "RemainingText",
    "allowed_caller",
    "command_info",
    "command_priority",
    "create_default_converters",
    "hidden_command",
    "terminal_command",
]
