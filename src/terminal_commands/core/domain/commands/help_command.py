from __future__ import annotations

import logging

from terminal_commands.core.domain.commands.attributes import (
    command_info,
    command_priority,
    terminal_command,
)
from terminal_commands.core.domain.commands.registry import CommandRegistry

logger = logging.getLogger(__name__)


class HelpCommands:
    """Built-in ``help`` command listing the registry's commands."""

    def __init__(self, registry: CommandRegistry) -> None:
        self._registry = registry

    @terminal_command("help")
    @command_info("Show available commands or details for a single command", "[command]")
    def list_commands(self) -> str:
        lines: list[str] = []
        for name in sorted(self._registry.get_command_names(), key=str.casefold):
            overloads = [
                overload
                for overload in self._registry.get_overloads(name)
                if not overload.hidden and overload.check_allowed()
            ]
            if not overloads:
                continue
            description = next(
                (overload.description for overload in overloads if overload.description), ""
            )
            lines.append(f"- {name} - {description}" if description else f"- {name}")

        if not lines:
            return "No commands available."
        return "Available commands:\n" + "\n".join(lines)

    @terminal_command("help")
    @command_info("Show available commands or details for a single command", "[command]")
    @command_priority(1)
    def describe_command(self, name: str) -> str:
        overloads = [
            overload
            for overload in self._registry.get_overloads(name)
            if not overload.hidden and overload.check_allowed()
        ]
        if not overloads:
            return f"Unknown command: {name}"

        parts: list[str] = []
        for overload in overloads:
            line = f"> {overload.usage}"
            if overload.description:
                line += f"\n  {overload.description}"
            parts.append(line)
        return "\n".join(parts)
