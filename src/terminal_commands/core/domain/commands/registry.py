"""
Registry of terminal command overloads.

Overloads are stored per command name in registration order. How names are
compared is decided by the registry's ``NameComparison`` strategy.
"""

from __future__ import annotations

import inspect
import logging
import types
from collections.abc import Callable
from enum import Enum
from typing import Any

from terminal_commands.core.common.exceptions import CommandRegistrationError
from terminal_commands.core.domain.commands.attributes import get_command_metadata
from terminal_commands.core.domain.commands.converters import ArgumentConverterRegistry
from terminal_commands.core.domain.commands.overload import CommandOverload
from terminal_commands.core.interfaces.command_registry_interface import ICommandRegistry

logger = logging.getLogger(__name__)


class NameComparison(str, Enum):
    CASE_SENSITIVE = "case_sensitive"
    CASE_INSENSITIVE = "case_insensitive"

    def key(self, name: str) -> str:
        if self is NameComparison.CASE_INSENSITIVE:
            return name.casefold()
        return name


class CommandRegistry(ICommandRegistry):
    """In-process registry of command overloads."""

    def __init__(
        self,
        comparison: NameComparison = NameComparison.CASE_INSENSITIVE,
        converters: ArgumentConverterRegistry | None = None,
    ) -> None:
        self._comparison = comparison
        self._converters = converters
        self._overloads: dict[str, list[CommandOverload]] = {}
        self._display_names: dict[str, str] = {}

    def __len__(self) -> int:
        return sum(len(overloads) for overloads in self._overloads.values())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and bool(self.get_overloads(name))

    @property
    def comparison(self) -> NameComparison:
        return self._comparison

    def register(self, overload: CommandOverload) -> CommandOverload:
        """Register an overload under its name.

        Raises:
            CommandRegistrationError: If the same overload is already registered
        """
        key = self._comparison.key(overload.name)
        overloads = self._overloads.setdefault(key, [])
        if any(existing is overload for existing in overloads):
            raise CommandRegistrationError(
                f"Overload {overload!r} is already registered.",
                command_name=overload.name,
            )
        overloads.append(overload)
        self._display_names.setdefault(key, overload.name)
        logger.debug(
            "Registered command overload: %s (priority=%d, arguments=%d)",
            overload.name,
            overload.priority,
            overload.argument_count,
        )
        return overload

    def register_callable(self, func: Callable[..., Any]) -> CommandOverload:
        """Register a function or bound method decorated with ``terminal_command``."""
        return self.register(CommandOverload.from_callable(func, converters=self._converters))

    def register_from(self, source: Any) -> list[CommandOverload]:
        """Register every decorated command found on ``source``.

        ``source`` may be a module, a class (instantiated with no arguments)
        or an instance whose methods carry command metadata.

        Returns:
            The overloads created, in discovery order
        """
        if isinstance(source, types.ModuleType):
            candidates = [
                value
                for value in vars(source).values()
                if inspect.isfunction(value) and self._is_command(value)
            ]
        else:
            instance = source() if isinstance(source, type) else source
            candidates = self._collect_members(instance)

        registered = [self.register_callable(candidate) for candidate in candidates]
        logger.info(
            "Registered %d command overload(s) from %s",
            len(registered),
            getattr(source, "__name__", type(source).__name__),
        )
        return registered

    def deregister(self, overload: CommandOverload) -> bool:
        """Remove ``overload``. Returns False if it was not registered."""
        key = self._comparison.key(overload.name)
        overloads = self._overloads.get(key)
        if not overloads:
            return False
        for index, existing in enumerate(overloads):
            if existing is overload:
                del overloads[index]
                if not overloads:
                    del self._overloads[key]
                    self._display_names.pop(key, None)
                return True
        return False

    def get_overloads(self, name: str) -> list[CommandOverload]:
        return list(self._overloads.get(self._comparison.key(name), []))

    def get_all_overloads(self) -> list[CommandOverload]:
        return [overload for overloads in self._overloads.values() for overload in overloads]

    def get_command_names(self) -> list[str]:
        """Names of all registered commands, as first registered."""
        return list(self._display_names.values())

    def clear(self) -> None:
        self._overloads.clear()
        self._display_names.clear()

    @staticmethod
    def _is_command(value: Any) -> bool:
        metadata = get_command_metadata(value)
        return metadata is not None and metadata.is_command

    def _collect_members(self, instance: Any) -> list[Callable[..., Any]]:
        seen: set[str] = set()
        members: list[Callable[..., Any]] = []
        for klass in type(instance).__mro__:
            for attr_name, raw in vars(klass).items():
                if attr_name in seen:
                    continue
                seen.add(attr_name)
                target = raw.__func__ if isinstance(raw, (staticmethod, classmethod)) else raw
                if inspect.isfunction(target) and self._is_command(target):
                    members.append(getattr(instance, attr_name))
        return members
