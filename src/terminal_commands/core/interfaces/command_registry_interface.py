from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from terminal_commands.core.domain.commands.overload import CommandOverload


class ICommandRegistry(ABC):
    """Lookup of command overloads by name."""

    @abstractmethod
    def get_overloads(self, name: str) -> list[CommandOverload]:
        """Return the overloads registered under ``name`` in registration order.

        Unknown names yield an empty list.
        """
