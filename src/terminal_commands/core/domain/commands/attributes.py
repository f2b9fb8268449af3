"""
Decorators that declare terminal commands on plain functions and methods.

Example::

    class ShipCommands:
        @terminal_command("scan")
        @command_info("Scan the current sector", syntax="[range]")
        @command_priority(5)
        def scan(self, terminal: Terminal, distance: int = 10) -> str:
            ...

The decorators only attach a ``CommandMetadata`` record to the function;
``CommandRegistry.register_from`` turns decorated callables into overloads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

COMMAND_METADATA_ATTR = "__terminal_command__"


class RemainingText:
    """Parameter marker: bind the rest of the input line as one string.

    Use as ``Annotated[str, RemainingText]``.
    """


@dataclass
class CommandMetadata:
    name: str | None = None
    description: str = ""
    syntax: str = ""
    category: str = ""
    priority: int = 0
    clear_text: bool = True
    hidden: bool = False
    predicates: list[Callable[[], bool]] = field(default_factory=list)

    @property
    def is_command(self) -> bool:
        return bool(self.name)


def _target(func: Any) -> Any:
    return getattr(func, "__func__", func)


def get_command_metadata(func: Any) -> CommandMetadata | None:
    """Return the metadata attached to ``func``, if any."""
    return getattr(_target(func), COMMAND_METADATA_ATTR, None)


def _ensure_metadata(func: Any) -> CommandMetadata:
    target = _target(func)
    metadata = getattr(target, COMMAND_METADATA_ATTR, None)
    if metadata is None:
        metadata = CommandMetadata()
        setattr(target, COMMAND_METADATA_ATTR, metadata)
    return metadata


def terminal_command(name: str, *, clear_text: bool = True) -> Callable[[F], F]:
    """Mark a callable as a terminal command overload named ``name``."""
    if not isinstance(name, str) or not name.strip():
        raise ValueError("Command name must be a non-empty string.")
    if " " in name.strip():
        raise ValueError("Command name must not contain spaces.")

    def decorator(func: F) -> F:
        metadata = _ensure_metadata(func)
        metadata.name = name.strip()
        metadata.clear_text = clear_text
        return func

    return decorator


def command_info(
    description: str, syntax: str = "", *, category: str = ""
) -> Callable[[F], F]:
    """Attach help text to a command overload."""

    def decorator(func: F) -> F:
        metadata = _ensure_metadata(func)
        metadata.description = description
        metadata.syntax = syntax
        metadata.category = category
        return func

    return decorator


def command_priority(priority: int) -> Callable[[F], F]:
    """Overloads with a higher priority are tried first."""

    def decorator(func: F) -> F:
        _ensure_metadata(func).priority = int(priority)
        return func

    return decorator


def allowed_caller(predicate: Callable[[], bool]) -> Callable[[F], F]:
    """Gate an overload behind a zero-argument predicate.

    Several predicates may be stacked; all of them must pass.
    """
    if not callable(predicate):
        raise TypeError("Allowed-caller predicate must be callable.")

    def decorator(func: F) -> F:
        _ensure_metadata(func).predicates.append(predicate)
        return func

    return decorator


def hidden_command(func: F) -> F:
    """Keep an overload out of help listings."""
    _ensure_metadata(func).hidden = True
    return func
