"""
Argument stream domain model.

An ``ArgumentStream`` is a read cursor over the tokens of one input line.
During a dispatch cycle the same stream instance is offered to every
candidate overload in turn. Tokens consumed by a binder stay consumed even
when that binder later fails, so a later candidate only sees what is left.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from terminal_commands.core.common.exceptions import ArgumentStreamExhaustedError

if TYPE_CHECKING:
    from terminal_commands.core.domain.commands.converters import (
        ArgumentConverterRegistry,
    )


class RawArguments(tuple):
    """The unparsed argument tokens of a dispatch cycle.

    Registered in the service context so commands can request the raw token
    list by type.
    """

    def __new__(cls, values: Iterable[str] = ()) -> RawArguments:
        return super().__new__(cls, tuple(values))


class ArgumentStream:
    """Cursor over an ordered sequence of string tokens."""

    def __init__(self, arguments: Sequence[str]) -> None:
        self._arguments: tuple[str, ...] = tuple(arguments)
        self._index = 0

    def __repr__(self) -> str:
        return f"<ArgumentStream position={self._index} arguments={list(self._arguments)!r}>"

    @property
    def arguments(self) -> RawArguments:
        """The full, original token sequence."""
        return RawArguments(self._arguments)

    @property
    def position(self) -> int:
        return self._index

    @property
    def remaining(self) -> int:
        """Number of tokens not yet consumed."""
        return len(self._arguments) - self._index

    @property
    def is_exhausted(self) -> bool:
        return self.remaining <= 0

    def peek(self, offset: int = 0) -> str | None:
        """Return the token ``offset`` places after the cursor without consuming it."""
        index = self._index + offset
        if offset < 0 or index >= len(self._arguments):
            return None
        return self._arguments[index]

    def read_next(self) -> str:
        """Consume and return the next token.

        Raises:
            ArgumentStreamExhaustedError: If no tokens remain
        """
        if self.is_exhausted:
            raise ArgumentStreamExhaustedError(
                "No arguments remain in the stream", position=self._index
            )
        value = self._arguments[self._index]
        self._index += 1
        return value

    def try_read_next(
        self,
        kind: type = str,
        converters: ArgumentConverterRegistry | None = None,
    ) -> tuple[bool, Any]:
        """Consume the next token and convert it to ``kind``.

        The token is consumed even when conversion fails.

        Returns:
            A ``(success, value)`` tuple
        """
        if converters is None:
            from terminal_commands.core.domain.commands.converters import (
                default_converters,
            )

            converters = default_converters

        try:
            token = self.read_next()
        except ArgumentStreamExhaustedError:
            return False, None
        return converters.try_convert(token, kind)

    def read_remaining(self) -> str:
        """Consume every remaining token and return them joined by spaces."""
        rest = self._arguments[self._index :]
        self._index = len(self._arguments)
        return " ".join(rest)

    def try_read_remaining(self) -> tuple[bool, str]:
        if self.is_exhausted:
            return False, ""
        return True, self.read_remaining()
