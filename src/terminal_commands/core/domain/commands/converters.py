"""
String-to-value converters used when binding command parameters.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

TRUE_WORDS = frozenset({"true", "yes", "y", "on", "1"})
FALSE_WORDS = frozenset({"false", "no", "n", "off", "0"})


def _convert_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in TRUE_WORDS:
        return True
    if lowered in FALSE_WORDS:
        return False
    raise ValueError(f"Not a boolean value: {text!r}")


def _convert_enum(text: str, kind: type[Enum]) -> Enum:
    lowered = text.strip().lower()
    for member in kind:
        if member.name.lower() == lowered:
            return member
    for member in kind:
        if str(member.value).lower() == lowered:
            return member
    raise ValueError(f"{text!r} is not a member of {kind.__name__}")


class ArgumentConverterRegistry:
    """Maps parameter types to functions that parse a token into that type."""

    def __init__(self) -> None:
        self._converters: dict[type, Callable[[str], Any]] = {}

    def register(self, kind: type, converter: Callable[[str], Any]) -> None:
        """Register (or replace) the converter for ``kind``.

        The converter must raise ``ValueError`` or ``TypeError`` for input it
        cannot parse.
        """
        if not callable(converter):
            raise TypeError("Converter must be a callable.")
        self._converters[kind] = converter
        logger.debug("Registered argument converter for %s", getattr(kind, "__name__", kind))

    def can_convert(self, kind: Any) -> bool:
        if not isinstance(kind, type):
            return False
        if kind in self._converters:
            return True
        return issubclass(kind, Enum)

    def try_convert(self, text: str, kind: Any) -> tuple[bool, Any]:
        """Convert ``text`` to ``kind``.

        Returns:
            A ``(success, value)`` tuple; ``value`` is ``None`` on failure
        """
        if not self.can_convert(kind):
            return False, None

        converter = self._converters.get(kind)
        try:
            if converter is not None:
                return True, converter(text)
            return True, _convert_enum(text, kind)
        except (ValueError, TypeError):
            return False, None

    def copy(self) -> ArgumentConverterRegistry:
        clone = ArgumentConverterRegistry()
        clone._converters = dict(self._converters)
        return clone


def create_default_converters() -> ArgumentConverterRegistry:
    registry = ArgumentConverterRegistry()
    registry.register(str, str)
    registry.register(int, int)
    registry.register(float, float)
    registry.register(bool, _convert_bool)
    return registry


# Shared registry used when no explicit registry is supplied
default_converters = create_default_converters()
