"""
Command Results Domain Model

A handler result is classified into exactly one of four shapes before it is
turned into a display response:

- ``DisplayResult``: already a ``DisplayResponse``
- ``InteractionRequest``: a new interaction to register
- ``PayloadResult``: any other value, shown by its textual form
- ``NoResult``: the handler declined
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.interfaces.interaction_interface import ITerminalInteraction


@dataclass(frozen=True)
class DisplayResult:
    response: DisplayResponse


@dataclass(frozen=True)
class InteractionRequest:
    interaction: ITerminalInteraction


@dataclass(frozen=True)
class PayloadResult:
    payload: Any


@dataclass(frozen=True)
class NoResult:
    pass


CommandResult = Union[DisplayResult, InteractionRequest, PayloadResult, NoResult]

NO_RESULT = NoResult()


def classify_result(value: Any) -> CommandResult:
    """Tag a raw handler result with its shape."""
    if value is None or isinstance(value, NoResult):
        return NO_RESULT
    if isinstance(value, (DisplayResult, InteractionRequest, PayloadResult)):
        return value
    if isinstance(value, DisplayResponse):
        return DisplayResult(value)
    if isinstance(value, ITerminalInteraction):
        return InteractionRequest(value)
    return PayloadResult(value)


class InteractionStatus(str, Enum):
    DECLINED = "declined"
    FAILED = "failed"
    SUCCEEDED = "succeeded"


@dataclass(frozen=True)
class InteractionOutcome:
    """Explicit result of an interaction handler."""

    status: InteractionStatus
    value: Any = None
    error: BaseException | str | None = None

    @classmethod
    def declined(cls) -> InteractionOutcome:
        return cls(InteractionStatus.DECLINED)

    @classmethod
    def failed(cls, error: BaseException | str) -> InteractionOutcome:
        return cls(InteractionStatus.FAILED, error=error)

    @classmethod
    def succeeded(cls, value: Any) -> InteractionOutcome:
        if value is None:
            raise ValueError("A succeeded outcome needs a value; use declined() instead.")
        return cls(InteractionStatus.SUCCEEDED, value=value)

    @classmethod
    def from_value(cls, value: Any) -> InteractionOutcome:
        """Normalize a bare handler return value into an outcome."""
        if isinstance(value, InteractionOutcome):
            return value
        if value is None or isinstance(value, NoResult):
            return cls.declined()
        return cls.succeeded(value)
