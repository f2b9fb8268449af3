from __future__ import annotations

import logging
from typing import Any

from terminal_commands.core.domain.command_results import (
    DisplayResult,
    InteractionRequest,
    NoResult,
    PayloadResult,
    classify_result,
)
from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.domain.interaction_stack import InteractionStack

logger = logging.getLogger(__name__)


class ResultConverter:
    """Normalizes handler results into display responses.

    Used for both interaction results and command overload results.
    """

    def convert(self, value: Any, interactions: InteractionStack) -> DisplayResponse | None:
        """Convert a raw handler result.

        Args:
            value: The value returned by a handler
            interactions: Stack that receives any interaction the handler returned

        Returns:
            The response to display, or None if the handler declined
        """
        result = classify_result(value)

        if isinstance(result, NoResult):
            return None
        if isinstance(result, DisplayResult):
            return result.response
        if isinstance(result, InteractionRequest):
            prompt = result.interaction.prompt
            interactions.push(result.interaction)
            return prompt
        if isinstance(result, PayloadResult):
            return DisplayResponse.from_value(result.payload)

        raise TypeError(f"Unhandled result shape: {type(result).__name__}")
