"""
Tests for turning handler results into display responses.
"""

from terminal_commands.core.domain.command_results import (
    NO_RESULT,
    DisplayResult,
    InteractionRequest,
    NoResult,
    PayloadResult,
    classify_result,
)
from terminal_commands.core.domain.display import DisplayResponse
from terminal_commands.core.domain.interaction_stack import InteractionStack
from terminal_commands.core.domain.interactions import ConfirmInteraction
from terminal_commands.core.services.result_converter import ResultConverter


def test_classify_result_shapes() -> None:
    response = DisplayResponse(display_text="x")
    interaction = ConfirmInteraction("?", lambda: None)

    assert classify_result(None) is NO_RESULT
    assert isinstance(classify_result(NoResult()), NoResult)
    assert classify_result(response) == DisplayResult(response)
    assert classify_result(interaction) == InteractionRequest(interaction)
    assert classify_result(5) == PayloadResult(5)


def test_none_is_no_response() -> None:
    stack = InteractionStack()

    assert ResultConverter().convert(None, stack) is None
    assert not stack


def test_display_response_is_returned_unchanged() -> None:
    response = DisplayResponse(display_text="x", clear_previous_text=False)

    assert ResultConverter().convert(response, InteractionStack()) is response


def test_interaction_is_registered_and_prompt_returned() -> None:
    stack = InteractionStack()
    interaction = ConfirmInteraction("Really?", lambda: None)

    response = ResultConverter().convert(interaction, stack)

    assert response == DisplayResponse(display_text="Really?")
    assert stack.peek() is interaction


def test_payload_is_shown_as_text() -> None:
    response = ResultConverter().convert(3.5, InteractionStack())

    assert response == DisplayResponse(display_text="3.5", clear_previous_text=True)
