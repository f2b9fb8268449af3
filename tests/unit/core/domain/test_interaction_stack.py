"""
Tests for the per-session interaction stack.
"""

import pytest
from terminal_commands.core.domain.interaction_stack import InteractionStack
from terminal_commands.core.domain.interactions import ConfirmInteraction
from terminal_commands.core.domain.session import TerminalSession


def _interaction(label: str) -> ConfirmInteraction:
    return ConfirmInteraction(label, lambda: label)


def test_last_in_first_out() -> None:
    stack = InteractionStack()
    first, second = _interaction("first"), _interaction("second")
    stack.push(first)
    stack.push(second)

    assert stack.peek() is second
    assert stack.pop() is second
    assert stack.pop() is first
    assert stack.pop() is None
    assert not stack


def test_push_rejects_non_interactions() -> None:
    with pytest.raises(TypeError):
        InteractionStack().push("not an interaction")  # type: ignore[arg-type]


def test_clear() -> None:
    stack = InteractionStack()
    stack.push(_interaction("x"))
    stack.clear()

    assert len(stack) == 0
    assert stack.peek() is None


def test_sessions_do_not_share_stacks() -> None:
    one, two = TerminalSession(), TerminalSession()
    one.register_interaction(_interaction("x"))

    assert one.has_pending_interaction
    assert not two.has_pending_interaction
    assert one.session_id != two.session_id
