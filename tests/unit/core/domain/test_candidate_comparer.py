"""
Tests for ordering matched command overloads.
"""

from dataclasses import dataclass

from terminal_commands.core.domain.commands.comparer import CandidateComparer


@dataclass
class Ranked:
    name: str
    priority: int = 0
    argument_count: int = 0


def _order(*overloads: Ranked) -> list[str]:
    return [o.name for o, _ in CandidateComparer.order((o, None) for o in overloads)]


def test_higher_priority_runs_first() -> None:
    assert _order(Ranked("low", 0, 3), Ranked("high", 5, 0)) == ["high", "low"]


def test_more_arguments_break_priority_ties() -> None:
    assert _order(Ranked("one", 1, 1), Ranked("two", 1, 2)) == ["two", "one"]


def test_full_ties_keep_registration_order() -> None:
    assert _order(Ranked("first"), Ranked("second"), Ranked("third")) == [
        "first",
        "second",
        "third",
    ]


def test_negative_priority_runs_last() -> None:
    assert _order(Ranked("fallback", -1, 4), Ranked("normal")) == ["normal", "fallback"]


def test_payloads_follow_their_overload() -> None:
    pairs = [(Ranked("a", 0), "payload-a"), (Ranked("b", 1), "payload-b")]

    assert [payload for _, payload in CandidateComparer.order(pairs)] == [
        "payload-b",
        "payload-a",
    ]
