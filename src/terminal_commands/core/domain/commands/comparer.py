"""
Ordering of matching command overloads.

Candidates run by priority descending, then by argument count descending.
Ties keep registration order, so ordering must always use a stable sort.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar

T = TypeVar("T")


class RankedOverload(Protocol):
    @property
    def priority(self) -> int: ...

    @property
    def argument_count(self) -> int: ...


class CandidateComparer:
    """Total order over command overloads."""

    @staticmethod
    def key(overload: RankedOverload) -> tuple[int, int]:
        return (-overload.priority, -overload.argument_count)

    @classmethod
    def order(
        cls, candidates: Iterable[tuple[RankedOverload, T]]
    ) -> list[tuple[RankedOverload, T]]:
        """Sort ``(overload, payload)`` pairs into execution order."""
        return sorted(candidates, key=lambda candidate: cls.key(candidate[0]))
