"""
Shared contract for ladder strategies.

A strategy is an immutable value object bound to one workout's progression
parameters. It answers two questions: which exercises are performed in a
round and at how many reps, and how many reps an exercise accumulated over a
number of completed rounds. The second answer is a closed form of the first:

    total_reps(ex, N) == sum(e.reps for r in 1..N for e in resolve_round(r, [ex]))

Rounds below 1 resolve to nothing and zero completed rounds total to zero,
so callers that run slightly out of sync with the configured bounds never
see an exception.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from ..models import Exercise, RoundEntry

Total = int | float


def clamp_reps(reps: int) -> int:
    """Floor a rep count at zero."""
    return max(0, reps)


def arithmetic_term(first: int, step: int, round_number: int) -> int:
    """Reps in round_number of a sequence starting at first, changing by step."""
    return first + (round_number - 1) * step


def series_total(rounds: int, first: int, last: int) -> Total:
    """
    Sum of an arithmetic series: rounds * (first + last) / 2.

    Exact integer sequences always give an even product; an odd product
    only happens when last has been clamped, and is returned as a float.
    """
    doubled = rounds * (first + last)
    if doubled % 2 == 0:
        return doubled // 2
    return doubled / 2


def sequence_hint(terms: Sequence[int]) -> str:
    """Format the first few terms of a progression, e.g. "21, 15, 9..."."""
    return ", ".join(str(t) for t in terms) + "..."


class LadderStrategy(ABC):
    """Progression rule for one ladder type."""

    def resolve_round(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        """
        Exercises performed in round_number (1-indexed) with their reps.

        Returns a new list on every call; exercises is never modified.
        """
        if round_number < 1:
            return []
        return self._resolve(round_number, exercises)

    def total_reps(self, exercise: Exercise, completed_rounds: int) -> Total:
        """Cumulative reps performed by exercise over completed_rounds rounds."""
        if completed_rounds <= 0:
            return 0
        return max(0, self._total(exercise, completed_rounds))

    @abstractmethod
    def describe(self) -> str:
        """Human-readable summary of the progression rule."""

    @abstractmethod
    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        ...

    @abstractmethod
    def _total(self, exercise: Exercise, completed_rounds: int) -> Total:
        ...
