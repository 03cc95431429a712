"""
Christmas ladder.

Round r adds the exercise at position r, then repeats every earlier
exercise in reverse order. Each exercise is always done for as many reps as
its position:

    Round 1: #1
    Round 2: #2, #1
    Round 3: #3, #2, #1
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..models import Exercise, RoundEntry
from .base import LadderStrategy


@dataclass(frozen=True)
class ChristmasLadder(LadderStrategy):
    """Grow the round by one exercise each time, newest first."""

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        active = sorted(
            (ex for ex in exercises if 1 <= ex.position <= round_number),
            key=lambda ex: ex.position,
            reverse=True,
        )
        return [RoundEntry(exercise=ex, reps=ex.position) for ex in active]

    def _total(self, exercise: Exercise, completed_rounds: int) -> int:
        # Dormant until round `position`, then once per round.
        times_performed = max(0, completed_rounds - exercise.position + 1)
        return exercise.position * times_performed

    def describe(self) -> str:
        return (
            "Each round adds a new exercise at the beginning, "
            "then performs previous exercises in reverse order"
        )
