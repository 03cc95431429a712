"""
Flexible ladder.

Every exercise carries its own direction, starting reps and step size, so
one exercise can climb while another drops and a third stays constant.
Exercises converted from another ladder type may lack these fields; the
missing values fall back to an ascending progression from 1 by 1.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..config import DEFAULT_DIRECTION, DEFAULT_STARTING_REPS, DEFAULT_STEP_SIZE
from ..models import Exercise, FlexibleReps, RoundEntry
from .base import LadderStrategy, Total, arithmetic_term, clamp_reps, series_total


def _progression(exercise: Exercise) -> tuple[str, int, int]:
    """Return (direction, starting_reps, step_size) with defaults filled in."""
    scheme = exercise.scheme if isinstance(exercise.scheme, FlexibleReps) else FlexibleReps()
    direction = scheme.direction or DEFAULT_DIRECTION
    starting = DEFAULT_STARTING_REPS if scheme.starting_reps is None else scheme.starting_reps
    step = DEFAULT_STEP_SIZE if scheme.step_size is None else scheme.step_size
    return direction, starting, step


def _signed_step(direction: str, step: int) -> int:
    if direction == "constant":
        return 0
    if direction == "descending":
        return -step
    return step


@dataclass(frozen=True)
class FlexibleLadder(LadderStrategy):
    """Independent per-exercise progressions."""

    def reps_for(self, exercise: Exercise, round_number: int) -> int:
        direction, starting, step = _progression(exercise)
        return clamp_reps(
            arithmetic_term(starting, _signed_step(direction, step), round_number)
        )

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        return [
            RoundEntry(exercise=ex, reps=self.reps_for(ex, round_number))
            for ex in exercises
        ]

    def _total(self, exercise: Exercise, completed_rounds: int) -> Total:
        direction, starting, step = _progression(exercise)
        if direction == "constant":
            return starting * completed_rounds
        # Only the last term is floored, not each round: once a descending
        # sequence crosses zero this overstates the per-round sum.
        last = clamp_reps(
            arithmetic_term(starting, _signed_step(direction, step), completed_rounds)
        )
        return series_total(completed_rounds, starting, last)

    def describe(self) -> str:
        return (
            "Each exercise follows its own progression: "
            "ascending, descending, or constant reps every round"
        )
