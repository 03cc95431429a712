"""
Repeating-round ladders: For Reps and AMRAP.

Both perform every exercise every round. For Reps uses a constant
reps_per_round per exercise over a fixed number of rounds. AMRAP runs until
a time cap with no round ceiling; each exercise starts at starting_reps and
grows by its own step_size (0 keeps it fixed). AMRAP workouts written in the
For Reps shape (reps_per_round only) are read as fixed reps.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..config import DEFAULT_AMRAP_STEP_SIZE, DEFAULT_FIXED_REPS, DEFAULT_STARTING_REPS
from ..models import AmrapReps, Exercise, ForRepsReps, RoundEntry
from .base import LadderStrategy, Total, arithmetic_term, clamp_reps, series_total


def reps_per_round(exercise: Exercise) -> int:
    scheme = exercise.scheme
    if isinstance(scheme, ForRepsReps) and scheme.reps_per_round is not None:
        return scheme.reps_per_round
    return DEFAULT_FIXED_REPS


def _amrap_progression(exercise: Exercise) -> tuple[int, int]:
    """Return (starting_reps, step_size) with defaults filled in."""
    scheme = exercise.scheme
    if isinstance(scheme, ForRepsReps):
        return reps_per_round(exercise), 0
    if not isinstance(scheme, AmrapReps):
        scheme = AmrapReps()
    starting = DEFAULT_STARTING_REPS if scheme.starting_reps is None else scheme.starting_reps
    step = DEFAULT_AMRAP_STEP_SIZE if scheme.step_size is None else scheme.step_size
    return starting, step


@dataclass(frozen=True)
class ForRepsLadder(LadderStrategy):
    """Same exercises, same reps, every round."""

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        return [RoundEntry(exercise=ex, reps=reps_per_round(ex)) for ex in exercises]

    def _total(self, exercise: Exercise, completed_rounds: int) -> int:
        return reps_per_round(exercise) * completed_rounds

    def describe(self) -> str:
        return "Every round repeats all exercises at their own fixed reps"


@dataclass(frozen=True)
class AmrapLadder(LadderStrategy):
    """As many rounds as possible; per-exercise fixed or growing reps."""

    def reps_for(self, exercise: Exercise, round_number: int) -> int:
        starting, step = _amrap_progression(exercise)
        return clamp_reps(arithmetic_term(starting, step, round_number))

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        return [
            RoundEntry(exercise=ex, reps=self.reps_for(ex, round_number))
            for ex in exercises
        ]

    def _total(self, exercise: Exercise, completed_rounds: int) -> Total:
        starting, step = _amrap_progression(exercise)
        if step == 0:
            return starting * completed_rounds
        last = arithmetic_term(starting, step, completed_rounds)
        return series_total(completed_rounds, starting, last)

    def describe(self) -> str:
        return (
            "As many rounds as possible before the time cap; "
            "each exercise keeps its reps or adds its step every round"
        )
