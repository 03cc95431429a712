"""
Chipper.

One exercise per round, worked through the list in order: round r is the
exercise at position r, done once for its fixed rep count.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..config import DEFAULT_FIXED_REPS
from ..models import ChipperReps, Exercise, RoundEntry
from .base import LadderStrategy


def fixed_reps(exercise: Exercise) -> int:
    scheme = exercise.scheme
    if isinstance(scheme, ChipperReps) and scheme.fixed_reps is not None:
        return scheme.fixed_reps
    return DEFAULT_FIXED_REPS


@dataclass(frozen=True)
class ChipperLadder(LadderStrategy):
    """Each exercise owns exactly one round."""

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        for ex in exercises:
            if ex.position == round_number:
                return [RoundEntry(exercise=ex, reps=fixed_reps(ex))]
        return []

    def _total(self, exercise: Exercise, completed_rounds: int) -> int:
        if 1 <= exercise.position <= completed_rounds:
            return fixed_reps(exercise)
        return 0

    def describe(self) -> str:
        return "Work through the list one exercise per round, each done once for its fixed reps"
