"""
Pyramid ladder.

Reps climb by step_size up to the middle round and come back down:

    5 rounds, step 1: 1, 2, 3, 2, 1
    6 rounds, step 1: 1, 2, 3, 3, 2, 1
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from ..config import DEFAULT_STEP_SIZE, FALLBACK_MAX_ROUNDS
from ..models import Exercise, RoundEntry
from .base import LadderStrategy, clamp_reps, sequence_hint


@dataclass(frozen=True)
class PyramidLadder(LadderStrategy):
    """Symmetric climb and descent around peak = ceil(max_rounds / 2)."""

    step_size: int = DEFAULT_STEP_SIZE
    max_rounds: int = FALLBACK_MAX_ROUNDS

    @property
    def peak_round(self) -> int:
        return math.ceil(self.max_rounds / 2)

    def reps_for_round(self, round_number: int) -> int:
        if round_number <= self.peak_round:
            return clamp_reps(round_number * self.step_size)
        return clamp_reps((self.max_rounds - round_number + 1) * self.step_size)

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        reps = self.reps_for_round(round_number)
        return [RoundEntry(exercise=ex, reps=reps) for ex in exercises]

    def _total(self, exercise: Exercise, completed_rounds: int) -> int:
        # The peak comes from the rounds passed in, not from max_rounds:
        # totals are read once the pyramid is finished, when the two agree.
        peak = math.ceil(completed_rounds / 2)
        if completed_rounds % 2 == 1:
            return peak * peak * self.step_size
        return peak * (peak + 1) * self.step_size

    def describe(self) -> str:
        step = self.step_size
        hint = sequence_hint([step, step * 2, step * 3, step * 2])
        return f"Ascends to peak then descends ({hint})"
