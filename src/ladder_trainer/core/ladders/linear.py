"""
Ascending and descending ladders.

Every exercise in a round shares one rep count, which moves by step_size
each round:

    ascending:  reps(r) = starting_reps + (r - 1) * step_size
    descending: reps(r) = starting_reps - (r - 1) * step_size

Workouts saved before starting_reps existed describe an ascending ladder as
step, 2*step, 3*step... and a descending one as max_rounds*step down to
step; the defaults below reproduce exactly those sequences.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..config import DEFAULT_STEP_SIZE, FALLBACK_MAX_ROUNDS
from ..models import Exercise, RoundEntry
from .base import (
    LadderStrategy,
    Total,
    arithmetic_term,
    clamp_reps,
    sequence_hint,
    series_total,
)


@dataclass(frozen=True)
class AscendingLadder(LadderStrategy):
    """Reps climb by step_size every round."""

    step_size: int = DEFAULT_STEP_SIZE
    starting_reps: int | None = None

    @property
    def first_reps(self) -> int:
        return self.step_size if self.starting_reps is None else self.starting_reps

    def reps_for_round(self, round_number: int) -> int:
        return clamp_reps(arithmetic_term(self.first_reps, self.step_size, round_number))

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        reps = self.reps_for_round(round_number)
        return [RoundEntry(exercise=ex, reps=reps) for ex in exercises]

    def _total(self, exercise: Exercise, completed_rounds: int) -> Total:
        first = self.first_reps
        last = arithmetic_term(first, self.step_size, completed_rounds)
        return series_total(completed_rounds, first, last)

    def describe(self) -> str:
        hint = sequence_hint([self.reps_for_round(r) for r in range(1, 5)])
        return f"Each round increases reps by {self.step_size} for all exercises ({hint})"


@dataclass(frozen=True)
class DescendingLadder(LadderStrategy):
    """
    Reps drop by step_size every round.

    The sequence is not floored inside the configured rounds; a starting
    value sized as max_rounds * step_size ends the ladder at step_size.
    Rounds past the point where reps would go negative resolve to 0.
    """

    step_size: int = DEFAULT_STEP_SIZE
    max_rounds: int = FALLBACK_MAX_ROUNDS
    starting_reps: int | None = None

    @property
    def first_reps(self) -> int:
        if self.starting_reps is None:
            return self.max_rounds * self.step_size
        return self.starting_reps

    def reps_for_round(self, round_number: int) -> int:
        return clamp_reps(arithmetic_term(self.first_reps, -self.step_size, round_number))

    def _resolve(
        self, round_number: int, exercises: Sequence[Exercise]
    ) -> list[RoundEntry]:
        reps = self.reps_for_round(round_number)
        return [RoundEntry(exercise=ex, reps=reps) for ex in exercises]

    def _total(self, exercise: Exercise, completed_rounds: int) -> Total:
        first = self.first_reps
        if first <= 0:
            return 0
        # Rounds past zero reps resolve to 0 and add nothing.
        rounds = completed_rounds
        if self.step_size > 0:
            rounds = min(rounds, first // self.step_size + 1)
        last = arithmetic_term(first, -self.step_size, rounds)
        return series_total(rounds, first, last)

    def describe(self) -> str:
        hint = sequence_hint([self.reps_for_round(r) for r in range(1, 5)])
        return f"Each round decreases reps by {self.step_size} for all exercises ({hint})"
