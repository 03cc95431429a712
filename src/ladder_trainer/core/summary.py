"""
Workout summaries for history lists and shareable cards.

Per-exercise totals come from the ladder strategy's closed-form total_reps.
"""

import math
from dataclasses import dataclass

from .config import LADDER_DISPLAY_NAMES
from .ladders import strategy_for
from .ladders.base import Total
from .models import Exercise, WorkoutConfig


@dataclass(frozen=True)
class ExerciseTotal:
    """Cumulative amount performed for one exercise."""

    exercise: Exercise
    total: Total

    @property
    def unit_label(self) -> str:
        return self.exercise.unit_label

    def __str__(self) -> str:
        return f"{self.exercise.name}: {format_amount(self.total)} {self.unit_label}"


def format_amount(value: Total) -> str:
    """Render a total without a trailing ".0" for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def exercise_totals(config: WorkoutConfig, rounds_completed: int) -> list[ExerciseTotal]:
    """
    Total amount per exercise after rounds_completed rounds.

    Args:
        config: Workout snapshot the rounds were performed with
        rounds_completed: Number of rounds recorded

    Returns:
        One ExerciseTotal per exercise, in workout order
    """
    strategy = strategy_for(config)
    return [
        ExerciseTotal(exercise=ex, total=strategy.total_reps(ex, rounds_completed))
        for ex in config.exercises
    ]


def workout_total(config: WorkoutConfig, rounds_completed: int) -> Total:
    """Sum of every exercise's total, regardless of unit."""
    return sum(t.total for t in exercise_totals(config, rounds_completed))


def rounds_label(ladder_type: str, rounds_recorded: int) -> str:
    """
    Round count as displayed.

    An AMRAP workout ends mid-round when the time cap hits, so its last
    recorded round is partial: 4 recorded rounds read "3+".
    """
    if ladder_type == "amrap":
        return f"{max(0, rounds_recorded - 1)}+"
    return str(rounds_recorded)


def ladder_display_name(ladder_type: str) -> str:
    return LADDER_DISPLAY_NAMES.get(ladder_type, "Workout")


def format_time(seconds: float) -> str:
    """
    Format a duration as M:SS, or H:MM:SS from one hour up.

    Fractional seconds are dropped.
    """
    seconds = math.floor(seconds)
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
