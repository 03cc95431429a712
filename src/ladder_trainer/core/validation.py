"""
Workout configuration rules.

validate_workout() collects every problem with a workout definition so the
caller can show them all at once. The ladder engine itself never rejects a
configuration; these checks run when a workout is created or imported.
"""

from .config import CHRISTMAS_MAX_ROUNDS, LADDER_DISPLAY_NAMES, SHARED_REPS_LADDERS
from .ladders.linear import DescendingLadder
from .models import LADDER_TYPES, WorkoutConfig


def default_workout_name(ladder_type: str) -> str:
    """Name suggested for a new workout, e.g. "Pyramid WOD"."""
    return f"{LADDER_DISPLAY_NAMES.get(ladder_type, 'Ladder')} WOD"


def validate_workout(config: WorkoutConfig) -> list[str]:
    """
    Check a workout definition.

    Args:
        config: Workout to check

    Returns:
        Human-readable error messages; empty when the workout is valid
    """
    errors: list[str] = []

    if not config.name.strip():
        errors.append("Workout name is required")

    if config.ladder_type not in LADDER_TYPES:
        errors.append(f"Unknown ladder type: {config.ladder_type}")

    if not config.exercises:
        errors.append("At least one exercise is required")

    for index, ex in enumerate(config.exercises, start=1):
        if not ex.name.strip():
            errors.append(f"Exercise {index}: Name is required")

    if config.rest_period_seconds < 0:
        errors.append("Rest period must not be negative")

    rounds = config.max_rounds
    if rounds <= 0:
        errors.append("Max rounds must be a positive number")

    if config.ladder_type == "christmas":
        if rounds > CHRISTMAS_MAX_ROUNDS:
            errors.append(f"Christmas ladder cannot exceed {CHRISTMAS_MAX_ROUNDS} rounds")
        if rounds > len(config.exercises):
            errors.append(
                f"Christmas ladder requires at least {rounds} exercises for {rounds} rounds"
            )

    if config.ladder_type in SHARED_REPS_LADDERS and config.step_size <= 0:
        errors.append("Step size must be a positive number")

    if config.ladder_type == "descending" and rounds > 0 and config.step_size > 0:
        ladder = DescendingLadder(
            step_size=config.step_size,
            max_rounds=rounds,
            starting_reps=config.starting_reps,
        )
        # Rounds resolve clamped; check the raw final term instead.
        final_reps = ladder.first_reps - (rounds - 1) * config.step_size
        if final_reps < 0:
            errors.append(
                f"Descending ladder reaches {final_reps} reps by round {rounds}; "
                "raise starting reps or lower the step size"
            )

    if config.ladder_type == "amrap" and config.time_cap_seconds is not None:
        if config.time_cap_seconds <= 0:
            errors.append("Time cap must be a positive number of seconds")

    if config.buy_in_out is not None:
        if not config.buy_in_out.name.strip():
            errors.append("Buy-in/out exercise: Name is required")
        if config.buy_in_out_rest_seconds < 0:
            errors.append("Buy-in/out rest must not be negative")

    return errors
