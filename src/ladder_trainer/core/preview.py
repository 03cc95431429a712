"""
Workout previews for the configuration screen.

Simulates the rounds a workout will produce using the same strategies the
live workout uses, so previews never drift from what is performed.
"""

from .config import AMRAP_PREVIEW_ROUNDS, PREVIEW_MAX_ROUNDS, SHARED_REPS_LADDERS
from .ladders import strategy_for
from .models import Exercise, RoundEntry, WorkoutConfig

_PLACEHOLDER = Exercise(position=1, name="preview")


def reps_preview(config: WorkoutConfig) -> str:
    """
    One-line rep sequence, e.g. "21 - 15 - 9".

    Only ladders whose rounds share a single rep count have one; christmas
    lists the reps of the newest exercise in each round. Returns "" for
    other ladder types and for round counts outside 1..PREVIEW_MAX_ROUNDS.
    """
    rounds = config.max_rounds
    if rounds <= 0 or rounds > PREVIEW_MAX_ROUNDS:
        return ""

    if config.ladder_type == "christmas":
        reps = list(range(1, rounds + 1))
    elif config.ladder_type in SHARED_REPS_LADDERS:
        strategy = strategy_for(config)
        reps = [strategy.resolve_round(r, [_PLACEHOLDER])[0].reps for r in range(1, rounds + 1)]
    else:
        return ""

    return " - ".join(str(r) for r in reps)


def preview_round_count(config: WorkoutConfig) -> int:
    """Number of rounds worth previewing for a workout."""
    if config.ladder_type == "amrap":
        return AMRAP_PREVIEW_ROUNDS
    return max(0, min(config.max_rounds, PREVIEW_MAX_ROUNDS))


def round_breakdown(
    config: WorkoutConfig, rounds: int | None = None
) -> list[tuple[int, list[RoundEntry]]]:
    """
    Resolve each round of a workout for display.

    Args:
        config: Workout to preview
        rounds: How many rounds to show; defaults to preview_round_count()
            and is capped at PREVIEW_MAX_ROUNDS

    Returns:
        (round_number, entries) pairs, round_number starting at 1
    """
    if rounds is None:
        rounds = preview_round_count(config)
    rounds = max(0, min(rounds, PREVIEW_MAX_ROUNDS))

    strategy = strategy_for(config)
    return [
        (r, strategy.resolve_round(r, config.exercises))
        for r in range(1, rounds + 1)
    ]
