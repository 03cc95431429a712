"""
Configuration constants for the ladder engine and workout rules.

All adjustable defaults and limits are centralized here.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# DEFAULT FILLING FOR INCOMPLETE EXERCISE DATA
# =============================================================================

DEFAULT_STARTING_REPS: Final[int] = 1  # Flexible / AMRAP starting reps
DEFAULT_STEP_SIZE: Final[int] = 1  # Flexible step size and global step size
DEFAULT_DIRECTION: Final[str] = "ascending"  # Flexible direction
DEFAULT_AMRAP_STEP_SIZE: Final[int] = 0  # Missing AMRAP step means fixed reps
DEFAULT_FIXED_REPS: Final[int] = 1  # Chipper fixed_reps / ForReps reps_per_round
FALLBACK_MAX_ROUNDS: Final[int] = 10  # Descending / Pyramid without max_rounds

# =============================================================================
# LIMITS
# =============================================================================

CHRISTMAS_MAX_ROUNDS: Final[int] = 12  # One new exercise per round, twelve days
PREVIEW_MAX_ROUNDS: Final[int] = 20  # Longest ladder rendered as a reps preview
AMRAP_PREVIEW_ROUNDS: Final[int] = 5  # AMRAP has no ceiling; preview a few rounds

# =============================================================================
# PER-LADDER DEFAULTS
# =============================================================================


@dataclass(frozen=True)
class LadderDefaults:
    """Values a new workout of a given ladder type starts from."""

    max_rounds: int
    step_size: int  # Only meaningful for ascending / descending / pyramid
    starting_reps: int  # Only meaningful for ascending / descending
    time_cap_seconds: int | None = None  # AMRAP only


LADDER_DEFAULTS: Final[dict[str, LadderDefaults]] = {
    "christmas": LadderDefaults(max_rounds=12, step_size=1, starting_reps=1),
    "ascending": LadderDefaults(max_rounds=10, step_size=1, starting_reps=1),
    "descending": LadderDefaults(max_rounds=10, step_size=1, starting_reps=10),
    "pyramid": LadderDefaults(max_rounds=5, step_size=1, starting_reps=1),
    "flexible": LadderDefaults(max_rounds=5, step_size=1, starting_reps=1),
    "chipper": LadderDefaults(max_rounds=5, step_size=1, starting_reps=1),  # tracks exercise count
    "amrap": LadderDefaults(  # rounds are unlimited until the time cap
        max_rounds=999,
        step_size=1,
        starting_reps=1,
        time_cap_seconds=600,
    ),
    "forreps": LadderDefaults(max_rounds=5, step_size=1, starting_reps=1),
}

LADDER_DISPLAY_NAMES: Final[dict[str, str]] = {
    "christmas": "Christmas",
    "ascending": "Ascending",
    "descending": "Descending",
    "pyramid": "Pyramid",
    "flexible": "Flexible",
    "chipper": "Chipper",
    "amrap": "AMRAP",
    "forreps": "For Reps",
}

# Ladder types whose rounds share one rep count across all exercises.
SHARED_REPS_LADDERS: Final[frozenset[str]] = frozenset(
    {"ascending", "descending", "pyramid"}
)


def get_ladder_defaults(ladder_type: str) -> LadderDefaults:
    """
    Return the starting values for a new workout of the given ladder type.

    Raises:
        ValueError: If ladder_type is not a known ladder type
    """
    if ladder_type not in LADDER_DEFAULTS:
        valid = ", ".join(LADDER_DEFAULTS)
        raise ValueError(f"Unknown ladder type '{ladder_type}'. Valid types: {valid}")
    return LADDER_DEFAULTS[ladder_type]
