"""
Ladder strategy factory.

Use get_ladder_strategy() to build the strategy for a ladder type from the
workout's global progression parameters, or strategy_for() to build it
straight from a WorkoutConfig. Parameters a ladder type does not use are
ignored.
"""

from collections.abc import Callable

from ..config import DEFAULT_STEP_SIZE, FALLBACK_MAX_ROUNDS
from ..models import LADDER_TYPES, WorkoutConfig
from .base import LadderStrategy
from .chipper import ChipperLadder
from .christmas import ChristmasLadder
from .fixed import AmrapLadder, ForRepsLadder
from .flexible import FlexibleLadder
from .linear import AscendingLadder, DescendingLadder
from .pyramid import PyramidLadder


class UnsupportedLadderTypeError(ValueError):
    """Raised when a ladder type tag has no strategy."""

    def __init__(self, ladder_type: str):
        self.ladder_type = ladder_type
        valid = ", ".join(LADDER_TYPES)
        super().__init__(f"Unsupported ladder type '{ladder_type}'. Valid types: {valid}")


_Builder = Callable[[int, int, int | None], LadderStrategy]

_BUILDERS: dict[str, _Builder] = {
    "christmas": lambda step, rounds, start: ChristmasLadder(),
    "ascending": lambda step, rounds, start: AscendingLadder(step_size=step, starting_reps=start),
    "descending": lambda step, rounds, start: DescendingLadder(
        step_size=step, max_rounds=rounds, starting_reps=start
    ),
    "pyramid": lambda step, rounds, start: PyramidLadder(step_size=step, max_rounds=rounds),
    "flexible": lambda step, rounds, start: FlexibleLadder(),
    "chipper": lambda step, rounds, start: ChipperLadder(),
    "amrap": lambda step, rounds, start: AmrapLadder(),
    "forreps": lambda step, rounds, start: ForRepsLadder(),
}


def get_ladder_strategy(
    ladder_type: str,
    step_size: int | None = DEFAULT_STEP_SIZE,
    max_rounds: int | None = None,
    starting_reps: int | None = None,
) -> LadderStrategy:
    """
    Return the strategy for the given ladder type.

    Args:
        ladder_type: One of LADDER_TYPES
        step_size: Global step (ascending, descending, pyramid); None means 1
        max_rounds: Round bound (descending, pyramid); None or 0 means 10
        starting_reps: First-round reps (ascending, descending)

    Returns:
        Configured LadderStrategy

    Raises:
        UnsupportedLadderTypeError: If ladder_type is not supported
    """
    builder = _BUILDERS.get(ladder_type)
    if builder is None:
        raise UnsupportedLadderTypeError(ladder_type)
    step = DEFAULT_STEP_SIZE if step_size is None else step_size
    rounds = max_rounds or FALLBACK_MAX_ROUNDS
    return builder(step, rounds, starting_reps)


def strategy_for(config: WorkoutConfig) -> LadderStrategy:
    """Return the strategy configured by a workout snapshot."""
    return get_ladder_strategy(
        config.ladder_type,
        step_size=config.step_size,
        max_rounds=config.max_rounds,
        starting_reps=config.starting_reps,
    )
