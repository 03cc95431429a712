"""
Data models for ladder-trainer.

Value types shared by the ladder engine, the serializers and the CLI.
Per-exercise rep parameters live in a rep-scheme payload whose type says
which ladder it belongs to; every payload field is optional because stale
or partial data has to survive a switch between ladder types.
"""

from dataclasses import dataclass, field
from typing import Literal, Union

LadderType = Literal[
    "christmas",
    "ascending",
    "descending",
    "pyramid",
    "flexible",
    "chipper",
    "amrap",
    "forreps",
]
Direction = Literal["ascending", "descending", "constant"]

LADDER_TYPES: tuple[str, ...] = (
    "christmas",
    "ascending",
    "descending",
    "pyramid",
    "flexible",
    "chipper",
    "amrap",
    "forreps",
)
DIRECTIONS: tuple[str, ...] = ("ascending", "descending", "constant")


def _check_non_negative(value: int | None, name: str) -> None:
    if value is not None and value < 0:
        raise ValueError(f"{name} must be non-negative")


@dataclass(frozen=True)
class FlexibleReps:
    """Independent progression for one exercise of a Flexible ladder."""

    direction: Direction | None = None
    starting_reps: int | None = None
    step_size: int | None = None

    def __post_init__(self) -> None:
        if self.direction is not None and self.direction not in DIRECTIONS:
            raise ValueError(f"Invalid direction: {self.direction}")
        _check_non_negative(self.starting_reps, "starting_reps")
        _check_non_negative(self.step_size, "step_size")


@dataclass(frozen=True)
class AmrapReps:
    """
    AMRAP progression for one exercise.

    step_size=0 (or missing) means the same reps every round.
    """

    starting_reps: int | None = None
    step_size: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative(self.starting_reps, "starting_reps")
        _check_non_negative(self.step_size, "step_size")


@dataclass(frozen=True)
class ChipperReps:
    """One-shot rep count for the single round a chipper exercise owns."""

    fixed_reps: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative(self.fixed_reps, "fixed_reps")


@dataclass(frozen=True)
class ForRepsReps:
    """Constant reps performed every round."""

    reps_per_round: int | None = None

    def __post_init__(self) -> None:
        _check_non_negative(self.reps_per_round, "reps_per_round")


RepScheme = Union[FlexibleReps, AmrapReps, ChipperReps, ForRepsReps, None]


@dataclass(frozen=True)
class Exercise:
    """
    One exercise slot in a workout.

    position is 1-based inside the ladder; 0 is used for the buy-in/buy-out
    exercise, which sits outside the ladder.
    """

    position: int
    name: str
    unit: str = ""  # empty means "reps"
    scheme: RepScheme = None

    def __post_init__(self) -> None:
        if self.position < 0:
            raise ValueError("position must be non-negative")

    @property
    def unit_label(self) -> str:
        """Unit as displayed: lower-cased, "reps" when unset."""
        return (self.unit or "reps").lower()


@dataclass(frozen=True)
class RoundEntry:
    """An exercise and the reps prescribed for it in one round."""

    exercise: Exercise
    reps: int


@dataclass(frozen=True)
class WorkoutConfig:
    """
    Snapshot of a workout definition.

    step_size and starting_reps are the global progression parameters used
    by ascending/descending/pyramid ladders; the other ladder types read
    their numbers from each exercise's rep scheme.
    """

    name: str
    ladder_type: LadderType
    exercises: tuple[Exercise, ...] = field(default_factory=tuple)
    max_rounds: int = 1
    step_size: int = 1
    starting_reps: int | None = None
    rest_period_seconds: int = 0
    time_cap_seconds: int | None = None  # AMRAP only
    buy_in_out: Exercise | None = None
    buy_in_out_rest_seconds: int = 0

    def __post_init__(self) -> None:
        # Accept any sequence but store an immutable tuple.
        if not isinstance(self.exercises, tuple):
            object.__setattr__(self, "exercises", tuple(self.exercises))

    @property
    def has_buy_in_out(self) -> bool:
        return self.buy_in_out is not None
