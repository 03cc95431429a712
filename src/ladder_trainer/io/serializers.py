"""
Dict/JSON/YAML serialization for workout models.

Stored exercises are flat records: the rep-scheme fields (direction,
starting_reps, step_size, fixed_reps, reps_per_round) sit next to position,
name and unit. Which of them matter depends on the workout's ladder type,
so the scheme is rebuilt from the ladder type when a workout is loaded.

Old records are upgraded on read by filling defaults:
  - missing ladder_type  -> "christmas" (the only ladder early versions had)
  - missing max_rounds   -> number of exercises
"""

import json
from pathlib import Path
from typing import Any

import yaml

from ..core.models import (
    DIRECTIONS,
    LADDER_TYPES,
    AmrapReps,
    ChipperReps,
    Exercise,
    FlexibleReps,
    ForRepsReps,
    RepScheme,
    WorkoutConfig,
)

LEGACY_LADDER_TYPE = "christmas"
WORKOUT_FILE_SUFFIXES = (".json", ".yaml", ".yml")


class ValidationError(Exception):
    """Raised when data validation fails."""

    pass


def _whole_number(value: Any, key: str) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"{key} must be a whole number, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"{key} must be an integer, got {value!r}") from e


def _int_field(data: dict[str, Any], key: str, default: int = 0) -> int:
    value = data.get(key)
    return default if value is None else _whole_number(value, key)


def _optional_int(data: dict[str, Any], key: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    number = _whole_number(value, key)
    if number < 0:
        raise ValidationError(f"{key} must be non-negative, got {number}")
    return number


def _scheme_to_dict(scheme: RepScheme) -> dict[str, Any]:
    if isinstance(scheme, FlexibleReps):
        fields = {
            "direction": scheme.direction,
            "starting_reps": scheme.starting_reps,
            "step_size": scheme.step_size,
        }
    elif isinstance(scheme, AmrapReps):
        fields = {"starting_reps": scheme.starting_reps, "step_size": scheme.step_size}
    elif isinstance(scheme, ChipperReps):
        fields = {"fixed_reps": scheme.fixed_reps}
    elif isinstance(scheme, ForRepsReps):
        fields = {"reps_per_round": scheme.reps_per_round}
    else:
        fields = {}
    return {k: v for k, v in fields.items() if v is not None}


def _infer_scheme_kind(data: dict[str, Any]) -> str | None:
    """Guess the ladder type an exercise record was written for."""
    if "direction" in data:
        return "flexible"
    if "fixed_reps" in data:
        return "chipper"
    if "reps_per_round" in data:
        return "forreps"
    if "starting_reps" in data or "step_size" in data:
        return "amrap"
    return None


def _scheme_from_dict(data: dict[str, Any], ladder_type: str | None) -> RepScheme:
    kind = ladder_type if ladder_type is not None else _infer_scheme_kind(data)

    if kind == "flexible":
        direction = data.get("direction")
        if direction is not None and direction not in DIRECTIONS:
            raise ValidationError(
                f"Invalid direction: {direction}. Must be one of {DIRECTIONS}"
            )
        return FlexibleReps(
            direction=direction,
            starting_reps=_optional_int(data, "starting_reps"),
            step_size=_optional_int(data, "step_size"),
        )
    if kind == "amrap":
        # Cindy-style AMRAP: same reps every round, stored as reps_per_round.
        if "reps_per_round" in data and "starting_reps" not in data:
            return ForRepsReps(reps_per_round=_optional_int(data, "reps_per_round"))
        return AmrapReps(
            starting_reps=_optional_int(data, "starting_reps"),
            step_size=_optional_int(data, "step_size"),
        )
    if kind == "chipper":
        return ChipperReps(fixed_reps=_optional_int(data, "fixed_reps"))
    if kind == "forreps":
        return ForRepsReps(reps_per_round=_optional_int(data, "reps_per_round"))
    return None


def exercise_to_dict(exercise: Exercise) -> dict[str, Any]:
    """
    Convert Exercise to a flat JSON-compatible dict.

    Args:
        exercise: Exercise to convert

    Returns:
        Dict representation
    """
    d: dict[str, Any] = {
        "position": exercise.position,
        "name": exercise.name,
        "unit": exercise.unit,
    }
    d.update(_scheme_to_dict(exercise.scheme))
    return d


def dict_to_exercise(data: dict[str, Any], ladder_type: str | None = None) -> Exercise:
    """
    Convert a flat dict to Exercise.

    Args:
        data: Dict representation
        ladder_type: Ladder type of the owning workout; picks the rep scheme.
            When omitted the scheme is inferred from the fields present.

    Returns:
        Exercise instance

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Exercise must be a mapping, got {data!r}")
    if "position" not in data or "name" not in data:
        raise ValidationError(f"Exercise needs position and name: {data!r}")
    position = _optional_int(data, "position")
    return Exercise(
        position=position or 0,
        name=str(data["name"]),
        unit=str(data.get("unit") or ""),
        scheme=_scheme_from_dict(data, ladder_type),
    )


def needs_migration(data: dict[str, Any]) -> bool:
    """True if a stored workout record predates ladder types."""
    return not data.get("ladder_type")


def migrate_workout_dict(data: dict[str, Any]) -> dict[str, Any]:
    """Return a copy of a stored workout record with legacy defaults filled in."""
    d = dict(data)
    if needs_migration(d):
        d["ladder_type"] = LEGACY_LADDER_TYPE
        exercises = d.get("exercises")
        d["max_rounds"] = d.get("max_rounds") or (
            len(exercises) if isinstance(exercises, list) else 0
        )
    return d


def workout_to_dict(config: WorkoutConfig) -> dict[str, Any]:
    """
    Convert WorkoutConfig to JSON-compatible dict.

    Args:
        config: Workout to convert

    Returns:
        Dict representation
    """
    d: dict[str, Any] = {
        "name": config.name,
        "ladder_type": config.ladder_type,
        "max_rounds": config.max_rounds,
        "step_size": config.step_size,
        "rest_period_seconds": config.rest_period_seconds,
        "exercises": [exercise_to_dict(ex) for ex in config.exercises],
    }
    if config.starting_reps is not None:
        d["starting_reps"] = config.starting_reps
    if config.time_cap_seconds is not None:
        d["time_cap_seconds"] = config.time_cap_seconds
    if config.buy_in_out is not None:
        d["buy_in_out"] = exercise_to_dict(config.buy_in_out)
        d["buy_in_out_rest_seconds"] = config.buy_in_out_rest_seconds
    return d


def dict_to_workout(data: dict[str, Any]) -> WorkoutConfig:
    """
    Convert dict to WorkoutConfig, upgrading legacy records.

    Args:
        data: Dict representation

    Returns:
        WorkoutConfig instance

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Workout must be a mapping, got {type(data).__name__}")
    d = migrate_workout_dict(data)

    ladder_type = d["ladder_type"]
    if ladder_type not in LADDER_TYPES:
        raise ValidationError(
            f"Invalid ladder_type: {ladder_type}. Must be one of {LADDER_TYPES}"
        )

    raw_exercises = d.get("exercises") or []
    if not isinstance(raw_exercises, list):
        raise ValidationError("exercises must be a list")

    try:
        exercises = tuple(dict_to_exercise(ex, ladder_type) for ex in raw_exercises)
        buy_in_out = (
            dict_to_exercise(d["buy_in_out"], ladder_type=None)
            if d.get("buy_in_out")
            else None
        )
        step_size = _optional_int(d, "step_size")
        return WorkoutConfig(
            name=str(d.get("name", "")),
            ladder_type=ladder_type,
            exercises=exercises,
            max_rounds=_int_field(d, "max_rounds"),
            step_size=1 if step_size is None else step_size,
            starting_reps=_optional_int(d, "starting_reps"),
            rest_period_seconds=_int_field(d, "rest_period_seconds"),
            time_cap_seconds=_optional_int(d, "time_cap_seconds"),
            buy_in_out=buy_in_out,
            buy_in_out_rest_seconds=_int_field(d, "buy_in_out_rest_seconds"),
        )
    except ValueError as e:
        raise ValidationError(str(e)) from e


def load_workout_file(path: str | Path) -> WorkoutConfig:
    """
    Load a single workout from a .json, .yaml or .yml file.

    Raises:
        ValidationError: If the file type is unsupported or the content is invalid
        FileNotFoundError: If the file does not exist
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix not in WORKOUT_FILE_SUFFIXES:
        raise ValidationError(
            f"Unsupported workout file type: {path.name}. "
            f"Expected one of {', '.join(WORKOUT_FILE_SUFFIXES)}"
        )

    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text) if suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Cannot parse {path.name}: {e}") from e

    return dict_to_workout(data)
