"""Workout commands: preview, summary, validate."""

from typing import Annotated, Optional

import typer

from ...core.models import WorkoutConfig
from ...core.preview import round_breakdown
from ...core.summary import exercise_totals, format_amount, workout_total
from ...core.validation import validate_workout
from ...io.serializers import ValidationError
from .. import views
from ..app import WorkoutArgument, app, resolve_workout


def _load_or_exit(ref: str) -> WorkoutConfig:
    try:
        return resolve_workout(ref)
    except (ValueError, ValidationError, OSError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)


@app.command()
def preview(
    workout: WorkoutArgument,
    rounds: Annotated[
        Optional[int],
        typer.Option("--rounds", "-r", help="Rounds to show (default: all, AMRAP: 5)", min=1),
    ] = None,
) -> None:
    """
    Show what every round of a workout looks like.
    """
    config = _load_or_exit(workout)

    for problem in validate_workout(config):
        views.print_warning(problem)

    views.print_workout_header(config)
    views.console.print(views.format_rounds_table(round_breakdown(config, rounds)))


@app.command()
def summary(
    workout: WorkoutArgument,
    rounds: Annotated[
        Optional[int],
        typer.Option(
            "--rounds", "-r",
            help="Rounds recorded (default: max rounds; AMRAP requires it)",
            min=0,
        ),
    ] = None,
) -> None:
    """
    Show the total amount performed per exercise after a number of rounds.
    """
    config = _load_or_exit(workout)

    if rounds is None:
        if config.ladder_type == "amrap":
            views.print_error("AMRAP workouts have no round ceiling; pass --rounds.")
            raise typer.Exit(1)
        rounds = config.max_rounds

    totals = exercise_totals(config, rounds)
    views.print_workout_header(config)
    views.console.print(views.format_totals_table(config, totals, rounds))
    views.console.print(f"Total volume: [bold]{format_amount(workout_total(config, rounds))}[/bold]")


@app.command()
def validate(workout: WorkoutArgument) -> None:
    """
    Check a workout definition and list every problem found.
    """
    config = _load_or_exit(workout)

    problems = validate_workout(config)
    if problems:
        for problem in problems:
            views.print_error(problem)
        raise typer.Exit(1)

    views.print_success(f"{config.name}: OK")
