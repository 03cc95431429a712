"""
CLI view formatters using Rich for pretty console output.

Handles table formatting and display of workouts, rounds and totals.
"""

from rich.console import Console
from rich.table import Table

from ..core.config import LADDER_DEFAULTS
from ..core.ladders import get_ladder_strategy, strategy_for
from ..core.models import LADDER_TYPES, RoundEntry, WorkoutConfig
from ..core.preview import reps_preview
from ..core.summary import (
    ExerciseTotal,
    format_amount,
    format_time,
    ladder_display_name,
    rounds_label,
)

console = Console()


def _fmt_entries(entries: list[RoundEntry]) -> str:
    if not entries:
        return "[dim]-[/dim]"
    return ", ".join(
        f"{e.reps} {e.exercise.unit_label} {e.exercise.name}" for e in entries
    )


def format_ladder_types_table() -> Table:
    """Table of every ladder type with its defaults and rule."""
    table = Table(title="Ladder types")
    table.add_column("Type", style="cyan")
    table.add_column("Name")
    table.add_column("Rounds", justify="right")
    table.add_column("Rule")

    for ladder_type in LADDER_TYPES:
        defaults = LADDER_DEFAULTS[ladder_type]
        strategy = get_ladder_strategy(
            ladder_type,
            step_size=defaults.step_size,
            max_rounds=defaults.max_rounds,
            starting_reps=defaults.starting_reps,
        )
        rounds = "∞" if ladder_type == "amrap" else str(defaults.max_rounds)
        table.add_row(ladder_type, ladder_display_name(ladder_type), rounds, strategy.describe())

    return table


def format_benchmarks_table(benchmarks: dict[str, WorkoutConfig]) -> Table:
    """Table of benchmark workouts keyed by ID."""
    table = Table(title="Benchmark workouts")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Rounds", justify="right")
    table.add_column("Exercises")

    for benchmark_id, workout in benchmarks.items():
        table.add_row(
            benchmark_id,
            workout.name,
            ladder_display_name(workout.ladder_type),
            _fmt_rounds(workout),
            ", ".join(ex.name for ex in workout.exercises),
        )

    return table


def format_templates_table(templates: list[WorkoutConfig]) -> Table:
    """Table of saved templates."""
    table = Table(title="Saved templates")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Type")
    table.add_column("Rounds", justify="right")
    table.add_column("Exercises", justify="right")

    for i, template in enumerate(templates, start=1):
        table.add_row(
            str(i),
            template.name,
            ladder_display_name(template.ladder_type),
            _fmt_rounds(template),
            str(len(template.exercises)),
        )

    return table


def _fmt_rounds(workout: WorkoutConfig) -> str:
    if workout.ladder_type == "amrap" and workout.time_cap_seconds:
        return f"{format_time(workout.time_cap_seconds)} cap"
    return str(workout.max_rounds)


def print_workout_header(workout: WorkoutConfig) -> None:
    """Print name, ladder type, rule and one-line rep sequence."""
    console.print()
    console.print(
        f"[bold]{workout.name}[/bold]  "
        f"[cyan]{ladder_display_name(workout.ladder_type)}[/cyan]"
    )
    console.print(f"[dim]{strategy_for(workout).describe()}[/dim]")

    sequence = reps_preview(workout)
    if sequence:
        console.print(f"Reps: [green]{sequence}[/green]")
    if workout.ladder_type == "amrap" and workout.time_cap_seconds:
        console.print(f"Time cap: {format_time(workout.time_cap_seconds)}")
    if workout.rest_period_seconds > 0:
        console.print(f"Rest between rounds: {workout.rest_period_seconds}s")
    if workout.buy_in_out is not None:
        ex = workout.buy_in_out
        console.print(
            f"Buy-in / buy-out: {ex.name} ({ex.unit_label}), "
            f"rest {workout.buy_in_out_rest_seconds}s"
        )


def format_rounds_table(rounds: list[tuple[int, list[RoundEntry]]]) -> Table:
    """Round-by-round breakdown."""
    table = Table(title="Rounds")
    table.add_column("Round", justify="right", style="cyan")
    table.add_column("Exercises")
    table.add_column("Reps", justify="right")

    for round_number, entries in rounds:
        table.add_row(
            str(round_number),
            _fmt_entries(entries),
            str(sum(e.reps for e in entries)),
        )

    return table


def format_totals_table(
    workout: WorkoutConfig, totals: list[ExerciseTotal], rounds_recorded: int
) -> Table:
    """Per-exercise totals after a number of rounds."""
    table = Table(title=f"Exercise summary ({rounds_label(workout.ladder_type, rounds_recorded)} rounds)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Exercise", style="bold")
    table.add_column("Total", justify="right", style="green")
    table.add_column("Unit")

    for t in totals:
        table.add_row(str(t.exercise.position), t.exercise.name, format_amount(t.total), t.unit_label)

    return table


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {message}[/red]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning: {message}[/yellow]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]{message}[/blue]")


def confirm_action(message: str) -> bool:
    """
    Prompt user for confirmation.

    Args:
        message: Confirmation message

    Returns:
        True if confirmed, False otherwise
    """
    response = console.input(f"{message} [y/N]: ")
    return response.lower() in ("y", "yes")
