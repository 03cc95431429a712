"""Shared Typer app object, shared option types, and workout/store utilities."""

from pathlib import Path
from typing import Annotated, Optional

import typer

from ..core.benchmarks.registry import get_benchmark
from ..core.models import WorkoutConfig
from ..io.serializers import load_workout_file
from ..io.template_store import TemplateStore, get_default_store_path

# Shared WORKOUT argument used by preview/summary/validate/save
WorkoutArgument = Annotated[
    str,
    typer.Argument(help="Benchmark ID (e.g. fran, cindy) or path to a .json/.yaml workout file"),
]

StorePathOption = Annotated[
    Optional[Path],
    typer.Option("--store-path", help="Templates file (default: ~/.ladder-trainer/templates.json)"),
]

app = typer.Typer(
    name="ladder-trainer",
    help="Ladder workout calculator: round-by-round reps and totals for every ladder type.",
    no_args_is_help=True,
)


def get_store(store_path: Path | None) -> TemplateStore:
    """Get template store from path or default location."""
    if store_path is None:
        store_path = get_default_store_path()
    return TemplateStore(store_path)


def resolve_workout(ref: str) -> WorkoutConfig:
    """
    Load a workout from a file path or a benchmark ID.

    Raises:
        ValueError: If ref is neither an existing file nor a known benchmark
        ValidationError: If the file content is invalid
    """
    path = Path(ref)
    if path.is_file():
        return load_workout_file(path)
    return get_benchmark(ref)
