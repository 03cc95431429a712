"""Catalog commands: types, benchmarks."""

from ...core.benchmarks.registry import BENCHMARK_REGISTRY
from .. import views
from ..app import app


@app.command("types")
def ladder_types() -> None:
    """
    List the supported ladder types and how each one progresses.
    """
    views.console.print(views.format_ladder_types_table())


@app.command()
def benchmarks() -> None:
    """
    List the bundled benchmark workouts (plus any from ~/.ladder-trainer/benchmarks).
    """
    views.console.print(views.format_benchmarks_table(BENCHMARK_REGISTRY))
