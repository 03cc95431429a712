"""
CLI entry point using Typer.

Commands:
- types: List ladder types and their progression rules
- benchmarks: List benchmark workouts
- preview: Round-by-round breakdown of a workout
- summary: Per-exercise totals after N rounds
- validate: Check a workout definition
- save / templates / delete-template: Manage saved templates
"""

from .app import app
from .commands import catalog, templates, workouts  # noqa: F401  (registers commands)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
