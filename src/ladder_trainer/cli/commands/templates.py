"""Template commands: save, templates, delete-template."""

from typing import Annotated

import typer

from ...core.validation import validate_workout
from ...io.serializers import ValidationError
from .. import views
from ..app import StorePathOption, WorkoutArgument, app, get_store, resolve_workout


@app.command()
def save(
    workout: WorkoutArgument,
    store_path: StorePathOption = None,
) -> None:
    """
    Save a workout (benchmark or file) as a template.
    """
    try:
        config = resolve_workout(workout)
    except (ValueError, ValidationError, OSError) as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    problems = validate_workout(config)
    if problems:
        for problem in problems:
            views.print_error(problem)
        raise typer.Exit(1)

    store = get_store(store_path)
    try:
        replaced = store.add(config)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    verb = "Updated" if replaced else "Saved"
    views.print_success(f"{verb} template: {config.name}")


@app.command()
def templates(store_path: StorePathOption = None) -> None:
    """
    List saved templates.
    """
    store = get_store(store_path)
    try:
        saved = store.load()
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if not saved:
        views.print_info("No saved templates.")
        return

    views.console.print(views.format_templates_table(saved))


@app.command("delete-template")
def delete_template(
    name: Annotated[str, typer.Argument(help="Template name")],
    store_path: StorePathOption = None,
    force: Annotated[bool, typer.Option("--force", "-f", help="Skip confirmation")] = False,
) -> None:
    """
    Delete a saved template by name.
    """
    store = get_store(store_path)
    try:
        existing = store.get(name)
    except ValidationError as e:
        views.print_error(str(e))
        raise typer.Exit(1)

    if existing is None:
        views.print_error(f"No template named '{name}'")
        raise typer.Exit(1)

    if not force and not views.confirm_action(f"Delete template '{name}'?"):
        views.print_info("Cancelled.")
        raise typer.Exit(0)

    store.delete(name)
    views.print_success(f"Deleted template: {name}")
