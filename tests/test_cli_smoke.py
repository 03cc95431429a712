"""
Minimal smoke tests for ladder-trainer CLI.

Tests basic functionality:
- App runs without errors
- Catalog commands list ladder types and benchmarks
- Workouts preview and summarize from benchmark IDs and files
- Templates can be saved, listed and deleted
"""

import json
import tempfile
from pathlib import Path

import pytest
from typer.testing import CliRunner

from ladder_trainer.cli.main import app


runner = CliRunner()


@pytest.fixture
def temp_store_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


class TestCLISmoke:
    """Basic smoke tests for CLI commands."""

    def test_app_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "preview" in result.output
        assert "summary" in result.output

    def test_types(self):
        result = runner.invoke(app, ["types"])
        assert result.exit_code == 0
        assert "christmas" in result.output
        assert "forreps" in result.output

    def test_benchmarks(self):
        result = runner.invoke(app, ["benchmarks"])
        assert result.exit_code == 0
        assert "fran" in result.output
        assert "cindy" in result.output

    def test_preview_benchmark(self):
        result = runner.invoke(app, ["preview", "fran"])
        assert result.exit_code == 0
        assert "21 - 15 - 9" in result.output

    def test_preview_unknown_workout(self):
        result = runner.invoke(app, ["preview", "nope"])
        assert result.exit_code == 1
        assert "Unknown benchmark" in result.output

    def test_preview_amrap_defaults_to_five_rounds(self):
        result = runner.invoke(app, ["preview", "cindy"])
        assert result.exit_code == 0
        assert "Time cap: 20:00" in result.output

    def test_summary_benchmark(self):
        result = runner.invoke(app, ["summary", "fran"])
        assert result.exit_code == 0
        assert "Total volume: 90" in result.output

    def test_summary_amrap_needs_rounds(self):
        result = runner.invoke(app, ["summary", "cindy"])
        assert result.exit_code == 1
        assert "--rounds" in result.output

    def test_summary_amrap_with_rounds(self):
        # 21 rounds of 5 + 10 + 15
        result = runner.invoke(app, ["summary", "cindy", "--rounds", "21"])
        assert result.exit_code == 0
        assert "Total volume: 630" in result.output
        assert "20+" in result.output

    def test_validate_benchmark(self):
        result = runner.invoke(app, ["validate", "twelve_days"])
        assert result.exit_code == 0
        assert "12 Days: OK" in result.output


class TestWorkoutFiles:
    """Workouts loaded from .yaml/.json files."""

    def test_preview_yaml_file(self, temp_store_dir):
        path = temp_store_dir / "peak.yaml"
        path.write_text(
            "name: Small Peak\n"
            "ladder_type: pyramid\n"
            "max_rounds: 5\n"
            "step_size: 2\n"
            "exercises:\n"
            "  - {position: 1, name: Push-ups}\n",
            encoding="utf-8",
        )
        result = runner.invoke(app, ["preview", str(path)])
        assert result.exit_code == 0
        assert "2 - 4 - 6 - 4 - 2" in result.output

    def test_validate_reports_problems(self, temp_store_dir):
        path = temp_store_dir / "short.json"
        path.write_text(
            json.dumps({
                "name": "Short",
                "ladder_type": "christmas",
                "max_rounds": 5,
                "exercises": [
                    {"position": 1, "name": "Burpees"},
                    {"position": 2, "name": "Squats"},
                ],
            }),
            encoding="utf-8",
        )
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1
        assert "requires at least 5 exercises" in result.output

    def test_invalid_file(self, temp_store_dir):
        path = temp_store_dir / "bad.json"
        path.write_text('{"name": "Bad", "ladder_type": "tabata"}', encoding="utf-8")
        result = runner.invoke(app, ["summary", str(path)])
        assert result.exit_code == 1
        assert "Invalid ladder_type" in result.output


class TestTemplates:
    """save / templates / delete-template against a temporary store."""

    def test_templates_empty(self, temp_store_dir):
        store = temp_store_dir / "templates.json"
        result = runner.invoke(app, ["templates", "--store-path", str(store)])
        assert result.exit_code == 0
        assert "No saved templates." in result.output

    def test_save_list_delete(self, temp_store_dir):
        store = temp_store_dir / "templates.json"

        result = runner.invoke(app, ["save", "fran", "--store-path", str(store)])
        assert result.exit_code == 0
        assert "Saved template: Fran" in result.output
        assert store.exists()

        result = runner.invoke(app, ["save", "fran", "--store-path", str(store)])
        assert result.exit_code == 0
        assert "Updated template: Fran" in result.output

        result = runner.invoke(app, ["templates", "--store-path", str(store)])
        assert result.exit_code == 0
        assert "Fran" in result.output

        result = runner.invoke(
            app, ["delete-template", "Fran", "--store-path", str(store)], input="y\n"
        )
        assert result.exit_code == 0
        assert "Deleted template: Fran" in result.output
        assert json.loads(store.read_text(encoding="utf-8")) == []

    def test_delete_missing_template(self, temp_store_dir):
        store = temp_store_dir / "templates.json"
        result = runner.invoke(
            app, ["delete-template", "Nope", "--store-path", str(store), "--force"]
        )
        assert result.exit_code == 1
        assert "No template named 'Nope'" in result.output

    def test_delete_cancelled(self, temp_store_dir):
        store = temp_store_dir / "templates.json"
        runner.invoke(app, ["save", "cindy", "--store-path", str(store)])

        result = runner.invoke(
            app, ["delete-template", "Cindy", "--store-path", str(store)], input="n\n"
        )
        assert result.exit_code == 0
        assert "Cancelled." in result.output
        assert len(json.loads(store.read_text(encoding="utf-8"))) == 1
