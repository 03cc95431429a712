"""
JSON-based storage for saved workout templates.

Templates live in a single JSON file holding a list of workout records.
Records written by older versions are upgraded on load and the file is
rewritten once so the upgrade does not repeat.
"""

import json
import os
import warnings
from pathlib import Path

from ..core.models import WorkoutConfig
from .serializers import (
    ValidationError,
    dict_to_workout,
    needs_migration,
    workout_to_dict,
)


def get_default_store_path() -> Path:
    """Return ~/.ladder-trainer/templates.json."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    return home / ".ladder-trainer" / "templates.json"


class TemplateStore:
    """
    Manages workout templates stored as a JSON list.

    Template names are unique; adding a template with an existing name
    replaces it.
    """

    def __init__(self, path: str | Path):
        """
        Initialize the template store.

        Args:
            path: Path to the JSON templates file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        """Check if the templates file exists."""
        return self.path.exists()

    def _read_records(self) -> list[dict]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValidationError(f"Corrupt templates file {self.path}: {e}") from e
        if not isinstance(data, list):
            raise ValidationError(f"Templates file {self.path} must hold a list")
        return data

    def load(self) -> list[WorkoutConfig]:
        """
        Load all templates, upgrading legacy records.

        Returns:
            Templates in stored order; empty if the file does not exist

        Raises:
            ValidationError: If the file or a record is invalid
        """
        records = self._read_records()
        templates = [dict_to_workout(r) for r in records]

        migrated = sum(1 for r in records if needs_migration(r))
        if migrated:
            warnings.warn(
                f"ladder-trainer: upgraded {migrated} legacy template(s) in {self.path}",
                stacklevel=2,
            )
            self.save(templates)

        return templates

    def save(self, templates: list[WorkoutConfig]) -> None:
        """Write templates, replacing the file contents."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump([workout_to_dict(t) for t in templates], f, indent=2)
            f.write("\n")
        tmp_path.replace(self.path)

    def get(self, name: str) -> WorkoutConfig | None:
        """Return the template with the given name, or None."""
        for template in self.load():
            if template.name == name:
                return template
        return None

    def add(self, template: WorkoutConfig) -> bool:
        """
        Save a template.

        Returns:
            True if a template with the same name was replaced
        """
        templates = self.load()
        replaced = False
        for i, existing in enumerate(templates):
            if existing.name == template.name:
                templates[i] = template
                replaced = True
                break
        if not replaced:
            templates.append(template)
        self.save(templates)
        return replaced

    def delete(self, name: str) -> bool:
        """
        Delete the template with the given name.

        Returns:
            True if a template was deleted
        """
        templates = self.load()
        kept = [t for t in templates if t.name != name]
        if len(kept) == len(templates):
            return False
        self.save(kept)
        return True
