"""
YAML -> WorkoutConfig loader for benchmark workouts.

Loads benchmark definitions from individual YAML files in the bundled
``src/ladder_trainer/benchmarks/`` directory. The file stem is the
benchmark ID (e.g. fran.yaml -> "fran").

User overrides: place matching files in ``~/.ladder-trainer/benchmarks/``.
A user file is deep-merged over the bundled definition, so only changed
keys need to be listed. A user file whose stem does not match any bundled
file is loaded as a new benchmark.

Usage (internal, called by registry.py):
    from .loader import load_benchmarks_from_yaml
    benchmarks = load_benchmarks_from_yaml()   # dict, empty when nothing loads
"""

from __future__ import annotations

import os
import warnings
from pathlib import Path

import yaml

from ...io.serializers import ValidationError, dict_to_workout
from ..models import WorkoutConfig


def _load_yaml_file(path: Path) -> dict:
    """Load a YAML mapping; warn and return {} if the file is unreadable."""
    try:
        with open(path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as exc:
        warnings.warn(
            f"ladder-trainer: cannot read benchmark file {path} ({exc})",
            stacklevel=3,
        )
        return {}
    return data if isinstance(data, dict) else {}


def _deep_merge(base: dict, override: dict) -> dict:
    """Recursively merge override into base (non-destructive to base)."""
    result = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(result.get(k), dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def _get_bundled_benchmarks_dir() -> Path | None:
    """Return path to the bundled benchmarks/ data directory, or None if not found."""
    # loader.py lives at src/ladder_trainer/core/benchmarks/loader.py
    # three levels up -> src/ladder_trainer/
    candidate = Path(__file__).parent.parent.parent / "benchmarks"
    return candidate if candidate.is_dir() else None


def _get_user_benchmarks_dir() -> Path | None:
    """Return ~/.ladder-trainer/benchmarks/ if it exists, else None."""
    home = Path(os.environ.get("HOME", "~")).expanduser()
    p = home / ".ladder-trainer" / "benchmarks"
    return p if p.is_dir() else None


def _to_workout(raw: dict, source: str) -> WorkoutConfig | None:
    try:
        return dict_to_workout(raw)
    except (ValidationError, KeyError) as exc:
        warnings.warn(
            f"ladder-trainer: skipping benchmark '{source}' ({exc})",
            stacklevel=3,
        )
        return None


def load_benchmarks_from_yaml(
    bundled_dir: Path | None = None,
    user_dir: Path | None = None,
) -> dict[str, WorkoutConfig]:
    """
    Return {benchmark_id: WorkoutConfig} loaded from per-benchmark YAML files.

    Args:
        bundled_dir: Directory of shipped definitions; defaults to the package data
        user_dir: Directory of user overrides; defaults to ~/.ladder-trainer/benchmarks

    Returns:
        Loaded benchmarks in file-name order; invalid files are skipped with a warning
    """
    if bundled_dir is None:
        bundled_dir = _get_bundled_benchmarks_dir()
    if user_dir is None:
        user_dir = _get_user_benchmarks_dir()

    stems: dict[str, Path] = {}
    if bundled_dir is not None:
        for p in sorted(bundled_dir.glob("*.yaml")):
            stems[p.stem] = p

    user_only: list[Path] = []
    if user_dir is not None:
        for p in sorted(user_dir.glob("*.yaml")):
            if p.stem not in stems:
                user_only.append(p)

    result: dict[str, WorkoutConfig] = {}

    for stem, bundled_path in stems.items():
        raw = _load_yaml_file(bundled_path)
        if not raw:
            continue
        if user_dir is not None:
            user_path = user_dir / f"{stem}.yaml"
            if user_path.exists():
                user_raw = _load_yaml_file(user_path)
                if user_raw:
                    raw = _deep_merge(raw, user_raw)
        workout = _to_workout(raw, stem)
        if workout is not None:
            result[stem] = workout

    for p in user_only:
        raw = _load_yaml_file(p)
        if not raw:
            continue
        workout = _to_workout(raw, p.stem)
        if workout is not None:
            result[p.stem] = workout

    return result
