"""
Benchmark workout registry.

Benchmark workouts ship with the package as one YAML file each and are
loaded at import time. Use get_benchmark() to look one up by ID. If no
definition can be loaded a RuntimeError is raised; the bundled files are
part of the package.

User overrides: place matching files in ``~/.ladder-trainer/benchmarks/``.
"""

from ..models import WorkoutConfig


def _build_registry() -> dict[str, WorkoutConfig]:
    from .loader import load_benchmarks_from_yaml

    loaded = load_benchmarks_from_yaml()
    if not loaded:
        raise RuntimeError(
            "ladder-trainer: no benchmark workouts could be loaded from YAML. "
            "Check that src/ladder_trainer/benchmarks/*.yaml files are present and valid."
        )
    return loaded


BENCHMARK_REGISTRY: dict[str, WorkoutConfig] = _build_registry()


def get_benchmark(benchmark_id: str) -> WorkoutConfig:
    """
    Return the benchmark workout with the given ID.

    Args:
        benchmark_id: File stem of the benchmark, e.g. "fran" or "twelve_days"

    Returns:
        WorkoutConfig for the requested benchmark

    Raises:
        ValueError: If benchmark_id is not in the registry
    """
    if benchmark_id not in BENCHMARK_REGISTRY:
        valid = ", ".join(BENCHMARK_REGISTRY)
        raise ValueError(f"Unknown benchmark '{benchmark_id}'. Valid IDs: {valid}")
    return BENCHMARK_REGISTRY[benchmark_id]
