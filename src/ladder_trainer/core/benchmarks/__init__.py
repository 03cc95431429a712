"""
Benchmark workouts for ladder-trainer.

Named reference workouts (Fran, Cindy, 12 Days...) covering every ladder
type, loaded from bundled YAML files.
"""

from .registry import BENCHMARK_REGISTRY, get_benchmark

__all__ = [
    "BENCHMARK_REGISTRY",
    "get_benchmark",
]
