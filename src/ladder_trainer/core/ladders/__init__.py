"""
Ladder progression engine.

One strategy per ladder type, all sharing the LadderStrategy contract:
resolve_round(), total_reps() and describe().
"""

from .base import LadderStrategy
from .chipper import ChipperLadder
from .christmas import ChristmasLadder
from .fixed import AmrapLadder, ForRepsLadder
from .flexible import FlexibleLadder
from .linear import AscendingLadder, DescendingLadder
from .pyramid import PyramidLadder
from .registry import UnsupportedLadderTypeError, get_ladder_strategy, strategy_for

__all__ = [
    "LadderStrategy",
    "ChristmasLadder",
    "AscendingLadder",
    "DescendingLadder",
    "PyramidLadder",
    "FlexibleLadder",
    "ChipperLadder",
    "ForRepsLadder",
    "AmrapLadder",
    "UnsupportedLadderTypeError",
    "get_ladder_strategy",
    "strategy_for",
]
