"""
Unit tests for the ladder progression engine.

Each class covers one ladder type with hand-computed round sequences and
totals. The shared properties at the bottom check that every strategy's
closed-form total agrees with summing its rounds, that nothing goes
negative, and that strategies are pure.
"""

import dataclasses

import pytest

from ladder_trainer.core.ladders import (
    AmrapLadder,
    AscendingLadder,
    ChipperLadder,
    ChristmasLadder,
    DescendingLadder,
    FlexibleLadder,
    ForRepsLadder,
    PyramidLadder,
    UnsupportedLadderTypeError,
    get_ladder_strategy,
    strategy_for,
)
from ladder_trainer.core.ladders.base import series_total
from ladder_trainer.core.models import (
    AmrapReps,
    ChipperReps,
    Exercise,
    FlexibleReps,
    ForRepsReps,
    WorkoutConfig,
)

# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _ex(position: int, scheme=None, name: str | None = None) -> Exercise:
    return Exercise(position=position, name=name or f"Exercise {position}", scheme=scheme)


def _reps(strategy, rounds: int, exercise: Exercise) -> list[int]:
    """Reps of one exercise in rounds 1..rounds (0 when it is not performed)."""
    out = []
    for r in range(1, rounds + 1):
        entries = strategy.resolve_round(r, [exercise])
        out.append(sum(e.reps for e in entries))
    return out


def _summed_total(strategy, exercise: Exercise, rounds: int) -> int:
    return sum(_reps(strategy, rounds, exercise))


# ===========================================================================
# Christmas
# ===========================================================================


class TestChristmasLadder:
    """Round r: exercises with position <= r, newest first, reps = position."""

    exercises = [_ex(1), _ex(2), _ex(3), _ex(4)]

    def test_round_three_lists_newest_first(self):
        entries = ChristmasLadder().resolve_round(3, self.exercises)
        assert [e.exercise.position for e in entries] == [3, 2, 1]
        assert [e.reps for e in entries] == [3, 2, 1]

    def test_exercise_not_yet_introduced_is_absent(self):
        entries = ChristmasLadder().resolve_round(3, self.exercises)
        assert 4 not in [e.exercise.position for e in entries]

    def test_rounds_past_exercise_count_include_everything(self):
        entries = ChristmasLadder().resolve_round(9, self.exercises)
        assert [e.exercise.position for e in entries] == [4, 3, 2, 1]

    def test_input_order_does_not_matter(self):
        shuffled = [self.exercises[2], self.exercises[0], self.exercises[1]]
        entries = ChristmasLadder().resolve_round(3, shuffled)
        assert [e.exercise.position for e in entries] == [3, 2, 1]

    def test_total_reps_position_two_after_five_rounds(self):
        # performed in rounds 2..5 → 4 times × 2 reps
        assert ChristmasLadder().total_reps(_ex(2), 5) == 8

    def test_total_reps_before_introduction_is_zero(self):
        assert ChristmasLadder().total_reps(_ex(4), 3) == 0

    def test_twelve_days_totals(self):
        # position p is done (13 - p) times → p × (13 - p); 364 in total
        ladder = ChristmasLadder()
        totals = [ladder.total_reps(_ex(p), 12) for p in range(1, 13)]
        assert totals[0] == 12
        assert totals[5] == 6 * 7
        assert sum(totals) == 364


# ===========================================================================
# Ascending / Descending
# ===========================================================================


class TestAscendingLadder:
    """reps(r) = starting_reps + (r - 1) × step_size"""

    def test_round_reps(self):
        ladder = AscendingLadder(step_size=2, starting_reps=3)
        assert ladder.resolve_round(1, [_ex(1)])[0].reps == 3
        assert ladder.resolve_round(4, [_ex(1)])[0].reps == 9

    def test_all_exercises_share_round_reps(self):
        ladder = AscendingLadder(step_size=2, starting_reps=3)
        entries = ladder.resolve_round(2, [_ex(1), _ex(2), _ex(3)])
        assert [e.reps for e in entries] == [5, 5, 5]
        assert [e.exercise.position for e in entries] == [1, 2, 3]

    def test_total_reps_arithmetic_series(self):
        # 4 × (3 + 9) / 2
        ladder = AscendingLadder(step_size=2, starting_reps=3)
        assert ladder.total_reps(_ex(1), 4) == 24

    def test_missing_starting_reps_starts_at_step(self):
        # step, 2·step, 3·step...
        ladder = AscendingLadder(step_size=5)
        assert _reps(ladder, 4, _ex(1)) == [5, 10, 15, 20]
        assert ladder.total_reps(_ex(1), 4) == 50

    def test_describe_mentions_step_and_sequence(self):
        text = AscendingLadder(step_size=1).describe()
        assert "increases reps by 1" in text
        assert "1, 2, 3, 4..." in text


class TestDescendingLadder:
    """reps(r) = starting_reps - (r - 1) × step_size"""

    def test_fran_rounds(self):
        fran = DescendingLadder(step_size=6, max_rounds=3, starting_reps=21)
        assert _reps(fran, 3, _ex(1)) == [21, 15, 9]

    def test_fran_total(self):
        # 3 × (21 + 9) / 2
        fran = DescendingLadder(step_size=6, max_rounds=3, starting_reps=21)
        assert fran.total_reps(_ex(1), 3) == 45

    def test_missing_starting_reps_uses_max_rounds_times_step(self):
        ladder = DescendingLadder(step_size=2, max_rounds=4)
        assert _reps(ladder, 4, _ex(1)) == [8, 6, 4, 2]
        assert ladder.total_reps(_ex(1), 4) == 20

    def test_can_reach_zero_inside_configured_rounds(self):
        ladder = DescendingLadder(step_size=5, max_rounds=3, starting_reps=10)
        assert _reps(ladder, 3, _ex(1)) == [10, 5, 0]
        assert ladder.total_reps(_ex(1), 3) == 15

    def test_rounds_past_zero_resolve_to_zero(self):
        fran = DescendingLadder(step_size=6, max_rounds=3, starting_reps=21)
        assert fran.resolve_round(5, [_ex(1)])[0].reps == 0

    def test_total_stops_growing_past_zero(self):
        # 21 + 15 + 9 + 3, then rounds of 0
        fran = DescendingLadder(step_size=6, max_rounds=3, starting_reps=21)
        assert [fran.total_reps(_ex(1), n) for n in range(4, 9)] == [48, 48, 48, 48, 48]

    def test_total_with_zero_start(self):
        ladder = DescendingLadder(step_size=2, max_rounds=3, starting_reps=0)
        assert ladder.total_reps(_ex(1), 3) == 0

    def test_describe_shows_sequence(self):
        fran = DescendingLadder(step_size=6, max_rounds=3, starting_reps=21)
        assert "21, 15, 9" in fran.describe()


# ===========================================================================
# Pyramid
# ===========================================================================


class TestPyramidLadder:
    """peak = ceil(max_rounds / 2); climb by step to the peak, then back down."""

    def test_odd_rounds(self):
        ladder = PyramidLadder(step_size=1, max_rounds=5)
        assert _reps(ladder, 5, _ex(1)) == [1, 2, 3, 2, 1]

    def test_even_rounds_repeat_the_peak(self):
        ladder = PyramidLadder(step_size=1, max_rounds=6)
        assert _reps(ladder, 6, _ex(1)) == [1, 2, 3, 3, 2, 1]

    def test_step_size_scales_every_round(self):
        ladder = PyramidLadder(step_size=2, max_rounds=7)
        assert _reps(ladder, 7, _ex(1)) == [2, 4, 6, 8, 6, 4, 2]

    def test_total_odd(self):
        # peak = 3 → 3² × 1 = 1+2+3+2+1
        ladder = PyramidLadder(step_size=1, max_rounds=5)
        assert ladder.total_reps(_ex(1), 5) == 9

    def test_total_even(self):
        # peak = 3 → 3 × 4 × 1 = 1+2+3+3+2+1
        ladder = PyramidLadder(step_size=1, max_rounds=6)
        assert ladder.total_reps(_ex(1), 6) == 12

    def test_total_derives_peak_from_rounds_passed(self):
        # Partial pyramid: the closed form treats 3 rounds as a complete
        # 3-round pyramid (1+2+1 = 4), not the 1+2+3 actually resolved.
        ladder = PyramidLadder(step_size=1, max_rounds=5)
        assert ladder.total_reps(_ex(1), 3) == 4
        assert _summed_total(ladder, _ex(1), 3) == 6

    def test_rounds_past_max_resolve_to_zero(self):
        ladder = PyramidLadder(step_size=1, max_rounds=5)
        assert ladder.resolve_round(6, [_ex(1)])[0].reps == 0
        assert ladder.resolve_round(8, [_ex(1)])[0].reps == 0


# ===========================================================================
# Flexible
# ===========================================================================


class TestFlexibleLadder:
    """Independent per-exercise direction / starting_reps / step_size."""

    def test_constant_exercise(self):
        ex = _ex(1, FlexibleReps(direction="constant", starting_reps=5))
        ladder = FlexibleLadder()
        assert _reps(ladder, 4, ex) == [5, 5, 5, 5]
        assert ladder.total_reps(ex, 4) == 20

    def test_descending_exercise_clamps_at_zero(self):
        ex = _ex(1, FlexibleReps(direction="descending", starting_reps=3, step_size=2))
        assert _reps(FlexibleLadder(), 3, ex) == [3, 1, 0]

    def test_descending_total_clamps_only_last_term(self):
        # 3 × (3 + max(0, -1)) / 2 = 4.5, while the rounds sum to 4.
        ex = _ex(1, FlexibleReps(direction="descending", starting_reps=3, step_size=2))
        assert FlexibleLadder().total_reps(ex, 3) == pytest.approx(4.5)
        assert _summed_total(FlexibleLadder(), ex, 3) == 4

    def test_exercises_progress_independently(self):
        burpees = _ex(1, FlexibleReps("ascending", 5, 5))
        pull_ups = _ex(2, FlexibleReps("descending", 20, 4))
        box_jumps = _ex(3, FlexibleReps("constant", 15, 0))
        entries = FlexibleLadder().resolve_round(3, [burpees, pull_ups, box_jumps])
        assert [e.reps for e in entries] == [15, 12, 15]

    def test_mixed_signals_totals(self):
        ladder = FlexibleLadder()
        assert ladder.total_reps(_ex(1, FlexibleReps("ascending", 5, 5)), 5) == 75
        assert ladder.total_reps(_ex(2, FlexibleReps("descending", 20, 4)), 5) == 60

    def test_missing_fields_default_to_ascending_from_one(self):
        ex = _ex(1)
        assert _reps(FlexibleLadder(), 3, ex) == [1, 2, 3]
        assert FlexibleLadder().total_reps(ex, 3) == 6

    def test_partial_scheme_fills_remaining_defaults(self):
        ex = _ex(1, FlexibleReps(starting_reps=4))
        assert _reps(FlexibleLadder(), 3, ex) == [4, 5, 6]

    def test_stale_scheme_from_other_ladder_is_ignored(self):
        ex = _ex(1, ChipperReps(fixed_reps=15))
        assert _reps(FlexibleLadder(), 3, ex) == [1, 2, 3]


# ===========================================================================
# Chipper
# ===========================================================================


class TestChipperLadder:
    """Round r performs only the exercise at position r, once, for fixed_reps."""

    exercises = [_ex(1, ChipperReps(10)), _ex(2, ChipperReps(15)), _ex(3, ChipperReps(5))]

    def test_round_returns_single_exercise(self):
        entries = ChipperLadder().resolve_round(2, self.exercises)
        assert len(entries) == 1
        assert entries[0].exercise.position == 2
        assert entries[0].reps == 15

    def test_other_rounds_exclude_exercise(self):
        entries = ChipperLadder().resolve_round(1, self.exercises)
        assert [e.exercise.position for e in entries] == [1]

    def test_round_past_exercise_count_is_empty(self):
        assert ChipperLadder().resolve_round(4, self.exercises) == []

    def test_total_is_binary(self):
        ex = self.exercises[1]
        assert ChipperLadder().total_reps(ex, 1) == 0
        assert ChipperLadder().total_reps(ex, 2) == 15
        assert ChipperLadder().total_reps(ex, 5) == 15

    def test_missing_fixed_reps_defaults_to_one(self):
        assert ChipperLadder().resolve_round(1, [_ex(1)])[0].reps == 1


# ===========================================================================
# For Reps / AMRAP
# ===========================================================================


class TestForRepsLadder:
    """Every exercise every round at its own reps_per_round."""

    exercises = [_ex(1, ForRepsReps(15)), _ex(2, ForRepsReps(12)), _ex(3, ForRepsReps(9))]

    def test_every_round_has_every_exercise(self):
        for r in (1, 3, 5):
            entries = ForRepsLadder().resolve_round(r, self.exercises)
            assert [e.reps for e in entries] == [15, 12, 9]

    def test_total(self):
        assert ForRepsLadder().total_reps(self.exercises[0], 5) == 75

    def test_missing_reps_per_round_defaults_to_one(self):
        assert ForRepsLadder().total_reps(_ex(1), 4) == 4


class TestAmrapLadder:
    """starting_reps + (r - 1) × step_size per exercise; step 0 = fixed."""

    def test_fixed_reps(self):
        ex = _ex(1, AmrapReps(starting_reps=5, step_size=0))
        assert _reps(AmrapLadder(), 3, ex) == [5, 5, 5]
        assert AmrapLadder().total_reps(ex, 20) == 100

    def test_increasing_reps(self):
        ex = _ex(1, AmrapReps(starting_reps=2, step_size=3))
        assert _reps(AmrapLadder(), 4, ex) == [2, 5, 8, 11]
        assert AmrapLadder().total_reps(ex, 4) == 26

    def test_missing_step_means_fixed(self):
        ex = _ex(1, AmrapReps(starting_reps=7))
        assert AmrapLadder().total_reps(ex, 3) == 21

    def test_reps_per_round_shape_is_fixed(self):
        # Cindy: 5 pull-ups every round
        ex = _ex(1, ForRepsReps(reps_per_round=5))
        assert _reps(AmrapLadder(), 3, ex) == [5, 5, 5]
        assert AmrapLadder().total_reps(ex, 20) == 100

    def test_large_round_numbers(self):
        ex = _ex(1, AmrapReps(starting_reps=2, step_size=3))
        assert AmrapLadder().resolve_round(1_000_000, [ex])[0].reps == 2_999_999
        assert AmrapLadder().total_reps(ex, 1_000_000) == 1_500_000_500_000


# ===========================================================================
# Factory
# ===========================================================================


class TestFactory:
    @pytest.mark.parametrize(
        "ladder_type, expected",
        [
            ("christmas", ChristmasLadder),
            ("ascending", AscendingLadder),
            ("descending", DescendingLadder),
            ("pyramid", PyramidLadder),
            ("flexible", FlexibleLadder),
            ("chipper", ChipperLadder),
            ("amrap", AmrapLadder),
            ("forreps", ForRepsLadder),
        ],
    )
    def test_returns_matching_strategy(self, ladder_type, expected):
        assert isinstance(get_ladder_strategy(ladder_type), expected)

    def test_unknown_type_raises(self):
        with pytest.raises(UnsupportedLadderTypeError, match="tabata"):
            get_ladder_strategy("tabata")

    def test_unsupported_error_is_value_error(self):
        with pytest.raises(ValueError):
            get_ladder_strategy("")

    def test_parameters_are_bound(self):
        ladder = get_ladder_strategy("descending", step_size=6, max_rounds=3, starting_reps=21)
        assert ladder == DescendingLadder(step_size=6, max_rounds=3, starting_reps=21)

    def test_irrelevant_parameters_ignored(self):
        assert get_ladder_strategy("christmas", step_size=7, max_rounds=3) == ChristmasLadder()

    def test_missing_max_rounds_falls_back(self):
        assert get_ladder_strategy("pyramid", max_rounds=None).max_rounds == 10
        assert get_ladder_strategy("pyramid", step_size=None).step_size == 1

    def test_strategy_for_config(self):
        config = WorkoutConfig(
            name="Fran",
            ladder_type="descending",
            exercises=(_ex(1), _ex(2)),
            max_rounds=3,
            step_size=6,
            starting_reps=21,
        )
        assert _reps(strategy_for(config), 3, _ex(1)) == [21, 15, 9]


# ===========================================================================
# Shared properties
# ===========================================================================

# (strategy, exercise, rounds over which the closed form is exact)
_CONSISTENT_CASES = [
    (ChristmasLadder(), _ex(3), 12),
    (AscendingLadder(step_size=2, starting_reps=3), _ex(1), 10),
    (AscendingLadder(step_size=3), _ex(1), 10),
    (DescendingLadder(step_size=6, max_rounds=3, starting_reps=21), _ex(1), 8),
    (DescendingLadder(step_size=5, max_rounds=3, starting_reps=10), _ex(1), 6),
    (DescendingLadder(step_size=1, max_rounds=10), _ex(1), 10),
    (FlexibleLadder(), _ex(1, FlexibleReps("ascending", 5, 5)), 8),
    (FlexibleLadder(), _ex(1, FlexibleReps("descending", 20, 4)), 6),
    (FlexibleLadder(), _ex(1, FlexibleReps("constant", 15, 0)), 8),
    (ChipperLadder(), _ex(2, ChipperReps(40)), 5),
    (ForRepsLadder(), _ex(1, ForRepsReps(12)), 8),
    (AmrapLadder(), _ex(1, AmrapReps(3, 2)), 15),
    (AmrapLadder(), _ex(1, ForRepsReps(10)), 15),
]


@pytest.mark.parametrize("strategy, exercise, max_rounds", _CONSISTENT_CASES)
def test_total_matches_sum_of_rounds(strategy, exercise, max_rounds):
    for n in range(0, max_rounds + 1):
        assert strategy.total_reps(exercise, n) == _summed_total(strategy, exercise, n)


@pytest.mark.parametrize("max_rounds", [1, 2, 5, 6, 9, 10])
def test_pyramid_total_matches_sum_at_completion(max_rounds):
    ladder = PyramidLadder(step_size=2, max_rounds=max_rounds)
    assert ladder.total_reps(_ex(1), max_rounds) == _summed_total(ladder, _ex(1), max_rounds)


_ALL_STRATEGIES = [
    ChristmasLadder(),
    AscendingLadder(step_size=2, starting_reps=3),
    DescendingLadder(step_size=6, max_rounds=3, starting_reps=21),
    PyramidLadder(step_size=1, max_rounds=5),
    FlexibleLadder(),
    ChipperLadder(),
    ForRepsLadder(),
    AmrapLadder(),
]

_MIXED_EXERCISES = [
    _ex(1, FlexibleReps("descending", 3, 2)),
    _ex(2, ChipperReps(15)),
    _ex(3, ForRepsReps(9)),
    _ex(4, AmrapReps(2, 3)),
    _ex(5),
]


@pytest.mark.parametrize("strategy", _ALL_STRATEGIES, ids=lambda s: type(s).__name__)
def test_never_negative(strategy):
    for r in range(-2, 16):
        for entry in strategy.resolve_round(r, _MIXED_EXERCISES):
            assert entry.reps >= 0
        for ex in _MIXED_EXERCISES:
            assert strategy.total_reps(ex, r) >= 0


@pytest.mark.parametrize("strategy", _ALL_STRATEGIES, ids=lambda s: type(s).__name__)
def test_round_zero_and_below_are_empty(strategy):
    assert strategy.resolve_round(0, _MIXED_EXERCISES) == []
    assert strategy.resolve_round(-1, _MIXED_EXERCISES) == []


@pytest.mark.parametrize("strategy", _ALL_STRATEGIES, ids=lambda s: type(s).__name__)
def test_resolve_is_idempotent_and_does_not_mutate(strategy):
    exercises = list(reversed(_MIXED_EXERCISES))
    snapshot = list(exercises)
    first = strategy.resolve_round(3, exercises)
    second = strategy.resolve_round(3, exercises)
    assert first == second
    assert first is not second
    assert exercises == snapshot


@pytest.mark.parametrize("strategy", _ALL_STRATEGIES, ids=lambda s: type(s).__name__)
def test_describe_is_text(strategy):
    assert isinstance(strategy.describe(), str)
    assert strategy.describe()


def test_strategies_are_immutable():
    ladder = AscendingLadder(step_size=2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        ladder.step_size = 3  # type: ignore[misc]


class TestSeriesTotal:
    def test_even_product_stays_int(self):
        assert series_total(4, 3, 9) == 24
        assert isinstance(series_total(4, 3, 9), int)

    def test_odd_product_is_float(self):
        assert series_total(3, 3, 0) == 4.5
