"""Tests for the strength survey script."""

import numpy as np
import pytest

from poker_rig import set_seed
from poker_rig.rules import HandStrength
from poker_rig.scripts.survey import (
    EXACT_COMBINATIONS,
    TOTAL_COMBINATIONS,
    exact_probabilities,
    run_survey,
)


class TestExactTable:
    """Test the exact combination table."""

    def test_total_is_52_choose_5(self):
        assert TOTAL_COMBINATIONS == 2_598_960

    def test_probabilities_sum_to_one(self):
        probs = exact_probabilities()
        assert probs.shape == (len(HandStrength),)
        assert np.isclose(probs.sum(), 1.0)
        assert set(EXACT_COMBINATIONS) == set(HandStrength)


class TestRunSurvey:
    """Test the random survey."""

    def test_counts_sum_to_hands(self):
        result = run_survey(500, seed=42)
        assert result.counts.shape == (len(HandStrength),)
        assert result.total == 500
        assert np.isclose(result.frequencies.sum(), 1.0)

    def test_deterministic_with_seed(self):
        a = run_survey(300, seed=7)
        b = run_survey(300, seed=7)
        assert np.array_equal(a.counts, b.counts)
        assert a.seed == b.seed == 7

    def test_common_strengths_dominate(self):
        result = run_survey(2000, seed=1)
        # Nothing and Pair make up about 92% of all hands
        share = result.frequencies[HandStrength.NOTHING] + result.frequencies[HandStrength.PAIR]
        assert share > 0.85

    def test_zero_hands(self):
        result = run_survey(0, seed=1)
        assert result.total == 0
        assert not result.frequencies.any()

    def test_negative_hands(self):
        with pytest.raises(ValueError):
            run_survey(-1, seed=1)

    def test_summary_lists_every_strength(self):
        summary = run_survey(100, seed=3).summary()
        for strength in HandStrength:
            assert strength.label in summary


class TestSeeding:
    """Test the global seeding helper."""

    def test_set_seed_returns_given_seed(self):
        assert set_seed(42) == 42

    def test_set_seed_generates_seed(self):
        seed = set_seed()
        assert 0 <= seed < 2**32

    def test_set_seed_makes_numpy_reproducible(self):
        set_seed(5)
        a = np.random.rand(3)
        set_seed(5)
        b = np.random.rand(3)
        assert np.array_equal(a, b)
