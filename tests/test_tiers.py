"""Tests for salience-to-tier quantization (analysis/tiers.py)."""

import pytest

from responsive_text.analysis.tiers import score_to_tier, tier_class_name
from responsive_text.models.entities import ScoreRange


# ------------------------------------------------------------------ #
# 1. Reference example
# ------------------------------------------------------------------ #

class TestFooBarBaz:
    """Range (1, 10) over 2 levels gives a step of 4.5."""

    def test_foo_at_minimum_is_tier_zero(self, one_to_ten):
        assert score_to_tier(1.0, one_to_ten, 2) == 0

    def test_bar_rounds_down(self, one_to_ten):
        # (5 - 1) / 4.5 = 0.89
        assert score_to_tier(5.0, one_to_ten, 2) == 0

    def test_baz_at_maximum_is_one_past_last_tier(self, one_to_ten):
        # (10 - 1) / 4.5 = 2.0, not clamped into [0, 1]
        assert score_to_tier(10.0, one_to_ten, 2) == 2


# ------------------------------------------------------------------ #
# 2. General properties
# ------------------------------------------------------------------ #

class TestProperties:
    @pytest.mark.parametrize("levels", [1, 2, 3, 7, 10, 11, 100])
    def test_minimum_score_is_tier_zero(self, levels):
        assert score_to_tier(-3.25, ScoreRange(min=-3.25, max=8.0), levels) == 0

    def test_monotonic_non_decreasing(self, one_to_ten):
        scores = [1.0 + i * 0.037 for i in range(243)]  # 1.0 .. < 10.0
        tiers = [score_to_tier(s, one_to_ten, 11) for s in scores]
        assert tiers == sorted(tiers)

    def test_below_maximum_stays_in_range(self, one_to_ten):
        for levels in (1, 4, 11):
            for s in (1.0, 2.5, 9.99, 9.999999):
                assert 0 <= score_to_tier(s, one_to_ten, levels) < levels

    def test_every_tier_is_reachable(self):
        score_range = ScoreRange(min=0.0, max=10.0)
        tiers = {score_to_tier(s + 0.5, score_range, 10) for s in range(10)}
        assert tiers == set(range(10))

    def test_negative_scores(self):
        score_range = ScoreRange(min=-10.0, max=-2.0)
        assert score_to_tier(-10.0, score_range, 4) == 0
        assert score_to_tier(-5.0, score_range, 4) == 2


# ------------------------------------------------------------------ #
# 3. Clamped mode
# ------------------------------------------------------------------ #

class TestClamp:
    def test_maximum_folds_into_top_tier(self, one_to_ten):
        assert score_to_tier(10.0, one_to_ten, 2, clamp=True) == 1

    def test_clamp_does_not_change_interior_scores(self, one_to_ten):
        for s in (1.0, 3.0, 5.0, 7.0, 9.0):
            assert score_to_tier(s, one_to_ten, 3, clamp=True) == score_to_tier(s, one_to_ten, 3)

    def test_out_of_range_score_clamped_low(self, one_to_ten):
        assert score_to_tier(-50.0, one_to_ten, 3, clamp=True) == 0


# ------------------------------------------------------------------ #
# 4. Invalid input
# ------------------------------------------------------------------ #

class TestInvalid:
    def test_zero_levels_rejected(self, one_to_ten):
        with pytest.raises(ValueError):
            score_to_tier(5.0, one_to_ten, 0)

    def test_zero_width_range_rejected(self):
        with pytest.raises(ValueError):
            score_to_tier(5.0, ScoreRange(min=5.0, max=5.0), 3)


def test_tier_class_name():
    assert tier_class_name(0) == "lv0"
    assert tier_class_name(12) == "lv12"
