"""
Tests for effect sizes and two-sample tests.
"""

import math

import numpy as np

from disc_noise.stats.effect_size import (
    cohens_d,
    describe_effect,
    effect_magnitude,
    rank_sum_p,
    signed_rank_p,
)


class TestCohensD:
    def test_known_value(self):
        # means 2 and 3, pooled sd 1
        d = cohens_d(np.array([1.0, 2.0, 3.0]), np.array([2.0, 3.0, 4.0]))
        assert math.isclose(d, -1.0)

    def test_zero_spread_equal_means(self):
        assert cohens_d(np.zeros(5), np.zeros(5)) == 0.0

    def test_zero_spread_different_means(self):
        assert cohens_d(np.ones(3), np.zeros(3)) == math.inf


class TestEffectLabels:
    def test_magnitudes(self):
        assert effect_magnitude(0.1) == "negligible"
        assert effect_magnitude(-0.3) == "small"
        assert effect_magnitude(0.6) == "medium"
        assert effect_magnitude(-2.0) == "large"

    def test_descriptor_format(self):
        assert describe_effect(-0.3124) == "small (-0.312)"
        assert describe_effect(0.0) == "negligible (0.000)"


class TestTests:
    def test_rank_sum_identical_values(self):
        assert rank_sum_p(np.ones(10), np.ones(10)) == 1.0

    def test_rank_sum_separated_samples(self):
        assert rank_sum_p(np.arange(20.0), np.arange(20.0) + 100) < 0.05

    def test_signed_rank_zero_displacement(self):
        assert signed_rank_p(np.zeros(4), np.zeros(4)) == 1.0

    def test_signed_rank_consistent_shift(self):
        x = np.zeros(12)
        y = np.arange(1.0, 13.0)
        assert signed_rank_p(x, y) < 0.05
