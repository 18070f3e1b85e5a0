"""
Tests for per-iteration performance metrics.
"""

import math

import numpy as np
import pytest

from disc_noise.core.errors import NonBinaryPredictionError
from disc_noise.core.models import CLASS1, CLASS2, METRIC_NAMES
from disc_noise.evaluation.performance import auc, brier_score, mcc, performance_metrics


def _labels(*codes: int) -> np.ndarray:
    return np.array([CLASS1 if c == 1 else CLASS2 for c in codes])


class TestMcc:
    def test_perfect_prediction(self):
        actuals = _labels(1, 1, 2, 2)
        assert math.isclose(mcc(actuals, actuals), 1.0)

    def test_inverse_prediction(self):
        actuals = _labels(1, 1, 2, 2)
        predicted = _labels(2, 2, 1, 1)
        assert math.isclose(mcc(actuals, predicted), -1.0)

    def test_zero_true_positives_is_defined(self):
        # tp + fp == 0 → denominator falls back to 1
        actuals = _labels(1, 2, 2)
        predicted = _labels(2, 2, 2)
        assert mcc(actuals, predicted) == 0.0


class TestAuc:
    def test_rounded_to_two_decimals(self):
        actuals = _labels(1, 1, 1, 2, 2, 2)
        prob = np.array([0.9, 0.8, 0.3, 0.7, 0.2, 0.5])
        # 7 of 9 positive/negative pairs ordered correctly
        assert auc(actuals, prob) == 0.78

    def test_single_class_test_set(self):
        assert auc(_labels(1, 1, 1), np.array([0.2, 0.5, 0.9])) == 0.5


class TestBrierScore:
    def test_perfect_probabilities(self):
        assert brier_score(_labels(1, 2), np.array([1.0, 0.0])) == 0.0

    def test_uninformed_probabilities(self):
        assert math.isclose(brier_score(_labels(1, 2), np.array([0.5, 0.5])), 0.25)


class TestPerformanceMetrics:
    def test_vector_layout(self):
        actuals = _labels(1, 1, 2, 2)
        vector = performance_metrics(actuals, actuals, np.array([1.0, 1.0, 0.0, 0.0]))
        assert len(vector) == len(METRIC_NAMES)
        expected = dict(accuracy=1.0, precision=1.0, recall=1.0, brier_score=0.0, auc=1.0, f_measure=1.0, mcc=1.0)
        for name, value in zip(METRIC_NAMES, vector):
            assert math.isclose(value, expected[name], abs_tol=1e-12), name

    def test_single_predicted_class_is_allowed(self):
        actuals = _labels(1, 2, 2)
        vector = performance_metrics(actuals, _labels(2, 2, 2), np.array([0.4, 0.1, 0.2]))
        assert math.isclose(vector[0], 2 / 3)
        assert vector[1] == 0.0  # precision with no positive predictions

    def test_non_binary_prediction_aborts(self):
        actuals = _labels(1, 2, 2)
        predicted = np.array([CLASS1, CLASS2, "class3"])
        with pytest.raises(NonBinaryPredictionError) as exc:
            performance_metrics(actuals, predicted, np.array([0.5, 0.5, 0.5]))
        assert len(exc.value.classes) == 3
