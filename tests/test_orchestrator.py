"""
Tests for the per-level bootstrap sweep.
"""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pandas as pd
import pytest

from disc_noise.core.models import METRIC_NAMES
from disc_noise.data.dataset import build_experiment_data
from disc_noise.experiment.orchestrator import IterationTask, run_iteration, run_noise_level
from disc_noise.resampling.bootstrap import create_oosb_sample


def _setup(frame, n_iter: int = 6):
    data = build_experiment_data(frame, "y")
    partitions = create_oosb_sample(data.n_rows, n_iter, seed=7)
    return data, partitions


class TestRunIteration:
    def test_result_shapes(self, bimodal_frame):
        data, partitions = _setup(bimodal_frame, 1)
        task = IterationTask(data=data, partition=partitions[0], classifier="C5.0", hyperparameters={}, target=0.0)
        result = run_iteration(task)
        assert result.index == 0
        assert len(result.performance) == len(METRIC_NAMES)
        assert list(result.importance.index) == data.feature_names


class TestRunNoiseLevel:
    def test_one_row_per_partition(self, bimodal_frame):
        data, partitions = _setup(bimodal_frame)
        level = run_noise_level(data, partitions, "glm", {"C": 1.0}, 25.0)
        assert level.n_iterations == len(partitions)
        assert list(level.performance.columns) == list(METRIC_NAMES)
        assert list(level.importance.columns) == data.feature_names
        assert level.percentage == 25.0

    def test_pooled_matches_sequential(self, bimodal_frame):
        data, partitions = _setup(bimodal_frame)
        sequential = run_noise_level(data, partitions, "rf", {"max_features": "sqrt"}, 10.0)
        with ThreadPoolExecutor(max_workers=3) as pool:
            pooled = run_noise_level(data, partitions, "rf", {"max_features": "sqrt"}, 10.0, executor=pool)
        pd.testing.assert_frame_equal(sequential.performance, pooled.performance)
        pd.testing.assert_frame_equal(sequential.importance, pooled.importance)

    def test_failing_iteration_aborts_level(self, bimodal_frame):
        data, partitions = _setup(bimodal_frame, 2)
        with pytest.raises(ValueError):
            run_noise_level(data, partitions, "glm", {"C": -1.0}, 0.0)

    def test_separable_data_scores_perfectly(self, bimodal_frame):
        data, partitions = _setup(bimodal_frame)
        level = run_noise_level(data, partitions, "C5.0", {}, 50.0)
        assert np.allclose(level.performance["accuracy"], 1.0)
        assert np.allclose(level.performance["mcc"], 1.0)
