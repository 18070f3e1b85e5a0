"""
Tests for importance-rank stability across noise levels.
"""

import math

import numpy as np
import pandas as pd

from disc_noise.impact.importance import (
    IMPORTANCE_IMPACT_COLUMNS,
    importance_impact,
    informative_features,
    jitter_duplicates,
    rank_matrix,
)


def _level(rng: np.random.Generator, n_iter: int = 20) -> pd.DataFrame:
    """Importance matrix with a clear A > B > C > D ordering."""
    base = np.array([10.0, 5.0, 2.0, 0.5])
    values = base + rng.uniform(-0.1, 0.1, size=(n_iter, 4))
    return pd.DataFrame(values, columns=["A", "B", "C", "D"])


def _levels(n_levels: int = 3, seed: int = 0) -> dict[str, pd.DataFrame]:
    rng = np.random.default_rng(seed)
    return {str(p): _level(rng) for p in range(0, 10 * n_levels, 10)}


class TestJitterDuplicates:
    def test_duplicate_columns_become_distinct(self):
        col = np.array([1.0, 2.0, 3.0])
        frame = pd.DataFrame({"a": col, "b": col, "c": col, "d": col + 5})
        out = jitter_duplicates(frame, np.random.default_rng(1))
        assert np.unique(out.to_numpy(), axis=1).shape[1] == 4

    def test_first_occurrence_untouched(self):
        col = np.array([1.0, 2.0])
        frame = pd.DataFrame({"a": col, "b": col})
        out = jitter_duplicates(frame, np.random.default_rng(1))
        assert np.array_equal(out["a"], col)
        assert (out["b"] > col).all()

    def test_jitter_does_not_reorder_distinct_values(self):
        frame = pd.DataFrame({"a": [0.0, 0.0], "b": [0.0, 0.0], "c": [0.001, 0.001]})
        out = jitter_duplicates(frame, np.random.default_rng(2))
        assert (out["b"] < out["c"]).all()


class TestInformativeFeatures:
    def test_constant_features_dropped(self):
        level = pd.DataFrame({"a": [1.0, 2.0], "b": [0.0, 0.0]})
        assert informative_features({"0": level, "10": level}, ["a", "b"]) == ["a"]

    def test_constant_within_level_but_not_across(self):
        first = pd.DataFrame({"a": [1.0, 1.0]})
        last = pd.DataFrame({"a": [2.0, 2.0]})
        assert informative_features({"0": first, "10": last}, ["a"]) == ["a"]


class TestRankMatrix:
    def test_clear_ordering_at_every_level(self):
        levels = _levels()
        ranks = rank_matrix(levels, ["A", "B", "C", "D"], np.random.default_rng(0))
        assert list(ranks.index) == ["0", "10", "20"]
        for _, row in ranks.iterrows():
            assert row.tolist() == [1, 2, 3, 4]


class TestImportanceImpact:
    def test_stable_ranks(self):
        table = importance_impact(_levels(), ["A", "B", "C", "D"], seed=3)
        assert list(table.columns) == IMPORTANCE_IMPACT_COLUMNS
        row = table.iloc[0]
        assert row["p_value"] == 1.0
        assert row["effect_size"] == "negligible (0.000)"
        assert row["rank1_shift"] == 0.0
        assert row["rank2_shift"] == 0.0
        assert row["rank3_shift"] == 0.0

    def test_single_level(self):
        table = importance_impact(_levels(n_levels=1), ["A", "B", "C", "D"], seed=3)
        assert table.iloc[0]["p_value"] == 1.0

    def test_all_constant_gives_nan_row(self):
        level = pd.DataFrame({"a": [0.0, 0.0], "b": [1.0, 1.0]})
        table = importance_impact({"0": level, "10": level}, ["a", "b"])
        assert table.shape == (1, 5)
        assert all(isinstance(v, float) and math.isnan(v) for v in table.iloc[0])

    def test_fewer_than_three_features_padded(self):
        rng = np.random.default_rng(4)
        levels = {
            "0": pd.DataFrame({"a": 5 + rng.uniform(0, 0.1, 10), "b": rng.uniform(0, 0.1, 10)}),
            "10": pd.DataFrame({"a": 5 + rng.uniform(0, 0.1, 10), "b": rng.uniform(0, 0.1, 10)}),
        }
        row = importance_impact(levels, ["a", "b"], seed=1).iloc[0]
        assert row["rank1_shift"] == 0.0
        assert math.isnan(row["rank3_shift"])
