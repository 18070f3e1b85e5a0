"""
Smoke tests for the per-level plots.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pandas as pd  # noqa: E402
import pytest  # noqa: E402

from disc_noise.viz.levels import plot_metric_levels, plot_performance_levels  # noqa: E402


def _results() -> dict[str, pd.DataFrame]:
    return {
        "0": pd.DataFrame({"auc": [0.9, 0.92, 0.88], "accuracy": [0.8, 0.85, 0.83]}),
        "10": pd.DataFrame({"auc": [0.85, 0.87, 0.84], "accuracy": [0.78, 0.8, 0.79]}),
    }


class TestPlots:
    def test_one_box_per_level(self):
        fig, ax = plot_metric_levels(_results(), "auc")
        assert [t.get_text() for t in ax.get_xticklabels()] == ["0%", "10%"]
        plt.close(fig)

    def test_unknown_metric(self):
        with pytest.raises(ValueError):
            plot_metric_levels(_results(), "r2")

    def test_grid_hides_nothing_when_even(self):
        fig, axes = plot_performance_levels(_results(), metrics=("auc", "accuracy"))
        assert len(axes) == 2
        plt.close(fig)
