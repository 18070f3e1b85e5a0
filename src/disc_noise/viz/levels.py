"""Per-noise-level metric distributions — one box per swept level.

Renders the raw performance matrices collected during a sweep, so the
drift of a metric from the clean level to the noisiest one is visible
next to the Performance_impact table.
"""

from __future__ import annotations

from collections.abc import Mapping

import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from disc_noise.core.models import METRIC_NAMES

_BOX_COLOR = "#3498db"
_MEDIAN_COLOR = "#e74c3c"


def plot_metric_levels(
    performance_results: Mapping[str, pd.DataFrame],
    metric: str = "auc",
    *,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
    title: str | None = None,
) -> tuple[Figure, Axes]:
    """Box plot of one metric at every noise level.

    Args:
        performance_results: Noise-level label → iterations × metrics, in
            sweep order.
        metric: One of ``METRIC_NAMES``.
        ax: Optional existing axes to draw on.
        figsize: Figure size (width, height) in inches.
        title: Plot title; defaults to the metric name.

    Returns:
        (fig, ax) tuple.
    """
    if metric not in METRIC_NAMES:
        raise ValueError(f"Unknown metric {metric!r}; choose one of {list(METRIC_NAMES)}")

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    labels = list(performance_results)
    series = [performance_results[label][metric].dropna().to_numpy() for label in labels]

    ax.boxplot(
        series,
        patch_artist=True,
        boxprops={"facecolor": _BOX_COLOR, "alpha": 0.6},
        medianprops={"color": _MEDIAN_COLOR, "linewidth": 2},
    )
    ax.set_xticks(range(1, len(labels) + 1))
    ax.set_xticklabels([f"{label}%" for label in labels])
    ax.set_xlabel("Noise level (% of cutpoint)")
    ax.set_ylabel(metric)
    ax.set_title(title or f"{metric} across noise levels")
    ax.grid(axis="y", alpha=0.3)

    return fig, ax


def plot_performance_levels(
    performance_results: Mapping[str, pd.DataFrame],
    metrics: tuple[str, ...] = ("accuracy", "auc", "mcc", "brier_score"),
    *,
    figsize: tuple[float, float] | None = None,
) -> tuple[Figure, list[Axes]]:
    """Grid of ``plot_metric_levels`` panels, one per metric."""
    n = len(metrics)
    ncols = 2 if n > 1 else 1
    nrows = (n + ncols - 1) // ncols
    fig, axes = plt.subplots(
        nrows, ncols,
        figsize=figsize or (6 * ncols, 4 * nrows),
        squeeze=False,
    )
    flat = list(axes.ravel())
    for ax, metric in zip(flat, metrics):
        plot_metric_levels(performance_results, metric, ax=ax, title=metric)
    for ax in flat[n:]:
        ax.set_visible(False)

    fig.tight_layout()
    return fig, flat[:n]
