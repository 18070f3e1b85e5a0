"""
Visualization of per-level sweep results.
"""

from disc_noise.viz.levels import plot_metric_levels, plot_performance_levels

__all__ = ["plot_metric_levels", "plot_performance_levels"]
