"""
Dataset preparation: discretization and the numeric feature design.
"""

from disc_noise.data.dataset import build_design, build_experiment_data, discretize, resolve_cutpoint

__all__ = ["build_design", "build_experiment_data", "discretize", "resolve_cutpoint"]
