"""
Experiment execution: per-level bootstrap sweep and the top-level driver.
"""

from disc_noise.experiment.driver import compute_impact, report_levels, run_experiment, sweep_noise_levels
from disc_noise.experiment.orchestrator import IterationTask, run_iteration, run_noise_level

__all__ = [
    "IterationTask",
    "compute_impact",
    "report_levels",
    "run_experiment",
    "run_iteration",
    "run_noise_level",
    "sweep_noise_levels",
]
