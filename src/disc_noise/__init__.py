"""
DiscNoise — measure how discretization noise around a cutpoint affects a
classifier's performance and the stability of its feature-importance ranks.

Usage::

    from disc_noise import compute_impact

    performance_impact, importance_impact = compute_impact(
        data, dep_var="bugs", classifier="rf", limit=20, step_size=10,
    )
"""

from importlib.metadata import version
__version__ = version("disc-noise")

# Core models
from disc_noise.core.config import ImpactConfig
from disc_noise.core.errors import ConfigError, ConfigViolation, DiscNoiseError, NonBinaryPredictionError
from disc_noise.core.models import METRIC_NAMES, ImpactReport, NoiseLevelResult

# Experiment
from disc_noise.experiment.driver import compute_impact, run_experiment

# Resampling
from disc_noise.resampling.bootstrap import create_oosb_sample
from disc_noise.resampling.noise import remove_noise

# Persistence
from disc_noise.persistence import load_interim_results, save_interim_results

__all__ = [
    # Core
    "METRIC_NAMES",
    "ImpactConfig",
    "ImpactReport",
    "NoiseLevelResult",
    # Errors
    "ConfigError",
    "ConfigViolation",
    "DiscNoiseError",
    "NonBinaryPredictionError",
    # Experiment
    "compute_impact",
    "run_experiment",
    # Resampling
    "create_oosb_sample",
    "remove_noise",
    # Persistence
    "load_interim_results",
    "save_interim_results",
]
