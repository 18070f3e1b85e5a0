"""
Core models and errors shared across all DiscNoise modules.
"""

from disc_noise.core.errors import (
    ConfigError,
    ConfigViolation,
    DiscNoiseError,
    NonBinaryPredictionError,
)
from disc_noise.core.models import (
    CLASS1,
    CLASS2,
    METRIC_NAMES,
    BootstrapPartition,
    ExperimentData,
    ImpactReport,
    IterationResult,
    NoiseLevelResult,
)

__all__ = [
    "CLASS1",
    "CLASS2",
    "METRIC_NAMES",
    "BootstrapPartition",
    "ConfigError",
    "ConfigViolation",
    "DiscNoiseError",
    "ExperimentData",
    "ImpactReport",
    "IterationResult",
    "NoiseLevelResult",
    "NonBinaryPredictionError",
]
