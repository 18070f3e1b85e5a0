"""
Exception types raised by DiscNoise.

Configuration problems are reported as ``ConfigError`` carrying a
``ConfigViolation`` so callers can branch on the cause without parsing
messages.
"""

from __future__ import annotations

from enum import Enum


class DiscNoiseError(Exception):
    """Base class for all DiscNoise errors."""


class ConfigViolation(str, Enum):
    """Precondition checked before any resampling starts."""

    MISSING_DEPENDENT_VARIABLE = "missing_dependent_variable"
    UNKNOWN_DEPENDENT_VARIABLE = "unknown_dependent_variable"
    MISSING_NOISE_LIMIT = "missing_noise_limit"
    INVALID_NOISE_LIMIT = "invalid_noise_limit"
    MISSING_STEP_SIZE = "missing_step_size"
    INVALID_STEP_SIZE = "invalid_step_size"
    MISSING_CORE_COUNT = "missing_core_count"
    INVALID_BOOT_SIZE = "invalid_boot_size"
    UNSUPPORTED_CLASSIFIER = "unsupported_classifier"
    MISSING_DESTINATION = "missing_destination"
    INVALID_CUTPOINT = "invalid_cutpoint"


class ConfigError(DiscNoiseError, ValueError):
    """An experiment was configured in a way that cannot run."""

    def __init__(self, violation: ConfigViolation, message: str) -> None:
        super().__init__(message)
        self.violation = violation


class NonBinaryPredictionError(DiscNoiseError, ValueError):
    """A classifier predicted more than the two derived classes."""

    def __init__(self, classes: list[str]) -> None:
        super().__init__(
            "Only binary classifiers are supported, but the model predicted "
            f"{len(classes)} outcome classes: {sorted(classes)}"
        )
        self.classes = classes
