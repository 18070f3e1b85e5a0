"""
Run configuration for an impact experiment.

``ImpactConfig`` collects every option of ``compute_impact`` and checks
them all up front, so that a bad option fails before any model is fitted.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from pathlib import Path

from disc_noise.core.errors import ConfigError, ConfigViolation
from disc_noise.learning.classifiers import CLASSIFIERS

DEFAULT_BOOT_SIZE = 100


@dataclass(frozen=True)
class ImpactConfig:
    """Options for one discretization-noise experiment.

    ``limit`` and ``step_size`` are percentages of the cutpoint. ``seed``
    follows the sampler's convention: an int is used as-is, ``True`` means
    the default seed and ``None``/``False`` disables seeding.
    """

    dep_var: str | None = None
    classifier: str | None = None
    limit: float | None = None
    step_size: float | None = None
    parallel: bool = False
    n_cores: int | None = None
    boot_size: int = DEFAULT_BOOT_SIZE
    cutpoint: float | None = None
    save_interim_results: bool = False
    dest_path: str | Path | None = None
    seed: int | bool | None = True

    def validate(self, columns: list[str] | None = None) -> None:
        """Raise ``ConfigError`` for the first violated precondition.

        Args:
            columns: Column names of the dataset; when given, the dependent
                variable must be one of them.
        """
        if not self.dep_var:
            raise ConfigError(
                ConfigViolation.MISSING_DEPENDENT_VARIABLE,
                "The dependent variable column name must be specified",
            )
        if columns is not None and self.dep_var not in columns:
            raise ConfigError(
                ConfigViolation.UNKNOWN_DEPENDENT_VARIABLE,
                f"Dependent variable {self.dep_var!r} is not a column of the data",
            )

        if self.limit is None:
            raise ConfigError(
                ConfigViolation.MISSING_NOISE_LIMIT,
                "A noise limit must be specified so the noisy area around the "
                "cutpoint can be demarcated",
            )
        if not _is_number(self.limit) or self.limit < 0:
            raise ConfigError(
                ConfigViolation.INVALID_NOISE_LIMIT,
                f"The noise limit must be a non-negative number, got {self.limit!r}",
            )

        if self.step_size is None:
            raise ConfigError(
                ConfigViolation.MISSING_STEP_SIZE,
                "A step size must be specified to form the noise increments",
            )
        if not _is_number(self.step_size) or self.step_size <= 0:
            raise ConfigError(
                ConfigViolation.INVALID_STEP_SIZE,
                f"The step size must be a positive number, got {self.step_size!r}",
            )

        if self.parallel and self.n_cores is None:
            raise ConfigError(
                ConfigViolation.MISSING_CORE_COUNT,
                "n_cores must be specified when running in parallel",
            )

        boot_size = self.boot_size
        if isinstance(boot_size, bool) or not isinstance(boot_size, numbers.Integral) or boot_size < 1:
            raise ConfigError(
                ConfigViolation.INVALID_BOOT_SIZE,
                f"boot_size must be a positive integer, got {self.boot_size!r}",
            )

        if self.cutpoint is not None and not _is_number(self.cutpoint):
            raise ConfigError(
                ConfigViolation.INVALID_CUTPOINT,
                "The cutpoint must be numeric or None, "
                f"got {type(self.cutpoint).__name__}",
            )

        if self.classifier not in CLASSIFIERS:
            raise ConfigError(
                ConfigViolation.UNSUPPORTED_CLASSIFIER,
                f"Unsupported classifier {self.classifier!r}; "
                f"choose one of {sorted(CLASSIFIERS)}",
            )

        if self.save_interim_results and not self.dest_path:
            raise ConfigError(
                ConfigViolation.MISSING_DESTINATION,
                "A destination path must be provided to save interim results",
            )

    @property
    def workers(self) -> int:
        return self.n_cores if self.parallel and self.n_cores else 1

    def noise_percentages(self) -> list[float]:
        """Swept noise percentages: 0, step, 2·step, … up to ``limit``."""
        n_steps = math.floor(self.limit / self.step_size + 1e-9)
        return [round(i * self.step_size, 10) for i in range(n_steps + 1)]


def percentage_label(percentage: float) -> str:
    """Key used for a noise level in result mappings ("0", "25", "2.5")."""
    return f"{percentage:g}"


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)
