"""
Project: DiscNoise
File Name: core/models.py
Description:
    Core data models shared across all DiscNoise modules.
    Row positions always refer to the frozen ``ExperimentData`` built once
    at the start of a run; every narrowed view is a new frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple

import numpy as np
import pandas as pd

# Derived class labels; ``class1`` is the positive class everywhere
CLASS1 = "class1"
CLASS2 = "class2"
CLASS_LABELS = (CLASS1, CLASS2)

# Performance vector layout (order matters, rows are stacked in this order)
METRIC_NAMES = (
    "accuracy",
    "precision",
    "recall",
    "brier_score",
    "auc",
    "f_measure",
    "mcc",
)


@dataclass(frozen=True)
class ExperimentData:
    """The dataset as seen by one experiment run.

    ``design`` is the numeric feature design (dependent variable excluded),
    ``dependent`` the continuous target and ``labels`` its discretization
    at ``cutpoint``.
    """

    design: pd.DataFrame
    dependent: np.ndarray
    labels: np.ndarray
    cutpoint: float
    dep_var: str

    @property
    def n_rows(self) -> int:
        return len(self.design)

    @property
    def feature_names(self) -> list[str]:
        """Canonical feature order, fixed for the whole run."""
        return list(self.design.columns)


@dataclass(frozen=True)
class BootstrapPartition:
    """One out-of-sample bootstrap draw.

    ``train`` holds ``n`` positions sampled with replacement; ``test`` the
    positions that were never drawn.
    """

    index: int
    train: np.ndarray
    test: np.ndarray
    random_state: int | None = None


@dataclass(frozen=True)
class IterationResult:
    """Performance and importance vectors from a single bootstrap iteration."""

    index: int
    performance: np.ndarray  # ordered as METRIC_NAMES
    importance: pd.Series  # indexed by the canonical feature order


@dataclass
class NoiseLevelResult:
    """Row-stacked iteration results for one noise percentage."""

    percentage: float
    performance: pd.DataFrame  # iterations × METRIC_NAMES
    importance: pd.DataFrame  # iterations × features

    @property
    def n_iterations(self) -> int:
        return len(self.performance)

    @classmethod
    def from_iterations(
        cls,
        percentage: float,
        results: list[IterationResult],
        feature_names: list[str],
    ) -> NoiseLevelResult:
        """Stack iteration results in iteration-index order."""
        results = sorted(results, key=lambda r: r.index)
        performance = pd.DataFrame(
            [r.performance for r in results],
            columns=list(METRIC_NAMES),
            dtype=np.float64,
        )
        importance = pd.DataFrame(
            [r.importance.reindex(feature_names).to_numpy() for r in results],
            columns=feature_names,
            dtype=np.float64,
        )
        return cls(percentage=percentage, performance=performance, importance=importance)


class ImpactReport(NamedTuple):
    """Final output, unpacks as ``performance_impact, importance_impact``."""

    performance: pd.DataFrame
    importance: pd.DataFrame
