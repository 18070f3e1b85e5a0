"""
Dataset preparation for an impact experiment.

Turns a raw DataFrame with a continuous dependent column into an
``ExperimentData``: a numeric design matrix (categoricals one-hot encoded
with the first level dropped) plus the class labels derived at the cutpoint.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from disc_noise.core.errors import ConfigError, ConfigViolation
from disc_noise.core.models import CLASS1, CLASS2, ExperimentData

logger = logging.getLogger(__name__)


def resolve_cutpoint(values: np.ndarray, cutpoint: float | None = None) -> float:
    """Return the user cutpoint, or the median of the dependent values."""
    if cutpoint is None:
        return float(np.median(values))
    return float(cutpoint)


def discretize(values: np.ndarray, cutpoint: float) -> np.ndarray:
    """``class1`` where value ≤ cutpoint, ``class2`` otherwise."""
    return np.where(np.asarray(values) <= cutpoint, CLASS1, CLASS2)


def build_design(frame: pd.DataFrame, dep_var: str) -> pd.DataFrame:
    """Numeric feature design with the dependent column removed.

    Column order is the canonical feature order for the whole run.
    """
    features = frame.drop(columns=[dep_var])
    design = pd.get_dummies(features, drop_first=True, dtype=np.float64)
    design.columns = [str(c) for c in design.columns]
    return design.astype(np.float64).reset_index(drop=True)


def build_experiment_data(
    frame: pd.DataFrame,
    dep_var: str,
    cutpoint: float | None = None,
) -> ExperimentData:
    """Build the frozen experiment view of ``frame``.

    Raises:
        ConfigError: If the cutpoint puts every row into the same class.
    """
    dependent = frame[dep_var].to_numpy(dtype=np.float64)
    cut = resolve_cutpoint(dependent, cutpoint)
    labels = discretize(dependent, cut)

    n_class1 = int(np.sum(labels == CLASS1))
    if n_class1 in (0, len(labels)):
        msg = f"Cutpoint {cut:g} leaves a single class in {dep_var!r}"
        raise ConfigError(ConfigViolation.INVALID_CUTPOINT, msg)

    design = build_design(frame, dep_var)
    logger.info(
        "Discretized %r at cutpoint %g: %d class1 / %d class2, %d features",
        dep_var,
        cut,
        n_class1,
        len(labels) - n_class1,
        design.shape[1],
    )

    return ExperimentData(
        design=design,
        dependent=dependent,
        labels=labels,
        cutpoint=cut,
        dep_var=dep_var,
    )
