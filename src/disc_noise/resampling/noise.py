"""
Discretization-noise injection around the cutpoint.
"""

from __future__ import annotations

import numpy as np


def noise_target(cutpoint: float, percentage: float) -> float:
    """Half-width of the noisy window for a percentage of the cutpoint."""
    return abs(cutpoint) * (percentage / 100.0)


def noisy_mask(dependent: np.ndarray, cutpoint: float, target: float) -> np.ndarray:
    """True where a dependent value lies in ``[cutpoint - target, cutpoint + target]``."""
    dependent = np.asarray(dependent, dtype=np.float64)
    return (dependent >= cutpoint - target) & (dependent <= cutpoint + target)


def remove_noise(
    train_rows: np.ndarray,
    dependent: np.ndarray,
    cutpoint: float,
    target: float,
) -> np.ndarray:
    """Drop training rows whose dependent value falls in the noisy window.

    Args:
        train_rows: Row positions of the training partition (may repeat).
        dependent: Continuous dependent values for the full dataset.
        cutpoint: Discretization cutpoint.
        target: Half-width of the window; 0 leaves the rows untouched.

    Returns:
        The surviving training row positions, in their original order.
    """
    train_rows = np.asarray(train_rows)
    if target == 0:
        return train_rows
    keep = ~noisy_mask(np.asarray(dependent)[train_rows], cutpoint, target)
    return train_rows[keep]
