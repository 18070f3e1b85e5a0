"""
Effect-size and two-sample test helpers shared by the impact tables.
"""

from __future__ import annotations

import math

import numpy as np
from scipy import stats

# Cohen (1988) thresholds on |d|
NEGLIGIBLE = 0.2
SMALL = 0.5
MEDIUM = 0.8


def cohens_d(group1: np.ndarray, group2: np.ndarray) -> float:
    """Cohen's d effect size with a pooled standard deviation.

    A zero pooled deviation gives 0 for equal means and ±inf otherwise.
    """
    g1 = np.asarray(group1, dtype=np.float64)
    g2 = np.asarray(group2, dtype=np.float64)
    n1, n2 = len(g1), len(g2)
    if n1 == 0 or n2 == 0:
        return 0.0

    diff = float(np.mean(g1) - np.mean(g2))
    dof = n1 + n2 - 2
    pooled_std = 0.0
    if dof > 0:
        ss1 = float(np.sum((g1 - g1.mean()) ** 2))
        ss2 = float(np.sum((g2 - g2.mean()) ** 2))
        pooled_std = math.sqrt((ss1 + ss2) / dof)

    if pooled_std == 0:
        return 0.0 if diff == 0 else math.copysign(math.inf, diff)
    return diff / pooled_std


def effect_magnitude(d: float) -> str:
    """Qualitative label for a Cohen's d value."""
    abs_d = abs(d)
    if abs_d < NEGLIGIBLE:
        return "negligible"
    if abs_d < SMALL:
        return "small"
    if abs_d < MEDIUM:
        return "medium"
    return "large"


def describe_effect(d: float) -> str:
    """``"<magnitude> (<estimate>)"``, e.g. ``"small (-0.312)"``."""
    return f"{effect_magnitude(d)} ({d:.3f})"


def rank_sum_p(group1: np.ndarray, group2: np.ndarray) -> float:
    """Two-sided Wilcoxon rank-sum (Mann-Whitney U) p-value.

    Samples whose pooled values are all identical give p = 1.
    """
    g1 = np.asarray(group1, dtype=np.float64)
    g2 = np.asarray(group2, dtype=np.float64)
    pooled = np.concatenate([g1, g2])
    if len(g1) == 0 or len(g2) == 0 or np.ptp(pooled) == 0:
        return 1.0
    _, p_value = stats.mannwhitneyu(g1, g2, alternative="two-sided")
    return float(min(1.0, p_value))


def signed_rank_p(x: np.ndarray, y: np.ndarray) -> float:
    """Two-sided paired Wilcoxon signed-rank p-value.

    All-zero differences carry no evidence of a shift: p = 1.
    """
    diffs = np.asarray(x, dtype=np.float64) - np.asarray(y, dtype=np.float64)
    if not np.any(diffs != 0):
        return 1.0
    _, p_value = stats.wilcoxon(diffs, alternative="two-sided")
    return float(p_value)
