"""
Scott-Knott Effect Size Difference (ESD) rank clustering.

Treatments are the columns of a replicates × treatments matrix. The
procedure has two passes:

  1. Scott-Knott: sort treatments by mean (highest first) and recursively
     bisect at the split maximizing the between-group sum of squares,
     as long as the split is significant under the λ ~ χ² test.
  2. ESD: merge adjacent groups whose pooled observations differ by a
     negligible Cohen's d (|d| < 0.2).

Group 1 always holds the treatments with the highest means.
"""

from __future__ import annotations

import math

import numpy as np
import pandas as pd
from scipy import stats

from disc_noise.stats.effect_size import NEGLIGIBLE, cohens_d

_LAMBDA_SCALE = math.pi / (2.0 * (math.pi - 2.0))


def _best_split(means: np.ndarray) -> tuple[int, float]:
    """Split point and between-group sum of squares B0 for sorted means."""
    k = len(means)
    total = means.sum()
    best_i, best_b0 = 1, -math.inf
    for i in range(1, k):
        t1 = means[:i].sum()
        t2 = total - t1
        b0 = t1**2 / i + t2**2 / (k - i) - total**2 / k
        if b0 > best_b0:
            best_i, best_b0 = i, b0
    return best_i, best_b0


def _partition(
    means: np.ndarray,
    lo: int,
    hi: int,
    s2: float,
    dfr: int,
    alpha: float,
) -> list[tuple[int, int]]:
    """Recursive Scott-Knott bisection over ``means[lo:hi]``."""
    k = hi - lo
    segment = means[lo:hi]
    scale = max(1.0, float(np.max(np.abs(segment)))) if k else 1.0
    if k < 2 or np.ptp(segment) <= 1e-12 * scale:
        return [(lo, hi)]

    split, b0 = _best_split(segment)
    sigma2 = (float(np.sum((segment - segment.mean()) ** 2)) + dfr * s2) / (k + dfr)
    if sigma2 <= 0:
        return [(lo, hi)]

    lam = _LAMBDA_SCALE * b0 / sigma2
    critical = stats.chi2.ppf(1.0 - alpha, k / (math.pi - 2.0))
    if lam <= critical:
        return [(lo, hi)]

    return (
        _partition(means, lo, lo + split, s2, dfr, alpha)
        + _partition(means, lo + split, hi, s2, dfr, alpha)
    )


def _merge_negligible(values: np.ndarray, groups: list[list[int]]) -> list[list[int]]:
    """Merge adjacent groups until no neighbours differ negligibly."""
    groups = [list(g) for g in groups]
    merged = True
    while merged and len(groups) > 1:
        merged = False
        for i in range(len(groups) - 1):
            upper = values[:, groups[i]].ravel()
            lower = values[:, groups[i + 1]].ravel()
            if abs(cohens_d(upper, lower)) < NEGLIGIBLE:
                groups[i] = groups[i] + groups[i + 1]
                del groups[i + 1]
                merged = True
                break
    return groups


def scott_knott_esd(
    data: pd.DataFrame | np.ndarray,
    alpha: float = 0.05,
) -> pd.Series:
    """Rank the columns of ``data`` into Scott-Knott ESD groups.

    Args:
        data: Replicates (rows) × treatments (columns).
        alpha: Significance level of the bisection test.

    Returns:
        Integer group per column (1 = best), indexed like the columns.
    """
    if isinstance(data, pd.DataFrame):
        columns = list(data.columns)
        values = data.to_numpy(dtype=np.float64)
    else:
        values = np.atleast_2d(np.asarray(data, dtype=np.float64))
        columns = list(range(values.shape[1]))

    n_rep, k = values.shape
    if k == 0:
        return pd.Series([], dtype=np.int64)

    col_means = values.mean(axis=0)
    order = np.argsort(-col_means, kind="stable")

    dfr = k * (n_rep - 1)
    mse = float(np.sum((values - col_means) ** 2)) / dfr if dfr > 0 else 0.0
    s2 = mse / n_rep

    spans = _partition(col_means[order], 0, k, s2, dfr, alpha)
    groups = [list(order[lo:hi]) for lo, hi in spans]
    groups = _merge_negligible(values, groups)

    ranks = np.empty(k, dtype=np.int64)
    for rank, members in enumerate(groups, 1):
        ranks[members] = rank
    return pd.Series(ranks, index=columns)
