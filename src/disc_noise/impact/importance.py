"""
Importance impact — how stable are feature-importance ranks under
discretization noise?

Pipeline:
  1. Drop features whose importance never varies (no rank information).
  2. Per noise level, break exact ties between importance columns with a
     tiny random jitter, then rank features with Scott-Knott ESD.
  3. Test the rank displacement between the lowest and highest noise
     level against "no displacement" (Wilcoxon signed-rank, Cohen's d).
  4. Bootstrap the rank matrix and measure how often each of the three
     top-ranked features lands off its median rank.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

import numpy as np
import pandas as pd

from disc_noise.resampling.bootstrap import make_rng
from disc_noise.stats.effect_size import cohens_d, describe_effect, signed_rank_p
from disc_noise.stats.scott_knott import scott_knott_esd

logger = logging.getLogger(__name__)

# Relative size of the tie-breaking jitter
TIE_JITTER = 1e-6
N_BOOT = 100
N_TOP = 3

IMPORTANCE_IMPACT_COLUMNS = ["p_value", "effect_size", "rank1_shift", "rank2_shift", "rank3_shift"]


# ── Helpers ──────────────────────────────────────────────────────────────────


def informative_features(
    importance_results: Mapping[str, pd.DataFrame],
    feature_names: list[str],
) -> list[str]:
    """Features whose importance varies across all iterations and levels."""
    stacked = pd.concat(
        [frame.reindex(columns=feature_names) for frame in importance_results.values()],
        ignore_index=True,
    )
    return [f for f in feature_names if stacked[f].nunique(dropna=False) > 1]


def jitter_duplicates(values: pd.DataFrame, rng: np.random.Generator) -> pd.DataFrame:
    """Shift every repeated column by one small positive random draw.

    The first occurrence of each distinct column is left untouched, so
    afterwards all columns are pairwise distinct.
    """
    arr = values.to_numpy(dtype=np.float64).copy()
    if arr.size == 0:
        return values.copy()

    _, first = np.unique(arr, axis=1, return_index=True)
    duplicates = sorted(set(range(arr.shape[1])) - set(first.tolist()))
    scale = TIE_JITTER * max(1.0, float(np.nanmax(np.abs(arr))))
    for col in duplicates:
        arr[:, col] += (1.0 - rng.random()) * scale

    return pd.DataFrame(arr, index=values.index, columns=values.columns)


# ── Rank matrix ──────────────────────────────────────────────────────────────


def rank_matrix(
    importance_results: Mapping[str, pd.DataFrame],
    features: list[str],
    rng: np.random.Generator,
) -> pd.DataFrame:
    """Scott-Knott ESD rank of every feature at every noise level.

    Returns:
        DataFrame indexed by noise-level label, columns in ``features`` order.
    """
    labels, rows = [], []
    for label, frame in importance_results.items():
        tied = jitter_duplicates(frame[features], rng)
        labels.append(label)
        rows.append(scott_knott_esd(tied).reindex(features).to_numpy())
    return pd.DataFrame(rows, index=labels, columns=features, dtype=np.int64)


def rank_shift_likelihood(
    ranks: pd.DataFrame,
    rng: np.random.Generator,
    n_boot: int = N_BOOT,
    n_top: int = N_TOP,
) -> pd.Series:
    """Likelihood that each top-ranked feature moves off its median rank.

    Each resample draws every feature's ranks with replacement across noise
    levels and re-clusters them. The ``n_top`` features with the lowest
    median bootstrap rank are reported, best first.

    Returns:
        Series of shift likelihoods in [0, 1], indexed by feature name.
    """
    values = ranks.to_numpy(dtype=np.float64)
    n_levels, k = values.shape

    boot = np.empty((n_boot, k), dtype=np.float64)
    for b in range(n_boot):
        idx = rng.integers(0, n_levels, size=(n_levels, k))
        sample = pd.DataFrame(np.take_along_axis(values, idx, axis=0), columns=ranks.columns)
        sample = jitter_duplicates(sample, rng)
        # Negate so that rank 1 has the highest mean and lands in group 1
        boot[b] = scott_knott_esd(-sample).reindex(ranks.columns).to_numpy()

    medians = np.median(boot, axis=0)
    top = np.argsort(medians, kind="stable")[:n_top]
    shifts = [float(np.mean(boot[:, j] != medians[j])) for j in top]
    return pd.Series(shifts, index=[ranks.columns[j] for j in top], dtype=np.float64)


# ── Importance impact ────────────────────────────────────────────────────────


def importance_impact(
    importance_results: Mapping[str, pd.DataFrame],
    feature_names: list[str],
    n_boot: int = N_BOOT,
    seed: int | bool | None = None,
) -> pd.DataFrame:
    """Build the 1×5 Importance_impact table.

    Args:
        importance_results: Noise-level label → iterations × features
            importance matrix, in sweep order (lowest noise first).
        feature_names: Canonical feature order.
        n_boot: Number of rank-matrix bootstrap resamples.
        seed: Seed for the tie-breaking jitter and rank bootstrap.

    Returns:
        One-row DataFrame: p_value, effect_size, rank1_shift, rank2_shift,
        rank3_shift.
    """
    rng = make_rng(seed)
    features = informative_features(importance_results, feature_names)
    if not features:
        logger.warning("Every feature has constant importance; no ranks to compare")
        return pd.DataFrame([[np.nan] * len(IMPORTANCE_IMPACT_COLUMNS)], columns=IMPORTANCE_IMPACT_COLUMNS)

    dropped = len(feature_names) - len(features)
    if dropped:
        logger.info("Dropped %d features with constant importance", dropped)

    ranks = rank_matrix(importance_results, features, rng)

    dx = np.abs(ranks.iloc[0].to_numpy(dtype=np.float64) - ranks.iloc[-1].to_numpy(dtype=np.float64))
    null_distribution = np.zeros_like(dx)
    p_value = signed_rank_p(null_distribution, dx)
    d = cohens_d(null_distribution, dx)

    shifts = rank_shift_likelihood(ranks, rng, n_boot=n_boot)
    logger.info("Top-ranked features: %s", dict(shifts.round(3)))
    padded = list(shifts.to_numpy()) + [np.nan] * (N_TOP - len(shifts))

    row = [p_value, describe_effect(d), *padded[:N_TOP]]
    return pd.DataFrame([row], columns=IMPORTANCE_IMPACT_COLUMNS)
