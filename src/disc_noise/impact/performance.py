"""
Performance impact — compare metric distributions between the first and
last swept noise levels.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from disc_noise.core.models import METRIC_NAMES
from disc_noise.stats.effect_size import cohens_d, describe_effect, rank_sum_p

logger = logging.getLogger(__name__)

ALPHA = 0.05
SIGNIFICANT = "Significant"
NOT_SIGNIFICANT = "Not-Significant"

PERFORMANCE_IMPACT_COLUMNS = ["metric", "percent_change", "significance", "effect_size"]


def percent_change(baseline: np.ndarray, noisy: np.ndarray) -> float:
    """``100 − median(noisy) / median(baseline) × 100``, rounded to 2 places.

    Positive values mean the metric's median dropped under noise.
    """
    m_base = float(np.median(baseline))
    m_noisy = float(np.median(noisy))
    if m_base == 0:
        if m_noisy == 0:
            return 0.0
        logger.warning("Baseline median is 0; percent change is undefined")
        return float("nan")
    return round(100.0 - (m_noisy / m_base) * 100.0, 2)


def performance_impact(
    baseline: pd.DataFrame,
    noisy: pd.DataFrame,
    same_level: bool = False,
) -> pd.DataFrame:
    """Build the 7-row Performance_impact table.

    Args:
        baseline: iterations × metrics at the first (lowest) noise level.
        noisy: iterations × metrics at the last (highest) noise level.
        same_level: Both frames are the same level; nothing can differ.

    Returns:
        DataFrame with columns metric, percent_change, significance,
        effect_size.
    """
    rows = []
    for metric in METRIC_NAMES:
        base = baseline[metric].to_numpy(dtype=np.float64)
        after = noisy[metric].to_numpy(dtype=np.float64)

        p_value = 1.0 if same_level else rank_sum_p(base, after)
        d = 0.0 if same_level else cohens_d(base, after)

        rows.append({
            "metric": metric,
            "percent_change": 0.0 if same_level else percent_change(base, after),
            "significance": SIGNIFICANT if p_value < ALPHA else NOT_SIGNIFICANT,
            "effect_size": describe_effect(d),
        })

    return pd.DataFrame(rows, columns=PERFORMANCE_IMPACT_COLUMNS)
