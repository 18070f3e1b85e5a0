"""
Normalize classifier-native importance into a fixed feature vector.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from disc_noise.learning.classifiers import FittedModel

logger = logging.getLogger(__name__)


def _clean_name(name: object) -> str:
    """Strip quoting artifacts (backticks) from a native feature name."""
    return str(name).replace("`", "")


def align_importance(raw: pd.Series, feature_names: list[str]) -> pd.Series:
    """Place native importance values into the canonical feature order.

    Features the native output never mentions stay at 0; native names that
    are not canonical features are ignored.
    """
    vector = pd.Series(np.zeros(len(feature_names)), index=list(feature_names), dtype=np.float64)

    cleaned = pd.Series(raw.to_numpy(dtype=np.float64), index=[_clean_name(n) for n in raw.index])
    cleaned = cleaned[~cleaned.index.duplicated(keep="first")]

    matched = cleaned.index.intersection(vector.index)
    vector.loc[matched] = cleaned.loc[matched].to_numpy()

    unknown = cleaned.index.difference(vector.index)
    if len(unknown):
        logger.debug("Ignoring importance for unknown features: %s", list(unknown))

    return vector


def extract_importance(model: FittedModel, feature_names: list[str]) -> pd.Series:
    """ImportanceVector for a fitted model, in canonical feature order."""
    return align_importance(model.raw_importance(), feature_names)
