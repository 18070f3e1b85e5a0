"""
Per-iteration performance metrics for a binary (class1/class2) target.

The performance vector is always ordered as ``METRIC_NAMES``:
accuracy, precision, recall, Brier score, AUC, F-measure, MCC.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np
from sklearn.metrics import f1_score, precision_score, recall_score, roc_auc_score

from disc_noise.core.errors import NonBinaryPredictionError
from disc_noise.core.models import CLASS1, CLASS2

if TYPE_CHECKING:
    import pandas as pd

    from disc_noise.learning.classifiers import FittedModel

logger = logging.getLogger(__name__)


def mcc(actuals: np.ndarray, predicted: np.ndarray) -> float:
    """Matthews correlation coefficient with ``class1`` as positive.

    When any of the four marginal sums is zero the denominator is taken
    as 1, so the result is the raw ``TP·TN − FP·FN``.
    """
    actuals = np.asarray(actuals)
    predicted = np.asarray(predicted)
    tp = int(np.sum((actuals == CLASS1) & (predicted == CLASS1)))
    tn = int(np.sum((actuals == CLASS2) & (predicted == CLASS2)))
    fp = int(np.sum((actuals == CLASS2) & (predicted == CLASS1)))
    fn = int(np.sum((actuals == CLASS1) & (predicted == CLASS2)))

    margins = (tp + fp, tp + fn, tn + fp, tn + fn)
    denom = 1.0 if 0 in margins else float(np.prod(margins, dtype=np.float64))
    return (tp * tn - fp * fn) / math.sqrt(denom)


def auc(actuals: np.ndarray, prob_class1: np.ndarray) -> float:
    """ROC AUC of the class1 probability, rounded to 2 decimals.

    A test set holding a single class has no ROC curve; 0.5 is returned.
    """
    positive = np.asarray(actuals) == CLASS1
    if positive.all() or not positive.any():
        logger.warning("AUC undefined for a single-class test set; using 0.5")
        return 0.5
    values = np.atleast_1d(roc_auc_score(positive, prob_class1))
    return float(np.min(np.round(values, 2)))


def brier_score(actuals: np.ndarray, prob_class1: np.ndarray) -> float:
    """Mean squared error of the class1 probability against 0/1 outcomes."""
    outcome = (np.asarray(actuals) == CLASS1).astype(np.float64)
    return float(np.mean((np.asarray(prob_class1, dtype=np.float64) - outcome) ** 2))


def performance_metrics(
    actuals: np.ndarray,
    predicted: np.ndarray,
    prob_class1: np.ndarray,
) -> np.ndarray:
    """Compute the 7-metric performance vector for one iteration.

    Raises:
        NonBinaryPredictionError: If more than two classes were predicted.
    """
    actuals = np.asarray(actuals)
    predicted = np.asarray(predicted)

    classes = list(np.unique(predicted))
    logger.debug("Predicted classes: %s", classes)
    if len(classes) > 2:
        raise NonBinaryPredictionError([str(c) for c in classes])

    accuracy = float(np.mean(predicted == actuals))
    precision = precision_score(actuals, predicted, pos_label=CLASS1, zero_division=0)
    recall = recall_score(actuals, predicted, pos_label=CLASS1, zero_division=0)
    f_measure = f1_score(actuals, predicted, pos_label=CLASS1, zero_division=0)

    return np.array(
        [
            accuracy,
            float(precision),
            float(recall),
            brier_score(actuals, prob_class1),
            auc(actuals, prob_class1),
            float(f_measure),
            mcc(actuals, predicted),
        ],
        dtype=np.float64,
    )


def evaluate_model(model: FittedModel, X_test: pd.DataFrame, actuals: np.ndarray) -> np.ndarray:
    """Predict on the held-out rows and score the predictions."""
    predicted = model.predict_class(X_test)
    proba = model.predict_probability(X_test)
    return performance_metrics(actuals, predicted, proba[CLASS1].to_numpy())
