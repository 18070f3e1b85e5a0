"""
Classifier families, fitting, tuning and importance extraction.
"""

from disc_noise.learning.classifiers import (
    CLASSIFIERS,
    ClassifierFamily,
    FittedModel,
    fit_model,
    get_family,
    tune_hyperparameters,
)
from disc_noise.learning.importance import align_importance, extract_importance

__all__ = [
    "CLASSIFIERS",
    "ClassifierFamily",
    "FittedModel",
    "align_importance",
    "extract_importance",
    "fit_model",
    "get_family",
    "tune_hyperparameters",
]
