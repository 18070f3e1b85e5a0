"""
Classifier families supported by the framework.

Each family wraps one scikit-learn estimator and knows three things about
it: how to build it, which hyper-parameters to search, and how to read its
native feature importance. ``CLASSIFIERS`` is the only place a tag is
resolved to a family.

  rf    → Random Forest, Gini-decrease importance
  glm   → Logistic regression, |Wald z| importance
  C5.0  → Classification tree (CART), impurity-decrease importance
  knn   → k-nearest neighbours, per-feature ROC filter importance
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import numpy as np
import pandas as pd
from sklearn.ensemble import RandomForestClassifier
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import roc_auc_score
from sklearn.model_selection import GridSearchCV, StratifiedKFold
from sklearn.neighbors import KNeighborsClassifier
from sklearn.pipeline import Pipeline
from sklearn.preprocessing import StandardScaler
from sklearn.tree import DecisionTreeClassifier

from disc_noise.core.errors import ConfigError, ConfigViolation
from disc_noise.core.models import CLASS1, CLASS_LABELS

logger = logging.getLogger(__name__)


# ── Helpers ──────────────────────────────────────────────────────────────────


def _share_100(importance: pd.Series) -> pd.Series:
    """Express importance as a percentage share of its total (all-zero stays 0)."""
    total = float(importance.sum())
    if not np.isfinite(total) or total <= 0:
        return pd.Series(0.0, index=importance.index)
    return importance / total * 100.0


# ── Families ─────────────────────────────────────────────────────────────────


class ClassifierFamily:
    """Base class for a supported classifier kind."""

    tag: str = ""
    name: str = ""
    param_grid: ClassVar[dict[str, list[Any]]]

    def build(self, random_state: int | None = None):
        raise NotImplementedError

    def raw_importance(self, estimator, X: pd.DataFrame, y: np.ndarray) -> pd.Series:
        """Classifier-native importance, indexed by the names it knows."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(tag={self.tag!r})"


class RandomForestFamily(ClassifierFamily):
    tag = "rf"
    name = "Random Forest"
    param_grid = {"max_features": ["sqrt", 0.5, 1.0]}

    def build(self, random_state: int | None = None):
        # n_jobs=1: iterations are already parallel at the orchestrator level
        return RandomForestClassifier(n_estimators=100, n_jobs=1, random_state=random_state)

    def raw_importance(self, estimator, X: pd.DataFrame, y: np.ndarray) -> pd.Series:
        return pd.Series(estimator.feature_importances_, index=list(X.columns))


class LogisticFamily(ClassifierFamily):
    tag = "glm"
    name = "Logistic Regression"
    param_grid = {"C": [0.01, 0.1, 1.0, 10.0, 100.0]}

    def build(self, random_state: int | None = None):
        return LogisticRegression(max_iter=1000, random_state=random_state)

    def raw_importance(self, estimator, X: pd.DataFrame, y: np.ndarray) -> pd.Series:
        """Absolute Wald z statistic of each coefficient, as a share of 100."""
        values = X.to_numpy(dtype=np.float64)
        coef = estimator.coef_.ravel()
        p = estimator.predict_proba(X)[:, 1]

        design = np.column_stack([np.ones(len(values)), values])
        info = design.T @ (design * (p * (1.0 - p))[:, None])
        cov = np.linalg.pinv(info)
        se = np.sqrt(np.clip(np.diag(cov)[1:], 0.0, None))
        z = np.divide(np.abs(coef), se, out=np.zeros_like(coef), where=se > 0)

        return _share_100(pd.Series(z, index=list(X.columns)))


class TreeFamily(ClassifierFamily):
    tag = "C5.0"
    name = "Classification Tree (CART)"
    param_grid = {"max_depth": [None, 3, 5], "min_samples_leaf": [1, 5]}

    def build(self, random_state: int | None = None):
        return DecisionTreeClassifier(random_state=random_state)

    def raw_importance(self, estimator, X: pd.DataFrame, y: np.ndarray) -> pd.Series:
        return _share_100(pd.Series(estimator.feature_importances_, index=list(X.columns)))


class KnnFamily(ClassifierFamily):
    tag = "knn"
    name = "K-Nearest Neighbours"
    param_grid = {"knn__n_neighbors": [5, 7, 9]}

    def build(self, random_state: int | None = None):
        return Pipeline([
            ("scaler", StandardScaler()),
            ("knn", KNeighborsClassifier()),
        ])

    def raw_importance(self, estimator, X: pd.DataFrame, y: np.ndarray) -> pd.Series:
        """Model-free filter score: ROC AUC of each feature alone, as a share of 100.

        k-NN has no native importance, so each feature is scored by how well
        it separates the two classes on the training data by itself.
        """
        positive = np.asarray(y) == CLASS1
        if positive.all() or not positive.any():
            return pd.Series(0.0, index=list(X.columns))
        scores = {}
        for col in X.columns:
            auc = roc_auc_score(positive, X[col].to_numpy())
            scores[col] = max(auc, 1.0 - auc)
        return _share_100(pd.Series(scores, dtype=np.float64))


CLASSIFIERS: dict[str, ClassifierFamily] = {
    family.tag: family
    for family in (RandomForestFamily(), LogisticFamily(), TreeFamily(), KnnFamily())
}


def get_family(classifier: str | ClassifierFamily) -> ClassifierFamily:
    """Resolve a tag to its family."""
    if isinstance(classifier, ClassifierFamily):
        return classifier
    try:
        return CLASSIFIERS[classifier]
    except KeyError:
        msg = f"Unsupported classifier {classifier!r}; choose one of {sorted(CLASSIFIERS)}"
        raise ConfigError(ConfigViolation.UNSUPPORTED_CLASSIFIER, msg) from None


# ── Fitted model ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class FittedModel:
    """A trained estimator together with the data it was trained on."""

    family: ClassifierFamily
    estimator: Any
    X_train: pd.DataFrame
    y_train: np.ndarray

    @property
    def feature_names(self) -> list[str]:
        return list(self.X_train.columns)

    def predict_class(self, X: pd.DataFrame) -> np.ndarray:
        return np.asarray(self.estimator.predict(X))

    def predict_probability(self, X: pd.DataFrame) -> pd.DataFrame:
        """Class probabilities, one column per derived class.

        A class missing from the training data gets probability 0.
        """
        proba = self.estimator.predict_proba(X)
        frame = pd.DataFrame(proba, columns=list(self.estimator.classes_))
        return frame.reindex(columns=list(CLASS_LABELS), fill_value=0.0)

    def raw_importance(self) -> pd.Series:
        return self.family.raw_importance(self.estimator, self.X_train, self.y_train)


def fit_model(
    classifier: str | ClassifierFamily,
    X: pd.DataFrame,
    y: np.ndarray,
    hyperparameters: dict[str, Any] | None = None,
    random_state: int | None = None,
) -> FittedModel:
    """Fit one classifier with a fixed hyper-parameter configuration."""
    family = get_family(classifier)
    estimator = family.build(random_state)
    if hyperparameters:
        estimator.set_params(**hyperparameters)
    estimator.fit(X, y)
    return FittedModel(family=family, estimator=estimator, X_train=X, y_train=np.asarray(y))


def tune_hyperparameters(
    classifier: str | ClassifierFamily,
    X: pd.DataFrame,
    y: np.ndarray,
    random_state: int | None = None,
    max_folds: int = 5,
) -> dict[str, Any]:
    """Pick the best grid configuration by stratified cross-validated accuracy.

    Runs single-threaded; called once per experiment before any worker
    pool exists.
    """
    family = get_family(classifier)
    _, counts = np.unique(np.asarray(y), return_counts=True)
    n_splits = min(max_folds, int(counts.min())) if len(counts) == 2 else 0
    if n_splits < 2:
        msg = f"Cannot tune {family.name}: need at least 2 rows of each class, got {counts.tolist()}"
        raise ValueError(msg)

    cv = StratifiedKFold(n_splits=n_splits, shuffle=True, random_state=random_state)
    search = GridSearchCV(
        family.build(random_state),
        family.param_grid,
        scoring="accuracy",
        cv=cv,
        n_jobs=1,
        refit=False,
    )
    search.fit(X, y)

    best = dict(search.best_params_)
    logger.info("Tuned %s: %s (cv accuracy %.4f)", family.name, best, search.best_score_)
    return best
