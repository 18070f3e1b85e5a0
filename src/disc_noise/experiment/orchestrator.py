"""
Bootstrap sweep for a single noise level.

Every iteration is independent: inject noise into its training partition,
fit with the pre-selected hyper-parameters, score the out-of-bag rows and
read the importance vector. Iterations run in index order, or on an
``Executor`` supplied by the caller, in which case results are gathered in
completion order.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, as_completed
from dataclasses import dataclass
from typing import Any

from disc_noise.core.models import (
    BootstrapPartition,
    ExperimentData,
    IterationResult,
    NoiseLevelResult,
)
from disc_noise.evaluation.performance import evaluate_model
from disc_noise.learning.classifiers import fit_model
from disc_noise.learning.importance import extract_importance
from disc_noise.resampling.noise import noise_target, remove_noise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IterationTask:
    """Everything a worker needs to run one bootstrap iteration."""

    data: ExperimentData
    partition: BootstrapPartition
    classifier: str
    hyperparameters: dict[str, Any]
    target: float


def run_iteration(task: IterationTask) -> IterationResult:
    """Fit, evaluate and extract importance for one bootstrap partition."""
    data = task.data
    partition = task.partition

    train_rows = remove_noise(partition.train, data.dependent, data.cutpoint, task.target)
    X_train = data.design.iloc[train_rows].reset_index(drop=True)
    y_train = data.labels[train_rows]
    X_test = data.design.iloc[partition.test].reset_index(drop=True)
    actuals = data.labels[partition.test]

    model = fit_model(
        task.classifier,
        X_train,
        y_train,
        hyperparameters=task.hyperparameters,
        random_state=partition.random_state,
    )
    performance = evaluate_model(model, X_test, actuals)
    importance = extract_importance(model, data.feature_names)

    logger.debug(
        "Iteration %d: %d/%d train rows kept, %d test rows, accuracy %.4f",
        partition.index,
        len(train_rows),
        len(partition.train),
        len(partition.test),
        performance[0],
    )
    return IterationResult(index=partition.index, performance=performance, importance=importance)


def run_noise_level(
    data: ExperimentData,
    partitions: list[BootstrapPartition],
    classifier: str,
    hyperparameters: dict[str, Any],
    percentage: float,
    executor: Executor | None = None,
) -> NoiseLevelResult:
    """Run every evaluation partition at one noise percentage.

    Args:
        data: The frozen experiment data.
        partitions: Evaluation partitions (the tuning partition excluded).
        classifier: Classifier tag, e.g. ``"rf"``.
        hyperparameters: Configuration fixed by the tuning step.
        percentage: Noise level as a percentage of the cutpoint.
        executor: Worker pool; ``None`` runs sequentially.

    Returns:
        NoiseLevelResult with one row per iteration. A failing iteration
        raises and aborts the whole level.
    """
    target = noise_target(data.cutpoint, percentage)
    tasks = [
        IterationTask(
            data=data,
            partition=partition,
            classifier=classifier,
            hyperparameters=hyperparameters,
            target=target,
        )
        for partition in partitions
    ]

    if executor is None:
        results = [run_iteration(task) for task in tasks]
    else:
        futures = [executor.submit(run_iteration, task) for task in tasks]
        results = []
        try:
            for future in as_completed(futures):
                results.append(future.result())
        except BaseException:
            for future in futures:
                future.cancel()
            raise

    logger.info(
        "Noise level %g%% (window ±%g around %g): %d iterations done",
        percentage,
        target,
        data.cutpoint,
        len(results),
    )
    return NoiseLevelResult.from_iterations(percentage, results, data.feature_names)
