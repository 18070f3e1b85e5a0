"""
Top-level driver — sweep noise levels and report their impact.

  1. Validate the configuration (nothing random happens before this).
  2. Discretize the dependent variable at the cutpoint.
  3. Draw ``boot_size + 1`` OOSB partitions once; the last one is reserved
     for hyper-parameter tuning, the rest are reused at every noise level.
  4. Run the orchestrator per noise level, strictly in sequence.
  5. Compare the first and last levels (performance) and rank stability
     across all levels (importance).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from concurrent.futures import Executor, ProcessPoolExecutor
from contextlib import contextmanager
from pathlib import Path

import pandas as pd

from disc_noise.core.config import DEFAULT_BOOT_SIZE, ImpactConfig, percentage_label
from disc_noise.core.models import ImpactReport, NoiseLevelResult
from disc_noise.data.dataset import build_experiment_data
from disc_noise.experiment.orchestrator import run_noise_level
from disc_noise.impact.importance import importance_impact
from disc_noise.impact.performance import performance_impact
from disc_noise.learning.classifiers import tune_hyperparameters
from disc_noise.persistence import save_interim_results
from disc_noise.resampling.bootstrap import create_oosb_sample

logger = logging.getLogger(__name__)


@contextmanager
def _worker_pool(config: ImpactConfig, executor: Executor | None) -> Iterator[Executor | None]:
    """Yield the executor for the sweep; a pool created here is shut down on exit."""
    if executor is not None:
        yield executor
    elif config.parallel:
        with ProcessPoolExecutor(max_workers=config.workers) as pool:
            yield pool
    else:
        yield None


def sweep_noise_levels(
    frame: pd.DataFrame,
    config: ImpactConfig,
    executor: Executor | None = None,
) -> tuple[list[NoiseLevelResult], list[str]]:
    """Validate, tune once, and run every noise level.

    Returns:
        (per-level results in sweep order, canonical feature names)
    """
    config.validate(list(frame.columns))

    data = build_experiment_data(frame, config.dep_var, config.cutpoint)
    partitions = create_oosb_sample(data.n_rows, config.boot_size + 1, seed=config.seed)
    tuning, evaluation = partitions[-1], partitions[:-1]

    hyperparameters = tune_hyperparameters(
        config.classifier,
        data.design.iloc[tuning.train].reset_index(drop=True),
        data.labels[tuning.train],
        random_state=tuning.random_state,
    )

    percentages = config.noise_percentages()
    logger.info(
        "Sweeping %d noise levels %s with %d bootstrap iterations on %d worker(s)",
        len(percentages),
        [percentage_label(p) for p in percentages],
        len(evaluation),
        config.workers,
    )

    with _worker_pool(config, executor) as pool:
        levels = [
            run_noise_level(
                data,
                evaluation,
                config.classifier,
                hyperparameters,
                percentage,
                executor=pool,
            )
            for percentage in percentages
        ]

    return levels, data.feature_names


def report_levels(
    levels: list[NoiseLevelResult],
    feature_names: list[str],
    config: ImpactConfig,
) -> ImpactReport:
    """Persist the raw per-level matrices if requested and build both tables."""
    performance_results = {percentage_label(lv.percentage): lv.performance for lv in levels}
    importance_results = {percentage_label(lv.percentage): lv.importance for lv in levels}

    if config.save_interim_results:
        perf_path, imp_path = save_interim_results(
            performance_results,
            importance_results,
            config.dest_path,
            config.classifier,
        )
        logger.info("Saved interim results to %s and %s", perf_path, imp_path)

    performance = performance_impact(
        levels[0].performance,
        levels[-1].performance,
        same_level=len(levels) == 1,
    )
    importance = importance_impact(importance_results, feature_names, seed=config.seed)
    return ImpactReport(performance=performance, importance=importance)


def run_experiment(
    frame: pd.DataFrame,
    config: ImpactConfig,
    executor: Executor | None = None,
) -> ImpactReport:
    """Run a configured experiment end to end."""
    levels, feature_names = sweep_noise_levels(frame, config, executor)
    return report_levels(levels, feature_names, config)


def compute_impact(
    data: pd.DataFrame,
    dep_var: str | None = None,
    classifier: str | None = None,
    limit: float | None = None,
    step_size: float | None = None,
    parallel: bool = False,
    n_cores: int | None = None,
    boot_size: int = DEFAULT_BOOT_SIZE,
    cutpoint: float | None = None,
    save_interim_results: bool = False,
    dest_path: str | Path | None = None,
    *,
    seed: int | bool | None = True,
    executor: Executor | None = None,
) -> ImpactReport:
    """Measure the impact of discretization noise on a classifier.

    Args:
        data: DataFrame with feature columns and the continuous dependent.
        dep_var: Name of the continuous dependent column.
        classifier: One of ``"rf"``, ``"glm"``, ``"C5.0"``, ``"knn"``.
        limit: Largest noise level, as a percentage of the cutpoint.
        step_size: Increment between swept noise levels (percent).
        parallel: Run bootstrap iterations on a process pool.
        n_cores: Pool size; required when ``parallel`` is set.
        boot_size: Number of bootstrap iterations per level.
        cutpoint: Discretization threshold; defaults to the median.
        save_interim_results: Pickle the per-level raw matrices.
        dest_path: Directory for interim results.
        seed: Sampler seed (int, ``True`` for 42, ``None``/``False`` unseeded).
        executor: Caller-managed pool, used instead of creating one.

    Returns:
        ImpactReport(performance, importance).

    Raises:
        ConfigError: If any option is missing or invalid.
    """
    config = ImpactConfig(
        dep_var=dep_var,
        classifier=classifier,
        limit=limit,
        step_size=step_size,
        parallel=parallel,
        n_cores=n_cores,
        boot_size=boot_size,
        cutpoint=cutpoint,
        save_interim_results=save_interim_results,
        dest_path=dest_path,
        seed=seed,
    )
    return run_experiment(data, config, executor=executor)
