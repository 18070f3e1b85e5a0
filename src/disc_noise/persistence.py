"""
Interim result persistence.

Per-level raw matrices are pickled as ``dict[label, DataFrame]`` so a
long sweep can be re-analysed without re-running the bootstrap.
"""

from __future__ import annotations

import pickle
from pathlib import Path

import pandas as pd

INTERIM_SUFFIX = "interim.pkl"


def interim_paths(dest_path: str | Path, classifier: str, suffix: str = INTERIM_SUFFIX) -> tuple[Path, Path]:
    """``(<dest>/<clf>_performance_<suffix>, <dest>/<clf>_importance_<suffix>)``."""
    dest = Path(dest_path)
    return (
        dest / f"{classifier}_performance_{suffix}",
        dest / f"{classifier}_importance_{suffix}",
    )


def save_interim_results(
    performance_results: dict[str, pd.DataFrame],
    importance_results: dict[str, pd.DataFrame],
    dest_path: str | Path,
    classifier: str,
    suffix: str = INTERIM_SUFFIX,
) -> tuple[Path, Path]:
    """Pickle both result mappings; returns the written paths."""
    perf_path, imp_path = interim_paths(dest_path, classifier, suffix)
    perf_path.parent.mkdir(parents=True, exist_ok=True)
    for path, results in ((perf_path, performance_results), (imp_path, importance_results)):
        with path.open("wb") as f:
            pickle.dump(results, f, protocol=pickle.HIGHEST_PROTOCOL)
    return perf_path, imp_path


def load_interim_results(
    dest_path: str | Path,
    classifier: str,
    suffix: str = INTERIM_SUFFIX,
) -> tuple[dict[str, pd.DataFrame], dict[str, pd.DataFrame]] | None:
    """Load saved results.  Returns None if either file doesn't exist."""
    perf_path, imp_path = interim_paths(dest_path, classifier, suffix)
    if not perf_path.exists() or not imp_path.exists():
        return None
    with perf_path.open("rb") as f:
        performance = pickle.load(f)  # noqa: S301
    with imp_path.open("rb") as f:
        importance = pickle.load(f)  # noqa: S301
    return performance, importance
