"""
Shared fixtures: a small bimodal dataset whose classes are perfectly
separated by every feature, so model output is stable across noise levels.
"""

import numpy as np
import pandas as pd
import pytest


def _bimodal_frame(n: int = 120, seed: int = 0) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    half = n // 2
    y = np.concatenate([rng.normal(20.0, 3.0, half), rng.normal(80.0, 3.0, n - half)])
    return pd.DataFrame({
        "x1": y / 10.0 + rng.normal(0.0, 0.1, n),
        "x2": -y / 5.0 + rng.normal(0.0, 0.2, n),
        "y": y,
    })


@pytest.fixture
def bimodal_frame() -> pd.DataFrame:
    return _bimodal_frame()


def _graded_frame(n: int = 200, seed: int = 42) -> pd.DataFrame:
    """x1 strong, x3 medium, x2 pure noise; cutpoint 50 is the midpoint."""
    rng = np.random.default_rng(seed)
    x1, x2, x3 = rng.normal(0.0, 1.0, (3, n))
    y = 50.0 + 25.0 * x1 + 12.0 * x3 + rng.normal(0.0, 5.0, n)
    return pd.DataFrame({"x1": x1, "x2": x2, "x3": x3, "y": y})


def _overlapping_frame(n: int = 200, seed: int = 42) -> pd.DataFrame:
    """Bimodal target whose features only carry signal near the cutpoint (50).

    Rows far from the cutpoint get an x1 unrelated to the class, so
    removing the rows near the cutpoint leaves nothing to learn from.
    """
    rng = np.random.default_rng(seed)
    half = n // 2
    y = np.concatenate([rng.normal(35.0, 12.0, half), rng.normal(65.0, 12.0, n - half)])
    near = np.abs(y - 50.0) < 25.0
    x1 = np.where(near, (y - 50.0) / 10.0 + rng.normal(0.0, 0.5, n), rng.normal(0.0, 1.5, n))
    return pd.DataFrame({"x1": x1, "x2": rng.normal(0.0, 1.0, n), "y": y})


@pytest.fixture
def graded_frame() -> pd.DataFrame:
    return _graded_frame()


@pytest.fixture
def overlapping_frame() -> pd.DataFrame:
    return _overlapping_frame()
