"""
Out-of-sample bootstrap (OOSB) partitions.

Each partition trains on ``n`` rows drawn with replacement and tests on the
rows that were never drawn.
"""

from __future__ import annotations

import numpy as np

from disc_noise.core.models import BootstrapPartition

DEFAULT_SEED = 42

# Upper bound for the per-iteration estimator seed
_MAX_RANDOM_STATE = 2**31 - 1


def make_rng(seed: int | bool | None = None) -> np.random.Generator:
    """Build the generator for a run.

    ``True`` selects the default seed, an int is used as-is, and
    ``None``/``False`` give fresh OS entropy.
    """
    if isinstance(seed, bool):
        return np.random.default_rng(DEFAULT_SEED if seed else None)
    return np.random.default_rng(seed)


def create_oosb_sample(
    n_rows: int,
    n_iterations: int,
    seed: int | bool | None = None,
) -> list[BootstrapPartition]:
    """Draw ``n_iterations`` train/test partitions over ``n_rows`` rows.

    For each iteration the row view is shuffled, ``n_rows`` positions are
    drawn from it with replacement as the training set, and the positions
    never drawn form the test set. Identical ``seed`` and ``n_iterations``
    reproduce identical partitions.

    Returns:
        List of BootstrapPartition, ``index`` running from 0.
    """
    rng = make_rng(seed)
    seeded = seed is not None and seed is not False
    all_rows = np.arange(n_rows)

    partitions: list[BootstrapPartition] = []
    for i in range(n_iterations):
        view = rng.permutation(n_rows)
        train = view[rng.integers(0, n_rows, size=n_rows)]
        test = np.setdiff1d(all_rows, train, assume_unique=False)
        random_state = int(rng.integers(_MAX_RANDOM_STATE)) if seeded else None
        partitions.append(
            BootstrapPartition(index=i, train=train, test=test, random_state=random_state)
        )

    return partitions
