"""
Out-of-sample bootstrap partitions and noise injection around the cutpoint.
"""

from disc_noise.resampling.bootstrap import DEFAULT_SEED, create_oosb_sample, make_rng
from disc_noise.resampling.noise import noise_target, noisy_mask, remove_noise

__all__ = [
    "DEFAULT_SEED",
    "create_oosb_sample",
    "make_rng",
    "noise_target",
    "noisy_mask",
    "remove_noise",
]
