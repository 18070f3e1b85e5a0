"""
Statistical helpers: effect sizes, two-sample tests, Scott-Knott ESD.
"""

from disc_noise.stats.effect_size import cohens_d, describe_effect, effect_magnitude, rank_sum_p, signed_rank_p
from disc_noise.stats.scott_knott import scott_knott_esd

__all__ = [
    "cohens_d",
    "describe_effect",
    "effect_magnitude",
    "rank_sum_p",
    "scott_knott_esd",
    "signed_rank_p",
]
