"""
Impact tables: performance change and importance-rank stability under noise.
"""

from disc_noise.impact.importance import IMPORTANCE_IMPACT_COLUMNS, importance_impact
from disc_noise.impact.performance import PERFORMANCE_IMPACT_COLUMNS, performance_impact

__all__ = [
    "IMPORTANCE_IMPACT_COLUMNS",
    "PERFORMANCE_IMPACT_COLUMNS",
    "importance_impact",
    "performance_impact",
]
