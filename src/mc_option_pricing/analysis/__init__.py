"""
Run statistics and the accuracy decision.
"""

from mc_option_pricing.analysis.statistics import (
    Statistics,
    StatisticsEngine,
    Stopwatch,
    SummaryStatistics,
    compute_summary_statistics,
    decide,
    exact_price,
)

__all__ = [
    "Statistics",
    "StatisticsEngine",
    "Stopwatch",
    "SummaryStatistics",
    "compute_summary_statistics",
    "decide",
    "exact_price",
]
