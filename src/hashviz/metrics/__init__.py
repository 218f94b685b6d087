"""Metrics module for hashviz."""

from hashviz.metrics.stats import gini_coefficient, mean_ci95, summarize_groups
from hashviz.metrics.analytics import Analytics, compute_analytics, placement_probes

__all__ = [
    "Analytics",
    "compute_analytics",
    "placement_probes",
    "gini_coefficient",
    "mean_ci95",
    "summarize_groups",
]
