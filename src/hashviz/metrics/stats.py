"""Statistical helpers for experiments and diagnostics."""

from collections import defaultdict
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np


def gini_coefficient(values: Sequence[float]) -> float:
    """Compute the Gini coefficient of a load distribution.

    Args:
        values: Non-negative loads (e.g. keys per bucket)

    Returns:
        Gini coefficient in [0, 1] (0 = every bucket equally loaded)
    """
    values = np.asarray(values, dtype=float)
    if values.size == 0 or np.all(values == 0):
        return 0.0

    values = np.sort(values)
    n = values.size
    ranks = np.arange(1, n + 1)
    return float((2 * np.sum(ranks * values)) / (n * np.sum(values)) - (n + 1) / n)


def mean_ci95(values: Sequence[float]) -> Tuple[float, float, float, float]:
    """Compute mean and 95% confidence interval (normal approximation, z=1.96).

    Args:
        values: Per-seed measurements

    Returns:
        (mean, ci_low, ci_high, std)
    """
    if len(values) == 0:
        return (0.0, 0.0, 0.0, 0.0)

    arr = np.asarray(values, dtype=float)
    mean = float(arr.mean())
    if arr.size == 1:
        return (mean, mean, mean, 0.0)

    std = float(arr.std(ddof=1))
    margin = 1.96 * std / np.sqrt(arr.size)
    return (mean, mean - margin, mean + margin, std)


def summarize_groups(
    raw_rows: List[Dict[str, Any]],
    groupby_keys: List[str],
    metric_keys: List[str],
) -> Dict[Tuple, Dict[str, Dict[str, float]]]:
    """Summarize trial rows grouped by configuration keys.

    Args:
        raw_rows: One dictionary per trial
        groupby_keys: Keys identifying a configuration (e.g. ["strategy", "fill"])
        metric_keys: Metrics to summarize (e.g. ["collisions", "mean_probes"])

    Returns:
        {group tuple: {metric: {mean, ci95_low, ci95_high, std}}}
    """
    groups: Dict[Tuple, List[Dict[str, Any]]] = defaultdict(list)
    for row in raw_rows:
        groups[tuple(row[k] for k in groupby_keys)].append(row)

    result = {}
    for group_key, rows in groups.items():
        summaries = {}
        for metric_key in metric_keys:
            values = [row[metric_key] for row in rows if metric_key in row]
            if values:
                mean, ci_low, ci_high, std = mean_ci95(values)
                summaries[metric_key] = {
                    "mean": mean,
                    "ci95_low": ci_low,
                    "ci95_high": ci_high,
                    "std": std,
                }
        result[group_key] = summaries

    return result
