"""Diagnostic functions for hash function analysis."""

from typing import Dict, Iterable, Optional, Sequence, Union

import numpy as np

from hashviz.errors import check_size
from hashviz.hashing.base import HashFunction, HashFunctionId
from hashviz.hashing.registry import HASH_FUNCTIONS, parse_hash_function_id
from hashviz.metrics.stats import gini_coefficient


def bucket_loads(keys: Iterable[int], hash_fn: HashFunction, size: int) -> np.ndarray:
    """
    Compute bucket loads (keys per home bucket).

    Args:
        keys: Keys to hash
        hash_fn: Hash function (key, size) -> index
        size: Table size

    Returns:
        Array of counts per bucket, shape [size]
    """
    check_size(size)
    indices = np.fromiter((hash_fn(k, size) for k in keys), dtype=np.int64)
    return np.bincount(indices, minlength=size)


def distribution_summary(
    keys: Sequence[int], hash_fn: HashFunction, size: int
) -> Dict[str, Union[int, float]]:
    """
    Summarize how evenly a hash function spreads keys over a table.

    Args:
        keys: Keys to hash
        hash_fn: Hash function (key, size) -> index
        size: Table size

    Returns:
        Dictionary with:
        - total_keys: int
        - buckets_used: int
        - mean_load: float
        - std_load: float
        - max_load: int
        - gini: float (0 = perfectly even)
        - q2_estimate: float (sum of squared bucket probabilities)
        - collision_rate: float (fraction of keys not alone in a fresh bucket)
    """
    loads = bucket_loads(keys, hash_fn, size)
    total_keys = int(loads.sum())

    if total_keys == 0:
        return {
            "total_keys": 0,
            "buckets_used": 0,
            "mean_load": 0.0,
            "std_load": 0.0,
            "max_load": 0,
            "gini": 0.0,
            "q2_estimate": 0.0,
            "collision_rate": 0.0,
        }

    buckets_used = int(np.sum(loads > 0))
    probs = loads[loads > 0] / total_keys

    return {
        "total_keys": total_keys,
        "buckets_used": buckets_used,
        "mean_load": float(loads.mean()),
        "std_load": float(loads.std()),
        "max_load": int(loads.max()),
        "gini": float(gini_coefficient(loads)),
        "q2_estimate": float(np.sum(probs ** 2)),
        "collision_rate": 1.0 - buckets_used / total_keys,
    }


def compare_hash_functions(
    keys: Sequence[int],
    size: int,
    ids: Optional[Iterable[Union[str, HashFunctionId]]] = None,
) -> Dict[str, Dict[str, Union[int, float]]]:
    """
    Run distribution_summary for several built-in hash functions.

    Args:
        keys: Keys to hash
        size: Table size
        ids: Hash function ids to compare (default: all built-ins)

    Returns:
        Mapping of hash function id value to its summary
    """
    if ids is None:
        selected = list(HASH_FUNCTIONS)
    else:
        selected = [parse_hash_function_id(i) for i in ids]

    keys = list(keys)
    return {
        hash_id.value: distribution_summary(keys, HASH_FUNCTIONS[hash_id], size)
        for hash_id in selected
        if hash_id in HASH_FUNCTIONS
    }
