"""Common utilities for experiments."""

import json
import platform
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np

from hashviz.experiments.plotting import get_environment_info, get_git_commit


def make_output_paths(out_dir: Path, exp_id: str, exp_slug: str) -> tuple[Path, Path]:
    """Create standardized output paths.

    Args:
        out_dir: Base output directory
        exp_id: Experiment ID (e.g., "exp01")
        exp_slug: Experiment slug (e.g., "load_sweep")

    Returns:
        (metrics_path, figure_path)
        - metrics_path: <out_dir>/metrics/exp01.json
        - figure_path: <out_dir>/figures/exp01_load_sweep.pdf
    """
    metrics_dir = out_dir / "metrics"
    figures_dir = out_dir / "figures"
    metrics_dir.mkdir(parents=True, exist_ok=True)
    figures_dir.mkdir(parents=True, exist_ok=True)

    return metrics_dir / f"{exp_id}.json", figures_dir / f"{exp_id}_{exp_slug}.pdf"


def seed_loop(num_seeds: int) -> List[int]:
    """Seeds [0, 1, ..., num_seeds-1] for deterministic trials."""
    return list(range(num_seeds))


def make_rng(seed: int) -> np.random.Generator:
    """Create a local NumPy random number generator with given seed.

    Experiments draw keys from local generators instead of the global
    np.random state.
    """
    return np.random.default_rng(seed)


def distinct_keys(rng: np.random.Generator, count: int, high: int) -> List[int]:
    """Draw ``count`` distinct keys from [0, high) as Python ints.

    Raises:
        ValueError: If count exceeds high
    """
    if count > high:
        raise ValueError(f"cannot draw {count} distinct keys from [0, {high})")
    return [int(k) for k in rng.choice(high, size=count, replace=False)]


def write_metrics_json(
    path: Path,
    experiment_id: str,
    experiment_name: str,
    config: Dict[str, Any],
    seeds: List[int],
    raw_trials: List[Dict[str, Any]],
    summary: Dict[str, Any],
    extra_info: Optional[Dict[str, Any]] = None,
) -> None:
    """Write standardized metrics JSON.

    Args:
        path: Output JSON path
        experiment_id: Experiment identifier (e.g., "exp01")
        experiment_name: Human-readable experiment name
        config: Experiment configuration
        seeds: List of seeds used
        raw_trials: List of per-trial results
        summary: Summary statistics with CI
        extra_info: Optional additional info to include
    """
    metrics = {
        "experiment_id": experiment_id,
        "experiment_name": experiment_name,
        "timestamp": datetime.now().isoformat(),
        "git_commit": get_git_commit(),
        "environment": get_environment_info(),
        "platform": platform.platform(),
        "config": config,
        "seeds": seeds,
        "raw_trials": raw_trials,
        "summary": summary,
    }

    if extra_info:
        metrics["extra_info"] = extra_info

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)
