"""Experiment 02: how evenly each hash function spreads keys."""

import argparse
from typing import Any, Dict, List

import matplotlib.pyplot as plt
import numpy as np

from hashviz.experiments.common import (
    distinct_keys,
    make_output_paths,
    make_rng,
    seed_loop,
    write_metrics_json,
)
from hashviz.experiments.plotting import add_footer, save_pdf
from hashviz.hashing.base import HashFunctionId
from hashviz.hashing.diagnostics import compare_hash_functions
from hashviz.metrics.stats import summarize_groups
from hashviz.utils.logging import get_logger
from hashviz.utils.seeds import seed_everything

EXP_ID = "exp02"
EXP_SLUG = "hash_spread"

METRICS = ["gini", "max_load", "collision_rate", "buckets_used"]
BUILTIN_IDS = [h.value for h in HashFunctionId if h is not HashFunctionId.CUSTOM]


def add_args(parser: argparse.ArgumentParser) -> None:
    """Add experiment-specific arguments."""
    parser.add_argument("--table_size", type=int, default=97, help="Table size")
    parser.add_argument("--num_keys", type=int, default=200, help="Keys per trial")
    parser.add_argument(
        "--key_mode",
        choices=["uniform", "sequential", "stride"],
        default="uniform",
        help="uniform: random distinct keys; sequential: offset..offset+n; "
        "stride: multiples of table_size plus an offset",
    )
    parser.add_argument(
        "--key_high",
        type=int,
        default=100000,
        help="Upper bound for uniform keys and offsets",
    )
    parser.add_argument(
        "--hash_functions",
        nargs="+",
        choices=BUILTIN_IDS,
        default=BUILTIN_IDS,
        help="Hash functions to compare",
    )


def make_keys(mode: str, rng: np.random.Generator, num_keys: int, table_size: int, high: int) -> List[int]:
    """Generate a key set for one trial."""
    if mode == "uniform":
        return distinct_keys(rng, num_keys, high)
    offset = int(rng.integers(0, high))
    if mode == "sequential":
        return list(range(offset, offset + num_keys))
    if mode == "stride":
        return [offset + i * table_size for i in range(num_keys)]
    raise ValueError(f"Unknown key_mode: {mode}")


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Run hash spread experiment.

    Args:
        args: Parsed command-line arguments

    Returns:
        Dictionary with metrics_path and figure_path
    """
    metrics_path, figure_path = make_output_paths(args.out_dir, EXP_ID, EXP_SLUG)
    logger = get_logger(EXP_ID, log_file=args.out_dir / "logs" / f"{EXP_ID}.txt")
    logger.info(
        f"Starting {EXP_ID}: size={args.table_size}, keys={args.num_keys}, "
        f"mode={args.key_mode}, seeds={args.seeds}"
    )

    seeds = seed_loop(args.seeds)
    raw_trials = []
    for seed in seeds:
        seed_everything(seed)
        keys = make_keys(args.key_mode, make_rng(seed), args.num_keys, args.table_size, args.key_high)
        summaries = compare_hash_functions(keys, args.table_size, args.hash_functions)
        for hash_id, s in summaries.items():
            raw_trials.append({
                "seed": seed,
                "hash_function": hash_id,
                "gini": s["gini"],
                "max_load": s["max_load"],
                "collision_rate": s["collision_rate"],
                "buckets_used": s["buckets_used"],
            })

    grouped = summarize_groups(raw_trials, ["hash_function"], METRICS)
    summary = {hash_id: metrics for (hash_id,), metrics in grouped.items()}
    for hash_id, metrics in summary.items():
        logger.info(
            f"{hash_id}: gini={metrics['gini']['mean']:.3f}, "
            f"collision_rate={metrics['collision_rate']['mean']:.3f}"
        )

    config = {
        "table_size": args.table_size,
        "num_keys": args.num_keys,
        "key_mode": args.key_mode,
        "key_high": args.key_high,
        "hash_functions": args.hash_functions,
    }
    write_metrics_json(metrics_path, EXP_ID, "Hash spread", config, seeds, raw_trials, summary)

    names = list(summary)
    x = np.arange(len(names))
    fig, axes = plt.subplots(1, 2, figsize=(11, 4.5))
    for ax, metric, title in (
        (axes[0], "gini", "Gini of bucket loads"),
        (axes[1], "collision_rate", "Collision rate"),
    ):
        means = [summary[n][metric]["mean"] for n in names]
        errs = [summary[n][metric]["ci95_high"] - summary[n][metric]["mean"] for n in names]
        ax.bar(x, means, yerr=errs, capsize=4, alpha=0.8)
        ax.set_xticks(x)
        ax.set_xticklabels(names, rotation=30, ha="right")
        ax.set_title(title)
        ax.grid(True, axis="y", alpha=0.3)
    add_footer(fig, EXP_ID, {"m": args.table_size, "keys": args.key_mode})
    save_pdf(fig, figure_path)

    logger.info(f"Results saved to {metrics_path}")
    return {"metrics_path": str(metrics_path), "figure_path": str(figure_path)}
