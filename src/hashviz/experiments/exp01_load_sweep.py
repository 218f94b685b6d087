"""Experiment 01: probe cost and collisions as the load factor grows."""

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
from hashviz.experiments.plotting import add_footer, plot_line_with_ci, save_pdf
from hashviz.hashing.registry import resolve_hash_function
from hashviz.metrics.stats import summarize_groups
from hashviz.probing.sequencer import ResolutionStrategy
from hashviz.table.store import TableStore
from hashviz.utils.logging import get_logger
from hashviz.utils.seeds import seed_everything

EXP_ID = "exp01"
EXP_SLUG = "load_sweep"

METRICS = ["load_factor", "collisions", "mean_insert_probes", "mean_search_probes", "failed_inserts"]


def add_args(parser: argparse.ArgumentParser) -> None:
    """Add experiment-specific arguments."""
    parser.add_argument(
        "--table_size",
        type=int,
        default=101,
        help="Table size (prime sizes give quadratic probing a fair chance)",
    )
    parser.add_argument(
        "--fills",
        type=float,
        nargs="+",
        default=[0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0],
        help="Fractions of table_size at which to record metrics",
    )
    parser.add_argument(
        "--strategies",
        nargs="+",
        choices=[s.value for s in ResolutionStrategy],
        default=[s.value for s in ResolutionStrategy],
        help="Strategies to sweep",
    )
    parser.add_argument(
        "--hash_function",
        type=str,
        default="division",
        help="Hash function id used for every strategy",
    )
    parser.add_argument(
        "--key_high",
        type=int,
        default=10000,
        help="Keys are drawn without replacement from [0, key_high)",
    )


def run_trial(
    strategy: str,
    keys: List[int],
    table_size: int,
    checkpoints: Dict[int, float],
    hash_id: str,
) -> List[Dict[str, Any]]:
    """
    Insert keys one by one, recording metrics at each checkpoint.

    Args:
        strategy: Resolution strategy id
        keys: Distinct keys in insertion order
        table_size: Table size
        checkpoints: {number of inserts attempted: fill fraction}
        hash_id: Hash function id

    Returns:
        One row per checkpoint
    """
    hash_fn = resolve_hash_function(hash_id)
    store = TableStore(table_size, strategy, hash_fn)
    rows = []
    insert_probes = []
    failed = 0

    for n, key in enumerate(keys, start=1):
        result = store.insert(key)
        if result.success:
            insert_probes.append(result.probes_used)
        else:
            failed += 1

        if n in checkpoints:
            stored = store.keys()
            search_probes = [store.search(k).probes_used for k in stored]
            analytics = store.analytics()
            rows.append({
                "strategy": strategy,
                "fill": checkpoints[n],
                "load_factor": analytics.load_factor,
                "collisions": analytics.collisions,
                "mean_insert_probes": float(np.mean(insert_probes)) if insert_probes else 0.0,
                "mean_search_probes": float(np.mean(search_probes)) if search_probes else 0.0,
                "failed_inserts": failed,
            })

    return rows


def run(args: argparse.Namespace) -> Dict[str, Any]:
    """Run load sweep experiment.

    Args:
        args: Parsed command-line arguments

    Returns:
        Dictionary with metrics_path and figure_path
    """
    metrics_path, figure_path = make_output_paths(args.out_dir, EXP_ID, EXP_SLUG)
    logger = get_logger(EXP_ID, log_file=args.out_dir / "logs" / f"{EXP_ID}.txt")

    table_size = args.table_size
    fills = sorted(set(args.fills))
    if any(not 0 < f <= 1 for f in fills):
        raise ValueError(f"fills must be in (0, 1], got {fills}")
    checkpoints = {max(1, round(f * table_size)): f for f in fills}
    num_keys = max(checkpoints)

    logger.info(
        f"Starting {EXP_ID}: size={table_size}, strategies={args.strategies}, "
        f"hash={args.hash_function}, seeds={args.seeds}"
    )

    seeds = seed_loop(args.seeds)
    raw_trials = []
    for seed in seeds:
        seed_everything(seed)
        keys = distinct_keys(make_rng(seed), num_keys, args.key_high)
        for strategy in args.strategies:
            for row in run_trial(strategy, keys, table_size, checkpoints, args.hash_function):
                row["seed"] = seed
                raw_trials.append(row)
        logger.info(f"Seed {seed} done")

    grouped = summarize_groups(raw_trials, ["strategy", "fill"], METRICS)
    summary: Dict[str, Any] = {}
    for (strategy, fill), metrics in grouped.items():
        summary.setdefault(strategy, {})[str(fill)] = metrics

    config = {
        "table_size": table_size,
        "fills": fills,
        "strategies": args.strategies,
        "hash_function": args.hash_function,
        "key_high": args.key_high,
    }
    write_metrics_json(
        metrics_path,
        EXP_ID,
        "Load factor sweep",
        config,
        seeds,
        raw_trials,
        summary,
    )

    fig, (ax_probe, ax_coll) = plt.subplots(1, 2, figsize=(11, 4.5))
    for strategy in args.strategies:
        points = [grouped[(strategy, f)] for f in fills if (strategy, f) in grouped]
        if not points:
            continue
        x = [p["load_factor"]["mean"] for p in points]
        for ax, metric in ((ax_probe, "mean_insert_probes"), (ax_coll, "collisions")):
            plot_line_with_ci(
                ax,
                x,
                [p[metric]["mean"] for p in points],
                [p[metric]["ci95_low"] for p in points],
                [p[metric]["ci95_high"] for p in points],
                label=strategy,
            )

    ax_probe.set_xlabel("Load factor")
    ax_probe.set_ylabel("Mean probes per insert")
    ax_probe.set_title("Insert cost")
    ax_coll.set_xlabel("Load factor")
    ax_coll.set_ylabel("Collisions")
    ax_coll.set_title("Collisions")
    ax_probe.legend()
    ax_probe.grid(True, alpha=0.3)
    ax_coll.grid(True, alpha=0.3)
    add_footer(fig, EXP_ID, {"m": table_size, "hash": args.hash_function})
    save_pdf(fig, figure_path)

    logger.info(f"Results saved to {metrics_path}")
    return {"metrics_path": str(metrics_path), "figure_path": str(figure_path)}
