"""Microbenchmark: insert/search throughput vs table size and strategy."""

import argparse
import json
from pathlib import Path

from hashviz import ResolutionStrategy, TableStore, resolve_hash_function, seed_everything
from hashviz.experiments.common import distinct_keys, make_rng
from hashviz.utils import Timer, get_logger, ops_per_second

logger = get_logger("microbench")


def benchmark_operations(sizes, strategies, hash_id="division", fill=0.75, num_trials=5, seed=0):
    """Benchmark insert and search throughput."""
    results = []
    hash_fn = resolve_hash_function(hash_id)

    for size in sizes:
        n = max(1, int(size * fill))
        keys = distinct_keys(make_rng(seed), n, size * 100)

        for strategy in strategies:
            logger.info(f"Benchmarking size={size}, strategy={strategy}")

            insert_times = []
            search_times = []
            for _ in range(num_trials):
                store = TableStore(size, strategy, hash_fn)
                with Timer("insert") as t:
                    for key in keys:
                        store.insert(key)
                insert_times.append(t.elapsed)

                with Timer("search") as t:
                    for key in keys:
                        store.search(key)
                search_times.append(t.elapsed)

            avg_insert = sum(insert_times) / len(insert_times)
            avg_search = sum(search_times) / len(search_times)
            results.append({
                "size": size,
                "strategy": strategy,
                "keys": n,
                "avg_insert_time": avg_insert,
                "avg_search_time": avg_search,
                "insert_throughput": ops_per_second(n, avg_insert),
                "search_throughput": ops_per_second(n, avg_search),
            })

    return results


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Microbenchmark insert/search")
    parser.add_argument("--out", type=Path, default=Path("results/benchmarks/microbench.json"))
    parser.add_argument("--sizes", type=int, nargs="+", default=[101, 1009, 10007])
    parser.add_argument(
        "--strategies",
        nargs="+",
        default=[s.value for s in ResolutionStrategy],
        choices=[s.value for s in ResolutionStrategy],
    )
    parser.add_argument("--hash_function", type=str, default="division")
    parser.add_argument("--fill", type=float, default=0.75)
    parser.add_argument("--trials", type=int, default=5)
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    seed_everything(args.seed)

    results = benchmark_operations(
        args.sizes,
        args.strategies,
        hash_id=args.hash_function,
        fill=args.fill,
        num_trials=args.trials,
        seed=args.seed,
    )

    args.out.parent.mkdir(parents=True, exist_ok=True)
    with open(args.out, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {args.out}")
