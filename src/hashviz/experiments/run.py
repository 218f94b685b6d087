"""Experiment runner with --exp flag CLI."""

import argparse
from pathlib import Path
from typing import List, Optional

from hashviz.experiments import exp01_load_sweep, exp02_hash_spread

EXPERIMENTS = {
    "exp01": ("Load Factor Sweep", exp01_load_sweep),
    "exp02": ("Hash Spread", exp02_hash_spread),
}


def main(argv: Optional[List[str]] = None):
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Run hashviz experiments",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--exp",
        choices=list(EXPERIMENTS.keys()),
        required=True,
        help="Experiment to run",
    )
    parser.add_argument(
        "--out_dir", type=Path, default=Path("artifacts"),
        help="Output directory for metrics and figures"
    )
    parser.add_argument(
        "--seeds", type=int, default=5,
        help="Number of random seeds"
    )

    # Parse known args first to get experiment ID
    args, unknown = parser.parse_known_args(argv)

    exp_id = args.exp
    name, exp_module = EXPERIMENTS[exp_id]

    exp_parser = argparse.ArgumentParser(prog=f"hashviz-exp --exp {exp_id}")
    exp_module.add_args(exp_parser)
    exp_args, remaining = exp_parser.parse_known_args(unknown)
    if remaining:
        parser.error(f"Unrecognized arguments: {remaining}")

    for key, value in vars(exp_args).items():
        setattr(args, key, value)

    print(f"Running {name} ({exp_id})...")
    result = exp_module.run(args)

    print(f"{name} completed")
    print(f"  Metrics: {result.get('metrics_path', 'N/A')}")
    print(f"  Figure: {result.get('figure_path', 'N/A')}")
    return result


if __name__ == "__main__":
    main()
