"""Experiments module for hashviz."""

# Export experiment modules for CLI
from . import exp01_load_sweep
from . import exp02_hash_spread

__all__ = [
    "exp01_load_sweep",
    "exp02_hash_spread",
]
