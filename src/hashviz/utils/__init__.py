"""Utilities module for hashviz."""

from hashviz.utils.logging import get_logger
from hashviz.utils.seeds import seed_everything
from hashviz.utils.timing import Timer, ops_per_second

__all__ = [
    "get_logger",
    "seed_everything",
    "Timer",
    "ops_per_second",
]
