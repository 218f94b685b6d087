"""Timing utilities."""

import time
from typing import Optional


class Timer:
    """Context manager for timing code blocks."""

    def __init__(self, name: str = "Operation", verbose: bool = False):
        """
        Initialize timer.

        Args:
            name: Name/description of the operation being timed
            verbose: Print the elapsed time on exit
        """
        self.name = name
        self.verbose = verbose
        self.start_time: Optional[float] = None
        self.elapsed_time: Optional[float] = None

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is not None:
            self.elapsed_time = time.perf_counter() - self.start_time
            if self.verbose:
                print(f"{self.name} took {self.elapsed_time:.4f} seconds")

    @property
    def elapsed(self) -> float:
        """Get elapsed time in seconds."""
        if self.elapsed_time is None:
            raise ValueError("Timer has not been used as context manager yet")
        return self.elapsed_time


def ops_per_second(num_ops: int, elapsed_seconds: float) -> float:
    """Operations per second (0.0 if elapsed_seconds <= 0)."""
    if elapsed_seconds <= 0:
        return 0.0
    return num_ops / elapsed_seconds
