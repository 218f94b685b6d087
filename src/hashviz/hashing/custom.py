"""Wrapper for caller-supplied hash functions."""

import logging
import math
from numbers import Integral, Real
from typing import Any, Callable, Optional, Tuple

from hashviz.errors import check_key, check_size
from hashviz.hashing.functions import division_hash

logger = logging.getLogger(__name__)


class CustomHashFunction:
    """
    Validate-and-fallback wrapper around a user hash function.

    The wrapped callable may return anything or raise. Whenever it raises,
    returns a non-number, a bool, a non-finite value or a non-integral
    value, the division method is used instead. Any accepted result is
    reduced into [0, size).
    """

    def __init__(self, fn: Callable[[int, int], Any], name: str = "custom"):
        """
        Initialize custom hash wrapper.

        Args:
            fn: Callable taking (key, size)
            name: Label used in warnings and step traces
        """
        if not callable(fn):
            raise TypeError(f"custom hash function must be callable, got {type(fn).__name__}")
        self.fn = fn
        self.name = name

    def evaluate(self, key: int, size: int) -> Tuple[int, Optional[str]]:
        """
        Compute the index and report whether the fallback was used.

        Args:
            key: Non-negative integer key
            size: Table size

        Returns:
            (index, warning) where warning is None on success, otherwise a
            description of why the division method was used
        """
        key = check_key(key)
        size = check_size(size)

        try:
            result = self.fn(key, size)
        except Exception as e:  # user code may raise anything
            return self._fallback(key, size, f"raised {type(e).__name__}: {e}")

        if isinstance(result, bool) or not isinstance(result, Real):
            return self._fallback(key, size, f"returned non-numeric {result!r}")
        if not isinstance(result, Integral):
            if not math.isfinite(result) or result != int(result):
                return self._fallback(key, size, f"returned non-integer {result!r}")
        # Python's % is already non-negative for a positive modulus
        return int(result) % size, None

    def _fallback(self, key: int, size: int, problem: str) -> Tuple[int, str]:
        warning = f"{self.name} hash {problem} for key {key}; using division method"
        return division_hash(key, size), warning

    def __call__(self, key: int, size: int) -> int:
        index, warning = self.evaluate(key, size)
        if warning is not None:
            logger.warning(warning)
        return index

    def __repr__(self) -> str:
        return f"CustomHashFunction({self.name!r})"
