"""Error types and argument checks shared across the engine."""

from numbers import Integral
from typing import Any


class InvalidArgument(ValueError):
    """Raised when a caller violates the engine's input contract.

    Covers negative or non-integer keys, table sizes below 1, unknown
    strategy or hash function ids, and malformed session documents.
    """


def check_key(key: Any) -> int:
    """Validate a key and return it as a plain int.

    Args:
        key: Candidate key

    Returns:
        The key as a plain int

    Raises:
        InvalidArgument: If key is not a non-negative integer
    """
    # bool is an int subclass but never a valid key
    if isinstance(key, bool) or not isinstance(key, Integral):
        raise InvalidArgument(f"key must be a non-negative integer, got {key!r}")
    if key < 0:
        raise InvalidArgument(f"key must be non-negative, got {key}")
    return int(key)


def check_size(size: Any) -> int:
    """Validate a table size and return it as a plain int.

    Raises:
        InvalidArgument: If size is not an integer >= 1
    """
    if isinstance(size, bool) or not isinstance(size, Integral):
        raise InvalidArgument(f"size must be a positive integer, got {size!r}")
    if size < 1:
        raise InvalidArgument(f"size must be >= 1, got {size}")
    return int(size)
