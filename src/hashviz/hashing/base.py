"""Base hash function interface."""

from enum import Enum
from typing import Protocol


class HashFunctionId(str, Enum):
    """Identifiers of the selectable hash functions.

    Values match the ids used by the visualizer front end so that saved
    sessions can name their hash function.
    """

    DIVISION = "division"
    MULTIPLICATION = "multiplication"
    POLYNOMIAL = "polynomial"
    UNIVERSAL = "universal"
    MID_SQUARE = "midSquare"
    FOLDING = "folding"
    CUSTOM = "custom"


class HashFunction(Protocol):
    """
    Protocol for hash functions used by the table store.

    A hash function maps a non-negative integer key to a bucket index for a
    table of the given size. Implementations must be deterministic and
    return a value in [0, size).
    """

    def __call__(self, key: int, size: int) -> int:
        """
        Compute the bucket index for a key.

        Args:
            key: Non-negative integer key
            size: Table size (>= 1)

        Returns:
            Index in [0, size)
        """
        ...
