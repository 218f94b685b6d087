"""Collision resolution strategies and their probe sequences."""

from enum import Enum
from numbers import Integral
from typing import Iterator, Union

from hashviz.errors import InvalidArgument, check_size

# Fixed modulus of the double-hashing step, independent of table size
DOUBLE_HASH_MODULUS = 7


class ResolutionStrategy(str, Enum):
    """Collision resolution strategy of a table."""

    CHAINING = "chaining"
    LINEAR = "linear"
    QUADRATIC = "quadratic"
    DOUBLE = "double"

    @property
    def probes(self) -> bool:
        """True for open-addressing strategies."""
        return self is not ResolutionStrategy.CHAINING


RESOLUTION_CATALOG = {
    ResolutionStrategy.CHAINING: {
        "name": "Separate Chaining",
        "formula": "bucket h(k) holds a list of keys",
    },
    ResolutionStrategy.LINEAR: {
        "name": "Linear Probing",
        "formula": "h(k,i) = (h(k) + i) mod m",
    },
    ResolutionStrategy.QUADRATIC: {
        "name": "Quadratic Probing",
        "formula": "h(k,i) = (h(k) + i^2) mod m",
    },
    ResolutionStrategy.DOUBLE: {
        "name": "Double Hashing",
        "formula": "h(k,i) = (h1(k) + i*h2(k)) mod m, h2(k) = 7 - (h1(k) mod 7)",
    },
}


def parse_strategy(value: Union[str, ResolutionStrategy]) -> ResolutionStrategy:
    """Convert a string id to ResolutionStrategy, raising InvalidArgument if unknown."""
    try:
        return ResolutionStrategy(value)
    except ValueError:
        valid = [s.value for s in ResolutionStrategy]
        raise InvalidArgument(f"strategy must be one of {valid}, got {value!r}") from None


def secondary_step(initial_hash: int) -> int:
    """Double-hashing step: 7 - (h mod 7), always in [1, 7]."""
    return DOUBLE_HASH_MODULUS - (initial_hash % DOUBLE_HASH_MODULUS)


class ProbeSequence:
    """
    Candidate slots for one key, in probe order.

    The sequence has exactly ``size`` entries (i = 0..size-1) and can be
    iterated any number of times. Entries may repeat: quadratic and double
    probing with these constants do not visit every slot for every size.
    """

    def __init__(self, strategy: ResolutionStrategy, initial_hash: int, size: int):
        """
        Initialize probe sequence.

        Args:
            strategy: Probing strategy (not chaining)
            initial_hash: Home slot h(k)
            size: Table size
        """
        self.strategy = strategy
        self.initial_hash = initial_hash
        self.size = size
        self.step = secondary_step(initial_hash) if strategy is ResolutionStrategy.DOUBLE else 1

    def __getitem__(self, i: int) -> int:
        if not 0 <= i < self.size:
            raise IndexError(f"probe {i} out of range for size {self.size}")
        if self.strategy is ResolutionStrategy.QUADRATIC:
            offset = i * i
        else:
            offset = i * self.step
        return (self.initial_hash + offset) % self.size

    def __iter__(self) -> Iterator[int]:
        for i in range(self.size):
            yield self[i]

    def __len__(self) -> int:
        return self.size

    def __repr__(self) -> str:
        return (
            f"ProbeSequence({self.strategy.value}, initial_hash={self.initial_hash}, "
            f"size={self.size})"
        )


def probe_sequence(
    strategy: Union[str, ResolutionStrategy], initial_hash: int, size: int
) -> ProbeSequence:
    """
    Build the probe sequence for a key's home slot.

    Args:
        strategy: linear, quadratic or double
        initial_hash: Home slot in [0, size)
        size: Table size

    Returns:
        ProbeSequence of length size

    Raises:
        InvalidArgument: For chaining (which never probes), unknown
            strategies, bad sizes or an out-of-range home slot
    """
    strategy = parse_strategy(strategy)
    size = check_size(size)
    if not strategy.probes:
        raise InvalidArgument("chaining does not use a probe sequence")
    if isinstance(initial_hash, bool) or not isinstance(initial_hash, Integral):
        raise InvalidArgument(f"initial_hash must be an integer, got {initial_hash!r}")
    initial_hash = int(initial_hash)
    if not 0 <= initial_hash < size:
        raise InvalidArgument(f"initial_hash must be in [0, {size}), got {initial_hash}")
    return ProbeSequence(strategy, initial_hash, size)
