"""Collision, probe and load-factor analytics derived from a table snapshot."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Union

from hashviz.hashing.base import HashFunction
from hashviz.hashing.functions import division_hash
from hashviz.probing.sequencer import ResolutionStrategy, parse_strategy, probe_sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Analytics:
    """
    Running statistics shown next to the table.

    Attributes:
        collisions: Chaining: extra keys per bucket. Probing: total probes
            the stored keys need to reach their slots.
        probes: Probe count of the most recent single operation
        load_factor: Stored keys / table size
    """

    collisions: int
    probes: int
    load_factor: float

    def as_dict(self) -> Dict[str, Union[int, float]]:
        """Plain dictionary with the field names used by the front end."""
        return {
            "collisions": self.collisions,
            "probes": self.probes,
            "loadFactor": self.load_factor,
        }


def placement_probes(
    key: int,
    slot: int,
    strategy: ResolutionStrategy,
    size: int,
    hash_fn: HashFunction,
) -> Optional[int]:
    """
    Number of probes a stored key needs to reach its slot.

    Replays the key's probe sequence and returns the first step landing on
    ``slot``.

    Returns:
        Probe step (0 = home slot), or None if the sequence never reaches
        the slot
    """
    home = hash_fn(key, size)
    for i, idx in enumerate(probe_sequence(strategy, home, size)):
        if idx == slot:
            return i
    return None


def compute_analytics(
    table: Sequence[Any],
    strategy: Union[str, ResolutionStrategy],
    hash_fn: Optional[HashFunction] = None,
    last_probes: int = 0,
) -> Analytics:
    """
    Recompute analytics from scratch for a table snapshot.

    Nothing is cached between calls, so results stay consistent after any
    sequence of inserts and deletes.

    Args:
        table: Snapshot of slots (probing) or buckets (chaining)
        strategy: Strategy the table uses
        hash_fn: Hash function used to replay probe sequences (division if None)
        last_probes: Probe count of the most recent operation

    Returns:
        Analytics
    """
    strategy = parse_strategy(strategy)
    size = len(table)
    if size == 0:
        return Analytics(collisions=0, probes=last_probes, load_factor=0.0)

    if not strategy.probes:
        stored = sum(len(bucket) for bucket in table)
        collisions = sum(max(0, len(bucket) - 1) for bucket in table)
        return Analytics(collisions=collisions, probes=last_probes, load_factor=stored / size)

    hash_fn = hash_fn if hash_fn is not None else division_hash
    stored = 0
    collisions = 0
    for slot, key in enumerate(table):
        if key is None:
            continue
        stored += 1
        probes = placement_probes(key, slot, strategy, size, hash_fn)
        if probes is None:
            logger.warning(
                "Key %d at slot %d is not on its probe sequence; counting 0 probes", key, slot
            )
            continue
        collisions += probes

    return Analytics(collisions=collisions, probes=last_probes, load_factor=stored / size)
