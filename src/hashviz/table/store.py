"""Hash table state and its insert/search/delete operations.

A store holds either ``size`` buckets (separate chaining) or ``size``
single-key slots (linear, quadratic, double probing). Every operation
returns an :class:`OperationResult` whose ``steps`` describe each probe and
decision; ``Exists``, ``NotFound`` and ``Full`` are reported there rather
than raised.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from numbers import Integral
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from hashviz.errors import InvalidArgument, check_key, check_size
from hashviz.hashing.base import HashFunction
from hashviz.hashing.custom import CustomHashFunction
from hashviz.hashing.functions import division_hash
from hashviz.metrics.analytics import Analytics, compute_analytics
from hashviz.probing.sequencer import ResolutionStrategy, parse_strategy, probe_sequence
from hashviz.table.log import OperationLog

logger = logging.getLogger(__name__)

# Snapshot of a table: probing tables hold Optional[int] per slot,
# chaining tables a tuple of keys per bucket
Table = Tuple[Any, ...]


class Reason(str, Enum):
    """Why an operation did not succeed."""

    EXISTS = "Exists"
    FULL = "Full"
    NOT_FOUND = "NotFound"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of one insert/search/delete.

    Attributes:
        operation: "insert", "search" or "delete"
        key: Key the operation was called with
        success: True if inserted, found, or deleted
        index: Slot/bucket touched (placement, match, or existing copy)
        probes_used: Probe step at which the operation stopped
            (0 = home slot; ``size`` when the sequence was exhausted)
        reason: Failure reason, None on success
        steps: Human-readable trace ending with the outcome line
    """

    operation: str
    key: int
    success: bool
    index: Optional[int] = None
    probes_used: int = 0
    reason: Optional[Reason] = None
    steps: Tuple[str, ...] = ()

    @property
    def found(self) -> bool:
        return self.success

    def as_dict(self) -> Dict[str, Any]:
        """Plain dictionary with the field names used by the front end."""
        return {
            "operation": self.operation,
            "key": self.key,
            "success": self.success,
            "index": self.index,
            "probesUsed": self.probes_used,
            "reason": self.reason.value if self.reason is not None else None,
            "steps": list(self.steps),
        }


def _hash_name(hash_fn: HashFunction) -> str:
    if isinstance(hash_fn, CustomHashFunction):
        return hash_fn.name
    return getattr(hash_fn, "__name__", repr(hash_fn))


class TableStore:
    """
    Hash table simulation for one strategy and one fixed size.

    Changing size or strategy means building a new store; existing keys are
    not migrated.
    """

    def __init__(
        self,
        size: int,
        strategy: Union[str, ResolutionStrategy] = ResolutionStrategy.CHAINING,
        hash_fn: Optional[HashFunction] = None,
    ):
        """
        Initialize an empty table.

        Args:
            size: Number of slots/buckets (>= 1)
            strategy: Collision resolution strategy
            hash_fn: Default hash function for operations (division if None)
        """
        self.size = check_size(size)
        self.strategy = parse_strategy(strategy)
        self.hash_fn: HashFunction = hash_fn if hash_fn is not None else division_hash
        self._table: List[Any] = self._empty_table()
        self.last_log = OperationLog()
        self.last_probes = 0
        logger.debug(
            "Created %s table of size %d (hash=%s)",
            self.strategy.value,
            self.size,
            _hash_name(self.hash_fn),
        )

    def _empty_table(self) -> List[Any]:
        if self.strategy.probes:
            return [None] * self.size
        return [[] for _ in range(self.size)]

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def insert(self, key: int, hash_fn: Optional[HashFunction] = None) -> OperationResult:
        """
        Insert a key.

        Both modes reject a key already stored anywhere in the table, since
        the hash function may differ between calls. Chaining then appends to
        the home bucket; probing takes the first empty slot of the probe
        sequence.

        Args:
            key: Non-negative integer key
            hash_fn: Hash function for this call (store default if None)

        Returns:
            OperationResult; reason is Exists or Full on failure

        Raises:
            InvalidArgument: If key is not a non-negative integer
        """
        key = check_key(key)
        log, home = self._begin("insert", key, hash_fn)

        existing = self._locate(key)
        if not self.strategy.probes:
            if existing is not None:
                log.step(f"Bucket {existing} already contains {key}")
                return self._finish(
                    log, False, existing, 0, Reason.EXISTS, f"{key} already exists in bucket {existing}"
                )
            bucket = self._table[home]
            if bucket:
                log.step(f"Bucket {home} holds {bucket}; appending {key} to the chain")
            else:
                log.step(f"Bucket {home} is empty")
            bucket.append(key)
            return self._finish(log, True, home, 0, None, f"Inserted {key} into bucket {home}")

        if existing is not None:
            log.step(f"{key} already occupies slot {existing}")
            return self._finish(
                log, False, existing, 0, Reason.EXISTS, f"{key} already exists at slot {existing}"
            )

        for i, idx in enumerate(probe_sequence(self.strategy, home, self.size)):
            occupant = self._table[idx]
            if occupant is None:
                log.step(f"Probe {i}: slot {idx} is empty")
                self._table[idx] = key
                return self._finish(
                    log, True, idx, i, None, f"Inserted {key} at slot {idx} after {i} probe(s)"
                )
            log.step(f"Probe {i}: slot {idx} occupied by {occupant}")

        return self._finish(
            log,
            False,
            None,
            self.size,
            Reason.FULL,
            f"Table full: no empty slot for {key} after {self.size} probes",
        )

    def search(self, key: int, hash_fn: Optional[HashFunction] = None) -> OperationResult:
        """
        Look up a key.

        Probing walks the key's probe sequence and stops at the first empty
        slot, so keys stranded behind a deleted slot are reported missing.

        Args:
            key: Non-negative integer key
            hash_fn: Hash function for this call (store default if None)

        Returns:
            OperationResult; reason is NotFound on failure
        """
        key = check_key(key)
        log, home = self._begin("search", key, hash_fn)

        if not self.strategy.probes:
            if key in self._table[home]:
                log.step(f"Bucket {home} contains {key}")
                return self._finish(log, True, home, 0, None, f"Found {key} in bucket {home}")
            log.step(f"Bucket {home} does not contain {key}")
            return self._finish(
                log, False, None, 0, Reason.NOT_FOUND, f"{key} not found"
            )

        idx, probes = self._walk(key, home, log)
        if idx is None:
            return self._finish(log, False, None, probes, Reason.NOT_FOUND, f"{key} not found")
        return self._finish(log, True, idx, probes, None, f"Found {key} at slot {idx}")

    def delete(self, key: int, hash_fn: Optional[HashFunction] = None) -> OperationResult:
        """
        Remove a key.

        Probing empties the matching slot without leaving a tombstone.

        Args:
            key: Non-negative integer key
            hash_fn: Hash function for this call (store default if None)

        Returns:
            OperationResult; reason is NotFound on failure
        """
        key = check_key(key)
        log, home = self._begin("delete", key, hash_fn)

        if not self.strategy.probes:
            bucket = self._table[home]
            if key in bucket:
                bucket.remove(key)
                log.step(f"Removed {key} from bucket {home}")
                return self._finish(log, True, home, 0, None, f"Deleted {key} from bucket {home}")
            log.step(f"Bucket {home} does not contain {key}")
            return self._finish(
                log, False, None, 0, Reason.NOT_FOUND, f"{key} not found; nothing deleted"
            )

        idx, probes = self._walk(key, home, log)
        if idx is None:
            return self._finish(
                log, False, None, probes, Reason.NOT_FOUND, f"{key} not found; nothing deleted"
            )
        self._table[idx] = None
        return self._finish(log, True, idx, probes, None, f"Deleted {key} from slot {idx}")

    def insert_random(
        self,
        rng: Optional[np.random.Generator] = None,
        hash_fn: Optional[HashFunction] = None,
        high: int = 1000,
    ) -> OperationResult:
        """
        Insert a random key drawn uniformly from [0, high).

        Args:
            rng: NumPy generator (a fresh unseeded one if None)
            hash_fn: Hash function for this call
            high: Exclusive upper bound for the key

        Returns:
            OperationResult of the insert
        """
        if high < 1:
            raise InvalidArgument(f"high must be >= 1, got {high}")
        if rng is None:
            rng = np.random.default_rng()
        return self.insert(int(rng.integers(0, high)), hash_fn)

    # ------------------------------------------------------------------
    # State access
    # ------------------------------------------------------------------

    def snapshot(self) -> Table:
        """Read-only copy of the table for rendering."""
        if self.strategy.probes:
            return tuple(self._table)
        return tuple(tuple(bucket) for bucket in self._table)

    def keys(self) -> List[int]:
        """Stored keys in table order (bucket order, then chain order)."""
        if self.strategy.probes:
            return [k for k in self._table if k is not None]
        return [k for bucket in self._table for k in bucket]

    def clear(self) -> None:
        """Remove every key."""
        self._table = self._empty_table()
        self.last_log = OperationLog()
        self.last_probes = 0

    def analytics(self, hash_fn: Optional[HashFunction] = None) -> Analytics:
        """Recompute analytics for the current table and the latest operation."""
        return compute_analytics(
            self.snapshot(),
            self.strategy,
            hash_fn if hash_fn is not None else self.hash_fn,
            last_probes=self.last_probes,
        )

    def __len__(self) -> int:
        return len(self.keys())

    def __contains__(self, key: object) -> bool:
        if key is None:
            return False
        if self.strategy.probes:
            return key in self._table
        return any(key in bucket for bucket in self._table)

    def __repr__(self) -> str:
        return f"TableStore(size={self.size}, strategy={self.strategy.value}, keys={len(self)})"

    @classmethod
    def from_snapshot(
        cls,
        table: Sequence[Any],
        strategy: Union[str, ResolutionStrategy],
        hash_fn: Optional[HashFunction] = None,
    ) -> "TableStore":
        """
        Rebuild a store from a snapshot.

        Keys are restored in place, not re-inserted, so the layout is kept
        exactly as captured.

        Args:
            table: Sequence of slots (probing) or of key lists (chaining)
            strategy: Strategy the snapshot was taken with
            hash_fn: Default hash function of the new store

        Returns:
            TableStore with the given contents

        Raises:
            InvalidArgument: If the snapshot is empty, has malformed slots or
                contains a key twice
        """
        if isinstance(table, (str, bytes)) or not isinstance(table, Sequence):
            raise InvalidArgument(f"table must be a sequence, got {type(table).__name__}")
        store = cls(len(table), strategy, hash_fn)
        seen = set()

        def _claim(key: Any, where: int) -> int:
            try:
                key = check_key(key)
            except InvalidArgument as e:
                raise InvalidArgument(f"slot {where}: {e}") from None
            if key in seen:
                raise InvalidArgument(f"key {key} appears more than once in snapshot")
            seen.add(key)
            return key

        for i, entry in enumerate(table):
            if store.strategy.probes:
                if entry is not None:
                    store._table[i] = _claim(entry, i)
            else:
                if isinstance(entry, (str, bytes)) or not isinstance(entry, Sequence):
                    raise InvalidArgument(f"bucket {i} must be a list of keys, got {entry!r}")
                store._table[i] = [_claim(k, i) for k in entry]

        return store

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _begin(
        self, operation: str, key: int, hash_fn: Optional[HashFunction]
    ) -> Tuple[OperationLog, int]:
        hash_fn = hash_fn if hash_fn is not None else self.hash_fn
        log = OperationLog(operation, key)

        if isinstance(hash_fn, CustomHashFunction):
            home, warning = hash_fn.evaluate(key, self.size)
            if warning is not None:
                log.warn(warning)
        else:
            home = hash_fn(key, self.size)
            if isinstance(home, bool) or not isinstance(home, Integral) or not 0 <= home < self.size:
                raise InvalidArgument(
                    f"hash function {_hash_name(hash_fn)} returned {home!r} for key {key}; "
                    f"expected an int in [0, {self.size}). Wrap untrusted functions in "
                    "CustomHashFunction"
                )

        home = int(home)
        log.step(f"{operation.capitalize()} {key}: h({key}) = {home} using {_hash_name(hash_fn)}")
        return log, home

    def _finish(
        self,
        log: OperationLog,
        success: bool,
        index: Optional[int],
        probes_used: int,
        reason: Optional[Reason],
        outcome: str,
    ) -> OperationResult:
        log.outcome(outcome)
        self.last_log = log
        self.last_probes = probes_used
        return OperationResult(
            operation=log.operation,
            key=log.key,
            success=success,
            index=index,
            probes_used=probes_used,
            reason=reason,
            steps=log.lines,
        )

    def _locate(self, key: int) -> Optional[int]:
        """Slot or bucket holding key anywhere in the table, ignoring hashing."""
        if not self.strategy.probes:
            for i, bucket in enumerate(self._table):
                if key in bucket:
                    return i
            return None
        try:
            return self._table.index(key)
        except ValueError:
            return None

    def _walk(self, key: int, home: int, log: OperationLog) -> Tuple[Optional[int], int]:
        """Follow the probe sequence until key, an empty slot, or exhaustion."""
        for i, idx in enumerate(probe_sequence(self.strategy, home, self.size)):
            occupant = self._table[idx]
            if occupant == key:
                log.step(f"Probe {i}: slot {idx} holds {key}")
                return idx, i
            if occupant is None:
                log.step(f"Probe {i}: slot {idx} is empty; stopping")
                return None, i
            log.step(f"Probe {i}: slot {idx} occupied by {occupant}")

        log.step(f"Probed all {self.size} slots without finding {key}")
        return None, self.size


def create_store(
    size: int,
    strategy: Union[str, ResolutionStrategy],
    hash_fn: Optional[HashFunction] = None,
) -> TableStore:
    """
    Create an empty table store.

    Args:
        size: Number of slots/buckets (>= 1)
        strategy: chaining, linear, quadratic or double
        hash_fn: Default hash function (division if None)

    Returns:
        TableStore
    """
    return TableStore(size, strategy, hash_fn)
