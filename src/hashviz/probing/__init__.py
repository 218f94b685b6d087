"""Probe sequencing for open-addressing strategies."""

from .sequencer import (
    DOUBLE_HASH_MODULUS,
    RESOLUTION_CATALOG,
    ProbeSequence,
    ResolutionStrategy,
    parse_strategy,
    probe_sequence,
    secondary_step,
)

__all__ = [
    "ResolutionStrategy",
    "ProbeSequence",
    "probe_sequence",
    "parse_strategy",
    "secondary_step",
    "DOUBLE_HASH_MODULUS",
    "RESOLUTION_CATALOG",
]
