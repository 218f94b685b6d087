"""Seed management for determinism."""

import random

import numpy as np


def seed_everything(seed: int) -> None:
    """Set Python and NumPy global seeds.

    Experiments draw keys from local generators (see make_rng); this covers
    code that still uses the global state.

    Args:
        seed: Random seed value (should be non-negative integer)
    """
    random.seed(seed)
    np.random.seed(seed)
