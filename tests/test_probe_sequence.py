"""Test probe sequences for the open-addressing strategies."""

import pytest

from hashviz import InvalidArgument, ResolutionStrategy, probe_sequence
from hashviz.probing import secondary_step


def test_linear_sequence():
    assert list(probe_sequence("linear", 3, 7)) == [3, 4, 5, 6, 0, 1, 2]


def test_quadratic_sequence():
    """Quadratic offsets i^2 may revisit slots."""
    assert list(probe_sequence("quadratic", 0, 7)) == [0, 1, 4, 2, 2, 4, 1]


def test_double_sequence():
    """Step is 7 - (h mod 7) regardless of table size."""
    seq = probe_sequence(ResolutionStrategy.DOUBLE, 3, 10)
    assert seq.step == 4
    assert list(seq) == [3, 7, 1, 5, 9, 3, 7, 1, 5, 9]


def test_secondary_step():
    assert secondary_step(0) == 7
    assert secondary_step(6) == 1
    assert secondary_step(13) == 1
    assert secondary_step(14) == 7


@pytest.mark.parametrize("strategy", ["linear", "quadratic", "double"])
@pytest.mark.parametrize("size", [1, 4, 7, 11])
def test_length_and_restartable(strategy, size):
    """Sequences have exactly `size` entries and iterate the same way twice."""
    seq = probe_sequence(strategy, size - 1, size)
    first = list(seq)
    assert len(seq) == size
    assert len(first) == size
    assert list(seq) == first
    assert all(0 <= idx < size for idx in first)
    assert first[0] == size - 1, "First probe is always the home slot"


def test_indexing():
    seq = probe_sequence("linear", 5, 7)
    assert seq[0] == 5
    assert seq[2] == 0
    with pytest.raises(IndexError):
        seq[7]


def test_chaining_has_no_sequence():
    with pytest.raises(InvalidArgument):
        probe_sequence("chaining", 0, 5)


def test_unknown_strategy():
    with pytest.raises(InvalidArgument):
        probe_sequence("cuckoo", 0, 5)


def test_initial_hash_out_of_range():
    with pytest.raises(InvalidArgument):
        probe_sequence("linear", 7, 7)
