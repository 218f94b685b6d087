"""Test analytics recomputation."""

import logging

import numpy as np
import pytest

from hashviz import Analytics, compute_analytics, create_store, resolve_hash_function


def test_chaining_collisions(chaining_store):
    for key in (2, 7, 12):
        chaining_store.insert(key)

    analytics = compute_analytics(chaining_store.snapshot(), "chaining")

    assert analytics.collisions == 2
    assert analytics.load_factor == pytest.approx(0.6)


def test_chaining_collisions_across_buckets():
    table = ((0, 5, 10), (), (2,), (3, 8), ())
    assert compute_analytics(table, "chaining").collisions == 3


def test_probing_collisions_replay_probe_counts(linear_store):
    """Collisions sum the probes each stored key needs: 0 + 1 + 2."""
    for key in (3, 10, 17):
        linear_store.insert(key)

    analytics = linear_store.analytics()

    assert analytics.collisions == 3
    assert analytics.probes == 2, "probes reports the latest operation only"
    assert analytics.load_factor == pytest.approx(3 / 7)


def test_recomputed_after_delete(linear_store):
    for key in (3, 10, 17):
        linear_store.insert(key)
    linear_store.delete(10)

    analytics = linear_store.analytics()

    # 17 still sits two probes away from its home slot
    assert analytics.collisions == 2
    assert analytics.load_factor == pytest.approx(2 / 7)


def test_probes_follow_latest_operation(linear_store):
    linear_store.insert(3)
    linear_store.insert(10)
    assert linear_store.analytics().probes == 1
    linear_store.search(3)
    assert linear_store.analytics().probes == 0


def test_uses_given_hash_function():
    universal = resolve_hash_function("universal")
    store = create_store(7, "linear", universal)
    # universal(k, 7) = (3k + 7) % 7 = 3k % 7; 0 and 7 both map to 0
    store.insert(0)
    store.insert(7)

    assert store.analytics().collisions == 1
    assert compute_analytics(store.snapshot(), "linear", universal).collisions == 1


def test_empty_table():
    analytics = compute_analytics((None,) * 4, "double")
    assert analytics == Analytics(collisions=0, probes=0, load_factor=0.0)


def test_unreachable_key_counts_zero(caplog):
    """Quadratic sequence for key 0 in size 4 is 0, 1, 0, 1 and never reaches slot 3."""
    with caplog.at_level(logging.WARNING, logger="hashviz.metrics.analytics"):
        analytics = compute_analytics((None, None, None, 0), "quadratic")
    assert analytics.collisions == 0
    assert analytics.load_factor == pytest.approx(0.25)
    assert any("not on its probe sequence" in r.message for r in caplog.records)


def test_as_dict():
    d = Analytics(collisions=2, probes=1, load_factor=0.5).as_dict()
    assert d == {"collisions": 2, "probes": 1, "loadFactor": 0.5}


def test_numpy_integer_hash_results():
    store = create_store(7, "linear", lambda k, s: np.int64(k % s))
    for key in (3, 10):
        assert store.insert(key).success

    analytics = store.analytics()
    assert analytics.collisions == 1
    assert analytics.load_factor == pytest.approx(2 / 7)
