"""Test separate chaining operations."""

import pytest

from hashviz import Reason, create_store, load_session, resolve_hash_function, save_session


def test_colliding_keys_share_bucket(chaining_store):
    """2, 7, 12 all hash to bucket 2 (mod 5) and keep insertion order."""
    for key in (2, 7, 12):
        result = chaining_store.insert(key)
        assert result.success
        assert result.index == 2
        assert result.probes_used == 0

    table = chaining_store.snapshot()
    assert table[2] == (2, 7, 12)
    assert all(table[i] == () for i in (0, 1, 3, 4))


def test_duplicate_rejected(chaining_store):
    chaining_store.insert(7)
    before = chaining_store.snapshot()

    result = chaining_store.insert(7)

    assert not result.success
    assert result.reason is Reason.EXISTS
    assert result.index == 2
    assert chaining_store.snapshot() == before


def test_search(chaining_store):
    chaining_store.insert(12)

    found = chaining_store.search(12)
    missing = chaining_store.search(17)

    assert found.found and found.index == 2 and found.probes_used == 0
    assert not missing.found
    assert missing.reason is Reason.NOT_FOUND
    assert missing.index is None


def test_round_trip(chaining_store):
    inserted = chaining_store.insert(13)
    assert chaining_store.search(13).index == inserted.index


def test_delete_then_search(chaining_store):
    for key in (2, 7, 12):
        chaining_store.insert(key)

    deleted = chaining_store.delete(7)

    assert deleted.success and deleted.index == 2
    assert chaining_store.snapshot()[2] == (2, 12)
    assert not chaining_store.search(7).found
    assert chaining_store.search(12).found


def test_delete_missing(chaining_store):
    result = chaining_store.delete(4)
    assert not result.success
    assert result.reason is Reason.NOT_FOUND


def test_load_factor_can_exceed_one():
    store = create_store(2, "chaining")
    for key in range(5):
        assert store.insert(key).success
    assert len(store) == 5
    assert store.analytics().load_factor == pytest.approx(2.5)


def test_keys_and_contains(chaining_store):
    for key in (3, 8, 1):
        chaining_store.insert(key)
    assert chaining_store.keys() == [1, 3, 8]
    assert 8 in chaining_store
    assert 4 not in chaining_store
    assert None not in chaining_store


def test_clear(chaining_store):
    chaining_store.insert(3)
    chaining_store.clear()
    assert len(chaining_store) == 0
    assert chaining_store.snapshot() == ((),) * 5


def test_duplicate_rejected_across_hash_functions(tmp_path):
    """5 lands in bucket 5 under division and bucket 1 under universal."""
    store = create_store(7, "chaining")
    assert store.insert(5).index == 5

    result = store.insert(5, resolve_hash_function("universal"))
    assert not result.success
    assert result.reason is Reason.EXISTS
    assert result.index == 5, "Should report the bucket already holding the key"
    assert store.snapshot() == ((), (), (), (), (), (5,), ())

    path = tmp_path / "session.json"
    save_session(store, path)
    assert load_session(path).snapshot() == store.snapshot()
