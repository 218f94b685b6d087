"""Test session save/restore."""

import json

import pytest

from hashviz import (
    InvalidArgument,
    create_store,
    from_document,
    load_session,
    save_session,
    to_document,
)


def test_probing_document(linear_store):
    for key in (3, 10):
        linear_store.insert(key)

    doc = to_document(linear_store)

    assert doc == {
        "size": 7,
        "strategy": "linear",
        "table": [None, None, None, 3, 10, None, None],
    }


def test_chaining_document_with_hash_id(chaining_store):
    chaining_store.insert(2)
    chaining_store.insert(7)

    doc = to_document(chaining_store, hash_function="midSquare")

    assert doc["table"] == [[], [], [2, 7], [], []]
    assert doc["hashFunction"] == "midSquare"


@pytest.mark.parametrize("strategy", ["chaining", "linear", "quadratic", "double"])
def test_file_round_trip(tmp_path, strategy):
    store = create_store(11, strategy)
    for key in (4, 15, 26, 8):
        store.insert(key)

    path = save_session(store, tmp_path / "session.json", hash_function="division")
    restored = load_session(path)

    assert restored.strategy == store.strategy
    assert restored.size == 11
    assert restored.snapshot() == store.snapshot()
    with open(path) as f:
        assert json.load(f)["hashFunction"] == "division"


def test_missing_fields():
    with pytest.raises(InvalidArgument):
        from_document({"size": 3, "table": [None, None, None]})


def test_size_mismatch():
    with pytest.raises(InvalidArgument):
        from_document({"size": 4, "strategy": "linear", "table": [None, None, None]})


def test_unknown_hash_function():
    with pytest.raises(InvalidArgument):
        from_document({"size": 1, "strategy": "linear", "table": [None], "hashFunction": "md5"})


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_session(tmp_path / "nope.json")
