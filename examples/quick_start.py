"""Quick start guide for hashviz.

Demonstrates:
1. Linear probing with step traces
2. Separate chaining and collision analytics
3. A custom hash function with fallback
4. Saving and restoring a session
"""

import tempfile
from pathlib import Path

from hashviz import (
    HashFunctionId,
    compute_analytics,
    create_store,
    load_session,
    resolve_hash_function,
    save_session,
)


def example_1_linear_probing():
    """Example 1: keys that share a home slot walk to the next free one."""
    print("=" * 60)
    print("Example 1: Linear Probing")
    print("=" * 60)

    store = create_store(7, "linear")
    for key in (3, 10, 17):
        result = store.insert(key)
        print(f"insert {key}: slot={result.index}, probes={result.probes_used}")
        for line in result.steps:
            print(f"    {line}")

    print(f"Table: {store.snapshot()}")
    print(f"Analytics: {store.analytics().as_dict()}")
    print()


def example_2_chaining():
    """Example 2: chaining keeps colliding keys in one bucket."""
    print("=" * 60)
    print("Example 2: Separate Chaining")
    print("=" * 60)

    store = create_store(5, "chaining")
    for key in (2, 7, 12):
        store.insert(key)

    table = store.snapshot()
    print(f"Bucket 2: {list(table[2])}")
    print(f"Analytics: {compute_analytics(table, 'chaining').as_dict()}")
    print()


def example_3_custom_hash():
    """Example 3: a custom function that misbehaves falls back to division."""
    print("=" * 60)
    print("Example 3: Custom Hash Function")
    print("=" * 60)

    def half_key(key, size):
        return key / 2  # non-integer for odd keys

    hash_fn = resolve_hash_function(HashFunctionId.CUSTOM, half_key)
    store = create_store(10, "quadratic", hash_fn)
    for key in (8, 9):
        result = store.insert(key)
        print(f"insert {key}: slot={result.index}")
        for line in result.steps:
            print(f"    {line}")
    print()


def example_4_sessions():
    """Example 4: save and restore a table."""
    print("=" * 60)
    print("Example 4: Sessions")
    print("=" * 60)

    store = create_store(8, "double")
    for key in (5, 13, 21, 29):
        store.insert(key)

    with tempfile.TemporaryDirectory() as tmp:
        path = save_session(store, Path(tmp) / "session.json", hash_function="division")
        restored = load_session(path)

    print(f"Saved:    {store.snapshot()}")
    print(f"Restored: {restored.snapshot()}")
    print()


if __name__ == "__main__":
    example_1_linear_probing()
    example_2_chaining()
    example_3_custom_hash()
    example_4_sessions()
