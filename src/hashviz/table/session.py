"""Save and restore table sessions as JSON documents."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from hashviz.errors import InvalidArgument
from hashviz.hashing.base import HashFunction, HashFunctionId
from hashviz.hashing.registry import parse_hash_function_id
from hashviz.table.store import TableStore

logger = logging.getLogger(__name__)

DEFAULT_SESSION_FILE = "session.json"


def to_document(
    store: TableStore, hash_function: Optional[Union[str, HashFunctionId]] = None
) -> Dict[str, Any]:
    """
    Serialize a store to a JSON-compatible document.

    Args:
        store: Store to serialize
        hash_function: Optional hash function id recorded for the UI

    Returns:
        {"size", "strategy", "table"[, "hashFunction"]}
    """
    doc: Dict[str, Any] = {
        "size": store.size,
        "strategy": store.strategy.value,
        "table": [list(b) if isinstance(b, tuple) else b for b in store.snapshot()],
    }
    if hash_function is not None:
        doc["hashFunction"] = parse_hash_function_id(hash_function).value
    return doc


def from_document(doc: Dict[str, Any], hash_fn: Optional[HashFunction] = None) -> TableStore:
    """
    Rebuild a store from a session document.

    Args:
        doc: Document produced by to_document
        hash_fn: Default hash function of the restored store

    Returns:
        TableStore

    Raises:
        InvalidArgument: If required fields are missing or inconsistent
    """
    if not isinstance(doc, dict):
        raise InvalidArgument(f"session document must be an object, got {type(doc).__name__}")
    missing = [k for k in ("size", "strategy", "table") if k not in doc]
    if missing:
        raise InvalidArgument(f"session document missing fields: {missing}")

    table = doc["table"]
    if not isinstance(table, list):
        raise InvalidArgument("session table must be a list")
    if doc["size"] != len(table):
        raise InvalidArgument(
            f"session size {doc['size']} does not match table length {len(table)}"
        )
    if "hashFunction" in doc:
        parse_hash_function_id(doc["hashFunction"])

    return TableStore.from_snapshot(table, doc["strategy"], hash_fn)


def save_session(
    store: TableStore,
    path: Union[str, Path] = DEFAULT_SESSION_FILE,
    hash_function: Optional[Union[str, HashFunctionId]] = None,
) -> Path:
    """
    Write a store to a JSON file.

    Returns:
        Path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(to_document(store, hash_function), f, indent=2)
    logger.info(f"Session saved to {path}")
    return path


def load_session(
    path: Union[str, Path] = DEFAULT_SESSION_FILE, hash_fn: Optional[HashFunction] = None
) -> TableStore:
    """
    Read a store from a JSON file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file is not valid JSON
        InvalidArgument: If the document is malformed
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Session file not found: {path}")

    with open(path, "r") as f:
        doc = json.load(f)

    store = from_document(doc, hash_fn)
    logger.info(f"Session loaded from {path} ({len(store)} keys)")
    return store
