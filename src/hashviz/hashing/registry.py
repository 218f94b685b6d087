"""Registry of selectable hash functions and resolution strategies."""

from typing import Any, Callable, Dict, Optional, Union

from hashviz.errors import InvalidArgument
from hashviz.hashing.base import HashFunction, HashFunctionId
from hashviz.hashing.custom import CustomHashFunction
from hashviz.hashing.functions import (
    division_hash,
    folding_hash,
    mid_square_hash,
    multiplication_hash,
    polynomial_hash,
    universal_hash,
)

HASH_FUNCTIONS: Dict[HashFunctionId, HashFunction] = {
    HashFunctionId.DIVISION: division_hash,
    HashFunctionId.MULTIPLICATION: multiplication_hash,
    HashFunctionId.POLYNOMIAL: polynomial_hash,
    HashFunctionId.UNIVERSAL: universal_hash,
    HashFunctionId.MID_SQUARE: mid_square_hash,
    HashFunctionId.FOLDING: folding_hash,
}

HASH_FUNCTION_CATALOG: Dict[HashFunctionId, Dict[str, str]] = {
    HashFunctionId.DIVISION: {
        "name": "Division Method",
        "formula": "h(k) = k mod m",
    },
    HashFunctionId.MULTIPLICATION: {
        "name": "Multiplication Method",
        "formula": "h(k) = floor(m(kA mod 1))",
    },
    HashFunctionId.POLYNOMIAL: {
        "name": "Polynomial Rolling Hash",
        "formula": "h(k) = (k1*p^(n-1) + k2*p^(n-2) + ... + kn) mod m",
    },
    HashFunctionId.UNIVERSAL: {
        "name": "Universal Hashing",
        "formula": "h(k) = ((ak + b) mod p) mod m",
    },
    HashFunctionId.MID_SQUARE: {
        "name": "Mid-square Hashing",
        "formula": "h(k) = middle digits of k^2",
    },
    HashFunctionId.FOLDING: {
        "name": "Folding Method",
        "formula": "h(k) = sum of k parts mod m",
    },
    HashFunctionId.CUSTOM: {
        "name": "Custom",
        "formula": "user supplied (key, size) -> index",
    },
}


def parse_hash_function_id(value: Union[str, HashFunctionId]) -> HashFunctionId:
    """Convert a string id to HashFunctionId, raising InvalidArgument if unknown."""
    try:
        return HashFunctionId(value)
    except ValueError:
        valid = [h.value for h in HashFunctionId]
        raise InvalidArgument(
            f"hash function must be one of {valid}, got {value!r}"
        ) from None


def resolve_hash_function(
    hash_id: Union[str, HashFunctionId],
    custom_fn: Optional[Callable[[int, int], Any]] = None,
) -> HashFunction:
    """
    Look up the hash function for an id.

    Args:
        hash_id: Hash function id (enum member or its string value)
        custom_fn: Callable used when hash_id is "custom"

    Returns:
        Callable (key, size) -> index

    Raises:
        InvalidArgument: If the id is unknown, or "custom" is requested
            without a callable
    """
    hash_id = parse_hash_function_id(hash_id)
    if hash_id is HashFunctionId.CUSTOM:
        if custom_fn is None:
            raise InvalidArgument("custom hash function requested but custom_fn is None")
        if isinstance(custom_fn, CustomHashFunction):
            return custom_fn
        return CustomHashFunction(custom_fn)
    return HASH_FUNCTIONS[hash_id]


def describe_hash_function(hash_id: Union[str, HashFunctionId]) -> Dict[str, str]:
    """Return display name and formula text for a hash function id."""
    hash_id = parse_hash_function_id(hash_id)
    return {"id": hash_id.value, **HASH_FUNCTION_CATALOG[hash_id]}
