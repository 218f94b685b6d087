"""Hashing modules for hashviz."""

from .base import HashFunction, HashFunctionId
from .custom import CustomHashFunction
from .functions import (
    division_hash,
    folding_hash,
    mid_square_hash,
    multiplication_hash,
    polynomial_hash,
    universal_hash,
)
from .registry import (
    HASH_FUNCTION_CATALOG,
    HASH_FUNCTIONS,
    describe_hash_function,
    parse_hash_function_id,
    resolve_hash_function,
)
from .diagnostics import bucket_loads, compare_hash_functions, distribution_summary

__all__ = [
    "HashFunction",
    "HashFunctionId",
    "CustomHashFunction",
    # Built-in functions
    "division_hash",
    "multiplication_hash",
    "polynomial_hash",
    "universal_hash",
    "mid_square_hash",
    "folding_hash",
    # Registry
    "HASH_FUNCTIONS",
    "HASH_FUNCTION_CATALOG",
    "resolve_hash_function",
    "parse_hash_function_id",
    "describe_hash_function",
    # Diagnostics
    "bucket_loads",
    "distribution_summary",
    "compare_hash_functions",
]
