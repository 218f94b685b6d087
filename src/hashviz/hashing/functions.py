"""Built-in hash functions.

Each function maps ``(key, size)`` to an index in ``[0, size)``. The
constants are fixed so results are reproducible across runs and match the
formulas shown to users of the visualizer.
"""

import math

from hashviz.errors import InvalidArgument, check_key, check_size

# Golden-ratio conjugate used by the multiplication method
KNUTH_A = 0.6180339887

POLYNOMIAL_BASE = 31

UNIVERSAL_A = 3
UNIVERSAL_B = 7
UNIVERSAL_PRIME = 1000000007


def division_hash(key: int, size: int) -> int:
    """h(k) = k mod m."""
    key = check_key(key)
    size = check_size(size)
    return key % size


def multiplication_hash(key: int, size: int) -> int:
    """
    Multiplication method: h(k) = floor(m * (k*A mod 1)).

    The product is taken in floating point, so keys beyond the float range
    are rejected.

    Args:
        key: Non-negative integer key
        size: Table size

    Returns:
        Index in [0, size)

    Raises:
        InvalidArgument: If key is too large to convert to a float
    """
    key = check_key(key)
    size = check_size(size)
    try:
        frac = (key * KNUTH_A) % 1
    except OverflowError:
        raise InvalidArgument("key is too large for the multiplication method") from None
    return math.floor(size * frac) % size


def polynomial_hash(key: int, size: int) -> int:
    """
    Polynomial rolling hash over the decimal digits of the key.

    Digits are consumed left to right as character codes, reducing modulo
    size at every step so intermediate values stay small.

    Args:
        key: Non-negative integer key
        size: Table size

    Returns:
        Index in [0, size)
    """
    key = check_key(key)
    size = check_size(size)
    h = 0
    for ch in str(key):
        h = (h * POLYNOMIAL_BASE + ord(ch)) % size
    return h


def universal_hash(key: int, size: int) -> int:
    """h(k) = ((a*k + b) mod p) mod m with a=3, b=7, p=1e9+7."""
    key = check_key(key)
    size = check_size(size)
    return ((UNIVERSAL_A * key + UNIVERSAL_B) % UNIVERSAL_PRIME) % size


def mid_square_hash(key: int, size: int) -> int:
    """
    Mid-square method: middle digit(s) of k^2, mod m.

    Even-length squares contribute the two digits around the midpoint,
    odd-length squares their single middle digit. Small squares therefore
    give small indices.

    Args:
        key: Non-negative integer key
        size: Table size

    Returns:
        Index in [0, size)
    """
    key = check_key(key)
    size = check_size(size)
    digits = str(key * key)
    mid = len(digits) // 2
    if len(digits) % 2 == 0:
        middle = digits[mid - 1:mid + 1]
    else:
        middle = digits[mid]
    return int(middle) % size


def folding_hash(key: int, size: int) -> int:
    """
    Folding method: sum of 2-digit groups of the key, mod m.

    Groups are cut from the left, so 12345 folds to 12 + 34 + 5.

    Args:
        key: Non-negative integer key
        size: Table size

    Returns:
        Index in [0, size)
    """
    key = check_key(key)
    size = check_size(size)
    digits = str(key)
    total = sum(int(digits[i:i + 2]) for i in range(0, len(digits), 2))
    return total % size
