"""Small numeric helpers shared by the vector and matrix types."""

from typing import TypeVar

T = TypeVar("T")

EPSILON = 0.0001
PI = 3.1415


def clamp(value: T, min_val: T, max_val: T) -> T:
    """Limit ``value`` to the closed range ``[min_val, max_val]``."""
    if value < min_val:
        return min_val
    if value > max_val:
        return max_val
    return value


def square(value: T) -> T:
    """Return ``value`` multiplied by itself."""
    return value * value