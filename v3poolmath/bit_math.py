"""Most and least significant set bit of 256-bit unsigned values."""

from .full_math import MAX_U256


def _check(x: int) -> None:
    if x == 0:
        raise ValueError("ZERO")
    if not 0 < x <= MAX_U256:
        raise ValueError(f"value out of 256-bit unsigned range: {x}")


def most_significant_bit(x: int) -> int:
    """Index of the highest set bit of x; raise ValueError("ZERO") for 0."""
    _check(x)
    return x.bit_length() - 1


def least_significant_bit(x: int) -> int:
    """Index of the lowest set bit of x; raise ValueError("ZERO") for 0."""
    _check(x)
    return (x & -x).bit_length() - 1