"""Encoding a ratio of token amounts as a Q64.96 square-root price."""

from math import isqrt

from .full_math import MAX_U256


def encode_sqrt_ratio_x96(amount1: int, amount0: int) -> int:
    """Return sqrt(amount1 / amount0) as a Q64.96 value, rounded down.

    Raises ZeroDivisionError when amount0 is 0 and ValueError when the ratio
    is negative or the result does not fit in 256 bits.
    """
    numerator = amount1 << 192
    if amount0 == 0:
        raise ZeroDivisionError("amount0 is zero")
    quotient = abs(numerator) // abs(amount0)
    if (numerator < 0) != (amount0 < 0):
        quotient = -quotient
    if quotient < 0:
        raise ValueError("cannot take the square root of a negative ratio")
    result = isqrt(quotient)
    if result > MAX_U256:
        raise ValueError(f"sqrt ratio does not fit in 256 bits: {result}")
    return result