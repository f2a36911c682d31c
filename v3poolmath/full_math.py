"""Full-precision multiply-then-divide on 256-bit unsigned values."""

from .errors import DenominatorIsLteProdOneError, DenominatorIsZeroError, ResultIsU256MaxError

MAX_U256 = (1 << 256) - 1
MAX_U160 = (1 << 160) - 1
Q96 = 1 << 96
Q128 = 1 << 128
Q192 = 1 << 192


def mul_div(a: int, b: int, denominator: int) -> int:
    """Return floor(a * b / denominator); raise if it overflows 256 bits or denominator is 0."""
    product = a * b
    if denominator <= product >> 256:
        if denominator == 0:
            raise DenominatorIsZeroError()
        raise DenominatorIsLteProdOneError()
    return product // denominator


def mul_div_rounding_up(a: int, b: int, denominator: int) -> int:
    """Return ceil(a * b / denominator); raise if it overflows 256 bits or denominator is 0."""
    result = mul_div(a, b, denominator)
    if (a * b) % denominator == 0:
        return result
    if result == MAX_U256:
        raise ResultIsU256MaxError()
    return result + 1


def mul_div_96(a: int, b: int) -> int:
    """Return floor(a * b / 2**96); raise if the result overflows 256 bits."""
    product = a * b
    if product >> 256 >= Q96:
        raise DenominatorIsLteProdOneError()
    return product >> 96