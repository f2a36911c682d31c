"""Adding signed liquidity deltas to unsigned 128-bit liquidity."""

from .errors import LiquidityOverflowError, LiquidityUnderflowError

MAX_U128 = (1 << 128) - 1
MIN_I128 = -(1 << 127)
MAX_I128 = (1 << 127) - 1


def add_delta(x: int, y: int) -> int:
    """Return x + y, raising if the result leaves the unsigned 128-bit range."""
    if not 0 <= x <= MAX_U128:
        raise ValueError(f"liquidity out of 128-bit unsigned range: {x}")
    if not MIN_I128 <= y <= MAX_I128:
        raise ValueError(f"liquidity delta out of 128-bit signed range: {y}")
    result = x + y
    if result < 0:
        raise LiquidityUnderflowError()
    if result > MAX_U128:
        raise LiquidityOverflowError()
    return result