"""Fee growth inside a tick range and fees owed to a position."""

from dataclasses import dataclass

from .full_math import MAX_U256, Q128
from .liquidity_math import MAX_U128


@dataclass(frozen=True)
class FeeGrowthOutside:
    """Fee growth recorded on the far side of a tick, per token, as Q128.128."""

    fee_growth_outside0_x128: int = 0
    fee_growth_outside1_x128: int = 0


def get_fee_growth_inside(
    lower: FeeGrowthOutside,
    upper: FeeGrowthOutside,
    tick_lower: int,
    tick_upper: int,
    tick_current: int,
    fee_growth_global0_x128: int,
    fee_growth_global1_x128: int,
) -> tuple[int, int]:
    """Return the fee growth inside [tick_lower, tick_upper) for both tokens.

    Subtraction wraps modulo 2**256, as fee growth accumulators do.
    """
    if tick_current < tick_lower:
        inside0 = lower.fee_growth_outside0_x128 - upper.fee_growth_outside0_x128
        inside1 = lower.fee_growth_outside1_x128 - upper.fee_growth_outside1_x128
    elif tick_current >= tick_upper:
        inside0 = upper.fee_growth_outside0_x128 - lower.fee_growth_outside0_x128
        inside1 = upper.fee_growth_outside1_x128 - lower.fee_growth_outside1_x128
    else:
        inside0 = (
            fee_growth_global0_x128
            - lower.fee_growth_outside0_x128
            - upper.fee_growth_outside0_x128
        )
        inside1 = (
            fee_growth_global1_x128
            - lower.fee_growth_outside1_x128
            - upper.fee_growth_outside1_x128
        )
    return inside0 & MAX_U256, inside1 & MAX_U256


def get_tokens_owed(
    fee_growth_inside_0_last_x128: int,
    fee_growth_inside_1_last_x128: int,
    liquidity: int,
    fee_growth_inside_0_x128: int,
    fee_growth_inside_1_x128: int,
) -> tuple[int, int]:
    """Return the fees owed to a position in token0 and token1."""
    if not 0 <= liquidity <= MAX_U128:
        raise ValueError(f"liquidity out of 128-bit unsigned range: {liquidity}")

    def owed(current: int, last: int) -> int:
        growth = (current - last) & MAX_U256
        return ((growth * liquidity) & MAX_U256) // Q128

    return (
        owed(fee_growth_inside_0_x128, fee_growth_inside_0_last_x128),
        owed(fee_growth_inside_1_x128, fee_growth_inside_1_last_x128),
    )