"""A single step of a swap within one price range."""

from typing import NamedTuple

from .full_math import MAX_U256, mul_div, mul_div_rounding_up
from .sqrt_price_math import (
    get_amount_0_delta,
    get_amount_1_delta,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)

MAX_FEE = 1_000_000
_MAX_U32 = (1 << 32) - 1
_MIN_I256 = -(1 << 255)
_MAX_I256 = (1 << 255) - 1


class SwapStep(NamedTuple):
    """Outcome of one swap step."""

    sqrt_ratio_next_x96: int
    amount_in: int
    amount_out: int
    fee_amount: int


def compute_swap_step(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_target_x96: int,
    liquidity: int,
    amount_remaining: int,
    fee_pips: int,
) -> SwapStep:
    """Swap toward the target price; a non-negative amount_remaining means exact input.

    The fee is expressed in hundredths of a bip of the input amount.
    """
    if not 0 <= fee_pips <= _MAX_U32:
        raise ValueError(f"fee out of 32-bit unsigned range: {fee_pips}")
    if not _MIN_I256 <= amount_remaining <= _MAX_I256:
        raise ValueError(f"amount out of 256-bit signed range: {amount_remaining}")

    fee_complement = (MAX_FEE - fee_pips) & MAX_U256
    zero_for_one = sqrt_ratio_current_x96 >= sqrt_ratio_target_x96

    if amount_remaining >= 0:
        amount_remaining_less_fee = mul_div(amount_remaining, fee_complement, MAX_FEE)
        if zero_for_one:
            amount_in = get_amount_0_delta(
                sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, True
            )
        else:
            amount_in = get_amount_1_delta(
                sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, True
            )

        if amount_remaining_less_fee >= amount_in:
            sqrt_ratio_next_x96 = sqrt_ratio_target_x96
            fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
        else:
            amount_in = amount_remaining_less_fee
            sqrt_ratio_next_x96 = get_next_sqrt_price_from_input(
                sqrt_ratio_current_x96, liquidity, amount_in, zero_for_one
            )
            fee_amount = amount_remaining - amount_in

        if zero_for_one:
            amount_out = get_amount_1_delta(
                sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, False
            )
        else:
            amount_out = get_amount_0_delta(
                sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, False
            )
        return SwapStep(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)

    amount_remaining_abs = -amount_remaining
    if zero_for_one:
        amount_out = get_amount_1_delta(
            sqrt_ratio_target_x96, sqrt_ratio_current_x96, liquidity, False
        )
    else:
        amount_out = get_amount_0_delta(
            sqrt_ratio_current_x96, sqrt_ratio_target_x96, liquidity, False
        )

    if amount_remaining_abs >= amount_out:
        sqrt_ratio_next_x96 = sqrt_ratio_target_x96
    else:
        amount_out = amount_remaining_abs
        sqrt_ratio_next_x96 = get_next_sqrt_price_from_output(
            sqrt_ratio_current_x96, liquidity, amount_out, zero_for_one
        )

    if zero_for_one:
        amount_in = get_amount_0_delta(
            sqrt_ratio_next_x96, sqrt_ratio_current_x96, liquidity, True
        )
    else:
        amount_in = get_amount_1_delta(
            sqrt_ratio_current_x96, sqrt_ratio_next_x96, liquidity, True
        )
    fee_amount = mul_div_rounding_up(amount_in, fee_pips, fee_complement)
    return SwapStep(sqrt_ratio_next_x96, amount_in, amount_out, fee_amount)