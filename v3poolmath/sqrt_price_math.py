"""Next square-root prices and token amounts between square-root prices."""

from .errors import (
    LiquidityIsZeroError,
    ProductDivAmountError,
    SafeCastToU160OverflowError,
    SqrtPriceIsLteQuotientError,
    SqrtPriceIsZeroError,
)
from .full_math import MAX_U160, MAX_U256, Q96, mul_div, mul_div_96, mul_div_rounding_up
from .liquidity_math import MAX_I128, MAX_U128, MIN_I128

_SIGN_BIT = 1 << 255
_TWO_256 = 1 << 256


def _check_liquidity(liquidity: int) -> None:
    if not 0 <= liquidity <= MAX_U128:
        raise ValueError(f"liquidity out of 128-bit unsigned range: {liquidity}")


def _check_signed_liquidity(liquidity: int) -> None:
    if not MIN_I128 <= liquidity <= MAX_I128:
        raise ValueError(f"liquidity out of 128-bit signed range: {liquidity}")


def _to_uint160(x: int) -> int:
    if x > MAX_U160:
        raise SafeCastToU160OverflowError()
    return x


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _to_signed(raw: int) -> int:
    """Interpret a 256-bit word as a two's-complement signed value."""
    return raw - _TWO_256 if raw & _SIGN_BIT else raw


def get_next_sqrt_price_from_amount_0_rounding_up(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Price after adding or removing `amount` of token0, rounded up."""
    _check_liquidity(liquidity)
    if amount == 0:
        return sqrt_price_x96
    numerator_1 = liquidity << 96
    product = amount * sqrt_price_x96

    if add:
        denominator = numerator_1 + product
        if denominator <= MAX_U256:
            return mul_div_rounding_up(numerator_1, sqrt_price_x96, denominator)
        # Fall back to liquidity / (liquidity / price + amount) when the product overflows.
        return _ceil_div(numerator_1, (numerator_1 // sqrt_price_x96 + amount) & MAX_U256)

    if product > MAX_U256 or numerator_1 <= product:
        raise ProductDivAmountError()
    return _to_uint160(
        mul_div_rounding_up(numerator_1, sqrt_price_x96, numerator_1 - product)
    )


def get_next_sqrt_price_from_amount_1_rounding_down(
    sqrt_price_x96: int, liquidity: int, amount: int, add: bool
) -> int:
    """Price after adding or removing `amount` of token1, rounded down."""
    _check_liquidity(liquidity)
    if add:
        if amount <= MAX_U160:
            quotient = (amount << 96) // liquidity
        else:
            quotient = mul_div(amount, Q96, liquidity)
        return _to_uint160((sqrt_price_x96 + quotient) & MAX_U256)

    if amount <= MAX_U160:
        quotient = _ceil_div(amount << 96, liquidity)
    else:
        quotient = mul_div_rounding_up(amount, Q96, liquidity)
    if sqrt_price_x96 > quotient:
        return sqrt_price_x96 - quotient
    raise SqrtPriceIsLteQuotientError()


def _check_price_and_liquidity(sqrt_price_x96: int, liquidity: int) -> None:
    if sqrt_price_x96 == 0:
        raise SqrtPriceIsZeroError()
    if liquidity == 0:
        raise LiquidityIsZeroError()


def get_next_sqrt_price_from_input(
    sqrt_price_x96: int, liquidity: int, amount_in: int, zero_for_one: bool
) -> int:
    """Price after swapping `amount_in` of token0 (zero_for_one) or token1 in."""
    _check_price_and_liquidity(sqrt_price_x96, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_0_rounding_up(
            sqrt_price_x96, liquidity, amount_in, True
        )
    return get_next_sqrt_price_from_amount_1_rounding_down(
        sqrt_price_x96, liquidity, amount_in, True
    )


def get_next_sqrt_price_from_output(
    sqrt_price_x96: int, liquidity: int, amount_out: int, zero_for_one: bool
) -> int:
    """Price after swapping `amount_out` of token1 (zero_for_one) or token0 out."""
    _check_price_and_liquidity(sqrt_price_x96, liquidity)
    if zero_for_one:
        return get_next_sqrt_price_from_amount_1_rounding_down(
            sqrt_price_x96, liquidity, amount_out, False
        )
    return get_next_sqrt_price_from_amount_0_rounding_up(
        sqrt_price_x96, liquidity, amount_out, False
    )


def get_amount_0_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Amount of token0 covering `liquidity` between two prices."""
    _check_liquidity(liquidity)
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    numerator_1 = liquidity << 96
    numerator_2 = upper - lower
    if lower == 0:
        raise SqrtPriceIsZeroError()

    amount_0, remainder = divmod(mul_div(numerator_1, numerator_2, upper), lower)
    carry = round_up and (remainder or (numerator_1 * numerator_2) % upper) > 0
    return (amount_0 + int(carry)) & MAX_U256


def get_amount_1_delta(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int, round_up: bool
) -> int:
    """Amount of token1 covering `liquidity` between two prices."""
    _check_liquidity(liquidity)
    lower, upper = sorted((sqrt_ratio_a_x96, sqrt_ratio_b_x96))
    numerator = upper - lower
    amount_1 = mul_div_96(liquidity, numerator)
    carry = round_up and (liquidity * numerator) % Q96 > 0
    return (amount_1 + int(carry)) & MAX_U256


def _signed_delta(amount_fn, sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int) -> int:
    _check_signed_liquidity(liquidity)
    positive = liquidity >= 0
    amount = amount_fn(sqrt_ratio_a_x96, sqrt_ratio_b_x96, abs(liquidity), positive)
    raw = amount if positive else (-amount) & MAX_U256
    return _to_signed(raw)


def get_amount_0_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Signed token0 amount for a signed liquidity change between two prices."""
    return _signed_delta(get_amount_0_delta, sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity)


def get_amount_1_delta_signed(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, liquidity: int
) -> int:
    """Signed token1 amount for a signed liquidity change between two prices."""
    return _signed_delta(get_amount_1_delta, sqrt_ratio_a_x96, sqrt_ratio_b_x96, liquidity)