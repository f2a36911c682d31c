import pytest
from hypothesis import given
from hypothesis import strategies as st

from v3poolmath.errors import (
    LiquidityIsZeroError,
    ProductDivAmountError,
    SafeCastToU160OverflowError,
    SqrtPriceIsLteQuotientError,
    SqrtPriceIsZeroError,
)
from v3poolmath.full_math import MAX_U256, Q96
from v3poolmath.liquidity_math import MAX_I128, MAX_U128, MIN_I128
from v3poolmath.sqrt_price_math import (
    get_amount_0_delta,
    get_amount_0_delta_signed,
    get_amount_1_delta,
    get_amount_1_delta_signed,
    get_next_sqrt_price_from_input,
    get_next_sqrt_price_from_output,
)
from v3poolmath.tick_math import MAX_SQRT_RATIO, MIN_SQRT_RATIO

prices = st.integers(MIN_SQRT_RATIO, MAX_SQRT_RATIO - 1)
liquidities = st.integers(1, MAX_U128)
ONE_ETHER = 10**18


def test_input_zero_amount_returns_price():
    assert get_next_sqrt_price_from_input(Q96, ONE_ETHER, 0, True) == Q96
    assert get_next_sqrt_price_from_input(Q96, ONE_ETHER, 0, False) == Q96


def test_input_zero_price_raises():
    with pytest.raises(SqrtPriceIsZeroError):
        get_next_sqrt_price_from_input(0, 1, 10**17, False)


def test_input_zero_liquidity_raises():
    with pytest.raises(LiquidityIsZeroError):
        get_next_sqrt_price_from_input(1, 0, 10**17, True)


def test_output_zero_price_raises():
    with pytest.raises(SqrtPriceIsZeroError):
        get_next_sqrt_price_from_output(0, 1, 10**17, False)


def test_output_zero_liquidity_raises():
    with pytest.raises(LiquidityIsZeroError):
        get_next_sqrt_price_from_output(1, 0, 10**17, True)


def test_input_minimum_price_for_max_inputs():
    amount = MAX_U256 - (MAX_U128 << 96)
    assert get_next_sqrt_price_from_input(1, MAX_U128, amount, True) == 1


def test_input_cannot_underflow_price():
    assert get_next_sqrt_price_from_input(1, 1, 1 << 255, True) == 1


def test_input_token1_tenth():
    assert (
        get_next_sqrt_price_from_input(Q96, ONE_ETHER, ONE_ETHER // 10, False)
        == 87150978765690771352898345369
    )


def test_input_token0_tenth():
    assert (
        get_next_sqrt_price_from_input(Q96, ONE_ETHER, ONE_ETHER // 10, True)
        == 72025602285694852357767227579
    )


def test_input_token1_overflow_of_u160_raises():
    with pytest.raises(SafeCastToU160OverflowError):
        get_next_sqrt_price_from_input(MAX_SQRT_RATIO, 1, 1 << 64, False)


def test_output_token0_too_large_raises():
    with pytest.raises(ProductDivAmountError):
        get_next_sqrt_price_from_output(Q96, 1, 1, False)


def test_output_token1_too_large_raises():
    with pytest.raises(SqrtPriceIsLteQuotientError):
        get_next_sqrt_price_from_output(Q96, 1, 1, True)


def test_amount_0_delta_zero_price_raises():
    with pytest.raises(SqrtPriceIsZeroError):
        get_amount_0_delta(0, Q96, 1, True)


def test_amount_deltas_equal_prices_are_zero():
    assert get_amount_0_delta(Q96, Q96, ONE_ETHER, True) == 0
    assert get_amount_1_delta(Q96, Q96, ONE_ETHER, True) == 0


def test_amount_1_delta_doubling_price_equals_liquidity():
    assert get_amount_1_delta(Q96, 2 * Q96, ONE_ETHER, True) == ONE_ETHER
    assert get_amount_1_delta(Q96, 2 * Q96, ONE_ETHER, False) == ONE_ETHER


def test_amount_0_delta_doubling_price_is_half_liquidity():
    assert 2 * get_amount_0_delta(Q96, 2 * Q96, ONE_ETHER, False) == ONE_ETHER


def test_liquidity_out_of_range_raises():
    with pytest.raises(ValueError):
        get_amount_1_delta(Q96, 2 * Q96, -1, True)
    with pytest.raises(ValueError):
        get_amount_0_delta_signed(Q96, 2 * Q96, MAX_I128 + 1)


def test_signed_minimum_liquidity_is_negative():
    result = get_amount_1_delta_signed(Q96, 2 * Q96, MIN_I128)
    assert result == -get_amount_1_delta(Q96, 2 * Q96, -MIN_I128, False)
    assert result < 0


@given(prices, prices, liquidities)
def test_amount_0_delta_symmetry_and_rounding(a, b, liquidity):
    up = get_amount_0_delta(a, b, liquidity, True)
    down = get_amount_0_delta(a, b, liquidity, False)
    assert get_amount_0_delta(b, a, liquidity, True) == up
    assert up - down in (0, 1)


@given(prices, prices, liquidities)
def test_amount_1_delta_symmetry_and_rounding(a, b, liquidity):
    up = get_amount_1_delta(a, b, liquidity, True)
    down = get_amount_1_delta(a, b, liquidity, False)
    assert get_amount_1_delta(b, a, liquidity, False) == down
    assert up - down in (0, 1)


@given(prices, prices, st.integers(MIN_I128, MAX_I128))
def test_signed_deltas_follow_liquidity_sign(a, b, liquidity):
    amount_0 = get_amount_0_delta_signed(a, b, liquidity)
    amount_1 = get_amount_1_delta_signed(a, b, liquidity)
    if liquidity >= 0:
        assert amount_0 == get_amount_0_delta(a, b, liquidity, True)
        assert amount_1 == get_amount_1_delta(a, b, liquidity, True)
    else:
        assert amount_0 == -get_amount_0_delta(a, b, -liquidity, False)
        assert amount_1 == -get_amount_1_delta(a, b, -liquidity, False)


@given(prices, liquidities, st.integers(1, 1 << 128))
def test_input_token0_lowers_price_without_overspending(price, liquidity, amount):
    new_price = get_next_sqrt_price_from_input(price, liquidity, amount, True)
    assert 1 <= new_price <= price
    assert get_amount_0_delta(new_price, price, liquidity, True) <= amount


@given(prices, st.integers(1 << 64, MAX_U128), st.integers(1, 1 << 64))
def test_input_token1_raises_price_without_overspending(price, liquidity, amount):
    new_price = get_next_sqrt_price_from_input(price, liquidity, amount, False)
    assert new_price >= price
    assert get_amount_1_delta(price, new_price, liquidity, True) <= amount


@given(
    st.integers(Q96, MAX_SQRT_RATIO - 1),
    st.integers(1 << 96, MAX_U128),
    st.integers(1, 1 << 64),
)
def test_output_token1_lowers_price_enough(price, liquidity, amount):
    new_price = get_next_sqrt_price_from_output(price, liquidity, amount, True)
    assert new_price < price
    assert get_amount_1_delta(new_price, price, liquidity, False) >= amount