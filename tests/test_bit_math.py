import pytest
from hypothesis import given
from hypothesis import strategies as st

from v3poolmath.bit_math import least_significant_bit, most_significant_bit
from v3poolmath.full_math import MAX_U256

positive_u256 = st.integers(min_value=1, max_value=MAX_U256)


def test_most_significant_bit_throws_for_zero():
    with pytest.raises(ValueError, match="ZERO"):
        most_significant_bit(0)


def test_least_significant_bit_throws_for_zero():
    with pytest.raises(ValueError, match="ZERO"):
        least_significant_bit(0)


def test_rejects_values_beyond_256_bits():
    with pytest.raises(ValueError):
        most_significant_bit(MAX_U256 + 1)


@pytest.mark.parametrize("i", range(1, 256))
def test_most_significant_bit_of_power_of_two(i):
    assert most_significant_bit(1 << i) == i


@pytest.mark.parametrize("i", range(2, 256))
def test_most_significant_bit_of_all_ones(i):
    assert most_significant_bit((1 << i) - 1) == i - 1


def test_most_significant_bit_of_max():
    assert most_significant_bit(MAX_U256) == 255


@pytest.mark.parametrize("i", range(1, 256))
def test_least_significant_bit_of_power_of_two(i):
    assert least_significant_bit(1 << i) == i


@pytest.mark.parametrize("i", range(2, 256))
def test_least_significant_bit_of_all_ones(i):
    assert least_significant_bit((1 << i) - 1) == 0


def test_least_significant_bit_of_max():
    assert least_significant_bit(MAX_U256) == 0


@given(positive_u256)
def test_most_significant_bit_bounds(x):
    msb = most_significant_bit(x)
    assert 1 << msb <= x < 1 << (msb + 1)


@given(positive_u256)
def test_least_significant_bit_divides(x):
    lsb = least_significant_bit(x)
    assert x % (1 << lsb) == 0
    assert (x >> lsb) & 1 == 1