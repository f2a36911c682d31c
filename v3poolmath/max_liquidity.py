"""Maximum liquidity obtainable for given token amounts and price bounds."""


def _ordered(sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int) -> tuple[int, int]:
    if sqrt_ratio_a_x96 > sqrt_ratio_b_x96:
        return sqrt_ratio_b_x96, sqrt_ratio_a_x96
    return sqrt_ratio_a_x96, sqrt_ratio_b_x96


def max_liquidity_for_amount0_imprecise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Liquidity for amount0, computed the way the periphery router does (imprecise)."""
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    intermediate = (lower * upper) >> 96
    return amount0 * intermediate // (upper - lower)


def max_liquidity_for_amount0_precise(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount0: int
) -> int:
    """Liquidity for amount0 at full precision."""
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    numerator = amount0 * lower * upper
    denominator = (upper - lower) << 96
    return numerator // denominator


def max_liquidity_for_amount1(
    sqrt_ratio_a_x96: int, sqrt_ratio_b_x96: int, amount1: int
) -> int:
    """Liquidity for amount1 between two prices."""
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    return (amount1 << 96) // (upper - lower)


def max_liquidity_for_amounts(
    sqrt_ratio_current_x96: int,
    sqrt_ratio_a_x96: int,
    sqrt_ratio_b_x96: int,
    amount0: int,
    amount1: int,
    use_full_precision: bool,
) -> int:
    """Maximum liquidity for both amounts given the current price and the range bounds.

    Without full precision the liquidity matches what the router can compute.
    """
    lower, upper = _ordered(sqrt_ratio_a_x96, sqrt_ratio_b_x96)
    amount0_liquidity = (
        max_liquidity_for_amount0_precise
        if use_full_precision
        else max_liquidity_for_amount0_imprecise
    )

    if sqrt_ratio_current_x96 <= lower:
        return amount0_liquidity(lower, upper, amount0)
    if sqrt_ratio_current_x96 < upper:
        liquidity0 = amount0_liquidity(sqrt_ratio_current_x96, upper, amount0)
        liquidity1 = max_liquidity_for_amount1(lower, sqrt_ratio_current_x96, amount1)
        return min(liquidity0, liquidity1)
    return max_liquidity_for_amount1(lower, upper, amount1)