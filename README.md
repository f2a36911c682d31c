# v3poolmath

Exact integer math for concentrated-liquidity pools. Every value is a plain
Python `int`, and the functions reproduce the 256-bit fixed-point behaviour of
the on-chain pool contracts: the same rounding, the same bounds and the same
failure cases. There are no runtime dependencies.

## Install

```
pip install v3poolmath
```

To run the test suite:

```
pip install "v3poolmath[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `v3poolmath.full_math` | `mul_div`, `mul_div_rounding_up`, `mul_div_96`; constants `Q96`, `Q128`, `Q192`, `MAX_U160`, `MAX_U256` |
| `v3poolmath.bit_math` | `most_significant_bit`, `least_significant_bit` |
| `v3poolmath.tick_math` | `get_sqrt_ratio_at_tick`, `get_tick_at_sqrt_ratio`; `MIN_TICK`, `MAX_TICK`, `MIN_SQRT_RATIO`, `MAX_SQRT_RATIO` |
| `v3poolmath.liquidity_math` | `add_delta` |
| `v3poolmath.sqrt_price_math` | next-price functions and amount deltas, unsigned and signed |
| `v3poolmath.swap_math` | `compute_swap_step`, the `SwapStep` named tuple, `MAX_FEE` |
| `v3poolmath.encode_sqrt_ratio` | `encode_sqrt_ratio_x96` |
| `v3poolmath.max_liquidity` | `max_liquidity_for_amounts` and its per-token helpers |
| `v3poolmath.nearest_usable_tick` | `nearest_usable_tick` |
| `v3poolmath.fees` | `FeeGrowthOutside`, `get_fee_growth_inside`, `get_tokens_owed` |
| `v3poolmath.tick_list` | queries over sorted tick sequences and `TickListError` |
| `v3poolmath.errors` | `MathError` and its subclasses |

## Examples

Prices and ticks:

```python
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96
from v3poolmath.tick_math import get_sqrt_ratio_at_tick, get_tick_at_sqrt_ratio

assert encode_sqrt_ratio_x96(1, 1) == 1 << 96
assert get_sqrt_ratio_at_tick(0) == 1 << 96
assert get_tick_at_sqrt_ratio(1 << 96) == 0
```

Liquidity for a range:

```python
from v3poolmath.encode_sqrt_ratio import encode_sqrt_ratio_x96
from v3poolmath.max_liquidity import max_liquidity_for_amounts

liquidity = max_liquidity_for_amounts(
    encode_sqrt_ratio_x96(1, 1),
    encode_sqrt_ratio_x96(100, 110),
    encode_sqrt_ratio_x96(110, 100),
    100,
    200,
    True,
)
assert liquidity == 2148
```

One swap step. A non-negative `amount_remaining` is an exact input, a
negative one an exact output; the fee is in hundredths of a bip:

```python
from v3poolmath.swap_math import compute_swap_step

step = compute_swap_step(
    1 << 96,                  # current sqrt price
    (1 << 96) * 101 // 100,   # target sqrt price
    10**18,                   # liquidity
    10**15,                   # amount remaining
    3000,                     # fee
)
print(step.sqrt_ratio_next_x96, step.amount_in, step.amount_out, step.fee_amount)
```

Rounding a tick to the pool's spacing:

```python
from v3poolmath.nearest_usable_tick import nearest_usable_tick

assert nearest_usable_tick(5, 10) == 10
assert nearest_usable_tick(-5, 10) == 0
```

Tick lists work on any sequence, sorted by index, of objects with integer
`index` and `liquidity_net` attributes:

```python
from dataclasses import dataclass

from v3poolmath.tick_list import next_initialized_tick_within_one_word, validate_list
from v3poolmath.tick_math import MAX_TICK, MIN_TICK


@dataclass(frozen=True)
class Tick:
    index: int
    liquidity_net: int


ticks = [Tick(MIN_TICK + 1, 10), Tick(0, -5), Tick(MAX_TICK - 1, -5)]
validate_list(ticks, 1)
assert next_initialized_tick_within_one_word(ticks, 0, True, 1) == (0, True)
assert next_initialized_tick_within_one_word(ticks, 0, False, 1) == (255, False)
```

## Errors

Failures of the fixed-point routines (full-precision division, tick math,
sqrt-price math, swap steps, `add_delta`) raise subclasses of
`v3poolmath.errors.MathError`, itself an `ArithmeticError`, for example
`TickOutOfBoundsError`, `SqrtRatioOutOfBoundsError`, `DenominatorIsZeroError`
or `LiquidityUnderflowError`.

Other failures raise standard exceptions:

- `ValueError` for an argument outside its integer range, a zero argument to
  `most_significant_bit` / `least_significant_bit` (message `"ZERO"`), and bad
  spacing or bounds in `nearest_usable_tick` (`"TICK_SPACING"`, `"TICK_BOUND"`);
- `TickListError`, a `ValueError`, for malformed tick lists and unanswerable
  queries (`"SORTED"`, `"ZERO_NET"`, `"BELOW_SMALLEST"` and so on);
- `ZeroDivisionError` from `encode_sqrt_ratio_x96` when `amount0` is zero.

```python
from v3poolmath.errors import TickOutOfBoundsError
from v3poolmath.tick_math import get_sqrt_ratio_at_tick

try:
    get_sqrt_ratio_at_tick(887273)
except TickOutOfBoundsError:
    pass
```

## What it does not do

This package is the arithmetic layer only. It has no token, price, pool or
position objects, does not convert ticks to human-readable prices, does not
compute pool addresses, and does not talk to any chain or network.