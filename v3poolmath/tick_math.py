"""Conversion between ticks and Q64.96 square-root price ratios."""

from .bit_math import most_significant_bit
from .errors import SqrtRatioOutOfBoundsError, TickOutOfBoundsError
from .full_math import MAX_U256

MIN_TICK = -887272
MAX_TICK = 887272

MIN_SQRT_RATIO = 4295128739
"""Value of get_sqrt_ratio_at_tick(MIN_TICK)."""
MAX_SQRT_RATIO = 1461446703485210103287273052203988822378723970342
"""Value of get_sqrt_ratio_at_tick(MAX_TICK)."""

_ODD_TICK_RATIO = 0xFFFCB933BD6FAD37AA2D162D1A594001

# 2**128 / 1.0001 ** (2 ** (i - 1)) for bits 1..19 of the absolute tick.
_BIT_FACTORS = (
    (0x2, 0xFFF97272373D413259A46990580E213A),
    (0x4, 0xFFF2E50F5F656932EF12357CF3C7FDCC),
    (0x8, 0xFFE5CACA7E10E4E61C3624EAA0941CD0),
    (0x10, 0xFFCB9843D60F6159C9DB58835C926644),
    (0x20, 0xFF973B41FA98C081472E6896DFB254C0),
    (0x40, 0xFF2EA16466C96A3843EC78B326B52861),
    (0x80, 0xFE5DEE046A99A2A811C461F1969C3053),
    (0x100, 0xFCBE86C7900A88AEDCFFC83B479AA3A4),
    (0x200, 0xF987A7253AC413176F2B074CF7815E54),
    (0x400, 0xF3392B0822B70005940C7A398E4B70F3),
    (0x800, 0xE7159475A2C29B7443B29C7FA6E889D9),
    (0x1000, 0xD097F3BDFD2022B8845AD8F792AA5825),
    (0x2000, 0xA9F746462D870FDF8A65DC1F90E061E5),
    (0x4000, 0x70D869A156D2A1B890BB3DF62BAF32F7),
    (0x8000, 0x31BE135F97D08FD981231505542FCFA6),
    (0x10000, 0x9AA508B5B7A84E1C677DE54F3E99BC9),
    (0x20000, 0x5D6AF8DEDB81196699C329225EE604),
    (0x40000, 0x2216E584F5FA1EA926041BEDFE98),
    (0x80000, 0x48A170391F7DC42444E8FA2),
)

# 2**64 / log_2(sqrt(1.0001))
_LOG_SQRT10001_FACTOR = 255738958999603826347141
_TICK_LOW_OFFSET = 3402992956809132418596140100660247210
_TICK_HIGH_OFFSET = 291339464771989622907027621153398088495


def get_sqrt_ratio_at_tick(tick: int) -> int:
    """Return sqrt(1.0001) ** tick as a Q64.96 value, rounded up."""
    abs_tick = abs(tick)
    if abs_tick > MAX_TICK:
        raise TickOutOfBoundsError()

    ratio = _ODD_TICK_RATIO if abs_tick & 0x1 else 1 << 128
    for bit, factor in _BIT_FACTORS:
        if abs_tick & bit:
            ratio = (ratio * factor) >> 128

    if tick > 0:
        ratio = MAX_U256 // ratio

    return (ratio + 0xFFFFFFFF) >> 32


def get_tick_at_sqrt_ratio(sqrt_ratio_x96: int) -> int:
    """Return the greatest tick whose sqrt ratio is at most sqrt_ratio_x96."""
    if not MIN_SQRT_RATIO <= sqrt_ratio_x96 < MAX_SQRT_RATIO:
        raise SqrtRatioOutOfBoundsError()

    msb = most_significant_bit(sqrt_ratio_x96)

    # Integer part of log_2(sqrt_ratio) as a signed 64.64 fixed-point number.
    log_2_x64 = (msb - 96) << 64

    # The 128 most significant bits of the ratio: 2**128 > r >= 2**127.
    r = (sqrt_ratio_x96 << 96) >> (msb - 31)

    # Fourteen binary digits of the fractional part by repeated squaring.
    for position in range(63, 49, -1):
        square = r * r
        f = square >> 255
        log_2_x64 |= f << position
        r = square >> (f + 127)

    log_sqrt10001 = log_2_x64 * _LOG_SQRT10001_FACTOR
    tick_low = (log_sqrt10001 - _TICK_LOW_OFFSET) >> 128
    tick_high = (log_sqrt10001 + _TICK_HIGH_OFFSET) >> 128

    if tick_low == tick_high:
        return tick_low
    return tick_high - int(get_sqrt_ratio_at_tick(tick_high) > sqrt_ratio_x96)