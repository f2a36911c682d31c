"""Queries over sorted sequences of initialized ticks.

A tick is any object with integer ``index`` and ``liquidity_net`` attributes.
The sequence is expected to be sorted by ``index``.
"""

from bisect import bisect_right
from collections.abc import Sequence
from itertools import pairwise
from typing import Protocol, TypeVar


class _TickLike(Protocol):
    index: int
    liquidity_net: int


T = TypeVar("T", bound=_TickLike)


class TickListError(ValueError):
    """A tick list is malformed or a query on it cannot be answered."""


def _index(tick: _TickLike) -> int:
    return tick.index


def _require_non_empty(ticks: Sequence[_TickLike]) -> None:
    if not ticks:
        raise TickListError("LENGTH")


def validate_list(ticks: Sequence[_TickLike], tick_spacing: int) -> None:
    """Raise TickListError unless the ticks are spaced, sorted and net to zero liquidity."""
    if tick_spacing <= 0:
        raise TickListError("TICK_SPACING_NONZERO")
    if any(tick.index % tick_spacing != 0 for tick in ticks):
        raise TickListError("TICK_SPACING")
    if any(later.index < earlier.index for earlier, later in pairwise(ticks)):
        raise TickListError("SORTED")
    if sum(tick.liquidity_net for tick in ticks) != 0:
        raise TickListError("ZERO_NET")


def is_below_smallest(ticks: Sequence[_TickLike], tick: int) -> bool:
    """True if `tick` lies below the first tick of the list."""
    _require_non_empty(ticks)
    return tick < ticks[0].index


def is_at_or_above_largest(ticks: Sequence[_TickLike], tick: int) -> bool:
    """True if `tick` lies at or above the last tick of the list."""
    _require_non_empty(ticks)
    return tick >= ticks[-1].index


def binary_search_by_tick(ticks: Sequence[_TickLike], tick: int) -> int:
    """Position of the largest tick whose index is less than or equal to `tick`."""
    if is_below_smallest(ticks, tick):
        raise TickListError("BELOW_SMALLEST")
    return bisect_right(ticks, tick, key=_index) - 1


def get_tick(ticks: Sequence[T], index: int) -> T:
    """Return the tick with exactly this index; raise TickListError if absent."""
    found = ticks[binary_search_by_tick(ticks, index)]
    if found.index != index:
        raise TickListError("NOT_CONTAINED")
    return found


def next_initialized_tick(ticks: Sequence[T], tick: int, lte: bool) -> T:
    """Next tick at or below `tick` when `lte`, otherwise strictly above it."""
    if lte:
        if is_below_smallest(ticks, tick):
            raise TickListError("BELOW_SMALLEST")
        if is_at_or_above_largest(ticks, tick):
            return ticks[-1]
        return ticks[binary_search_by_tick(ticks, tick)]

    if is_at_or_above_largest(ticks, tick):
        raise TickListError("AT_OR_ABOVE_LARGEST")
    if is_below_smallest(ticks, tick):
        return ticks[0]
    return ticks[binary_search_by_tick(ticks, tick) + 1]


def next_initialized_tick_within_one_word(
    ticks: Sequence[_TickLike], tick: int, lte: bool, tick_spacing: int
) -> tuple[int, bool]:
    """Next initialized tick within the same 256-tick word, and whether it is initialized.

    When no initialized tick lies within the word, the word boundary is returned
    with ``False``.
    """
    compressed = tick // tick_spacing
    if lte:
        word_pos = compressed >> 8
        minimum = (word_pos << 8) * tick_spacing
        if is_below_smallest(ticks, tick):
            return minimum, False
        index = next_initialized_tick(ticks, tick, True).index
        result = max(minimum, index)
        return result, result == index

    word_pos = (compressed + 1) >> 8
    maximum = (((word_pos + 1) << 8) - 1) * tick_spacing
    if is_at_or_above_largest(ticks, tick):
        return maximum, False
    index = next_initialized_tick(ticks, tick, False).index
    result = min(maximum, index)
    return result, result == index