"""Exceptions raised by the fixed-point pool math."""


class MathError(ArithmeticError):
    """Base class for every failure of the pool math routines."""

    default_message = "pool math error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class DenominatorIsZeroError(MathError):
    """A division was requested with a zero denominator."""

    default_message = "denominator is zero"


class DenominatorIsLteProdOneError(MathError):
    """The quotient of a full-precision division does not fit in 256 bits."""

    default_message = "denominator is less than or equal to prod_1"


class ResultIsU256MaxError(MathError):
    """Rounding up would push the result past the largest 256-bit value."""

    default_message = "result is U256::MAX"


class SafeCastToU160OverflowError(MathError):
    """A value does not fit in 160 bits."""

    default_message = "overflow when casting to U160"


class ProductDivAmountError(MathError):
    """The price product overflowed or exceeded the liquidity numerator."""

    default_message = "require((product = amount * sqrtPX96) / amount == sqrtPX96 && numerator1 > product)"


class SqrtPriceIsLteQuotientError(MathError):
    """The square-root price would drop to or below zero."""

    default_message = "sqrt price is less than or equal to quotient"


class SqrtPriceIsZeroError(MathError):
    """A square-root price of zero was supplied."""

    default_message = "sqrt price is zero"


class LiquidityIsZeroError(MathError):
    """A liquidity of zero was supplied."""

    default_message = "liquidity is zero"


class TickOutOfBoundsError(MathError):
    """The tick lies outside [MIN_TICK, MAX_TICK]."""

    default_message = "T: tick out of bounds"


class SqrtRatioOutOfBoundsError(MathError):
    """The square-root ratio lies outside [MIN_SQRT_RATIO, MAX_SQRT_RATIO)."""

    default_message = "R: sqrt ratio out of bounds"


class LiquidityOverflowError(MathError):
    """Adding liquidity overflowed 128 bits."""

    default_message = "liquidity add overflow"


class LiquidityUnderflowError(MathError):
    """Removing liquidity went below zero."""

    default_message = "liquidity sub underflow"