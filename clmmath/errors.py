"""Exceptions raised by the pool math."""


class AmmMathError(Exception):
    """Base class for errors in the pool math."""


class TickOutOfRangeError(AmmMathError, ValueError):
    """A tick lies outside ``[MIN_TICK, MAX_TICK]``."""


class SqrtPriceOutOfRangeError(AmmMathError, ValueError):
    """A square-root price lies outside the supported range."""


class LiquidityUnderflowError(AmmMathError, ArithmeticError):
    """Removing liquidity would take it below zero."""


class LiquidityOverflowError(AmmMathError, ArithmeticError):
    """Adding liquidity would overflow its width."""