"""Exceptions raised by the pricing library."""


class MissingMarketDataError(KeyError):
    """Raised by a rates provider that cannot supply a curve or FX rate."""


class UndefinedParSpreadError(ArithmeticError):
    """Raised when a par spread has no finite value (zero notional or zero discount factor)."""
