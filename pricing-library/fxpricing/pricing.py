"""
Pricing entrypoint.

Most users of the library should only need the functions below, e.g.
`present_value(trade, provider)`. They delegate to a default `PricingEngine`
instance that contains the pricing logic.

Keeping this as a thin wrapper gives you a stable, ergonomic API while still
allowing advanced users to instantiate/configure their own engines.
"""

from typing import TypeAlias

from fxpricing.currency import MultiCurrencyAmount
from fxpricing.engine import create_default_engine
from fxpricing.interfaces import RatesProvider
from fxpricing.products.fx import FxSingle
from fxpricing.products.fx_swap import FxSwap
from fxpricing.sensitivity import CurveParameterSensitivities, PointSensitivities


Trade: TypeAlias = FxSingle | FxSwap

_default_engine = create_default_engine()


def present_value(trade: Trade, provider: RatesProvider) -> MultiCurrencyAmount:
    """Return present value of trade (via default registry-based engine)."""
    return _default_engine.present_value(trade, provider)


def currency_exposure(trade: Trade, provider: RatesProvider) -> MultiCurrencyAmount:
    return _default_engine.currency_exposure(trade, provider)


def par_spread(trade: Trade, provider: RatesProvider) -> float:
    return _default_engine.par_spread(trade, provider)


def present_value_sensitivity(trade: Trade, provider: RatesProvider) -> PointSensitivities:
    return _default_engine.present_value_sensitivity(trade, provider)


def current_cash(trade: Trade, provider: RatesProvider) -> MultiCurrencyAmount:
    return _default_engine.current_cash(trade, provider)


def curve_parameter_sensitivity(
    trade: Trade, provider: RatesProvider
) -> CurveParameterSensitivities:
    """Analytic curve parameter sensitivity of the present value."""
    return _default_engine.curve_parameter_sensitivity(trade, provider)
