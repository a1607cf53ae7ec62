"""FX pricing library: currency amounts, curves, rates provider, products, pricers and risk."""

from fxpricing.currency import CurrencyAmount, CurrencyPair, FxRate, MultiCurrencyAmount
from fxpricing.curves import LogLinearDiscountCurve, ZeroRateCurve
from fxpricing.engine import PricingEngine, create_default_engine
from fxpricing.errors import MissingMarketDataError, UndefinedParSpreadError
from fxpricing.interfaces import Curve, Instrument, Pricer, RatesProvider, RiskMeasure
from fxpricing.pricers import BasePricer, DiscountingFxSinglePricer, DiscountingFxSwapPricer
from fxpricing.pricing import (
    Trade,
    currency_exposure,
    current_cash,
    curve_parameter_sensitivity,
    par_spread,
    present_value,
    present_value_sensitivity,
)
from fxpricing.products.fx import FxSingle
from fxpricing.products.fx_swap import FxSwap
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk import (
    CurveSensitivity,
    FiniteDifferenceCurveSensitivity,
    FiniteDifferenceSensitivityCalculator,
    PV01Parallel,
    curve_sensitivity,
    fd_curve_sensitivity,
    pv01_parallel,
)
from fxpricing.sensitivity import (
    CurveParameterSensitivities,
    CurveParameterSensitivity,
    DiscountFactorSensitivity,
    PointSensitivities,
)

__all__ = [
    "Curve",
    "Instrument",
    "Pricer",
    "RatesProvider",
    "RiskMeasure",
    "CurrencyAmount",
    "CurrencyPair",
    "FxRate",
    "MultiCurrencyAmount",
    "ZeroRateCurve",
    "LogLinearDiscountCurve",
    "ImmutableRatesProvider",
    "MissingMarketDataError",
    "UndefinedParSpreadError",
    "DiscountFactorSensitivity",
    "PointSensitivities",
    "CurveParameterSensitivity",
    "CurveParameterSensitivities",
    "PricingEngine",
    "create_default_engine",
    "BasePricer",
    "DiscountingFxSinglePricer",
    "DiscountingFxSwapPricer",
    "Trade",
    "present_value",
    "currency_exposure",
    "par_spread",
    "present_value_sensitivity",
    "current_cash",
    "curve_parameter_sensitivity",
    "FxSingle",
    "FxSwap",
    "CurveSensitivity",
    "FiniteDifferenceCurveSensitivity",
    "FiniteDifferenceSensitivityCalculator",
    "PV01Parallel",
    "curve_sensitivity",
    "fd_curve_sensitivity",
    "pv01_parallel",
]
