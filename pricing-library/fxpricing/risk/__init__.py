"""
Risk measures: analytic curve sensitivities and "bump and reprice" checks.

New code should use the measure classes for composability; the functions
below are thin shortcuts around them.
"""

from __future__ import annotations

from fxpricing.currency import CurrencyAmount
from fxpricing.pricing import Trade
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk.base import BaseRiskMeasure
from fxpricing.risk.curve_sensitivity import (
    CurveSensitivity,
    FiniteDifferenceCurveSensitivity,
)
from fxpricing.risk.finite_difference import FiniteDifferenceSensitivityCalculator
from fxpricing.risk.pv01 import PV01Parallel
from fxpricing.sensitivity import CurveParameterSensitivities


def curve_sensitivity(
    trade: Trade, provider: ImmutableRatesProvider
) -> CurveParameterSensitivities:
    """Analytic curve parameter sensitivity of the trade's present value."""
    return CurveSensitivity().compute(trade, provider)


def fd_curve_sensitivity(
    trade: Trade,
    provider: ImmutableRatesProvider,
    currency: str,
    epsilon: float | None = None,
) -> CurveParameterSensitivities:
    """
    Finite-difference curve parameter sensitivity of the PV in `currency`.
    Each curve parameter is shifted by epsilon in turn (forward difference).
    """
    measure = FiniteDifferenceCurveSensitivity(currency=currency, epsilon=epsilon)
    return measure.compute(trade, provider)


def pv01_parallel(
    trade: Trade,
    provider: ImmutableRatesProvider,
    curve_currency: str,
    reporting_currency: str,
    bump_bp: float = 1.0,
) -> CurrencyAmount:
    """
    PV01: change in PV when the curve is bumped by bump_bp basis points (parallel).
    bump_bp is in basis points; bump = bump_bp / 10000 (additive to zero rates).
    Returns PV(bumped) - PV(base) in reporting_currency.
    """
    measure = PV01Parallel(
        curve_currency=curve_currency,
        reporting_currency=reporting_currency,
        bump_bp=bump_bp,
    )
    return measure.compute(trade, provider)


__all__ = [
    "BaseRiskMeasure",
    "CurveSensitivity",
    "FiniteDifferenceCurveSensitivity",
    "FiniteDifferenceSensitivityCalculator",
    "PV01Parallel",
    "curve_sensitivity",
    "fd_curve_sensitivity",
    "pv01_parallel",
]
