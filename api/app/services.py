"""Service layer: convert GraphQL inputs to pricing library objects and run pricing/risk."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fxpricing.config import get_settings
from fxpricing.currency import (
    CurrencyAmount,
    CurrencyPair,
    FxRate,
    MultiCurrencyAmount,
    validate_currency,
)
from fxpricing.curves import LogLinearDiscountCurve, ZeroRateCurve
from fxpricing.errors import MissingMarketDataError, UndefinedParSpreadError
from fxpricing.interfaces import Curve
from fxpricing.pricing import (
    Trade,
    currency_exposure,
    current_cash,
    par_spread,
    present_value,
)
from fxpricing.products.fx import FxSingle
from fxpricing.products.fx_swap import FxSwap
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk import curve_sensitivity, fd_curve_sensitivity, pv01_parallel
from fxpricing.sensitivity import CurveParameterSensitivities

from app.types import (
    CurrencyAmountType,
    CurveInput,
    CurveSensitivityType,
    FxSingleInput,
    FxSwapInput,
    MarketInput,
    PricingResult,
    RiskMeasures,
)

logger = logging.getLogger(__name__)


def _curve_from_input(c: CurveInput, valuation_date: date, basis: float) -> Curve:
    """Build a ZeroRateCurve or LogLinearDiscountCurve from GraphQL CurveInput."""
    validate_currency(c.currency)
    name = c.name or f"{c.currency}-DSC"
    if (c.zero_rates is None) == (c.discount_factors is None):
        raise ValueError(f"curve {name}: give exactly one of zeroRates or discountFactors")
    pillars = [(d - valuation_date).days / basis for d in c.pillar_dates]
    if any(t <= 0 for t in pillars):
        raise ValueError(f"curve {name}: pillar dates must be after the valuation date")
    if c.zero_rates is not None:
        return ZeroRateCurve(name=name, pillars=pillars, zero_rates_cc=list(c.zero_rates))
    return LogLinearDiscountCurve(
        name=name, pillars=pillars, discount_factors=list(c.discount_factors)
    )


def market_from_input(m: MarketInput) -> ImmutableRatesProvider:
    """Build ImmutableRatesProvider from GraphQL MarketInput."""
    if not m.curves:
        raise ValueError("market.curves must not be empty")
    basis = get_settings().day_count_basis
    curves: dict[str, Curve] = {}
    for c in m.curves:
        if c.currency in curves:
            raise ValueError(f"market.curves: more than one curve for {c.currency}")
        curves[c.currency] = _curve_from_input(c, m.valuation_date, basis)
    fx_rates: dict[str, float] = {}
    if m.fx_rates:
        for fx in m.fx_rates:
            fx_rates[fx.pair] = fx.rate
    return ImmutableRatesProvider(
        valuation_date=m.valuation_date,
        discount_curves=curves,
        fx_rates=fx_rates,
        day_count_basis=basis,
    )


def _validate_curve_in_market(
    provider: ImmutableRatesProvider, currency: str, context: str
) -> None:
    if currency not in provider.discount_curves:
        raise ValueError(
            f"{context}: no discount curve for '{currency}' in market. "
            f"Available curves: {sorted(provider.discount_curves)}"
        )


def _validate_fx_rate_in_market(
    provider: ImmutableRatesProvider, pair: CurrencyPair, context: str
) -> None:
    try:
        provider.fx_rate(pair.base, pair.counter)
    except MissingMarketDataError as err:
        raise ValueError(f"{context}: {err.args[0]}") from err


def _amounts(mca: MultiCurrencyAmount) -> list[CurrencyAmountType]:
    return [CurrencyAmountType(currency=ca.currency, amount=ca.amount) for ca in mca]


def _sensitivities(sens: CurveParameterSensitivities) -> list[CurveSensitivityType]:
    return [
        CurveSensitivityType(
            curve_name=s.curve_name, currency=s.currency, sensitivity=list(s.sensitivity)
        )
        for s in sens
    ]


def _par_spread_or_none(trade: Trade, provider: ImmutableRatesProvider) -> Optional[float]:
    try:
        return par_spread(trade, provider)
    except UndefinedParSpreadError as err:
        logger.warning("Par spread not reported: %s", err)
        return None


def _price_trade(
    trade: Trade,
    provider: ImmutableRatesProvider,
    calculate_sensitivities: bool,
    calculate_fd_sensitivities: bool,
    calculate_pv01: bool,
    pv01_curve_currency: Optional[str],
    pv01_bump_bp: float,
    reporting_currency: Optional[str],
) -> PricingResult:
    pair = trade.currency_pair
    pv = present_value(trade, provider)
    result = PricingResult(
        present_value=_amounts(pv),
        currency_exposure=_amounts(currency_exposure(trade, provider)),
        current_cash=_amounts(current_cash(trade, provider)),
        par_spread=_par_spread_or_none(trade, provider),
    )
    if not (calculate_sensitivities or calculate_fd_sensitivities or calculate_pv01):
        return result

    risk_measures = RiskMeasures()
    if calculate_sensitivities:
        risk_measures.curve_sensitivities = _sensitivities(curve_sensitivity(trade, provider))
    if calculate_fd_sensitivities:
        fd = CurveParameterSensitivities.empty()
        for currency in pv.currencies:
            fd = fd.combined_with(fd_curve_sensitivity(trade, provider, currency))
        risk_measures.fd_curve_sensitivities = _sensitivities(fd)
    if calculate_pv01:
        curve_currency = pv01_curve_currency or pair.counter
        _validate_curve_in_market(provider, curve_currency, "PV01")
        pv01 = pv01_parallel(
            trade,
            provider,
            curve_currency,
            reporting_currency or curve_currency,
            bump_bp=pv01_bump_bp,
        )
        risk_measures.pv01 = CurrencyAmountType(currency=pv01.currency, amount=pv01.amount)
    result.risk_measures = risk_measures
    return result


def price_fx_single(
    forward: FxSingleInput,
    market: MarketInput,
    calculate_sensitivities: bool = False,
    calculate_fd_sensitivities: bool = False,
    calculate_pv01: bool = False,
    pv01_curve_currency: Optional[str] = None,
    pv01_bump_bp: float = 1.0,
    reporting_currency: Optional[str] = None,
) -> PricingResult:
    """Price an FX forward and optionally compute curve sensitivities and PV01."""
    provider = market_from_input(market)
    rate = FxRate(CurrencyPair.parse(forward.pair), forward.rate)
    trade = FxSingle.of(CurrencyAmount(forward.currency, forward.amount), rate, forward.payment_date)
    _validate_curve_in_market(provider, rate.pair.base, "FxSingle")
    _validate_curve_in_market(provider, rate.pair.counter, "FxSingle")
    _validate_fx_rate_in_market(provider, rate.pair, "FxSingle")
    logger.info(
        "Pricing FX forward %s paying %s as of %s",
        rate.pair,
        trade.payment_date,
        provider.valuation_date,
    )
    return _price_trade(
        trade,
        provider,
        calculate_sensitivities,
        calculate_fd_sensitivities,
        calculate_pv01,
        pv01_curve_currency,
        pv01_bump_bp,
        reporting_currency,
    )


def price_fx_swap(
    swap: FxSwapInput,
    market: MarketInput,
    calculate_sensitivities: bool = False,
    calculate_fd_sensitivities: bool = False,
    calculate_pv01: bool = False,
    pv01_curve_currency: Optional[str] = None,
    pv01_bump_bp: float = 1.0,
    reporting_currency: Optional[str] = None,
) -> PricingResult:
    """Price an FX swap and optionally compute curve sensitivities and PV01."""
    if (swap.far_rate is None) == (swap.forward_points is None):
        raise ValueError("swap: give exactly one of farRate or forwardPoints")
    provider = market_from_input(market)
    pair = CurrencyPair.parse(swap.pair)
    amount = CurrencyAmount(swap.currency, swap.amount)
    near_rate = FxRate(pair, swap.near_rate)
    if swap.far_rate is not None:
        trade = FxSwap.of(
            amount, near_rate, swap.near_date, FxRate(pair, swap.far_rate), swap.far_date
        )
    else:
        trade = FxSwap.of_forward_points(
            amount, near_rate, swap.forward_points, swap.near_date, swap.far_date
        )
    _validate_curve_in_market(provider, pair.base, "FxSwap")
    _validate_curve_in_market(provider, pair.counter, "FxSwap")
    _validate_fx_rate_in_market(provider, pair, "FxSwap")
    logger.info(
        "Pricing FX swap %s %s/%s as of %s",
        pair,
        swap.near_date,
        swap.far_date,
        provider.valuation_date,
    )
    return _price_trade(
        trade,
        provider,
        calculate_sensitivities,
        calculate_fd_sensitivities,
        calculate_pv01,
        pv01_curve_currency,
        pv01_bump_bp,
        reporting_currency,
    )
