"""
Rates provider: an immutable market snapshot for discounting.

`ImmutableRatesProvider` holds:
- a valuation date,
- one discount curve per currency (any object satisfying the Curve protocol),
- FX spot rates keyed by currency pair (e.g. "USD/KRW").

Dates are turned into curve times with an ACT/365F style year fraction from
the valuation date. The provider owns the curves, so it also owns the chain
rule from point sensitivities to curve parameter sensitivities.
"""

from __future__ import annotations

import logging
from datetime import date
from types import MappingProxyType
from typing import Mapping

from fxpricing.config import get_settings
from fxpricing.currency import CurrencyPair, FxRate
from fxpricing.errors import MissingMarketDataError
from fxpricing.interfaces import Curve
from fxpricing.sensitivity import (
    CurveParameterSensitivities,
    CurveParameterSensitivity,
    PointSensitivities,
)

logger = logging.getLogger(__name__)


def _check_curve_names(curves: Mapping[str, Curve]) -> None:
    """Curve names key the parameter sensitivities, so each may serve one currency only."""
    seen: dict[str, str] = {}
    for currency, curve in curves.items():
        if curve.name in seen:
            raise ValueError(
                f"curve name {curve.name!r} used for both {seen[curve.name]} and {currency}"
            )
        seen[curve.name] = currency


class ImmutableRatesProvider:
    """
    Market snapshot: valuation date, discount curves (by currency) and FX spot rates.
    Immutable-style: with_discount_curve / with_fx_rate return new providers.
    """

    def __init__(
        self,
        valuation_date: date,
        discount_curves: dict[str, Curve] | None = None,
        fx_rates: dict[str | CurrencyPair, float] | None = None,
        day_count_basis: float | None = None,
    ) -> None:
        self._valuation_date = valuation_date
        # Own copies: callers may keep mutating their dicts.
        self._discount_curves: dict[str, Curve] = dict(discount_curves or {})
        _check_curve_names(self._discount_curves)
        self._fx_rates: dict[CurrencyPair, float] = {}
        for pair, rate in (fx_rates or {}).items():
            fx = FxRate(CurrencyPair.parse(pair) if isinstance(pair, str) else pair, rate)
            self._fx_rates[fx.pair] = fx.rate
        self.day_count_basis = (
            day_count_basis if day_count_basis is not None else get_settings().day_count_basis
        )

    @property
    def valuation_date(self) -> date:
        return self._valuation_date

    @property
    def discount_curves(self) -> Mapping[str, Curve]:
        """Read-only view of the discount curves by currency."""
        return MappingProxyType(self._discount_curves)

    @property
    def fx_rates(self) -> Mapping[CurrencyPair, float]:
        """Read-only view of the FX spot rates by pair."""
        return MappingProxyType(self._fx_rates)

    def year_fraction(self, payment_date: date) -> float:
        """Year fraction from the valuation date (ACT/basis)."""
        return (payment_date - self._valuation_date).days / self.day_count_basis

    def discount_curve(self, currency: str) -> Curve:
        """Return the discount curve of currency. Raises MissingMarketDataError if absent."""
        try:
            return self._discount_curves[currency]
        except KeyError:
            raise MissingMarketDataError(
                f"no discount curve for {currency}; "
                f"available: {sorted(self._discount_curves)}"
            ) from None

    def discount_factor(self, currency: str, payment_date: date) -> float:
        """
        Discount factor of currency at payment_date.

        Dates on or before the valuation date discount at 1.0.
        """
        curve = self.discount_curve(currency)
        t = self.year_fraction(payment_date)
        if t <= 0:
            return 1.0
        return curve.df(t)

    def fx_rate(self, base: str, counter: str) -> float:
        """Spot FX rate, counter units per base unit; inverse quotes are used when needed."""
        if base == counter:
            return 1.0
        pair = CurrencyPair(base, counter)
        if pair in self._fx_rates:
            return self._fx_rates[pair]
        inverse = pair.inverse()
        if inverse in self._fx_rates:
            return 1.0 / self._fx_rates[inverse]
        raise MissingMarketDataError(
            f"no FX rate for {pair}; available: {sorted(str(p) for p in self._fx_rates)}"
        )

    def curve_parameter_sensitivity(
        self, sensitivities: PointSensitivities
    ) -> CurveParameterSensitivities:
        """
        Chain rule: for each record, sensitivity * dDF/dp of the referenced curve.

        Records on curves sharing a name and value currency are summed.
        """
        result = CurveParameterSensitivities.empty()
        for point in sensitivities:
            curve = self.discount_curve(point.curve_currency)
            t = self.year_fraction(point.date)
            if t <= 0:
                continue
            jacobian = curve.df_parameter_sensitivity(t)
            result = result.combined_with(
                CurveParameterSensitivity(
                    curve.name,
                    point.currency,
                    tuple(point.sensitivity * d for d in jacobian),
                )
            )
        logger.debug(
            "Converted %d point sensitivities into %d curve entries",
            len(sensitivities),
            len(result),
        )
        return result

    def with_discount_curve(self, currency: str, curve: Curve) -> ImmutableRatesProvider:
        """Return a new provider with the curve of currency replaced/added."""
        # Copy-on-write: other curves are shared read-only.
        new_curves = dict(self._discount_curves)
        new_curves[currency] = curve
        return ImmutableRatesProvider(
            valuation_date=self._valuation_date,
            discount_curves=new_curves,
            fx_rates=dict(self._fx_rates),
            day_count_basis=self.day_count_basis,
        )

    def with_fx_rate(self, pair: str, rate: float) -> ImmutableRatesProvider:
        """Return a new provider with the FX rate of pair updated/added."""
        new_fx: dict[str | CurrencyPair, float] = dict(self._fx_rates)
        new_pair = CurrencyPair.parse(pair)
        new_fx.pop(new_pair.inverse(), None)
        new_fx[new_pair] = rate
        return ImmutableRatesProvider(
            valuation_date=self._valuation_date,
            discount_curves=self._discount_curves,
            fx_rates=new_fx,
            day_count_basis=self.day_count_basis,
        )

    def __repr__(self) -> str:
        return (
            f"ImmutableRatesProvider(valuation_date={self._valuation_date}, "
            f"curves={sorted(self._discount_curves)}, "
            f"fx={sorted(str(p) for p in self._fx_rates)})"
        )
