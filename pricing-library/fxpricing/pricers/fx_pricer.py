"""Pricer for FX single forwards (discounting)."""

from __future__ import annotations

import logging

from fxpricing.currency import FxRate, MultiCurrencyAmount
from fxpricing.errors import UndefinedParSpreadError
from fxpricing.interfaces import Instrument, RatesProvider
from fxpricing.pricers.base import BasePricer
from fxpricing.products.fx import FxSingle
from fxpricing.sensitivity import DiscountFactorSensitivity, PointSensitivities

logger = logging.getLogger(__name__)


class DiscountingFxSinglePricer(BasePricer):
    """Pricer for FX forwards: each leg discounted on its own currency curve."""

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, FxSingle)

    @staticmethod
    def _is_settled(fx: FxSingle, provider: RatesProvider) -> bool:
        return fx.payment_date <= provider.valuation_date

    def present_value(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """
        FX forward: PV_base = N_base * DF_base(T), PV_counter = N_counter * DF_counter(T).
        Empty once the payment date is on or before the valuation date.
        """
        assert isinstance(instrument, FxSingle)
        fx = instrument
        if self._is_settled(fx, provider):
            logger.debug("FX forward paying %s has settled; PV is empty", fx.payment_date)
            return MultiCurrencyAmount.empty()
        base = fx.base_amount
        counter = fx.counter_amount
        pv_base = base.multiplied_by(provider.discount_factor(base.currency, fx.payment_date))
        pv_counter = counter.multiplied_by(
            provider.discount_factor(counter.currency, fx.payment_date)
        )
        return MultiCurrencyAmount.of(pv_base, pv_counter)

    def currency_exposure(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """Each leg's PV is already an exposure in its own currency."""
        return self.present_value(instrument, provider)

    def par_spread(self, instrument: Instrument, provider: RatesProvider) -> float:
        """
        Spread s such that the forward at rate + s has zero PV:
        s = PV_in_counter / (N_base * DF_counter(T)).
        """
        assert isinstance(instrument, FxSingle)
        fx = instrument
        counter_ccy = fx.counter_amount.currency
        pv_counter = self.present_value(fx, provider).converted_to(counter_ccy, provider)
        df_counter = provider.discount_factor(counter_ccy, fx.payment_date)
        notional = fx.notional
        if notional == 0 or df_counter == 0:
            raise UndefinedParSpreadError(
                f"par spread undefined: notional={notional}, discount factor={df_counter}"
            )
        return pv_counter.amount / (notional * df_counter)

    def forward_fx_rate(self, instrument: Instrument, provider: RatesProvider) -> FxRate:
        """Forward rate implied by the curves: spot * DF_base(T) / DF_counter(T)."""
        assert isinstance(instrument, FxSingle)
        fx = instrument
        pair = fx.currency_pair
        spot = provider.fx_rate(pair.base, pair.counter)
        df_base = provider.discount_factor(pair.base, fx.payment_date)
        df_counter = provider.discount_factor(pair.counter, fx.payment_date)
        return FxRate(pair, spot * df_base / df_counter)

    def present_value_sensitivity(
        self, instrument: Instrument, provider: RatesProvider
    ) -> PointSensitivities:
        """
        dPV/dDF per leg. PV is linear in DF, so the sensitivity is the leg amount.
        """
        assert isinstance(instrument, FxSingle)
        fx = instrument
        if self._is_settled(fx, provider):
            return PointSensitivities.empty()
        return PointSensitivities.of(
            *(
                DiscountFactorSensitivity(
                    curve_currency=leg.currency,
                    date=fx.payment_date,
                    currency=leg.currency,
                    sensitivity=leg.amount,
                )
                for leg in (fx.base_amount, fx.counter_amount)
            )
        )

    def current_cash(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """Both leg amounts if paid on the valuation date, otherwise nothing."""
        assert isinstance(instrument, FxSingle)
        fx = instrument
        if fx.payment_date == provider.valuation_date:
            return MultiCurrencyAmount.of(fx.base_amount, fx.counter_amount)
        return MultiCurrencyAmount.empty()
