"""Pricer for FX swaps: near and far legs priced with DiscountingFxSinglePricer."""

from __future__ import annotations

from fxpricing.currency import MultiCurrencyAmount
from fxpricing.errors import UndefinedParSpreadError
from fxpricing.interfaces import Instrument, RatesProvider
from fxpricing.pricers.base import BasePricer
from fxpricing.pricers.fx_pricer import DiscountingFxSinglePricer
from fxpricing.products.fx_swap import FxSwap
from fxpricing.sensitivity import PointSensitivities


class DiscountingFxSwapPricer(BasePricer):
    """Pricer for FX swaps (sum of the two forward legs)."""

    def __init__(self, leg_pricer: DiscountingFxSinglePricer | None = None) -> None:
        self.leg_pricer = leg_pricer or DiscountingFxSinglePricer()

    def can_price(self, instrument: Instrument) -> bool:
        return isinstance(instrument, FxSwap)

    def present_value(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """PV(near) combined with PV(far)."""
        assert isinstance(instrument, FxSwap)
        swap = instrument
        pv_near = self.leg_pricer.present_value(swap.near_leg, provider)
        pv_far = self.leg_pricer.present_value(swap.far_leg, provider)
        return pv_near.combined_with(pv_far)

    def currency_exposure(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        return self.present_value(instrument, provider)

    def par_spread(self, instrument: Instrument, provider: RatesProvider) -> float:
        """
        Spread added to the far rate that makes the swap PV zero:
        s = -PV_in_counter / (N_near * DF_counter(T_far)).
        """
        assert isinstance(instrument, FxSwap)
        swap = instrument
        counter_ccy = swap.near_leg.counter_amount.currency
        pv_counter = self.present_value(swap, provider).converted_to(counter_ccy, provider)
        df_far = provider.discount_factor(counter_ccy, swap.far_leg.payment_date)
        notional = swap.near_leg.notional
        if notional == 0 or df_far == 0:
            raise UndefinedParSpreadError(
                f"par spread undefined: notional={notional}, discount factor={df_far}"
            )
        return -pv_counter.amount / (notional * df_far)

    def present_value_sensitivity(
        self, instrument: Instrument, provider: RatesProvider
    ) -> PointSensitivities:
        """Near-leg records followed by far-leg records (not merged)."""
        assert isinstance(instrument, FxSwap)
        swap = instrument
        near = self.leg_pricer.present_value_sensitivity(swap.near_leg, provider)
        far = self.leg_pricer.present_value_sensitivity(swap.far_leg, provider)
        return near.combined_with(far)

    def current_cash(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        assert isinstance(instrument, FxSwap)
        swap = instrument
        return self.leg_pricer.current_cash(swap.near_leg, provider).combined_with(
            self.leg_pricer.current_cash(swap.far_leg, provider)
        )
