"""
Pricing engine: computes discounting measures for instruments given a rates provider.

Design intent:
- Instruments/products are **data only** (no market access, no pricing methods).
- This engine uses a **registry of pricers** for dispatch, enabling:
  - Adding new instruments without modifying engine code (Open/Closed Principle)
  - Swapping pricing models per instrument type
  - Third-party pricer plugins
"""

from __future__ import annotations

import logging

from fxpricing.currency import MultiCurrencyAmount
from fxpricing.interfaces import Instrument, RatesProvider
from fxpricing.pricers import BasePricer
from fxpricing.sensitivity import CurveParameterSensitivities, PointSensitivities

logger = logging.getLogger(__name__)


class PricingEngine:
    """
    Registry-based pricing engine.

    Pricers are registered at initialization and dispatched based on
    can_price() checks. First matching pricer wins.
    """

    def __init__(self) -> None:
        self._pricers: list[BasePricer] = []

    def register(self, pricer: BasePricer) -> None:
        """Register a pricer for dispatch.

        Order matters: first matching pricer wins.
        """
        self._pricers.append(pricer)

    def pricer_for(self, instrument: Instrument) -> BasePricer:
        """Return the first registered pricer accepting instrument."""
        for pricer in self._pricers:
            if pricer.can_price(instrument):
                logger.debug(
                    "Dispatching %s to %s",
                    type(instrument).__name__,
                    type(pricer).__name__,
                )
                return pricer
        raise ValueError(
            f"No pricer registered for {type(instrument).__name__}. "
            "Register a pricer with engine.register(pricer)."
        )

    def present_value(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        return self.pricer_for(instrument).present_value(instrument, provider)

    def currency_exposure(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        return self.pricer_for(instrument).currency_exposure(instrument, provider)

    def par_spread(self, instrument: Instrument, provider: RatesProvider) -> float:
        return self.pricer_for(instrument).par_spread(instrument, provider)

    def present_value_sensitivity(
        self, instrument: Instrument, provider: RatesProvider
    ) -> PointSensitivities:
        return self.pricer_for(instrument).present_value_sensitivity(instrument, provider)

    def current_cash(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        return self.pricer_for(instrument).current_cash(instrument, provider)

    def curve_parameter_sensitivity(
        self, instrument: Instrument, provider: RatesProvider
    ) -> CurveParameterSensitivities:
        """Point sensitivity of the instrument, converted by the provider."""
        points = self.present_value_sensitivity(instrument, provider)
        return provider.curve_parameter_sensitivity(points)


def create_default_engine() -> PricingEngine:
    """Factory for default engine with all built-in pricers registered."""
    from fxpricing.pricers import DiscountingFxSinglePricer, DiscountingFxSwapPricer

    leg_pricer = DiscountingFxSinglePricer()
    engine = PricingEngine()
    engine.register(leg_pricer)
    engine.register(DiscountingFxSwapPricer(leg_pricer))
    return engine
