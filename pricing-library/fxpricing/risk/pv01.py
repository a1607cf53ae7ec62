"""Parallel PV01 risk measure (bump-and-reprice)."""

from __future__ import annotations

from dataclasses import dataclass

from fxpricing.currency import CurrencyAmount
from fxpricing.interfaces import Instrument
from fxpricing.pricing import present_value
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk.base import BaseRiskMeasure


@dataclass
class PV01Parallel(BaseRiskMeasure):
    """Parallel PV01: sensitivity to a parallel shift of one currency's discount curve."""

    curve_currency: str
    reporting_currency: str
    bump_bp: float = 1.0

    @property
    def name(self) -> str:
        return f"PV01_{self.curve_currency}"

    def compute(
        self, instrument: Instrument, provider: ImmutableRatesProvider
    ) -> CurrencyAmount:
        """PV(bumped) - PV(base), converted into the reporting currency."""
        bump = self.bump_bp / 10000.0
        curve = provider.discount_curve(self.curve_currency)
        bumped_provider = provider.with_discount_curve(self.curve_currency, curve.bumped(bump))
        pv_base = present_value(instrument, provider)
        pv_bumped = present_value(instrument, bumped_provider)
        return pv_bumped.combined_with(pv_base.negated()).converted_to(
            self.reporting_currency, provider
        )
