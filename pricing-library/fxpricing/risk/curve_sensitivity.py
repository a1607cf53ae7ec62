"""Curve parameter sensitivity measures: analytic and finite-difference."""

from __future__ import annotations

from dataclasses import dataclass

from fxpricing.interfaces import Instrument
from fxpricing.pricing import curve_parameter_sensitivity, present_value
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk.base import BaseRiskMeasure
from fxpricing.risk.finite_difference import FiniteDifferenceSensitivityCalculator
from fxpricing.sensitivity import CurveParameterSensitivities


@dataclass
class CurveSensitivity(BaseRiskMeasure):
    """Analytic sensitivity: point sensitivities chained through the provider's curves."""

    @property
    def name(self) -> str:
        return "CurveSensitivity"

    def compute(
        self, instrument: Instrument, provider: ImmutableRatesProvider
    ) -> CurveParameterSensitivities:
        return curve_parameter_sensitivity(instrument, provider)


@dataclass
class FiniteDifferenceCurveSensitivity(BaseRiskMeasure):
    """Bump-and-reprice sensitivity of the PV in one currency."""

    currency: str
    epsilon: float | None = None

    @property
    def name(self) -> str:
        return f"FDCurveSensitivity_{self.currency}"

    def compute(
        self, instrument: Instrument, provider: ImmutableRatesProvider
    ) -> CurveParameterSensitivities:
        calculator = FiniteDifferenceSensitivityCalculator(self.epsilon)
        return calculator.sensitivity(
            provider, lambda p: present_value(instrument, p).get_amount(self.currency)
        )
