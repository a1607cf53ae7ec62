"""
Finite-difference curve parameter sensitivities (bump one parameter, reprice).

The calculator knows nothing about instruments or pricers: it receives a
valuation function provider -> CurrencyAmount and differentiates it with
respect to every parameter of every discount curve of the provider. It is
the independent check on the analytic sensitivities.
"""

from __future__ import annotations

import logging
from typing import Callable

from fxpricing.config import get_settings
from fxpricing.currency import CurrencyAmount
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.sensitivity import CurveParameterSensitivities, CurveParameterSensitivity

logger = logging.getLogger(__name__)

ValuationFunction = Callable[[ImmutableRatesProvider], CurrencyAmount]


class FiniteDifferenceSensitivityCalculator:
    """
    Forward-difference sensitivity: (V(p + eps) - V(p)) / eps per parameter.

    `epsilon` is an absolute shift applied to one curve parameter at a time;
    it defaults to FXPRICING_FD_EPSILON (1e-7).
    """

    def __init__(self, epsilon: float | None = None) -> None:
        eps = epsilon if epsilon is not None else get_settings().fd_epsilon
        if not eps > 0:
            raise ValueError(f"epsilon must be positive, got {eps}")
        self.epsilon = eps

    def sensitivity(
        self,
        provider: ImmutableRatesProvider,
        valuation_fn: ValuationFunction,
    ) -> CurveParameterSensitivities:
        """
        One entry per discount curve, in the currency of the valuation result.

        Curves are visited in sorted currency order; each shifted provider is
        a copy, `provider` itself is never modified.
        """
        base = valuation_fn(provider)
        entries: list[CurveParameterSensitivity] = []
        evaluations = 0
        for currency in sorted(provider.discount_curves):
            curve = provider.discount_curves[currency]
            values: list[float] = []
            for index in range(curve.parameter_count):
                shifted_curve = curve.with_parameter_shift(index, self.epsilon)
                shifted = valuation_fn(provider.with_discount_curve(currency, shifted_curve))
                evaluations += 1
                if shifted.currency != base.currency:
                    raise ValueError(
                        f"valuation currency changed under bump: "
                        f"{base.currency} -> {shifted.currency}"
                    )
                values.append((shifted.amount - base.amount) / self.epsilon)
            entries.append(CurveParameterSensitivity(curve.name, base.currency, tuple(values)))
        logger.debug(
            "Finite-difference sensitivity: %d bumped valuations (eps=%g)",
            evaluations,
            self.epsilon,
        )
        return CurveParameterSensitivities(tuple(entries))
