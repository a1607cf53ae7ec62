"""GraphQL types for the FX pricing and sensitivity API."""

from __future__ import annotations

from datetime import date
from typing import Optional

import strawberry


# --- Input types (request payloads) ---


@strawberry.input
class CurveInput:
    """
    Discount curve of one currency, defined on pillar dates.

    Give either zero rates (continuously compounded, linear interpolation) or
    discount factors (log-linear interpolation), not both.
    """

    currency: str
    pillar_dates: list[date]
    zero_rates: Optional[list[float]] = None
    discount_factors: Optional[list[float]] = None
    name: Optional[str] = None


@strawberry.input
class FxRateInput:
    """FX spot rate for a pair (e.g. USD/KRW): counter units per one base unit."""

    pair: str
    rate: float


@strawberry.input
class MarketInput:
    """Market snapshot: valuation date, one discount curve per currency, FX spots."""

    valuation_date: date
    curves: list[CurveInput]
    fx_rates: Optional[list[FxRateInput]] = None


@strawberry.input
class FxSingleInput:
    """FX forward: `amount` of `currency` exchanged at `rate` on `payment_date`.

    `currency` may be either currency of `pair`; a positive amount is received.
    """

    currency: str
    amount: float
    pair: str
    rate: float
    payment_date: date


@strawberry.input
class FxSwapInput:
    """FX swap: the near leg exchanges `amount`, the far leg exchanges it back.

    The far rate is `far_rate` if given, otherwise `near_rate + forward_points`.
    """

    currency: str
    amount: float
    pair: str
    near_rate: float
    near_date: date
    far_date: date
    far_rate: Optional[float] = None
    forward_points: Optional[float] = None


# --- Output types (response payloads) ---


@strawberry.type
class CurrencyAmountType:
    currency: str
    amount: float


@strawberry.type
class CurveSensitivityType:
    """Sensitivity of the value in `currency` to every parameter of one curve."""

    curve_name: str
    currency: str
    sensitivity: list[float]


@strawberry.type
class RiskMeasures:
    """Analytic and finite-difference curve sensitivities, parallel PV01."""

    curve_sensitivities: Optional[list[CurveSensitivityType]] = None
    fd_curve_sensitivities: Optional[list[CurveSensitivityType]] = None
    pv01: Optional[CurrencyAmountType] = None


@strawberry.type
class PricingResult:
    """Pricing result: PV per currency, exposure, par spread and optional risk measures.

    `par_spread` is null when it is undefined (zero notional or zero discount factor).
    """

    present_value: list[CurrencyAmountType]
    currency_exposure: list[CurrencyAmountType]
    current_cash: list[CurrencyAmountType]
    par_spread: Optional[float] = None
    risk_measures: Optional[RiskMeasures] = None
