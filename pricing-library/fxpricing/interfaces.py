"""
Protocol-based interfaces for all extension points in the pricing library.

Using typing.Protocol enables structural subtyping: any class that implements
the required methods satisfies the protocol without explicit inheritance.
Pricers only ever see a RatesProvider; they never look inside a curve, so any
curve family can sit behind a provider without changes to pricing code.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fxpricing.currency import CurrencyAmount, MultiCurrencyAmount
    from fxpricing.sensitivity import CurveParameterSensitivities, PointSensitivities


@runtime_checkable
class Curve(Protocol):
    """Protocol for discount curve implementations.

    A curve is described by an ordered vector of parameters. Besides discount
    factors it must expose the Jacobian of the discount factor with respect to
    those parameters, and build copies with one parameter shifted.
    """

    name: str

    @property
    def parameter_count(self) -> int:
        ...

    def df(self, t: float) -> float:
        """Return discount factor to time t (year-fraction)."""
        ...

    def df_parameter_sensitivity(self, t: float) -> tuple[float, ...]:
        """Return dDF(t)/dp_i for every parameter p_i, in parameter order."""
        ...

    def with_parameter_shift(self, index: int, shift: float) -> Curve:
        """Return new curve with parameter `index` shifted by `shift`."""
        ...

    def bumped(self, bump: float) -> Curve:
        """Return new curve with parallel additive rate shift."""
        ...


@runtime_checkable
class RatesProvider(Protocol):
    """Market data capability set consumed by the pricers."""

    @property
    def valuation_date(self) -> date:
        ...

    def discount_factor(self, currency: str, payment_date: date) -> float:
        """Discount factor of currency for a payment on payment_date."""
        ...

    def fx_rate(self, base: str, counter: str) -> float:
        """Today's FX rate, counter units per one base unit."""
        ...

    def curve_parameter_sensitivity(
        self, sensitivities: PointSensitivities
    ) -> CurveParameterSensitivities:
        """Chain point sensitivities through the curve Jacobians."""
        ...


@runtime_checkable
class Instrument(Protocol):
    """Marker protocol for all priceable instruments.

    Instruments are data-only; pricing logic lives in Pricer implementations.
    """

    pass


class Pricer(Protocol):
    """Protocol for instrument pricing implementations.

    Each pricer handles one or more instrument types and can be registered
    with the PricingEngine for dispatch.
    """

    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the given instrument type."""
        ...

    def present_value(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """Present value, one entry per settlement currency."""
        ...

    def present_value_sensitivity(
        self, instrument: Instrument, provider: RatesProvider
    ) -> PointSensitivities:
        """Point sensitivity of the present value to discount factors."""
        ...


class RiskMeasure(Protocol):
    """Protocol for risk measure implementations.

    Risk measures are composable objects that compute sensitivities either
    analytically or via bump-and-reprice.
    """

    @property
    def name(self) -> str:
        """Human-readable name (e.g., 'PV01_USD')."""
        ...

    def compute(self, instrument: Instrument, provider: RatesProvider) -> Any:
        """Compute the risk measure for the instrument."""
        ...

