"""Base pricer abstract class for instrument pricing implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fxpricing.currency import MultiCurrencyAmount
from fxpricing.interfaces import Instrument, RatesProvider
from fxpricing.sensitivity import PointSensitivities


class BasePricer(ABC):
    """Abstract base class for instrument pricers.

    Subclasses implement the discounting measures for specific instrument types.
    This allows pricing logic to be isolated, testable, and pluggable.
    Pricers hold no state: every method is a pure function of its arguments.
    """

    @abstractmethod
    def can_price(self, instrument: Instrument) -> bool:
        """Return True if this pricer handles the instrument type."""
        ...

    @abstractmethod
    def present_value(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """Compute present value."""
        ...

    @abstractmethod
    def currency_exposure(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """Compute currency exposure."""
        ...

    @abstractmethod
    def par_spread(self, instrument: Instrument, provider: RatesProvider) -> float:
        """Compute the rate spread that makes present value zero."""
        ...

    @abstractmethod
    def present_value_sensitivity(
        self, instrument: Instrument, provider: RatesProvider
    ) -> PointSensitivities:
        """Compute point sensitivity of present value to discount factors."""
        ...

    @abstractmethod
    def current_cash(
        self, instrument: Instrument, provider: RatesProvider
    ) -> MultiCurrencyAmount:
        """Compute cash settling on the valuation date."""
        ...
