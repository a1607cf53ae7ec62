"""Base class for risk measure implementations."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from fxpricing.interfaces import Instrument, RatesProvider


class BaseRiskMeasure(ABC):
    """Base class for risk measure implementations."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name."""
        ...

    @abstractmethod
    def compute(self, instrument: Instrument, provider: RatesProvider) -> Any:
        """Compute the risk measure value."""
        ...
