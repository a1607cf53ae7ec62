"""Pricer implementations for the registry-based pricing engine."""

from fxpricing.pricers.base import BasePricer
from fxpricing.pricers.fx_pricer import DiscountingFxSinglePricer
from fxpricing.pricers.fx_swap_pricer import DiscountingFxSwapPricer

__all__ = [
    "BasePricer",
    "DiscountingFxSinglePricer",
    "DiscountingFxSwapPricer",
]
