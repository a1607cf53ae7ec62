"""Shared market data for the pricing tests: USD and KRW discount curves."""

from datetime import date

import pytest

from fxpricing.curves import LogLinearDiscountCurve, ZeroRateCurve
from fxpricing.provider import ImmutableRatesProvider

VALUATION_DATE = date(2011, 11, 10)
PILLARS = [0.25, 0.5, 1.0, 2.0, 5.0]
USD_ZERO_RATES = [0.0050, 0.0060, 0.0080, 0.0110, 0.0160]
KRW_ZERO_RATES = [0.0340, 0.0350, 0.0365, 0.0380, 0.0400]
KRW_DISCOUNT_FACTORS = [0.9910, 0.9820, 0.9640, 0.9290, 0.8350]
USD_KRW_SPOT = 1120.0


@pytest.fixture
def provider() -> ImmutableRatesProvider:
    """Zero-rate curves in both currencies."""
    return ImmutableRatesProvider(
        valuation_date=VALUATION_DATE,
        discount_curves={
            "USD": ZeroRateCurve(name="USD-DSC", pillars=PILLARS, zero_rates_cc=USD_ZERO_RATES),
            "KRW": ZeroRateCurve(name="KRW-DSC", pillars=PILLARS, zero_rates_cc=KRW_ZERO_RATES),
        },
        fx_rates={"USD/KRW": USD_KRW_SPOT},
    )


@pytest.fixture
def mixed_provider() -> ImmutableRatesProvider:
    """USD zero-rate curve, KRW discount-factor curve."""
    return ImmutableRatesProvider(
        valuation_date=VALUATION_DATE,
        discount_curves={
            "USD": ZeroRateCurve(name="USD-DSC", pillars=PILLARS, zero_rates_cc=USD_ZERO_RATES),
            "KRW": LogLinearDiscountCurve(
                name="KRW-DSC", pillars=PILLARS, discount_factors=KRW_DISCOUNT_FACTORS
            ),
        },
        fx_rates={"USD/KRW": USD_KRW_SPOT},
    )
