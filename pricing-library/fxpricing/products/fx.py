"""FX single forward product (instrument data only; pricing via PricingEngine)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date

from fxpricing.currency import CurrencyAmount, CurrencyPair, FxRate


def opposite_signs(a: float, b: float) -> bool:
    """True if a and b have opposite signs, or are both zero."""
    if a == 0 and b == 0:
        return True
    return math.copysign(1.0, a) != math.copysign(1.0, b)


@dataclass(frozen=True)
class FxSingle:
    """
    FX forward: exchange of two currency amounts on one payment date.

    One amount is received (positive) and the other paid (negative).
    base_amount / counter_amount follow the pair order, e.g. for USD/KRW the
    base amount is in USD. PV in each currency = amount * DF(currency, date),
    computed by DiscountingFxSinglePricer.
    """

    base_amount: CurrencyAmount
    counter_amount: CurrencyAmount
    payment_date: date

    def __post_init__(self) -> None:
        if self.base_amount.currency == self.counter_amount.currency:
            raise ValueError(
                f"FX forward needs two different currencies, got {self.base_amount.currency} twice"
            )
        if not opposite_signs(self.base_amount.amount, self.counter_amount.amount):
            raise ValueError("FX forward amounts must have opposite signs")

    @classmethod
    def of(cls, amount: CurrencyAmount, rate: FxRate, payment_date: date) -> FxSingle:
        """
        Build from one amount and the agreed rate.

        The other amount is -amount converted at rate; amount may be in either
        currency of the rate's pair.
        """
        pair = rate.pair
        if amount.currency == pair.base:
            base = amount
            counter = CurrencyAmount(pair.counter, -amount.amount * rate.rate)
        elif amount.currency == pair.counter:
            counter = amount
            base = CurrencyAmount(pair.base, -amount.amount / rate.rate)
        else:
            raise ValueError(f"amount currency {amount.currency} is not part of {pair}")
        return cls(base_amount=base, counter_amount=counter, payment_date=payment_date)

    @property
    def currency_pair(self) -> CurrencyPair:
        return CurrencyPair(self.base_amount.currency, self.counter_amount.currency)

    @property
    def notional(self) -> float:
        """Signed amount in the base currency."""
        return self.base_amount.amount

    @property
    def rate(self) -> FxRate:
        """Agreed rate, counter per base."""
        if self.base_amount.amount == 0:
            raise ValueError("FX forward with zero base amount has no rate")
        return FxRate(self.currency_pair, -self.counter_amount.amount / self.base_amount.amount)

    @property
    def receive_currency_amount(self) -> CurrencyAmount:
        return self.base_amount if self.base_amount.amount > 0 else self.counter_amount

    @property
    def pay_currency_amount(self) -> CurrencyAmount:
        return self.counter_amount if self.base_amount.amount > 0 else self.base_amount

    def amount_in(self, currency: str) -> CurrencyAmount:
        """Return the leg amount paid in currency."""
        if currency == self.base_amount.currency:
            return self.base_amount
        if currency == self.counter_amount.currency:
            return self.counter_amount
        raise ValueError(f"{currency} is not part of {self.currency_pair}")
