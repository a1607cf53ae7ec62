"""FX swap product: a near and a far FX forward in opposite directions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fxpricing.currency import CurrencyAmount, CurrencyPair, FxRate
from fxpricing.products.fx import FxSingle, opposite_signs


@dataclass(frozen=True)
class FxSwap:
    """
    FX swap: near leg exchanges the amounts one way, far leg exchanges them back.

    Near payment date must be strictly before the far one; both legs are on the
    same currency pair and the base-currency amounts have opposite signs.
    """

    near_leg: FxSingle
    far_leg: FxSingle

    def __post_init__(self) -> None:
        near, far = self.near_leg, self.far_leg
        if not near.payment_date < far.payment_date:
            raise ValueError("near leg payment date must be before far leg payment date")
        if not (
            near.currency_pair == far.currency_pair
            or near.currency_pair.is_inverse(far.currency_pair)
        ):
            raise ValueError(
                f"legs must share a currency pair: {near.currency_pair} vs {far.currency_pair}"
            )
        base_ccy = near.base_amount.currency
        if not opposite_signs(near.base_amount.amount, far.amount_in(base_ccy).amount):
            raise ValueError("near and far legs must be in opposite directions")

    @classmethod
    def of(
        cls,
        amount: CurrencyAmount,
        near_rate: FxRate,
        near_date: date,
        far_rate: FxRate,
        far_date: date,
    ) -> FxSwap:
        """Near leg exchanges amount at near_rate, far leg exchanges it back at far_rate."""
        near = FxSingle.of(amount, near_rate, near_date)
        far = FxSingle.of(amount.negated(), far_rate, far_date)
        return cls(near_leg=near, far_leg=far)

    @classmethod
    def of_forward_points(
        cls,
        amount: CurrencyAmount,
        near_rate: FxRate,
        forward_points: float,
        near_date: date,
        far_date: date,
    ) -> FxSwap:
        """Far rate = near rate + forward_points."""
        far_rate = FxRate(near_rate.pair, near_rate.rate + forward_points)
        return cls.of(amount, near_rate, near_date, far_rate, far_date)

    @property
    def currency_pair(self) -> CurrencyPair:
        return self.near_leg.currency_pair
