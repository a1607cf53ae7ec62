"""
Currency value types: pairs, single- and multi-currency amounts, FX rates.

Currencies are plain ISO-4217 style codes ("USD", "KRW"). All types are frozen
dataclasses; arithmetic returns new instances.

Conversions take any object with an ``fx_rate(base, counter) -> float`` method
(an FxRate, or a rates provider), see FxRateSource.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Protocol

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


def validate_currency(code: str) -> str:
    """Return code if it is a three-letter upper-case currency code."""
    if not isinstance(code, str) or not _CURRENCY_CODE.match(code):
        raise ValueError(f"invalid currency code: {code!r}")
    return code


class FxRateSource(Protocol):
    """Anything able to quote counter units per one base unit."""

    def fx_rate(self, base: str, counter: str) -> float:
        ...


@dataclass(frozen=True)
class CurrencyPair:
    """Ordered pair of distinct currencies, written BASE/COUNTER."""

    base: str
    counter: str

    def __post_init__(self) -> None:
        validate_currency(self.base)
        validate_currency(self.counter)
        if self.base == self.counter:
            raise ValueError(f"currency pair needs two different currencies: {self.base}")

    @classmethod
    def parse(cls, text: str) -> CurrencyPair:
        """Parse 'USD/KRW' (or 'USDKRW')."""
        text = text.strip().upper()
        if "/" in text:
            base, _, counter = text.partition("/")
        elif len(text) == 6:
            base, counter = text[:3], text[3:]
        else:
            raise ValueError(f"invalid currency pair: {text!r}")
        return cls(base, counter)

    def inverse(self) -> CurrencyPair:
        return CurrencyPair(self.counter, self.base)

    def contains(self, currency: str) -> bool:
        return currency in (self.base, self.counter)

    def is_inverse(self, other: CurrencyPair) -> bool:
        return self.base == other.counter and self.counter == other.base

    def __str__(self) -> str:
        return f"{self.base}/{self.counter}"


@dataclass(frozen=True)
class CurrencyAmount:
    """A signed amount of a single currency."""

    currency: str
    amount: float

    def __post_init__(self) -> None:
        validate_currency(self.currency)

    @classmethod
    def zero(cls, currency: str) -> CurrencyAmount:
        return cls(currency, 0.0)

    def _check_same_currency(self, other: CurrencyAmount) -> None:
        if other.currency != self.currency:
            raise ValueError(
                f"cannot combine amounts in {self.currency} and {other.currency}"
            )

    def plus(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_same_currency(other)
        return CurrencyAmount(self.currency, self.amount + other.amount)

    def minus(self, other: CurrencyAmount) -> CurrencyAmount:
        self._check_same_currency(other)
        return CurrencyAmount(self.currency, self.amount - other.amount)

    def multiplied_by(self, factor: float) -> CurrencyAmount:
        return CurrencyAmount(self.currency, self.amount * factor)

    def negated(self) -> CurrencyAmount:
        return CurrencyAmount(self.currency, -self.amount)

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def converted_to(self, currency: str, rates: FxRateSource) -> CurrencyAmount:
        """Convert into currency using rates.fx_rate(self.currency, currency)."""
        if currency == self.currency:
            return self
        return CurrencyAmount(currency, self.amount * rates.fx_rate(self.currency, currency))

    def __add__(self, other: CurrencyAmount) -> CurrencyAmount:
        return self.plus(other)

    def __sub__(self, other: CurrencyAmount) -> CurrencyAmount:
        return self.minus(other)

    def __neg__(self) -> CurrencyAmount:
        return self.negated()

    def __str__(self) -> str:
        return f"{self.currency} {self.amount:,.2f}"


@dataclass(frozen=True)
class MultiCurrencyAmount:
    """
    Amounts in several currencies, at most one entry per currency.

    Entries are kept sorted by currency so iteration and equality are
    deterministic. A zero amount is a real entry: ``MultiCurrencyAmount.of(
    CurrencyAmount.zero("USD"))`` is not equal to ``MultiCurrencyAmount.empty()``.
    """

    amounts: tuple[CurrencyAmount, ...] = field(default=())

    def __post_init__(self) -> None:
        merged: dict[str, CurrencyAmount] = {}
        for ca in self.amounts:
            merged[ca.currency] = merged[ca.currency].plus(ca) if ca.currency in merged else ca
        object.__setattr__(
            self, "amounts", tuple(merged[ccy] for ccy in sorted(merged))
        )

    @classmethod
    def empty(cls) -> MultiCurrencyAmount:
        return cls()

    @classmethod
    def of(cls, *amounts: CurrencyAmount) -> MultiCurrencyAmount:
        """Build from amounts; amounts sharing a currency are summed."""
        return cls(tuple(amounts))

    @property
    def currencies(self) -> tuple[str, ...]:
        return tuple(ca.currency for ca in self.amounts)

    def contains(self, currency: str) -> bool:
        return currency in self.currencies

    def get_amount(self, currency: str) -> CurrencyAmount:
        """Return the amount in currency, or a zero amount if absent."""
        for ca in self.amounts:
            if ca.currency == currency:
                return ca
        return CurrencyAmount.zero(currency)

    def is_empty(self) -> bool:
        return not self.amounts

    def plus(self, other: CurrencyAmount | MultiCurrencyAmount) -> MultiCurrencyAmount:
        if isinstance(other, CurrencyAmount):
            return MultiCurrencyAmount(self.amounts + (other,))
        return MultiCurrencyAmount(self.amounts + other.amounts)

    def combined_with(self, other: MultiCurrencyAmount) -> MultiCurrencyAmount:
        """Sum of both, adding amounts that share a currency."""
        return self.plus(other)

    def negated(self) -> MultiCurrencyAmount:
        return MultiCurrencyAmount(tuple(ca.negated() for ca in self.amounts))

    def multiplied_by(self, factor: float) -> MultiCurrencyAmount:
        return MultiCurrencyAmount(tuple(ca.multiplied_by(factor) for ca in self.amounts))

    def converted_to(self, currency: str, rates: FxRateSource) -> CurrencyAmount:
        """Convert every entry into currency and sum them."""
        total = CurrencyAmount.zero(currency)
        for ca in self.amounts:
            total = total.plus(ca.converted_to(currency, rates))
        return total

    def to_dict(self) -> dict[str, float]:
        return {ca.currency: ca.amount for ca in self.amounts}

    def __iter__(self) -> Iterator[CurrencyAmount]:
        return iter(self.amounts)

    def __len__(self) -> int:
        return len(self.amounts)

    def __add__(self, other: CurrencyAmount | MultiCurrencyAmount) -> MultiCurrencyAmount:
        return self.plus(other)


@dataclass(frozen=True)
class FxRate:
    """
    FX rate on a currency pair: ``rate`` counter units per one base unit.

    USD/KRW 1123.45 means 1 USD = 1123.45 KRW.
    """

    pair: CurrencyPair
    rate: float

    def __post_init__(self) -> None:
        if not self.rate > 0:
            raise ValueError(f"FX rate must be positive, got {self.rate}")

    @classmethod
    def of(cls, base: str, counter: str, rate: float) -> FxRate:
        return cls(CurrencyPair(base, counter), rate)

    def inverse(self) -> FxRate:
        return FxRate(self.pair.inverse(), 1.0 / self.rate)

    def fx_rate(self, base: str, counter: str) -> float:
        """Rate for base/counter, which must be this pair in either direction."""
        if base == counter:
            return 1.0
        if base == self.pair.base and counter == self.pair.counter:
            return self.rate
        if base == self.pair.counter and counter == self.pair.base:
            return 1.0 / self.rate
        raise ValueError(f"FX rate {self.pair} cannot quote {base}/{counter}")

    def convert(self, amount: float, from_currency: str) -> float:
        """Convert amount of from_currency into the other currency of the pair."""
        if from_currency == self.pair.base:
            return amount * self.rate
        if from_currency == self.pair.counter:
            return amount / self.rate
        raise ValueError(f"{from_currency} is not part of {self.pair}")

    def __str__(self) -> str:
        return f"{self.pair} {self.rate}"
