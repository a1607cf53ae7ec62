"""
Sensitivity containers.

Point sensitivities are plain records (curve currency, date, value currency,
dValue/dDF) produced by pricers. A rates provider turns them into curve
parameter sensitivities, i.e. one vector of partial derivatives per curve,
using the curve's own Jacobian. Keeping this boundary as plain data lets the
conversion be tested without any pricing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator

from fxpricing.currency import CurrencyAmount, FxRateSource, validate_currency


@dataclass(frozen=True)
class DiscountFactorSensitivity:
    """
    Sensitivity of a value in `currency` to the discount factor of the
    `curve_currency` discount curve at `date`.
    """

    curve_currency: str
    date: date
    currency: str
    sensitivity: float

    def __post_init__(self) -> None:
        validate_currency(self.curve_currency)
        validate_currency(self.currency)

    @property
    def key(self) -> tuple[str, date, str]:
        return (self.curve_currency, self.date, self.currency)

    def multiplied_by(self, factor: float) -> DiscountFactorSensitivity:
        return DiscountFactorSensitivity(
            self.curve_currency, self.date, self.currency, self.sensitivity * factor
        )


@dataclass(frozen=True)
class PointSensitivities:
    """Ordered collection of point sensitivity records (may be empty)."""

    sensitivities: tuple[DiscountFactorSensitivity, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "sensitivities", tuple(self.sensitivities))

    @classmethod
    def empty(cls) -> PointSensitivities:
        return cls()

    @classmethod
    def of(cls, *sensitivities: DiscountFactorSensitivity) -> PointSensitivities:
        return cls(tuple(sensitivities))

    def combined_with(self, other: PointSensitivities) -> PointSensitivities:
        """Concatenate records; nothing is merged."""
        return PointSensitivities(self.sensitivities + other.sensitivities)

    def multiplied_by(self, factor: float) -> PointSensitivities:
        return PointSensitivities(tuple(s.multiplied_by(factor) for s in self.sensitivities))

    def normalized(self) -> PointSensitivities:
        """Merge records sharing (curve currency, date, currency); sorted by that key."""
        merged: dict[tuple[str, date, str], float] = {}
        for s in self.sensitivities:
            merged[s.key] = merged.get(s.key, 0.0) + s.sensitivity
        return PointSensitivities(
            tuple(
                DiscountFactorSensitivity(ccy, d, value_ccy, value)
                for (ccy, d, value_ccy), value in sorted(merged.items())
            )
        )

    def is_empty(self) -> bool:
        return not self.sensitivities

    def __iter__(self) -> Iterator[DiscountFactorSensitivity]:
        return iter(self.sensitivities)

    def __len__(self) -> int:
        return len(self.sensitivities)


@dataclass(frozen=True)
class CurveParameterSensitivity:
    """dValue/dp_i for every parameter p_i of one curve, value in `currency`."""

    curve_name: str
    currency: str
    sensitivity: tuple[float, ...]

    def __post_init__(self) -> None:
        validate_currency(self.currency)
        object.__setattr__(self, "sensitivity", tuple(float(v) for v in self.sensitivity))

    @property
    def key(self) -> tuple[str, str]:
        return (self.curve_name, self.currency)

    @property
    def parameter_count(self) -> int:
        return len(self.sensitivity)

    def plus(self, other: CurveParameterSensitivity) -> CurveParameterSensitivity:
        if other.key != self.key:
            raise ValueError(f"cannot add sensitivities for {self.key} and {other.key}")
        if other.parameter_count != self.parameter_count:
            raise ValueError(
                f"sensitivity length mismatch for {self.curve_name}: "
                f"{self.parameter_count} != {other.parameter_count}"
            )
        return CurveParameterSensitivity(
            self.curve_name,
            self.currency,
            tuple(a + b for a, b in zip(self.sensitivity, other.sensitivity)),
        )

    def multiplied_by(self, factor: float) -> CurveParameterSensitivity:
        return CurveParameterSensitivity(
            self.curve_name, self.currency, tuple(v * factor for v in self.sensitivity)
        )

    def converted_to(self, currency: str, rates: FxRateSource) -> CurveParameterSensitivity:
        if currency == self.currency:
            return self
        return CurveParameterSensitivity(
            self.curve_name, currency, self.multiplied_by(rates.fx_rate(self.currency, currency)).sensitivity
        )

    def total(self) -> CurrencyAmount:
        """Sum of all entries (a parallel-shift estimate)."""
        return CurrencyAmount(self.currency, sum(self.sensitivity))


@dataclass(frozen=True)
class CurveParameterSensitivities:
    """
    Curve parameter sensitivities keyed by (curve name, currency).

    Iteration follows the sorted key order so results are reproducible.
    """

    sensitivities: tuple[CurveParameterSensitivity, ...] = field(default=())

    def __post_init__(self) -> None:
        merged: dict[tuple[str, str], CurveParameterSensitivity] = {}
        for s in self.sensitivities:
            merged[s.key] = merged[s.key].plus(s) if s.key in merged else s
        object.__setattr__(
            self, "sensitivities", tuple(merged[k] for k in sorted(merged))
        )

    @classmethod
    def empty(cls) -> CurveParameterSensitivities:
        return cls()

    @classmethod
    def of(cls, *sensitivities: CurveParameterSensitivity) -> CurveParameterSensitivities:
        return cls(tuple(sensitivities))

    @property
    def keys(self) -> tuple[tuple[str, str], ...]:
        return tuple(s.key for s in self.sensitivities)

    def find(self, curve_name: str, currency: str) -> CurveParameterSensitivity | None:
        for s in self.sensitivities:
            if s.key == (curve_name, currency):
                return s
        return None

    def get(self, curve_name: str, currency: str) -> CurveParameterSensitivity:
        """Return the entry for (curve_name, currency). Raises KeyError if absent."""
        found = self.find(curve_name, currency)
        if found is None:
            raise KeyError(f"no sensitivity for curve {curve_name!r} in {currency}")
        return found

    def combined_with(
        self, other: CurveParameterSensitivities | CurveParameterSensitivity
    ) -> CurveParameterSensitivities:
        """Element-wise sum; entries present in only one operand are kept."""
        if isinstance(other, CurveParameterSensitivity):
            return CurveParameterSensitivities(self.sensitivities + (other,))
        return CurveParameterSensitivities(self.sensitivities + other.sensitivities)

    def multiplied_by(self, factor: float) -> CurveParameterSensitivities:
        return CurveParameterSensitivities(
            tuple(s.multiplied_by(factor) for s in self.sensitivities)
        )

    def converted_to(self, currency: str, rates: FxRateSource) -> CurveParameterSensitivities:
        """Express every entry in currency; entries of the same curve are then summed."""
        return CurveParameterSensitivities(
            tuple(s.converted_to(currency, rates) for s in self.sensitivities)
        )

    def total(self, currency: str, rates: FxRateSource) -> CurrencyAmount:
        """Sum of every entry, converted into currency."""
        total = CurrencyAmount.zero(currency)
        for s in self.sensitivities:
            total = total.plus(s.total().converted_to(currency, rates))
        return total

    def equal_within_tolerance(
        self, other: CurveParameterSensitivities, tolerance: float
    ) -> bool:
        """
        True if every entry matches within `tolerance` (absolute, element-wise).

        An entry missing on one side compares as a zero vector.
        """
        for key in set(self.keys) | set(other.keys):
            mine = self.find(*key)
            theirs = other.find(*key)
            if mine is not None and theirs is not None:
                if mine.parameter_count != theirs.parameter_count:
                    return False
                pairs = zip(mine.sensitivity, theirs.sensitivity)
            else:
                present = mine if mine is not None else theirs
                pairs = ((v, 0.0) for v in present.sensitivity)
            if any(abs(a - b) > tolerance for a, b in pairs):
                return False
        return True

    def is_empty(self) -> bool:
        return not self.sensitivities

    def __iter__(self) -> Iterator[CurveParameterSensitivity]:
        return iter(self.sensitivities)

    def __len__(self) -> int:
        return len(self.sensitivities)
