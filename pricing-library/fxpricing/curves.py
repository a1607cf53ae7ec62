"""
Discount curve primitives.

Curve math is kept minimal and explicit:
- Times are **year fractions** (e.g. 2.0 = 2Y from the curve reference).
- ZeroRateCurve is parametrized by **continuously compounded zero rates**,
  interpolated linearly between pillars.
- LogLinearDiscountCurve is parametrized by **discount factors** at the
  pillars, interpolated linearly in log(DF).

Both expose their parameters as an ordered vector together with the Jacobian
dDF(t)/dp_i, which is what a rates provider needs to turn point sensitivities
into curve parameter sensitivities. Calibration (building curves from market
quotes) is out of scope; callers supply the parameters directly.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def _validate_pillars(pillars: list[float], values: list[float], values_name: str) -> None:
    if len(pillars) != len(values):
        raise ValueError(f"pillars and {values_name} must have the same length")
    for i in range(1, len(pillars)):
        if pillars[i] <= pillars[i - 1]:
            raise ValueError("pillars must be strictly increasing")


def _bracket(pillars: list[float], t: float) -> tuple[int, float]:
    """Index i and weight w such that t = (1-w)*pillars[i] + w*pillars[i+1]."""
    for i in range(len(pillars) - 1):
        if pillars[i] <= t <= pillars[i + 1]:
            return i, (t - pillars[i]) / (pillars[i + 1] - pillars[i])
    return len(pillars) - 2, 1.0


@dataclass
class ZeroRateCurve:
    """
    Zero rate curve (continuously compounded) with linear interpolation.

    - **Pillars** are increasing times (year fractions) where the curve is defined.
    - `zero_rates_cc[i]` is the CC zero rate at `pillars[i]`; these rates are the
      curve parameters.
    - `t0` is kept for completeness (reference time) but this curve assumes the
      caller passes times already measured from that reference.

    Implements Curve protocol structurally (no explicit inheritance).
    """

    name: str
    pillars: list[float]
    zero_rates_cc: list[float]
    t0: float = 0.0

    def __post_init__(self) -> None:
        _validate_pillars(self.pillars, self.zero_rates_cc, "zero_rates_cc")

    @property
    def parameter_count(self) -> int:
        return len(self.zero_rates_cc)

    @property
    def parameters(self) -> tuple[float, ...]:
        return tuple(self.zero_rates_cc)

    def _weights(self, t: float) -> list[float]:
        """Interpolation weight of each pillar rate in r(t)."""
        if t < 0:
            raise ValueError("t must be >= 0")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        weights = [0.0] * len(self.pillars)
        # Flat extrapolation beyond the end pillars.
        if t <= self.pillars[0]:
            weights[0] = 1.0
        elif t >= self.pillars[-1]:
            weights[-1] = 1.0
        else:
            i, w = _bracket(self.pillars, t)
            weights[i] = 1.0 - w
            weights[i + 1] = w
        return weights

    def zero_rate_cc(self, t: float) -> float:
        """
        Continuously compounded zero rate at time t (year-fraction).
        Linear interpolation in zero rates. t must be >= 0.
        """
        return sum(w * r for w, r in zip(self._weights(t), self.zero_rates_cc))

    def df(self, t: float) -> float:
        r"""
        Discount factor to time t.

        With CC zero rate r(t), the discount factor is:
        DF(t) = exp(-r(t)*t).
        """
        r = self.zero_rate_cc(t)
        return math.exp(-r * t)

    def df_parameter_sensitivity(self, t: float) -> tuple[float, ...]:
        """dDF(t)/dr_i = -t * DF(t) * w_i(t)."""
        weights = self._weights(t)
        df = self.df(t)
        return tuple(-t * df * w for w in weights)

    def with_parameter_shift(self, index: int, shift: float) -> ZeroRateCurve:
        """Return a new curve with zero_rates_cc[index] shifted by `shift`."""
        if not 0 <= index < self.parameter_count:
            raise IndexError(f"parameter index {index} out of range for {self.name}")
        new_rates = list(self.zero_rates_cc)
        new_rates[index] += shift
        return ZeroRateCurve(
            name=self.name,
            pillars=list(self.pillars),
            zero_rates_cc=new_rates,
            t0=self.t0,
        )

    def bumped(self, bump: float) -> ZeroRateCurve:
        """
        Return a new curve with a *parallel* additive shift to all zero rates.

        `bump` is expressed in absolute rate terms (e.g. 1bp = 0.0001).
        """
        new_rates = [r + bump for r in self.zero_rates_cc]
        return ZeroRateCurve(
            name=self.name,
            pillars=list(self.pillars),
            zero_rates_cc=new_rates,
            t0=self.t0,
        )


@dataclass
class LogLinearDiscountCurve:
    """
    Discount curve defined by discount factors at pillar times.

    - Between pillars, log(DF) is interpolated linearly in time.
    - Before the first / after the last pillar the zero rate is held flat,
      i.e. DF(t) = DF_k ** (t / t_k) with k the end pillar.
    - The pillar discount factors are the curve parameters.

    For every t the log-weights c_i(t) satisfy sum(c_i * t_i) = t, which makes
    bumped() an exact parallel zero-rate shift.
    """

    name: str
    pillars: list[float]
    discount_factors: list[float]

    def __post_init__(self) -> None:
        _validate_pillars(self.pillars, self.discount_factors, "discount_factors")
        if self.pillars and self.pillars[0] <= 0:
            raise ValueError("pillars must be > 0")
        if any(d <= 0 for d in self.discount_factors):
            raise ValueError("discount factors must be positive")

    @property
    def parameter_count(self) -> int:
        return len(self.discount_factors)

    @property
    def parameters(self) -> tuple[float, ...]:
        return tuple(self.discount_factors)

    def _log_weights(self, t: float) -> list[float]:
        """Coefficients c_i with log DF(t) = sum(c_i * log DF_i)."""
        if t < 0:
            raise ValueError("t must be >= 0")
        if not self.pillars:
            raise ValueError("curve has no pillars")
        weights = [0.0] * len(self.pillars)
        if t <= self.pillars[0]:
            weights[0] = t / self.pillars[0]
        elif t >= self.pillars[-1]:
            weights[-1] = t / self.pillars[-1]
        else:
            i, w = _bracket(self.pillars, t)
            weights[i] = 1.0 - w
            weights[i + 1] = w
        return weights

    def df(self, t: float) -> float:
        weights = self._log_weights(t)
        return math.exp(
            sum(c * math.log(d) for c, d in zip(weights, self.discount_factors))
        )

    def df_parameter_sensitivity(self, t: float) -> tuple[float, ...]:
        """dDF(t)/dDF_i = DF(t) * c_i(t) / DF_i."""
        weights = self._log_weights(t)
        df = self.df(t)
        return tuple(df * c / d for c, d in zip(weights, self.discount_factors))

    def with_parameter_shift(self, index: int, shift: float) -> LogLinearDiscountCurve:
        """Return a new curve with discount_factors[index] shifted by `shift`."""
        if not 0 <= index < self.parameter_count:
            raise IndexError(f"parameter index {index} out of range for {self.name}")
        new_dfs = list(self.discount_factors)
        new_dfs[index] += shift
        return LogLinearDiscountCurve(
            name=self.name,
            pillars=list(self.pillars),
            discount_factors=new_dfs,
        )

    def bumped(self, bump: float) -> LogLinearDiscountCurve:
        """Return new curve with a parallel additive zero-rate shift."""
        new_dfs = [d * math.exp(-bump * t) for t, d in zip(self.pillars, self.discount_factors)]
        return LogLinearDiscountCurve(
            name=self.name,
            pillars=list(self.pillars),
            discount_factors=new_dfs,
        )
