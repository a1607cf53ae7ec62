"""Tests for FxSingle and DiscountingFxSinglePricer (USD/KRW forward)."""

from datetime import date

import pytest

from fxpricing.currency import CurrencyAmount, CurrencyPair, FxRate, MultiCurrencyAmount
from fxpricing.curves import ZeroRateCurve
from fxpricing.errors import MissingMarketDataError, UndefinedParSpreadError
from fxpricing.pricers.fx_pricer import DiscountingFxSinglePricer
from fxpricing.products.fx import FxSingle
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk.finite_difference import FiniteDifferenceSensitivityCalculator
from fxpricing.sensitivity import DiscountFactorSensitivity, PointSensitivities

PAYMENT_DATE = date(2012, 5, 4)
NOMINAL_USD = 100_000_000
FX_RATE = 1123.45
FWD = FxSingle.of(CurrencyAmount("USD", NOMINAL_USD), FxRate.of("USD", "KRW", FX_RATE), PAYMENT_DATE)
ENDED = FxSingle.of(CurrencyAmount("USD", NOMINAL_USD), FxRate.of("USD", "KRW", FX_RATE), date(2011, 11, 2))
PRICER = DiscountingFxSinglePricer()
TOL = 1.0e-12
EPS_FD = 1e-7


# --- product ---


def test_of_derives_counter_amount() -> None:
    assert FWD.base_amount == CurrencyAmount("USD", NOMINAL_USD)
    assert FWD.counter_amount == CurrencyAmount("KRW", -NOMINAL_USD * FX_RATE)
    assert FWD.currency_pair == CurrencyPair("USD", "KRW")
    assert FWD.notional == NOMINAL_USD
    assert FWD.rate.rate == pytest.approx(FX_RATE)
    assert FWD.receive_currency_amount.currency == "USD"
    assert FWD.pay_currency_amount.currency == "KRW"


def test_of_with_counter_currency_amount() -> None:
    fx = FxSingle.of(CurrencyAmount("KRW", 1_123_450.0), FxRate.of("USD", "KRW", FX_RATE), PAYMENT_DATE)
    assert fx.base_amount.currency == "USD"
    assert fx.base_amount.amount == pytest.approx(-1_000.0)
    assert fx.counter_amount == CurrencyAmount("KRW", 1_123_450.0)


def test_invalid_construction() -> None:
    with pytest.raises(ValueError, match="different currencies"):
        FxSingle(CurrencyAmount("USD", 1.0), CurrencyAmount("USD", -1.0), PAYMENT_DATE)
    with pytest.raises(ValueError, match="opposite signs"):
        FxSingle(CurrencyAmount("USD", 1.0), CurrencyAmount("KRW", 1000.0), PAYMENT_DATE)
    with pytest.raises(ValueError, match="opposite signs"):
        FxSingle(CurrencyAmount("USD", 100.0), CurrencyAmount("KRW", 0.0), PAYMENT_DATE)
    with pytest.raises(ValueError, match="opposite signs"):
        FxSingle(CurrencyAmount("USD", 0.0), CurrencyAmount("KRW", -1000.0), PAYMENT_DATE)
    with pytest.raises(ValueError, match="not part of"):
        FxSingle.of(CurrencyAmount("EUR", 1.0), FxRate.of("USD", "KRW", FX_RATE), PAYMENT_DATE)


def test_both_amounts_zero_accepted() -> None:
    fx = FxSingle(CurrencyAmount("USD", 0.0), CurrencyAmount("KRW", 0.0), PAYMENT_DATE)
    assert fx.notional == 0.0
    zero = FxSingle.of(CurrencyAmount("USD", 0.0), FxRate.of("USD", "KRW", FX_RATE), PAYMENT_DATE)
    assert zero.counter_amount.amount == 0.0


# --- pricer ---


def test_present_value(provider: ImmutableRatesProvider) -> None:
    computed = PRICER.present_value(FWD, provider)
    expected1 = NOMINAL_USD * provider.discount_factor("USD", PAYMENT_DATE)
    expected2 = -NOMINAL_USD * FX_RATE * provider.discount_factor("KRW", PAYMENT_DATE)
    assert computed.get_amount("USD").amount == pytest.approx(expected1, abs=NOMINAL_USD * TOL)
    assert computed.get_amount("KRW").amount == pytest.approx(expected2, abs=NOMINAL_USD * TOL)
    assert computed.currencies == ("KRW", "USD")


def test_present_value_ended(provider: ImmutableRatesProvider) -> None:
    assert PRICER.present_value(ENDED, provider) == MultiCurrencyAmount.empty()


def test_present_value_on_valuation_date_is_settled(provider: ImmutableRatesProvider) -> None:
    fx = FxSingle.of(CurrencyAmount("USD", 1_000.0), FxRate.of("USD", "KRW", FX_RATE), provider.valuation_date)
    assert PRICER.present_value(fx, provider).is_empty()
    cash = PRICER.current_cash(fx, provider)
    assert cash.get_amount("USD").amount == 1_000.0
    assert cash.get_amount("KRW").amount == pytest.approx(-1_000.0 * FX_RATE)
    assert PRICER.current_cash(FWD, provider).is_empty()


def test_currency_exposure(provider: ImmutableRatesProvider) -> None:
    assert PRICER.currency_exposure(FWD, provider) == PRICER.present_value(FWD, provider)


def test_par_spread(provider: ImmutableRatesProvider) -> None:
    spread = PRICER.par_spread(FWD, provider)
    fwd_sp = FxSingle.of(CurrencyAmount("USD", NOMINAL_USD), FxRate.of("USD", "KRW", FX_RATE + spread), PAYMENT_DATE)
    pv = PRICER.present_value(fwd_sp, provider)
    assert pv.converted_to("USD", provider).amount == pytest.approx(0.0, abs=NOMINAL_USD * TOL)


def test_par_spread_matches_forward_rate(provider: ImmutableRatesProvider) -> None:
    spread = PRICER.par_spread(FWD, provider)
    forward = PRICER.forward_fx_rate(FWD, provider)
    assert forward.pair == CurrencyPair("USD", "KRW")
    assert FX_RATE + spread == pytest.approx(forward.rate, rel=1e-12)
    expected = 1120.0 * provider.discount_factor("USD", PAYMENT_DATE) / provider.discount_factor("KRW", PAYMENT_DATE)
    assert forward.rate == pytest.approx(expected, rel=1e-14)


def test_par_spread_zero_notional_fails(provider: ImmutableRatesProvider) -> None:
    fx = FxSingle(CurrencyAmount("USD", 0.0), CurrencyAmount("KRW", 0.0), PAYMENT_DATE)
    with pytest.raises(UndefinedParSpreadError, match="notional"):
        PRICER.par_spread(fx, provider)


def test_par_spread_zero_discount_factor_fails(provider: ImmutableRatesProvider) -> None:
    class ZeroCurve:
        name = "KRW-ZERO"
        parameter_count = 0

        def df(self, t: float) -> float:
            return 0.0

    degenerate = provider.with_discount_curve("KRW", ZeroCurve())
    with pytest.raises(UndefinedParSpreadError, match="discount factor"):
        PRICER.par_spread(FWD, degenerate)


def test_missing_market_data_propagates(provider: ImmutableRatesProvider) -> None:
    usd_only = ImmutableRatesProvider(
        valuation_date=provider.valuation_date,
        discount_curves={"USD": provider.discount_curve("USD")},
    )
    with pytest.raises(MissingMarketDataError, match="KRW"):
        PRICER.present_value(FWD, usd_only)


def test_present_value_sensitivity_records(provider: ImmutableRatesProvider) -> None:
    point = PRICER.present_value_sensitivity(FWD, provider)
    assert point == PointSensitivities.of(
        DiscountFactorSensitivity("USD", PAYMENT_DATE, "USD", NOMINAL_USD),
        DiscountFactorSensitivity("KRW", PAYMENT_DATE, "KRW", -NOMINAL_USD * FX_RATE),
    )


@pytest.mark.parametrize("provider_fixture", ["provider", "mixed_provider"])
def test_present_value_sensitivity(provider_fixture: str, request: pytest.FixtureRequest) -> None:
    """Analytic curve sensitivity ties out with bump-and-reprice in each currency."""
    rates: ImmutableRatesProvider = request.getfixturevalue(provider_fixture)
    point = PRICER.present_value_sensitivity(FWD, rates)
    computed = rates.curve_parameter_sensitivity(point)
    cal_fd = FiniteDifferenceSensitivityCalculator(EPS_FD)
    expected_usd = cal_fd.sensitivity(rates, lambda p: PRICER.present_value(FWD, p).get_amount("USD"))
    expected_krw = cal_fd.sensitivity(rates, lambda p: PRICER.present_value(FWD, p).get_amount("KRW"))
    assert computed.equal_within_tolerance(
        expected_usd.combined_with(expected_krw), NOMINAL_USD * FX_RATE * EPS_FD
    )


def test_present_value_sensitivity_ended(provider: ImmutableRatesProvider) -> None:
    computed = PRICER.present_value_sensitivity(ENDED, provider)
    assert computed == PointSensitivities.empty()


def test_pv_only_touches_discount_factors(provider: ImmutableRatesProvider) -> None:
    """Changing FX spot leaves PV unchanged; replacing a curve moves only its leg."""
    base = PRICER.present_value(FWD, provider)
    assert PRICER.present_value(FWD, provider.with_fx_rate("USD/KRW", 900.0)) == base
    shifted = provider.with_discount_curve(
        "USD", ZeroRateCurve(name="USD-FLAT", pillars=[1.0], zero_rates_cc=[0.05])
    )
    pv = PRICER.present_value(FWD, shifted)
    assert pv.get_amount("KRW") == base.get_amount("KRW")
    assert pv.get_amount("USD") != base.get_amount("USD")
