"""Tests for FxSwap and DiscountingFxSwapPricer."""

from datetime import date

import pytest

from fxpricing.currency import CurrencyAmount, FxRate, MultiCurrencyAmount
from fxpricing.pricers.fx_pricer import DiscountingFxSinglePricer
from fxpricing.pricers.fx_swap_pricer import DiscountingFxSwapPricer
from fxpricing.products.fx import FxSingle
from fxpricing.products.fx_swap import FxSwap
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk.finite_difference import FiniteDifferenceSensitivityCalculator

NEAR_DATE = date(2011, 12, 5)
FAR_DATE = date(2012, 5, 4)
NOMINAL_USD = 10_000_000
NEAR_RATE = FxRate.of("USD", "KRW", 1120.0)
FAR_RATE = FxRate.of("USD", "KRW", 1117.5)
SWAP = FxSwap.of(CurrencyAmount("USD", NOMINAL_USD), NEAR_RATE, NEAR_DATE, FAR_RATE, FAR_DATE)
PRICER = DiscountingFxSwapPricer()
LEG_PRICER = DiscountingFxSinglePricer()


def test_of_builds_offsetting_legs() -> None:
    assert SWAP.near_leg.base_amount == CurrencyAmount("USD", NOMINAL_USD)
    assert SWAP.near_leg.counter_amount == CurrencyAmount("KRW", -NOMINAL_USD * 1120.0)
    assert SWAP.far_leg.base_amount == CurrencyAmount("USD", -NOMINAL_USD)
    assert SWAP.far_leg.counter_amount == CurrencyAmount("KRW", NOMINAL_USD * 1117.5)


def test_of_forward_points() -> None:
    swap = FxSwap.of_forward_points(CurrencyAmount("USD", NOMINAL_USD), NEAR_RATE, -2.5, NEAR_DATE, FAR_DATE)
    assert swap.far_leg.rate.rate == pytest.approx(1117.5)
    assert swap == SWAP


def test_invalid_swaps() -> None:
    near = SWAP.near_leg
    with pytest.raises(ValueError, match="before far"):
        FxSwap(near_leg=SWAP.far_leg, far_leg=near)
    same_direction = FxSingle.of(CurrencyAmount("USD", NOMINAL_USD), FAR_RATE, FAR_DATE)
    with pytest.raises(ValueError, match="opposite directions"):
        FxSwap(near_leg=near, far_leg=same_direction)
    other_pair = FxSingle.of(CurrencyAmount("USD", -NOMINAL_USD), FxRate.of("USD", "JPY", 78.0), FAR_DATE)
    with pytest.raises(ValueError, match="share a currency pair"):
        FxSwap(near_leg=near, far_leg=other_pair)
    zero_near = FxSingle(CurrencyAmount("USD", 0.0), CurrencyAmount("KRW", 0.0), NEAR_DATE)
    with pytest.raises(ValueError, match="opposite directions"):
        FxSwap(near_leg=zero_near, far_leg=same_direction)


def test_legs_on_inverse_pair_are_accepted() -> None:
    far = FxSingle.of(CurrencyAmount("KRW", NOMINAL_USD * 1117.5), FxRate.of("KRW", "USD", 1 / 1117.5), FAR_DATE)
    swap = FxSwap(near_leg=SWAP.near_leg, far_leg=far)
    assert swap.far_leg.amount_in("USD").amount == pytest.approx(-NOMINAL_USD)


def test_present_value_is_sum_of_legs(provider: ImmutableRatesProvider) -> None:
    computed = PRICER.present_value(SWAP, provider)
    expected = LEG_PRICER.present_value(SWAP.near_leg, provider).combined_with(
        LEG_PRICER.present_value(SWAP.far_leg, provider)
    )
    assert computed == expected
    assert computed.get_amount("USD").amount == pytest.approx(
        NOMINAL_USD * (provider.discount_factor("USD", NEAR_DATE) - provider.discount_factor("USD", FAR_DATE))
    )


def test_currency_exposure(provider: ImmutableRatesProvider) -> None:
    assert PRICER.currency_exposure(SWAP, provider) == PRICER.present_value(SWAP, provider)


def test_present_value_sensitivity_is_concatenation(provider: ImmutableRatesProvider) -> None:
    computed = PRICER.present_value_sensitivity(SWAP, provider)
    near = LEG_PRICER.present_value_sensitivity(SWAP.near_leg, provider)
    far = LEG_PRICER.present_value_sensitivity(SWAP.far_leg, provider)
    assert computed.sensitivities == near.sensitivities + far.sensitivities
    assert len(computed) == 4


def test_near_leg_settled(provider: ImmutableRatesProvider) -> None:
    swap = FxSwap.of(CurrencyAmount("USD", NOMINAL_USD), NEAR_RATE, date(2011, 11, 1), FAR_RATE, FAR_DATE)
    pv = PRICER.present_value(swap, provider)
    assert pv == LEG_PRICER.present_value(swap.far_leg, provider)
    assert len(PRICER.present_value_sensitivity(swap, provider)) == 2
    assert PRICER.current_cash(swap, provider) == MultiCurrencyAmount.empty()


def test_both_legs_expired(provider: ImmutableRatesProvider) -> None:
    swap = FxSwap.of(
        CurrencyAmount("USD", NOMINAL_USD), NEAR_RATE, date(2011, 10, 3), FAR_RATE, date(2011, 11, 2)
    )
    assert PRICER.present_value(swap, provider) == MultiCurrencyAmount.empty()
    assert PRICER.currency_exposure(swap, provider).is_empty()
    assert PRICER.present_value_sensitivity(swap, provider).is_empty()
    assert provider.curve_parameter_sensitivity(
        PRICER.present_value_sensitivity(swap, provider)
    ).is_empty()
    assert PRICER.current_cash(swap, provider).is_empty()


def test_par_spread_round_trip(provider: ImmutableRatesProvider) -> None:
    spread = PRICER.par_spread(SWAP, provider)
    far_rate = FxRate(FAR_RATE.pair, FAR_RATE.rate + spread)
    swap_sp = FxSwap.of(CurrencyAmount("USD", NOMINAL_USD), NEAR_RATE, NEAR_DATE, far_rate, FAR_DATE)
    pv = PRICER.present_value(swap_sp, provider)
    assert pv.converted_to("USD", provider).amount == pytest.approx(0.0, abs=NOMINAL_USD * 1e-12)


def test_present_value_sensitivity_ties_out(mixed_provider: ImmutableRatesProvider) -> None:
    computed = mixed_provider.curve_parameter_sensitivity(
        PRICER.present_value_sensitivity(SWAP, mixed_provider)
    )
    eps = 1e-7
    cal_fd = FiniteDifferenceSensitivityCalculator(eps)
    expected = cal_fd.sensitivity(
        mixed_provider, lambda p: PRICER.present_value(SWAP, p).get_amount("USD")
    ).combined_with(
        cal_fd.sensitivity(mixed_provider, lambda p: PRICER.present_value(SWAP, p).get_amount("KRW"))
    )
    assert computed.equal_within_tolerance(expected, NOMINAL_USD * 1120.0 * eps)
