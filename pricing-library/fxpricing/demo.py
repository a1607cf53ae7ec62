"""Demo: USD and KRW curves, price a USD/KRW forward and an FX swap with sensitivities."""

from datetime import date

from fxpricing.config import configure_logging
from fxpricing.currency import CurrencyAmount, FxRate
from fxpricing.curves import LogLinearDiscountCurve, ZeroRateCurve
from fxpricing.pricing import currency_exposure, par_spread, present_value
from fxpricing.products.fx import FxSingle
from fxpricing.products.fx_swap import FxSwap
from fxpricing.provider import ImmutableRatesProvider
from fxpricing.risk import curve_sensitivity, fd_curve_sensitivity, pv01_parallel


def main() -> None:
    configure_logging()
    # Sample USD zero curve and KRW discount-factor curve
    pillars = [0.25, 0.5, 1.0, 2.0, 5.0]
    usd_curve = ZeroRateCurve(
        name="USD-DSC", pillars=pillars, zero_rates_cc=[0.0050, 0.0060, 0.0080, 0.0110, 0.0160]
    )
    krw_curve = LogLinearDiscountCurve(
        name="KRW-DSC", pillars=pillars, discount_factors=[0.9910, 0.9820, 0.9640, 0.9290, 0.8350]
    )
    provider = ImmutableRatesProvider(
        valuation_date=date(2011, 11, 10),
        discount_curves={"USD": usd_curve, "KRW": krw_curve},
        fx_rates={"USD/KRW": 1123.45},
    )

    # 1) USD/KRW forward: receive 100m USD, pay KRW at 1123.45 on 2012-05-04
    fwd = FxSingle.of(
        CurrencyAmount("USD", 100_000_000), FxRate.of("USD", "KRW", 1123.45), date(2012, 5, 4)
    )
    pv_fwd = present_value(fwd, provider)
    ce_fwd = currency_exposure(fwd, provider)
    spread_fwd = par_spread(fwd, provider)
    analytic = curve_sensitivity(fwd, provider)
    fd = fd_curve_sensitivity(fwd, provider, "USD").combined_with(
        fd_curve_sensitivity(fwd, provider, "KRW")
    )

    # 2) USD/KRW swap: near 2011-12-05, far 2012-05-04
    swap = FxSwap.of_forward_points(
        CurrencyAmount("USD", 10_000_000),
        FxRate.of("USD", "KRW", 1123.45),
        -2.5,
        date(2011, 12, 5),
        date(2012, 5, 4),
    )
    pv_swap = present_value(swap, provider)
    pv01_swap = pv01_parallel(swap, provider, "USD", "USD", bump_bp=1.0)

    print("=== FX Pricing Demo ===\n")
    print(f"Provider: {provider}\n")
    print("1) USD/KRW forward (100m USD at 1123.45, 2012-05-04)")
    for amount in pv_fwd:
        print(f"   PV       = {amount}")
    print(f"   Exposure = {', '.join(str(a) for a in ce_fwd)}")
    print(f"   Par spread = {spread_fwd:.6f}")
    for entry in analytic:
        print(f"   dPV/dp {entry.curve_name} ({entry.currency}) = {entry.sensitivity}")
    print(f"   Analytic == FD (tol 1e4): {analytic.equal_within_tolerance(fd, 1e4)}\n")
    print("2) USD/KRW FX swap (10m USD, -2.5 forward points)")
    for amount in pv_swap:
        print(f"   PV       = {amount}")
    print(f"   PV01 USD = {pv01_swap}\n")
    print("Done.")


if __name__ == "__main__":
    main()
