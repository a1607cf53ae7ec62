"""GraphQL schema: FX pricing and sensitivity queries."""

from typing import Optional

import strawberry

from app.services import price_fx_single, price_fx_swap
from app.types import FxSingleInput, FxSwapInput, MarketInput, PricingResult


@strawberry.type
class Query:
    @strawberry.field
    def hello(self, name: str = "World") -> str:
        return f"Hello {name} from FX Pricing API!"

    @strawberry.field
    def version(self) -> str:
        return "0.1.0"

    @strawberry.field
    def price_fx_single(
        self,
        forward: FxSingleInput,
        market: MarketInput,
        calculate_sensitivities: bool = False,
        calculate_fd_sensitivities: bool = False,
        calculate_pv01: bool = False,
        pv01_curve_currency: Optional[str] = None,
        pv01_bump_bp: float = 1.0,
        reporting_currency: Optional[str] = None,
    ) -> PricingResult:
        """Price an FX forward. Optionally compute curve sensitivities (analytic and FD) and PV01."""
        return price_fx_single(
            forward=forward,
            market=market,
            calculate_sensitivities=calculate_sensitivities,
            calculate_fd_sensitivities=calculate_fd_sensitivities,
            calculate_pv01=calculate_pv01,
            pv01_curve_currency=pv01_curve_currency,
            pv01_bump_bp=pv01_bump_bp,
            reporting_currency=reporting_currency,
        )

    @strawberry.field
    def price_fx_swap(
        self,
        swap: FxSwapInput,
        market: MarketInput,
        calculate_sensitivities: bool = False,
        calculate_fd_sensitivities: bool = False,
        calculate_pv01: bool = False,
        pv01_curve_currency: Optional[str] = None,
        pv01_bump_bp: float = 1.0,
        reporting_currency: Optional[str] = None,
    ) -> PricingResult:
        """Price an FX swap. Optionally compute curve sensitivities (analytic and FD) and PV01."""
        return price_fx_swap(
            swap=swap,
            market=market,
            calculate_sensitivities=calculate_sensitivities,
            calculate_fd_sensitivities=calculate_fd_sensitivities,
            calculate_pv01=calculate_pv01,
            pv01_curve_currency=pv01_curve_currency,
            pv01_bump_bp=pv01_bump_bp,
            reporting_currency=reporting_currency,
        )


schema = strawberry.Schema(query=Query)
