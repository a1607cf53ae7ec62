"""Products: FX single forward, FX swap."""

from fxpricing.products.fx import FxSingle
from fxpricing.products.fx_swap import FxSwap

__all__ = ["FxSingle", "FxSwap"]
