"""
Top-level public API surface.
Fetch the current SOL/USD price with CoinGecko -> CoinCap -> Binance fallback.
Does not import cli.
"""

from __future__ import annotations

from ._version import __version__
from .errors import ConfigError, SolPriceError, UnsupportedAssetError
from .formatting import format_outcome
from .providers import (
    ErrorKind,
    Failure,
    FallbackResolver,
    PriceQuote,
    ProviderError,
    ProviderId,
    ResolutionOutcome,
    Success,
    create_resolver,
)

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "ConfigError",
    "SolPriceError",
    "UnsupportedAssetError",
    "ErrorKind",
    "Failure",
    "FallbackResolver",
    "PriceQuote",
    "ProviderError",
    "ProviderId",
    "ResolutionOutcome",
    "Success",
    "create_resolver",
    "format_outcome",
]
