"""
Price providers and the fallback chain that ties them together.

Each provider is an adapter over one HTTP API; the resolver tries them in
fixed priority order (CoinGecko, CoinCap, Binance) and returns either the
first quote or the full list of per-provider failures.
"""

from __future__ import annotations

from .base import (
    SUPPORTED_ASSETS,
    ErrorKind,
    PriceAdapter,
    PriceQuote,
    ProviderError,
    ProviderId,
)
from .binance import BinanceAdapter
from .coincap import CoinCapAdapter
from .coingecko import CoinGeckoAdapter
from .defaults import create_default_registry, create_resolver
from .registry import ProviderRegistry
from .resolver import Failure, FallbackResolver, ResolutionOutcome, Success

__all__ = [
    "SUPPORTED_ASSETS",
    "ErrorKind",
    "PriceAdapter",
    "PriceQuote",
    "ProviderError",
    "ProviderId",
    "CoinGeckoAdapter",
    "CoinCapAdapter",
    "BinanceAdapter",
    "ProviderRegistry",
    "FallbackResolver",
    "Success",
    "Failure",
    "ResolutionOutcome",
    "create_default_registry",
    "create_resolver",
]
