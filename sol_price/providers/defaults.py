"""
Default provider wiring.

Registers the built-in adapters with settings from config and builds the
CoinGecko -> CoinCap -> Binance resolver.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import requests

from ..config import get_config
from .base import ProviderId
from .binance import BinanceAdapter
from .coincap import CoinCapAdapter
from .coingecko import CoinGeckoAdapter
from .registry import ProviderRegistry
from .resolver import FallbackResolver

logger = logging.getLogger(__name__)


def create_default_registry(
    config: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
) -> ProviderRegistry:
    """Create a registry with all built-in adapters configured from `config`."""
    cfg = config if config is not None else get_config()
    timeout_s = float(cfg["http"]["timeout_s"])

    registry = ProviderRegistry()
    registry.register(
        ProviderId.COINGECKO,
        CoinGeckoAdapter(
            base_url=cfg["coingecko"]["base_url"],
            api_key_header=cfg["coingecko"]["api_key_header"],
            timeout_s=timeout_s,
            session=session,
        ),
    )
    registry.register(
        ProviderId.COINCAP,
        CoinCapAdapter(
            base_url=cfg["coincap"]["base_url"],
            timeout_s=timeout_s,
            session=session,
        ),
    )
    registry.register(
        ProviderId.BINANCE,
        BinanceAdapter(
            base_url=cfg["binance"]["base_url"],
            quote_asset=cfg["binance"]["quote_asset"],
            timeout_s=timeout_s,
            session=session,
        ),
    )
    return registry


def create_resolver(
    config: Optional[Dict[str, Any]] = None,
    session: Optional[requests.Session] = None,
) -> FallbackResolver:
    """Build the default fallback resolver."""
    registry = create_default_registry(config, session=session)
    resolver = FallbackResolver(registry.build_chain())
    logger.debug(
        "Provider chain: %s", " -> ".join(p.value for p in resolver.providers)
    )
    return resolver
