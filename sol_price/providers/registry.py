"""
Provider registry: maps each ProviderId to the adapter that implements it.

Usage:
    registry = ProviderRegistry()
    registry.register(ProviderId.COINGECKO, CoinGeckoAdapter)
    registry.register(ProviderId.BINANCE, BinanceAdapter(quote_asset="USDT"))

    adapters = registry.build_chain()
"""

from __future__ import annotations

import logging
from typing import Dict, List, Type, Union

from .base import PriceAdapter, ProviderId

logger = logging.getLogger(__name__)

AdapterFactory = Union[Type[PriceAdapter], PriceAdapter]


class ProviderRegistry:
    """Registry of adapter classes or ready-made instances, keyed by ProviderId."""

    def __init__(self) -> None:
        self._factories: Dict[ProviderId, AdapterFactory] = {}
        self._instances: Dict[ProviderId, PriceAdapter] = {}

    def register(self, provider: ProviderId, factory: AdapterFactory) -> None:
        """Register (or replace) the adapter for a provider."""
        adapter_id = getattr(factory, "provider_id", None)
        if adapter_id is not provider:
            raise ValueError(
                f"Adapter {factory!r} implements {adapter_id}, not {provider}"
            )
        self._factories[provider] = factory
        self._instances.pop(provider, None)
        logger.debug("Registered price provider: %s", provider.value)

    def get(self, provider: ProviderId) -> PriceAdapter:
        """Get or instantiate the adapter for a provider."""
        if provider not in self._instances:
            factory = self._factories.get(provider)
            if factory is None:
                raise KeyError(
                    f"Unknown price provider '{provider.value}'. "
                    f"Available: {[p.value for p in self._factories]}"
                )
            self._instances[provider] = factory() if isinstance(factory, type) else factory
        return self._instances[provider]

    def build_chain(self) -> List[PriceAdapter]:
        """Build the adapter list in ProviderId declaration order, skipping unregistered providers."""
        return [self.get(p) for p in ProviderId if p in self._factories]
