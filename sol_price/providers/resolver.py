"""
Fallback resolution: try providers in priority order, stop at the first price.

Each provider is called once, synchronously, before the next one is touched.
Failures are collected as ProviderError values so the outcome carries one
entry per attempted provider, in attempt order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple, Union

from ..errors import SolPriceError, UnsupportedAssetError
from .base import (
    SUPPORTED_ASSETS,
    ErrorKind,
    PriceAdapter,
    PriceQuote,
    ProviderError,
    ProviderId,
)

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL = "SOL"


@dataclass(frozen=True)
class Success:
    """A provider returned a price. `errors` lists the providers that failed first."""

    quote: PriceQuote
    errors: Tuple[ProviderError, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Every provider failed. Never empty."""

    errors: Tuple[ProviderError, ...]
    symbol: str = DEFAULT_SYMBOL

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Failure requires at least one ProviderError")

    @property
    def ok(self) -> bool:
        return False


ResolutionOutcome = Union[Success, Failure]


class FallbackResolver:
    """
    Ordered chain of price adapters with fail-soft fallback.

    The resolver holds no state between calls; the same adapters and the
    same upstream responses always produce the same outcome shape.
    """

    def __init__(self, adapters: Sequence[PriceAdapter]) -> None:
        if not adapters:
            raise ValueError("FallbackResolver needs at least one adapter")
        self._adapters: Tuple[PriceAdapter, ...] = tuple(adapters)

    @property
    def providers(self) -> List[ProviderId]:
        return [a.provider_id for a in self._adapters]

    def resolve(
        self, symbol: str = DEFAULT_SYMBOL, api_key: Optional[str] = None
    ) -> ResolutionOutcome:
        """
        Resolve the current USD price of `symbol`.

        `api_key` is handed to the CoinGecko adapter only. Raises
        UnsupportedAssetError before any request for symbols outside the
        supported set.
        """
        symbol = symbol.upper()
        if symbol not in SUPPORTED_ASSETS:
            raise UnsupportedAssetError(
                f"Unsupported asset {symbol!r}; supported: {', '.join(SUPPORTED_ASSETS)}"
            )

        errors: List[ProviderError] = []
        for adapter in self._adapters:
            key = api_key if adapter.provider_id is ProviderId.COINGECKO else None
            logger.debug("Trying %s for %s", adapter.provider_name, symbol)
            try:
                result = adapter.fetch_price(symbol, key)
            except SolPriceError:
                raise
            except Exception as exc:  # adapter bug; keep it in the trail
                logger.warning("%s raised unexpectedly: %s", adapter.provider_name, exc)
                result = ProviderError(
                    provider=adapter.provider_id,
                    kind=ErrorKind.UNKNOWN,
                    message=f"{type(exc).__name__}: {exc}",
                )

            if isinstance(result, PriceQuote):
                if errors:
                    logger.info(
                        "Resolved %s via %s after %d failed provider(s)",
                        symbol, adapter.provider_name, len(errors),
                    )
                return Success(quote=result, errors=tuple(errors))
            errors.append(result)

        logger.warning("All %d price providers failed for %s", len(errors), symbol)
        return Failure(errors=tuple(errors), symbol=symbol)
