"""
Binance spot price provider.

Uses the public ticker endpoint (no authentication required):
  GET https://api.binance.com/api/v3/ticker/price?symbol={pair}

USDT is treated as USD. HTTP 418 is Binance's status for an IP that kept
going after 429s, so it is reported as a rate limit too.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .base import PriceAdapter, ProviderId, require_path

BINANCE_BASE_URL = "https://api.binance.com"
DEFAULT_QUOTE_ASSET = "USDT"

_SUPPORTED_BASES = {
    "SOL": "SOL",
}


class BinanceAdapter(PriceAdapter):
    """Fetch spot prices from the Binance public API."""

    provider_id = ProviderId.BINANCE
    default_base_url = BINANCE_BASE_URL

    RATE_LIMIT_STATUS_CODES = (418, 429)

    def __init__(self, *, quote_asset: str = DEFAULT_QUOTE_ASSET, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.quote_asset = quote_asset.upper()

    def trading_pair(self, symbol: str) -> str:
        return self._lookup(_SUPPORTED_BASES, symbol) + self.quote_asset

    def build_request(
        self, symbol: str, api_key: Optional[str]
    ) -> Tuple[str, Dict[str, str], Dict[str, str]]:
        return f"{self.base_url}/api/v3/ticker/price", {"symbol": self.trading_pair(symbol)}, {}

    def extract_price(self, payload: Any, symbol: str) -> Any:
        return require_path(payload, "price")
