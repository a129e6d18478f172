"""
CoinGecko spot price provider.

Uses the simple-price endpoint; an API key is optional:
  GET https://api.coingecko.com/api/v3/simple/price?ids=solana&vs_currencies=usd
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .base import PriceAdapter, ProviderId, require_path

COINGECKO_BASE_URL = "https://api.coingecko.com/api/v3"
DEFAULT_API_KEY_HEADER = "x-cg-demo-api-key"

_SYMBOL_TO_ID = {
    "SOL": "solana",
}


class CoinGeckoAdapter(PriceAdapter):
    """Fetch spot prices from the CoinGecko public API."""

    provider_id = ProviderId.COINGECKO
    default_base_url = COINGECKO_BASE_URL

    def __init__(self, *, api_key_header: str = DEFAULT_API_KEY_HEADER, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.api_key_header = api_key_header

    def build_request(
        self, symbol: str, api_key: Optional[str]
    ) -> Tuple[str, Dict[str, str], Dict[str, str]]:
        coin_id = self._lookup(_SYMBOL_TO_ID, symbol)
        params = {"ids": coin_id, "vs_currencies": "usd"}
        # Anonymous access is allowed; only send the header when a key exists.
        headers = {self.api_key_header: api_key} if api_key else {}
        return f"{self.base_url}/simple/price", params, headers

    def extract_price(self, payload: Any, symbol: str) -> Any:
        return require_path(payload, f"{_SYMBOL_TO_ID[symbol]}.usd")
