"""
CoinCap spot price provider.

Uses the public asset endpoint (no authentication required):
  GET https://api.coincap.io/v2/assets/{id}

The price arrives as a string-encoded decimal under data.priceUsd.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

from .base import PriceAdapter, ProviderId, require_path

COINCAP_BASE_URL = "https://api.coincap.io/v2"

_SYMBOL_TO_ID = {
    "SOL": "solana",
}


class CoinCapAdapter(PriceAdapter):
    """Fetch spot prices from the CoinCap public API."""

    provider_id = ProviderId.COINCAP
    default_base_url = COINCAP_BASE_URL

    def build_request(
        self, symbol: str, api_key: Optional[str]
    ) -> Tuple[str, Dict[str, str], Dict[str, str]]:
        asset_id = self._lookup(_SYMBOL_TO_ID, symbol)
        return f"{self.base_url}/assets/{asset_id}", {}, {}

    def extract_price(self, payload: Any, symbol: str) -> Any:
        return require_path(payload, "data.priceUsd")
