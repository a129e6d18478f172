"""
Provider interfaces and data contracts.

Every price provider is a PriceAdapter subclass bound to one ProviderId. The
base class owns the HTTP round trip and the status-code mapping; subclasses
only describe their request and where the USD price lives in the response.

Provider-side failures are returned as ProviderError values, never raised, so
a fallback chain can collect a complete diagnostic trail.
"""

from __future__ import annotations

import enum
import logging
import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

import requests

from ..errors import UnsupportedAssetError

logger = logging.getLogger(__name__)

SUPPORTED_ASSETS: Tuple[str, ...] = ("SOL",)
DEFAULT_TIMEOUT_S = 5.0


class ProviderId(enum.Enum):
    """Known price providers. Declaration order is the fallback priority."""

    COINGECKO = "coingecko"
    COINCAP = "coincap"
    BINANCE = "binance"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ProviderId.COINGECKO: "CoinGecko",
    ProviderId.COINCAP: "CoinCap",
    ProviderId.BINANCE: "Binance",
}


class ErrorKind(enum.Enum):
    """Why a single provider attempt failed."""

    NETWORK = "network"
    RATE_LIMIT = "rate_limit"
    PARSE_FAILURE = "parse_failure"
    UNAUTHORIZED = "unauthorized"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class PriceQuote:
    """Immutable USD price for one asset, as reported by one provider."""

    symbol: str
    price_usd: float
    source: ProviderId
    fetched_at_utc: str


@dataclass(frozen=True)
class ProviderError:
    """One failed provider attempt."""

    provider: ProviderId
    kind: ErrorKind
    message: str
    status_code: Optional[int] = None


FetchResult = Union[PriceQuote, ProviderError]


class AdapterFailure(Exception):
    """Internal signal used while an adapter call is in flight."""

    def __init__(self, kind: ErrorKind, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.status_code = status_code


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="seconds")


def require_path(payload: Any, path: str) -> Any:
    """Walk a dotted key path through nested dicts; missing keys are a parse failure."""
    cur: Any = payload
    for key in path.split("."):
        if not isinstance(cur, dict) or key not in cur:
            raise AdapterFailure(ErrorKind.PARSE_FAILURE, f"response missing {path}")
        cur = cur[key]
    return cur


def parse_price_value(raw: Any) -> float:
    """
    Convert a provider's price token to a float.

    Accepts JSON numbers and numeric strings (scientific notation included).
    Booleans, non-finite values and non-positive prices are rejected.
    """
    if raw is None or isinstance(raw, bool):
        raise AdapterFailure(ErrorKind.PARSE_FAILURE, f"price is not numeric: {raw!r}")
    if isinstance(raw, (int, float)):
        try:
            value = float(raw)
        except OverflowError:
            raise AdapterFailure(ErrorKind.PARSE_FAILURE, "price is out of float range") from None
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise AdapterFailure(ErrorKind.PARSE_FAILURE, f"price is not numeric: {raw!r}") from None
    else:
        raise AdapterFailure(ErrorKind.PARSE_FAILURE, f"price is not numeric: {raw!r}")

    if not math.isfinite(value):
        raise AdapterFailure(ErrorKind.PARSE_FAILURE, f"price is not finite: {raw!r}")
    if value <= 0:
        raise AdapterFailure(ErrorKind.PARSE_FAILURE, f"non-positive price: {raw!r}")
    return value


class PriceAdapter:
    """
    Base class for a single provider's spot price endpoint.

    Subclasses set `provider_id` and `default_base_url` and implement
    `build_request` and `extract_price`. One call to `fetch_price` issues
    exactly one HTTP request; there are no retries at this level.
    """

    provider_id: ClassVar[ProviderId]
    default_base_url: ClassVar[str]

    RATE_LIMIT_STATUS_CODES: ClassVar[Tuple[int, ...]] = (429,)
    UNAUTHORIZED_STATUS_CODES: ClassVar[Tuple[int, ...]] = (401, 403)

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self.timeout_s = timeout_s
        self._session = session

    @property
    def provider_name(self) -> str:
        return self.provider_id.value

    def build_request(
        self, symbol: str, api_key: Optional[str]
    ) -> Tuple[str, Dict[str, str], Dict[str, str]]:
        """Return (url, query params, headers) for the given symbol."""
        raise NotImplementedError

    def extract_price(self, payload: Any, symbol: str) -> Any:
        """Return the raw USD price token from a decoded response body."""
        raise NotImplementedError

    def fetch_price(self, symbol: str, api_key: Optional[str] = None) -> FetchResult:
        """
        Fetch the current USD price for `symbol`.

        Returns a PriceQuote on success or a ProviderError describing the
        failure. Raises UnsupportedAssetError, before any request, when the
        provider has no mapping for the symbol.
        """
        symbol = symbol.upper()
        url, params, headers = self.build_request(symbol, api_key)
        try:
            payload = self._get_json(url, params, headers)
            price = parse_price_value(self.extract_price(payload, symbol))
        except AdapterFailure as exc:
            logger.warning(
                "%s failed for %s: %s (%s)",
                self.provider_name, symbol, exc.kind.value, exc.message,
            )
            return ProviderError(
                provider=self.provider_id,
                kind=exc.kind,
                message=exc.message,
                status_code=exc.status_code,
            )

        logger.debug("%s returned %s=%s", self.provider_name, symbol, price)
        return PriceQuote(
            symbol=symbol,
            price_usd=price,
            source=self.provider_id,
            fetched_at_utc=_utc_now_iso(),
        )

    def _lookup(self, mapping: Mapping[str, str], symbol: str) -> str:
        try:
            return mapping[symbol]
        except KeyError:
            raise UnsupportedAssetError(
                f"{self.provider_id.display_name} has no mapping for {symbol}; "
                f"supported: {', '.join(sorted(mapping))}"
            ) from None

    def _get_json(self, url: str, params: Dict[str, str], headers: Dict[str, str]) -> Any:
        http = self._session if self._session is not None else requests
        try:
            resp = http.get(url, params=params, headers=headers, timeout=self.timeout_s)
        except requests.Timeout:
            raise AdapterFailure(
                ErrorKind.NETWORK, f"request timed out after {self.timeout_s:g}s"
            ) from None
        except requests.RequestException as exc:
            raise AdapterFailure(ErrorKind.NETWORK, f"{type(exc).__name__}: {exc}") from exc

        status = resp.status_code
        if status in self.RATE_LIMIT_STATUS_CODES:
            raise AdapterFailure(ErrorKind.RATE_LIMIT, f"rate limited (HTTP {status})", status)
        if status in self.UNAUTHORIZED_STATUS_CODES:
            raise AdapterFailure(ErrorKind.UNAUTHORIZED, f"unauthorized (HTTP {status})", status)
        if not 200 <= status < 300:
            raise AdapterFailure(ErrorKind.UNKNOWN, f"unexpected HTTP {status}", status)

        try:
            return resp.json()
        except ValueError:
            raise AdapterFailure(
                ErrorKind.PARSE_FAILURE, "response body is not valid JSON", status
            ) from None
