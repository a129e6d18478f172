"""
Fake price adapters for tests: deterministic quotes, fail-N-then-succeed, always-fail.

No live network; used by test_provider_chain and test_console_entrypoints.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from sol_price.providers.base import ErrorKind, PriceQuote, ProviderError, ProviderId

# Deterministic timestamp for reproducible tests.
FAKE_FETCHED_AT = "2026-01-01T00:00:00+00:00"


class _FakeBase:
    def __init__(self, provider: ProviderId) -> None:
        self.provider_id = provider
        self.calls: List[Tuple[str, Optional[str]]] = []

    @property
    def provider_name(self) -> str:
        return self.provider_id.value

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _quote(self, symbol: str, price: float) -> PriceQuote:
        return PriceQuote(
            symbol=symbol,
            price_usd=price,
            source=self.provider_id,
            fetched_at_utc=FAKE_FETCHED_AT,
        )


# ---------------------------------------------------------------------------
# Always succeed with a fixed price
# ---------------------------------------------------------------------------


class FakeAdapter(_FakeBase):
    """Adapter that always returns the same quote. No network."""

    def __init__(self, provider: ProviderId, price: float = 150.0) -> None:
        super().__init__(provider)
        self._price = price

    def fetch_price(self, symbol: str, api_key: Optional[str] = None):
        self.calls.append((symbol, api_key))
        return self._quote(symbol, self._price)


# ---------------------------------------------------------------------------
# Fail N times then succeed
# ---------------------------------------------------------------------------


class FakeAdapterFailNThenSucceed(_FakeBase):
    """Adapter that returns a ProviderError for the first N calls, then a quote."""

    def __init__(
        self,
        provider: ProviderId,
        fail_times: int,
        price: float = 150.0,
        kind: ErrorKind = ErrorKind.NETWORK,
    ) -> None:
        super().__init__(provider)
        self._fail_times = fail_times
        self._price = price
        self._kind = kind

    def fetch_price(self, symbol: str, api_key: Optional[str] = None):
        self.calls.append((symbol, api_key))
        if self.call_count <= self._fail_times:
            return ProviderError(
                provider=self.provider_id,
                kind=self._kind,
                message=f"{self.provider_name} simulated failure #{self.call_count}",
            )
        return self._quote(symbol, self._price)


# ---------------------------------------------------------------------------
# Always fail
# ---------------------------------------------------------------------------


class FakeAdapterAlwaysFail(_FakeBase):
    """Adapter that always returns a ProviderError of the given kind. No network."""

    def __init__(
        self,
        provider: ProviderId,
        kind: ErrorKind = ErrorKind.NETWORK,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(provider)
        self._kind = kind
        self._status_code = status_code

    def fetch_price(self, symbol: str, api_key: Optional[str] = None):
        self.calls.append((symbol, api_key))
        return ProviderError(
            provider=self.provider_id,
            kind=self._kind,
            message=f"{self.provider_name} always fails",
            status_code=self._status_code,
        )
