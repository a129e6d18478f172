"""Tests for outcome rendering."""

from __future__ import annotations

import pytest

from sol_price.formatting import TROUBLESHOOTING_HINT, format_error, format_outcome, format_quote
from sol_price.providers.base import ErrorKind, PriceQuote, ProviderError, ProviderId
from sol_price.providers.resolver import Failure, Success

QUOTE = PriceQuote(
    symbol="SOL",
    price_usd=142.3512,
    source=ProviderId.COINCAP,
    fetched_at_utc="2026-01-01T00:00:00+00:00",
)


def test_success_shows_symbol_price_and_source():
    text = format_outcome(Success(quote=QUOTE))
    assert text == "SOL price: $142.35 (source: CoinCap)"


def test_success_ignores_earlier_errors():
    err = ProviderError(ProviderId.COINGECKO, ErrorKind.NETWORK, "timed out")
    assert format_outcome(Success(quote=QUOTE, errors=(err,))) == format_quote(QUOTE)


def test_large_price_gets_thousands_separator():
    quote = PriceQuote("SOL", 1234.5, ProviderId.BINANCE, "2026-01-01T00:00:00+00:00")
    assert format_quote(quote) == "SOL price: $1,234.50 (source: Binance)"


def test_failure_lists_every_attempt_in_order():
    failure = Failure(
        errors=(
            ProviderError(ProviderId.COINGECKO, ErrorKind.RATE_LIMIT, "rate limited (HTTP 429)", 429),
            ProviderError(ProviderId.COINCAP, ErrorKind.NETWORK, "ConnectionError: refused"),
            ProviderError(ProviderId.BINANCE, ErrorKind.PARSE_FAILURE, "response missing price"),
        )
    )
    lines = format_outcome(failure).splitlines()

    assert lines[0] == "Failed to fetch SOL price from all providers:"
    assert lines[1] == "  - CoinGecko: rate limited - rate limited (HTTP 429)"
    assert lines[2] == "  - CoinCap: network error - ConnectionError: refused"
    assert lines[3] == "  - Binance: unexpected response - response missing price"
    assert lines[4] == TROUBLESHOOTING_HINT
    assert "COINGECKO_API_KEY" in TROUBLESHOOTING_HINT


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_error_kind_has_a_label(kind):
    text = format_error(ProviderError(ProviderId.BINANCE, kind, "x"))
    assert text.startswith("Binance: ")


def test_rejects_non_outcome():
    with pytest.raises(TypeError):
        format_outcome(QUOTE)
