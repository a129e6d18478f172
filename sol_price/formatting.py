"""
Render a resolution outcome as console text.

Pure functions: printing and exit codes are the CLI's job.
"""

from __future__ import annotations

from typing import List

from .providers.base import ErrorKind, PriceQuote, ProviderError
from .providers.resolver import Failure, ResolutionOutcome, Success

_KIND_LABELS = {
    ErrorKind.NETWORK: "network error",
    ErrorKind.RATE_LIMIT: "rate limited",
    ErrorKind.PARSE_FAILURE: "unexpected response",
    ErrorKind.UNAUTHORIZED: "unauthorized",
    ErrorKind.UNKNOWN: "unknown error",
}

TROUBLESHOOTING_HINT = (
    "Check your network connection, verify COINGECKO_API_KEY if you set one, "
    "or wait a minute in case you hit a provider rate limit."
)


def format_quote(quote: PriceQuote) -> str:
    return f"{quote.symbol} price: ${quote.price_usd:,.2f} (source: {quote.source.display_name})"


def format_error(error: ProviderError) -> str:
    return f"{error.provider.display_name}: {_KIND_LABELS[error.kind]} - {error.message}"


def format_outcome(outcome: ResolutionOutcome) -> str:
    """Return display text for a Success or a Failure."""
    if isinstance(outcome, Success):
        return format_quote(outcome.quote)
    if isinstance(outcome, Failure):
        lines: List[str] = [f"Failed to fetch {outcome.symbol} price from all providers:"]
        lines.extend(f"  - {format_error(e)}" for e in outcome.errors)
        lines.append(TROUBLESHOOTING_HINT)
        return "\n".join(lines)
    raise TypeError(f"Not a resolution outcome: {outcome!r}")
