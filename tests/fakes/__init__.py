"""Fake price adapters for resolver and CLI tests (no live network)."""

from .providers import (
    FAKE_FETCHED_AT,
    FakeAdapter,
    FakeAdapterAlwaysFail,
    FakeAdapterFailNThenSucceed,
)

__all__ = [
    "FAKE_FETCHED_AT",
    "FakeAdapter",
    "FakeAdapterAlwaysFail",
    "FakeAdapterFailNThenSucceed",
]
