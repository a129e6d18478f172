"""
Shared exception types for sol_price.

Provider failures are not exceptions: they travel as ProviderError values
inside a resolution outcome. These types cover caller and setup mistakes.
"""

from __future__ import annotations


class SolPriceError(Exception):
    """Base exception for sol_price; catch this for any package-raised error."""

    pass


class UnsupportedAssetError(SolPriceError):
    """Raised when a requested asset symbol has no provider mapping."""


class ConfigError(SolPriceError):
    """Raised when config.yaml or an environment override cannot be used."""


__all__ = ["SolPriceError", "UnsupportedAssetError", "ConfigError"]
