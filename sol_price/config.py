"""
Load config from config.yaml with optional env overrides.
Single source of truth for provider endpoints, HTTP timeout, API key and log level.
"""

from __future__ import annotations

import copy
import math
import os
from pathlib import Path
from typing import Optional

import yaml

from .errors import ConfigError

CONFIG_ENV_VAR = "SOL_PRICE_CONFIG"

# Defaults if no YAML or env
_DEFAULTS = {
    "asset": {"symbol": "SOL"},
    "http": {"timeout_s": 5.0},
    "coingecko": {
        "base_url": "https://api.coingecko.com/api/v3",
        "api_key": None,
        "api_key_header": "x-cg-demo-api-key",
    },
    "coincap": {"base_url": "https://api.coincap.io/v2"},
    "binance": {"base_url": "https://api.binance.com", "quote_asset": "USDT"},
    "logging": {"level": "ERROR"},
}


def _config_yaml_path() -> Path:
    """$SOL_PRICE_CONFIG if set, else config.yaml in the working directory."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.cwd() / "config.yaml"


def _load_yaml(path: Optional[Path] = None) -> dict:
    config_path = path or _config_yaml_path()
    if not config_path.exists():
        return {}
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config {config_path} must be a mapping, got {type(data).__name__}")
    return data


def _deep_merge(base: dict, override: dict) -> dict:
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _env_overrides() -> dict:
    overrides: dict = {}
    api_key = os.environ.get("COINGECKO_API_KEY")
    if api_key:
        overrides.setdefault("coingecko", {})["api_key"] = api_key
    timeout = os.environ.get("SOL_PRICE_HTTP_TIMEOUT")
    if timeout:
        try:
            overrides.setdefault("http", {})["timeout_s"] = float(timeout)
        except ValueError:
            raise ConfigError(f"SOL_PRICE_HTTP_TIMEOUT must be a number, got {timeout!r}") from None
    level = os.environ.get("SOL_PRICE_LOG_LEVEL")
    if level:
        overrides.setdefault("logging", {})["level"] = level.upper()
    return overrides


def get_config(path: Optional[Path] = None) -> dict:
    """Return merged config: defaults <- config.yaml <- env."""
    merged = _deep_merge(copy.deepcopy(_DEFAULTS), _load_yaml(path))
    merged = _deep_merge(merged, _env_overrides())
    timeout = merged["http"]["timeout_s"]
    if (
        isinstance(timeout, bool)
        or not isinstance(timeout, (int, float))
        or not math.isfinite(timeout)
        or timeout <= 0
    ):
        raise ConfigError(f"http.timeout_s must be a positive finite number, got {timeout!r}")
    return merged


# Convenience accessors
def http_timeout() -> float:
    return float(get_config()["http"]["timeout_s"])


def coingecko_api_key() -> Optional[str]:
    return get_config()["coingecko"]["api_key"] or None


def log_level() -> str:
    return str(get_config()["logging"]["level"]).upper()
