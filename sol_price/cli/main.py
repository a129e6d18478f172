"""
sol-price: print the current SOL/USD price.

Tries CoinGecko, then CoinCap, then Binance. Reads COINGECKO_API_KEY from the
environment or a .env file in the working directory.
Exit: 0 price printed, 1 every provider failed, 2 usage or config error.
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .._version import __version__
from ..config import get_config
from ..errors import ConfigError, SolPriceError
from ..formatting import format_outcome
from ..providers.defaults import create_resolver

EXIT_OK = 0
EXIT_ALL_PROVIDERS_FAILED = 1
EXIT_USAGE = 2

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sol-price",
        description="Fetch the current SOL/USD price with CoinGecko -> CoinCap -> Binance fallback",
    )
    parser.add_argument("--symbol", default=None, help="Asset symbol (default: from config, SOL)")
    parser.add_argument("--timeout", type=float, default=None, help="Per-request HTTP timeout in seconds")
    parser.add_argument("--config", default=None, help="Path to a config.yaml")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {level_name!r}")
    logging.basicConfig(level=level, format=_LOG_FORMAT, stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.timeout is not None and (not math.isfinite(args.timeout) or args.timeout <= 0):
        parser.error("--timeout must be a positive finite number")

    # Variables already in the environment win over .env entries.
    load_dotenv(Path.cwd() / ".env", override=False)

    try:
        config_path = Path(args.config) if args.config else None
        if config_path is not None and not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        cfg = get_config(config_path)
        if args.timeout is not None:
            cfg["http"]["timeout_s"] = args.timeout
        _configure_logging(str(cfg["logging"]["level"]), args.verbose)

        symbol = str(args.symbol or cfg["asset"]["symbol"]).upper()
        resolver = create_resolver(cfg)
        print(f"Fetching current {symbol} price...", file=sys.stderr, flush=True)
        outcome = resolver.resolve(symbol, cfg["coingecko"]["api_key"] or None)
    except SolPriceError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    text = format_outcome(outcome)
    if outcome.ok:
        print(text)
        return EXIT_OK
    print(text, file=sys.stderr)
    return EXIT_ALL_PROVIDERS_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
