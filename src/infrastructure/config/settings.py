"""
Application settings loaded from environment variables.

A .env file in the working directory is read first (python-dotenv) so local
runs do not need exported variables. NO SECRETS ARE STORED IN CODE.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from src.infrastructure.market_data.finnhub_adapter import DEFAULT_BASE_URL

FALLBACK_STOCK_SYMBOL = "MSFT"


@dataclass(frozen=True)
class TradingSettings:
    default_stock_symbol: str = FALLBACK_STOCK_SYMBOL
    default_order_quantity: int = 0
    finnhub_token: str = ""
    finnhub_base_url: str = DEFAULT_BASE_URL
    finnhub_timeout_seconds: float = 10.0
    log_level: str = "INFO"


def load_settings(environ: Optional[Mapping[str, str]] = None) -> TradingSettings:
    """Build TradingSettings from *environ* (defaults to os.environ after load_dotenv).

    Unparseable numbers fall back to their defaults; validate_settings() reports them.
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    symbol = environ.get("TRADING_DEFAULT_STOCK_SYMBOL", "").strip().upper()
    return TradingSettings(
        default_stock_symbol=symbol or FALLBACK_STOCK_SYMBOL,
        default_order_quantity=_parse_int(
            environ.get("TRADING_DEFAULT_ORDER_QUANTITY"), 0
        ),
        finnhub_token=environ.get("FINNHUB_TOKEN", "").strip(),
        finnhub_base_url=environ.get("FINNHUB_BASE_URL", "").strip() or DEFAULT_BASE_URL,
        finnhub_timeout_seconds=_parse_float(
            environ.get("FINNHUB_TIMEOUT_SECONDS"), 10.0
        ),
        log_level=_parse_log_level(environ.get("LOG_LEVEL"), "INFO"),
    )


def validate_settings(
    settings: TradingSettings, environ: Optional[Mapping[str, str]] = None
) -> list[str]:
    """Describe every setting that is missing or fell back to its default.

    *environ* is the raw mapping load_settings() read; pass an empty mapping
    when the settings were built by hand so only their values are checked.
    Nothing here is fatal: the caller logs the returned messages.
    """
    environ = os.environ if environ is None else environ
    errors = []

    if not settings.finnhub_token:
        errors.append("FINNHUB_TOKEN not set; quotes will be unavailable")

    raw_quantity = environ.get("TRADING_DEFAULT_ORDER_QUANTITY")
    if raw_quantity and _parse_int(raw_quantity, None) is None:
        errors.append(
            f"TRADING_DEFAULT_ORDER_QUANTITY={raw_quantity!r} is not an integer; using 0"
        )

    if settings.default_order_quantity < 0:
        errors.append("TRADING_DEFAULT_ORDER_QUANTITY must not be negative")

    raw_timeout = environ.get("FINNHUB_TIMEOUT_SECONDS")
    if raw_timeout and _parse_float(raw_timeout, None) is None:
        errors.append(
            f"FINNHUB_TIMEOUT_SECONDS={raw_timeout!r} is not a positive number; using 10"
        )

    raw_level = environ.get("LOG_LEVEL")
    if raw_level and _parse_log_level(raw_level, None) is None:
        errors.append(f"LOG_LEVEL={raw_level!r} is not a logging level; using INFO")

    return errors


def _parse_int(raw: Optional[str], default):
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _parse_float(raw: Optional[str], default):
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def _parse_log_level(raw: Optional[str], default):
    if raw is None or not raw.strip():
        return default
    name = raw.strip().upper()
    # getLevelName maps known names to their numeric level and anything else to a str.
    return name if isinstance(logging.getLevelName(name), int) else default
