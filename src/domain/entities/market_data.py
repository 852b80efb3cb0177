"""
Domain entities for market data shown on the trade screen.
Zero external dependencies; pure Python dataclasses only.

These replace the raw key-value payloads returned by the quote provider:
every field that the provider may omit is Optional.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CompanyProfile:
    ticker: str
    name: str
    exchange: Optional[str] = None
    currency: Optional[str] = None
    country: Optional[str] = None
    industry: Optional[str] = None
    logo: Optional[str] = None
    web_url: Optional[str] = None


@dataclass(frozen=True)
class PriceQuote:
    current_price: float
    change: Optional[float] = None
    percent_change: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    open: Optional[float] = None
    previous_close: Optional[float] = None


@dataclass(frozen=True)
class StockTrade:
    """Snapshot rendered on the default trade screen.

    stock_name and price are None when the quote provider had no data.
    """

    stock_symbol: str
    stock_name: Optional[str] = None
    price: Optional[float] = None
    quantity: int = 0
