"""
Port (interface) for market data providers.
Infrastructure adapters (e.g. FinnhubMarketDataProvider) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.market_data import CompanyProfile, PriceQuote


class IMarketDataProvider(ABC):
    @abstractmethod
    def get_company_profile(self, symbol: str) -> Optional[CompanyProfile]:
        """Return the company profile for *symbol*, or None if unavailable."""
        ...

    @abstractmethod
    def get_price_quote(self, symbol: str) -> Optional[PriceQuote]:
        """Return the current price quote for *symbol*, or None if unavailable."""
        ...
