from datetime import datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from src.application.services.order_service import OrderService
from src.domain.entities.market_data import CompanyProfile, PriceQuote
from src.domain.ports.market_data_port import IMarketDataProvider
from src.infrastructure.config.settings import TradingSettings
from src.infrastructure.entrypoints.fastapi_app import create_app
from src.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

FIXED_NOW = datetime(2024, 3, 15, 10, 30, 0)


class FakeMarketDataProvider(IMarketDataProvider):
    """Serves canned profiles and quotes; unknown symbols return None."""

    def __init__(
        self,
        profiles: Optional[dict[str, CompanyProfile]] = None,
        quotes: Optional[dict[str, PriceQuote]] = None,
    ) -> None:
        self.profiles = profiles or {}
        self.quotes = quotes or {}
        self.calls: list[tuple[str, str]] = []
        self.closed = False

    def get_company_profile(self, symbol: str) -> Optional[CompanyProfile]:
        self.calls.append(("profile", symbol))
        return self.profiles.get(symbol)

    def get_price_quote(self, symbol: str) -> Optional[PriceQuote]:
        self.calls.append(("quote", symbol))
        return self.quotes.get(symbol)

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def order_service(repository) -> OrderService:
    return OrderService(repository, clock=lambda: FIXED_NOW)


@pytest.fixture
def market_data() -> FakeMarketDataProvider:
    return FakeMarketDataProvider(
        profiles={"MSFT": CompanyProfile(ticker="MSFT", name="Microsoft Corp")},
        quotes={"MSFT": PriceQuote(current_price=412.5, previous_close=410.0)},
    )


@pytest.fixture
def settings() -> TradingSettings:
    return TradingSettings(
        default_stock_symbol="MSFT",
        default_order_quantity=100,
        finnhub_token="test-token",
    )


@pytest.fixture
def client(settings, market_data, repository):
    app = create_app(settings=settings, market_data=market_data, repository=repository)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture
def make_market_data():
    return FakeMarketDataProvider
