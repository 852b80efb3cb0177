"""
Process-wide application context.

Built once by create_app() and stored on app.state.context. It is the single
owner of the in-memory order repository; request handlers reach it through
the get_context dependency instead of importing module-level singletons.
"""

from dataclasses import dataclass

from fastapi import Request

from src.application.services.order_service import OrderService
from src.application.use_cases.get_stock_trade import GetStockTradeUseCase
from src.domain.ports.market_data_port import IMarketDataProvider
from src.domain.ports.order_repository_port import IOrderRepository
from src.infrastructure.config.settings import TradingSettings


@dataclass
class AppContext:
    settings: TradingSettings
    repository: IOrderRepository
    market_data: IMarketDataProvider
    order_service: OrderService
    stock_trade_use_case: GetStockTradeUseCase

    @classmethod
    def build(
        cls,
        settings: TradingSettings,
        repository: IOrderRepository,
        market_data: IMarketDataProvider,
    ) -> "AppContext":
        return cls(
            settings=settings,
            repository=repository,
            market_data=market_data,
            order_service=OrderService(repository),
            stock_trade_use_case=GetStockTradeUseCase(market_data),
        )


def get_context(request: Request) -> AppContext:
    """FastAPI dependency: the AppContext owned by the running app."""
    return request.app.state.context
