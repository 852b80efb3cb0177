"""
FastAPI entry point.

This module is the Composition Root: it loads settings, wires the Finnhub
adapter and the in-memory order repository into an AppContext and passes it
to the trade routes. Tests call create_app() with fakes instead.

Run locally:
    uvicorn src.infrastructure.entrypoints.fastapi_app:app --reload --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from src.domain.ports.market_data_port import IMarketDataProvider
from src.domain.ports.order_repository_port import IOrderRepository
from src.infrastructure.config.settings import (
    TradingSettings,
    load_settings,
    validate_settings,
)
from src.infrastructure.entrypoints import trade_routes
from src.infrastructure.entrypoints.app_context import AppContext
from src.infrastructure.logging_config import configure_logging
from src.infrastructure.market_data.finnhub_adapter import FinnhubMarketDataProvider
from src.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)

logger = logging.getLogger(__name__)

APP_NAME = "Stocks Trading App"


def create_app(
    settings: Optional[TradingSettings] = None,
    market_data: Optional[IMarketDataProvider] = None,
    repository: Optional[IOrderRepository] = None,
) -> FastAPI:
    """Wire all dependencies once and return the FastAPI application."""
    # The raw environment is only checked when the settings came from it.
    validation_environ = {} if settings is not None else None
    settings = settings or load_settings()
    configure_logging(settings.log_level)

    if market_data is None:
        market_data = FinnhubMarketDataProvider(
            token=settings.finnhub_token,
            base_url=settings.finnhub_base_url,
            timeout=settings.finnhub_timeout_seconds,
        )
    context = AppContext.build(
        settings=settings,
        repository=repository or InMemoryOrderRepository(),
        market_data=market_data,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Starting %s (default symbol %s)", APP_NAME, settings.default_stock_symbol
        )
        for problem in validate_settings(settings, validation_environ):
            logger.warning("Configuration: %s", problem)
        yield
        logger.info("Shutting down %s", APP_NAME)
        close = getattr(context.market_data, "close", None)
        if callable(close):
            close()

    app = FastAPI(title=APP_NAME, lifespan=lifespan)
    app.state.context = context
    app.include_router(trade_routes.router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()
