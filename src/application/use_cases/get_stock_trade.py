"""
Use-case: assemble the default trade screen for a stock symbol.
Depends only on Domain ports and entities; no infrastructure imports.
"""

from src.domain.entities.market_data import StockTrade
from src.domain.ports.market_data_port import IMarketDataProvider


class GetStockTradeUseCase:
    def __init__(self, provider: IMarketDataProvider) -> None:
        self._provider = provider

    def execute(self, symbol: str, quantity: int = 0) -> StockTrade:
        """Fetch profile and quote for *symbol* (uppercased).

        Name and price are filled only when both lookups succeed; otherwise the
        screen degrades to the bare symbol.

        Raises:
            ValueError: if *symbol* is blank.
        """
        if not symbol or not symbol.strip():
            raise ValueError("symbol must be a non-empty string")
        symbol = symbol.upper().strip()

        profile = self._provider.get_company_profile(symbol)
        quote = self._provider.get_price_quote(symbol)
        if profile is None or quote is None:
            return StockTrade(stock_symbol=symbol, quantity=quantity)

        return StockTrade(
            stock_symbol=profile.ticker or symbol,
            stock_name=profile.name,
            price=quote.current_price,
            quantity=quantity,
        )
