"""
Domain entities for buy and sell orders.
Zero external dependencies; pure Python dataclasses only.

Orders are immutable once created; the repository never exposes update or
delete operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar
from uuid import UUID


class OrderKind(str, Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Order:
    order_id: UUID
    stock_symbol: str
    stock_name: str
    quantity: int
    price: float
    date_and_time_of_order: datetime

    kind: ClassVar[OrderKind]

    @property
    def trade_amount(self) -> float:
        return self.quantity * self.price


@dataclass(frozen=True)
class BuyOrder(Order):
    kind: ClassVar[OrderKind] = OrderKind.BUY


@dataclass(frozen=True)
class SellOrder(Order):
    kind: ClassVar[OrderKind] = OrderKind.SELL
