"""
Request and response DTOs for the order workflow.
Depends only on Domain entities; no infrastructure imports.

Request fields are Optional because they arrive straight from form binding;
validate_order_request() decides what is acceptable.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union
from uuid import UUID

from src.domain.entities.order import BuyOrder, SellOrder


@dataclass
class BuyOrderRequest:
    stock_symbol: str = ""
    stock_name: str = ""
    quantity: Optional[int] = None
    price: Optional[float] = None
    date_and_time_of_order: Optional[datetime] = None


@dataclass
class SellOrderRequest:
    stock_symbol: str = ""
    stock_name: str = ""
    quantity: Optional[int] = None
    price: Optional[float] = None
    date_and_time_of_order: Optional[datetime] = None


OrderRequest = Union[BuyOrderRequest, SellOrderRequest]


@dataclass(frozen=True)
class BuyOrderResponse:
    buy_order_id: UUID
    stock_symbol: str
    stock_name: str
    quantity: int
    price: float
    date_and_time_of_order: datetime
    trade_amount: float

    @classmethod
    def from_order(cls, order: BuyOrder) -> "BuyOrderResponse":
        return cls(
            buy_order_id=order.order_id,
            stock_symbol=order.stock_symbol,
            stock_name=order.stock_name,
            quantity=order.quantity,
            price=order.price,
            date_and_time_of_order=order.date_and_time_of_order,
            trade_amount=order.trade_amount,
        )


@dataclass(frozen=True)
class SellOrderResponse:
    sell_order_id: UUID
    stock_symbol: str
    stock_name: str
    quantity: int
    price: float
    date_and_time_of_order: datetime
    trade_amount: float

    @classmethod
    def from_order(cls, order: SellOrder) -> "SellOrderResponse":
        return cls(
            sell_order_id=order.order_id,
            stock_symbol=order.stock_symbol,
            stock_name=order.stock_name,
            quantity=order.quantity,
            price=order.price,
            date_and_time_of_order=order.date_and_time_of_order,
            trade_amount=order.trade_amount,
        )
