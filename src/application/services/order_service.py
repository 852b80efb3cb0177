"""
Application service: the order workflow (timestamp → validate → persist).

Business decisions owned here:
  - The order timestamp always comes from the injected clock; whatever the
    caller put in date_and_time_of_order is overwritten.
  - Validation runs before any mutation, so a failed request leaves the
    repository untouched.

The IOrderRepository adapter is injected; no infrastructure imports appear here.
"""

import dataclasses
import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import uuid4

from src.application.dto.orders import (
    BuyOrderRequest,
    BuyOrderResponse,
    OrderRequest,
    SellOrderRequest,
    SellOrderResponse,
)
from src.application.validation import validate_order_request
from src.domain.entities.order import BuyOrder, OrderKind, SellOrder
from src.domain.exceptions import ValidationError
from src.domain.ports.order_repository_port import IOrderRepository

logger = logging.getLogger(__name__)


class OrderService:
    def __init__(
        self,
        repository: IOrderRepository,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._repository = repository
        self._clock = clock

    def create_buy_order(
        self, request: Optional[BuyOrderRequest]
    ) -> BuyOrderResponse:
        """Validate and store a buy order.

        Raises:
            ValueError: if *request* is None.
            ValidationError: if any field rule is violated; nothing is stored.
        """
        order = self._build_order(request, BuyOrder)
        self._repository.add(order)
        logger.info(
            "Created buy order %s: %d x %s @ %s",
            order.order_id, order.quantity, order.stock_symbol, order.price,
        )
        return BuyOrderResponse.from_order(order)

    def create_sell_order(
        self, request: Optional[SellOrderRequest]
    ) -> SellOrderResponse:
        """Validate and store a sell order.

        Raises:
            ValueError: if *request* is None.
            ValidationError: if any field rule is violated; nothing is stored.
        """
        order = self._build_order(request, SellOrder)
        self._repository.add(order)
        logger.info(
            "Created sell order %s: %d x %s @ %s",
            order.order_id, order.quantity, order.stock_symbol, order.price,
        )
        return SellOrderResponse.from_order(order)

    def list_buy_orders(self) -> list[BuyOrderResponse]:
        return [
            BuyOrderResponse.from_order(order)
            for order in self._repository.list_all(OrderKind.BUY)
        ]

    def list_sell_orders(self) -> list[SellOrderResponse]:
        return [
            SellOrderResponse.from_order(order)
            for order in self._repository.list_all(OrderKind.SELL)
        ]

    def _build_order(self, request: Optional[OrderRequest], order_cls):
        if request is None:
            raise ValueError("order request must not be None")

        request = dataclasses.replace(request, date_and_time_of_order=self._clock())
        errors = validate_order_request(request)
        if errors:
            logger.info(
                "Rejected %s order for %r: %s",
                order_cls.kind.value, request.stock_symbol, "; ".join(errors),
            )
            raise ValidationError(errors)

        return order_cls(
            order_id=uuid4(),
            stock_symbol=request.stock_symbol.strip().upper(),
            stock_name=request.stock_name.strip(),
            quantity=request.quantity,
            price=float(request.price),
            date_and_time_of_order=request.date_and_time_of_order,
        )
