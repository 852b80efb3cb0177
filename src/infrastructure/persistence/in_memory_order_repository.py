"""
Infrastructure adapter: process-local lists → IOrderRepository.

One instance is owned by the AppContext built in the composition root and
lives for the whole process. FastAPI runs sync routes on a worker thread
pool, so every read and write goes through a single lock.
"""

import threading

from src.domain.entities.order import Order, OrderKind
from src.domain.ports.order_repository_port import IOrderRepository


class InMemoryOrderRepository(IOrderRepository):
    """Append-only buy and sell order lists kept in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._orders: dict[OrderKind, list[Order]] = {
            OrderKind.BUY: [],
            OrderKind.SELL: [],
        }

    def add(self, order: Order) -> None:
        orders = self._bucket(getattr(order, "kind", None))
        with self._lock:
            orders.append(order)

    def list_all(self, kind: OrderKind) -> list[Order]:
        orders = self._bucket(kind)
        with self._lock:
            return list(orders)

    def _bucket(self, kind) -> list[Order]:
        try:
            return self._orders[kind]
        except KeyError:
            raise TypeError(f"Unsupported order kind: {kind!r}") from None
