import threading
from datetime import datetime
from uuid import uuid4

import pytest

from src.domain.entities.order import BuyOrder, OrderKind, SellOrder
from src.infrastructure.persistence.in_memory_order_repository import (
    InMemoryOrderRepository,
)


def _order(cls=BuyOrder, symbol="MSFT"):
    return cls(
        order_id=uuid4(),
        stock_symbol=symbol,
        stock_name="Microsoft",
        quantity=1,
        price=10.0,
        date_and_time_of_order=datetime(2024, 1, 1),
    )


def test_orders_are_kept_per_kind_in_insertion_order():
    repo = InMemoryOrderRepository()
    first, second = _order(), _order(symbol="AAPL")
    sell = _order(SellOrder)

    repo.add(first)
    repo.add(sell)
    repo.add(second)

    assert repo.list_all(OrderKind.BUY) == [first, second]
    assert repo.list_all(OrderKind.SELL) == [sell]


def test_list_all_returns_a_snapshot():
    repo = InMemoryOrderRepository()
    repo.add(_order())

    snapshot = repo.list_all(OrderKind.BUY)
    snapshot.clear()

    assert len(repo.list_all(OrderKind.BUY)) == 1


def test_unknown_kind_is_rejected():
    repo = InMemoryOrderRepository()
    with pytest.raises(TypeError):
        repo.list_all("hold")
    with pytest.raises(TypeError):
        repo.add(object())


def test_concurrent_adds_are_not_lost():
    repo = InMemoryOrderRepository()
    per_thread = 200

    def worker():
        for _ in range(per_thread):
            repo.add(_order())
            repo.list_all(OrderKind.BUY)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    orders = repo.list_all(OrderKind.BUY)
    assert len(orders) == 8 * per_thread
    assert len({o.order_id for o in orders}) == len(orders)


def test_orders_are_immutable():
    order = _order()
    with pytest.raises(AttributeError):
        order.quantity = 5
    assert order.trade_amount == 10.0
