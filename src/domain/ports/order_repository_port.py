"""
Port (interface) for order storage.
Infrastructure adapters (e.g. InMemoryOrderRepository) must implement this interface.
"""

from abc import ABC, abstractmethod

from src.domain.entities.order import Order, OrderKind


class IOrderRepository(ABC):
    @abstractmethod
    def add(self, order: Order) -> None:
        """Append an already-validated order to the collection of its kind."""
        ...

    @abstractmethod
    def list_all(self, kind: OrderKind) -> list[Order]:
        """Return a snapshot copy of all orders of *kind* in insertion order."""
        ...
