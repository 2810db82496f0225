"""
Order store interface

The service layer depends only on this interface; concrete adapters
(PostgreSQL, in-memory) are chosen by the application wiring.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from orders_api.domain.order import Order


class OrderStore(ABC):
    @abstractmethod
    def save(self, order: Order) -> Order:
        """
        Persist an order

        Inserts when order.id is None (the store assigns the id),
        otherwise overwrites the stored order with that id.

        Returns:
            The stored order, including its id
        """

    @abstractmethod
    def find_by_id(self, order_id: int) -> Optional[Order]:
        """Return the order with this id, or None"""

    @abstractmethod
    def find_all(self) -> List[Order]:
        """Return every stored order"""

    @abstractmethod
    def delete(self, order: Order) -> None:
        """Remove the stored order"""
