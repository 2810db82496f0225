"""
In-memory order store

Keeps orders in a dict keyed by id. Used when no DATABASE_URL is
configured and by the test suite.
"""
import itertools
import threading
from typing import Dict, List, Optional

from orders_api.domain.order import Order
from orders_api.repositories.base import OrderStore


class InMemoryOrderRepository(OrderStore):
    """
    Order store backed by a dict

    Ids come from a counter starting at 1 and are never reused.
    Stored orders are copied in and out so callers can't mutate the store.
    """

    def __init__(self):
        self._orders: Dict[int, Order] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save(self, order: Order) -> Order:
        with self._lock:
            if order.id is None:
                order = order.model_copy(update={"id": next(self._ids)})
            else:
                order = order.model_copy()
            self._orders[order.id] = order
            return order.model_copy()

    def find_by_id(self, order_id: int) -> Optional[Order]:
        with self._lock:
            order = self._orders.get(order_id)
            return order.model_copy() if order else None

    def find_all(self) -> List[Order]:
        with self._lock:
            return [order.model_copy() for order in self._orders.values()]

    def delete(self, order: Order) -> None:
        with self._lock:
            self._orders.pop(order.id, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)
