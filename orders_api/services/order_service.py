"""
Order Service
Business operations on orders: validation and not-found semantics on top
of an order store
"""
import logging
from typing import List

from orders_api.core.exceptions import NotFoundError, ValidationError
from orders_api.domain.order import Order, OrderPayload, validate_order
from orders_api.repositories.base import OrderStore

logger = logging.getLogger(__name__)


class OrderService:
    """
    Service for order management

    Handles:
    - Payload validation before anything is persisted
    - Create, fetch, full-replace update, delete and list
    - Translating a missing order into NotFoundError
    """

    def __init__(self, store: OrderStore):
        self.store = store

    def _validate(self, payload: OrderPayload):
        error = validate_order(payload)
        if error:
            logger.warning(f"Rejected order payload: {error}")
            raise ValidationError(error)

    def _load(self, order_id: int) -> Order:
        order = self.store.find_by_id(order_id)
        if order is None:
            logger.warning(f"Order {order_id} not found")
            raise NotFoundError(order_id)
        return order

    def create_order(self, payload: OrderPayload) -> Order:
        """
        Validate and insert a new order

        Any id in the payload is ignored; the store assigns one.

        Raises:
            ValidationError: first violated field rule
        """
        self._validate(payload)

        order = self.store.save(Order(**payload.order_fields()))
        logger.info(f"Created order {order.id}")
        return order

    def get_order_by_id(self, order_id: int) -> Order:
        """
        Raises:
            NotFoundError: no order with this id
        """
        return self._load(order_id)

    def update_order(self, order_id: int, payload: OrderPayload) -> Order:
        """
        Replace the four mutable fields of an existing order

        customer_name, order_date, shipping_address and total are all
        overwritten from the payload. The path id is authoritative; an id
        inside the payload is ignored.

        Raises:
            ValidationError: first violated field rule
            NotFoundError: no order with this id
        """
        self._validate(payload)

        existing = self._load(order_id)
        order = self.store.save(existing.model_copy(update=payload.order_fields()))
        logger.info(f"Updated order {order.id}")
        return order

    def delete_order(self, order_id: int) -> None:
        """
        Raises:
            NotFoundError: no order with this id
        """
        order = self._load(order_id)
        self.store.delete(order)
        logger.info(f"Deleted order {order_id}")

    def get_all_orders(self) -> List[Order]:
        return self.store.find_all()
