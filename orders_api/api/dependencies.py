"""
FastAPI dependency providers for the order store and service
"""
from functools import lru_cache

from fastapi import Depends

from orders_api.core.config import settings
from orders_api.repositories import InMemoryOrderRepository, OrderRepository, OrderStore
from orders_api.services.order_service import OrderService


@lru_cache
def get_order_store() -> OrderStore:
    """
    Order store for the running application

    PostgreSQL when DATABASE_URL is configured, otherwise a process-wide
    in-memory store.

    Usage:
        app.dependency_overrides[get_order_store] = lambda: InMemoryOrderRepository()
    """
    if settings.uses_database:
        return OrderRepository()
    return InMemoryOrderRepository()


def get_order_service(store: OrderStore = Depends(get_order_store)) -> OrderService:
    return OrderService(store)
