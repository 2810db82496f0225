"""
Repository Layer - Data Access

Repositories hide storage details from the service layer and return
Order domain models.
"""
from orders_api.repositories.base import OrderStore
from orders_api.repositories.order_repository import OrderRepository
from orders_api.repositories.memory_repository import InMemoryOrderRepository

__all__ = [
    'OrderStore',
    'OrderRepository',
    'InMemoryOrderRepository'
]
