"""
Service Layer - Business Operations
"""
from orders_api.services.order_service import OrderService

__all__ = ['OrderService']
