"""
Domain Layer - Business Entities

Pydantic models for the order entity and its request payload.
"""
from orders_api.domain.order import Order, OrderPayload, validate_order

__all__ = ['Order', 'OrderPayload', 'validate_order']
