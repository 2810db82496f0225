"""
Order Domain Models

Represents the order entity and the request payload used to create or
replace it. JSON field names are camelCase (customerName, orderDate,
shippingAddress, total); snake_case names are accepted on input too.
"""
import math
from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


CUSTOMER_NAME_MANDATORY = "Customer name is mandatory"
SHIPPING_ADDRESS_MANDATORY = "Shipping address is mandatory"
TOTAL_MUST_BE_POSITIVE = "Total must be positive"


class Order(BaseModel):
    """
    Order domain model - a persisted customer order

    Fields:
        id: Order ID, assigned by the store on insert (None before saving)
        customer_name: Customer name
        order_date: Date the order was placed (optional)
        shipping_address: Address the order ships to
        total: Order total, strictly positive
    """

    id: Optional[int] = Field(None, description="Order ID")
    customer_name: str = Field(..., description="Customer name")
    order_date: Optional[date] = Field(None, description="Order date")
    shipping_address: str = Field(..., description="Shipping address")
    total: float = Field(..., description="Order total")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dict with camelCase keys"""
        return self.model_dump(mode="json", by_alias=True)


class OrderPayload(BaseModel):
    """
    Request body for creating or replacing an order

    Every field is optional here so that missing or blank values reach
    validate_order and produce its messages. An id in the body is ignored.
    """

    id: Optional[int] = None
    customer_name: Optional[str] = None
    order_date: Optional[date] = None
    shipping_address: Optional[str] = None
    total: Optional[float] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False)

    @field_validator("total", mode="before")
    @classmethod
    def total_not_bool(cls, value):
        # JSON true/false would otherwise coerce to 1.0/0.0
        if isinstance(value, bool):
            raise ValueError("Input should be a valid number")
        return value

    def order_fields(self) -> dict:
        """The four mutable order fields, without id"""
        return {
            "customer_name": self.customer_name,
            "order_date": self.order_date,
            "shipping_address": self.shipping_address,
            "total": self.total,
        }


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_order(payload: OrderPayload) -> Optional[str]:
    """
    Check an order payload against the field rules

    Rules are checked in order and the first violation wins:
    customer name not blank, shipping address not blank, total finite and > 0.
    The order date has no presence rule.

    Returns:
        The message of the first violated rule, or None when valid
    """
    if _is_blank(payload.customer_name):
        return CUSTOMER_NAME_MANDATORY
    if _is_blank(payload.shipping_address):
        return SHIPPING_ADDRESS_MANDATORY
    if payload.total is None or not math.isfinite(payload.total) or payload.total <= 0:
        return TOTAL_MUST_BE_POSITIVE
    return None
