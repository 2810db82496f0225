"""
Order table model
"""
from sqlalchemy import Column, Date, Float, Integer, String

from orders_api.core.database import Base


class Order(Base):
    """
    orders table - one row per order, id generated by the database
    """
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)

    customer_name = Column(String(255), nullable=False)
    order_date = Column(Date)
    shipping_address = Column(String(500), nullable=False)
    total = Column(Float, nullable=False)  # double precision
