"""
Order domain exceptions

Raised by the service layer. The API layer catches them and translates
them into HTTP responses (ValidationError -> 400, NotFoundError -> 404).
"""


class ValidationError(Exception):
    """An order payload violates a field constraint"""


class NotFoundError(Exception):
    """The referenced order does not exist"""

    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order not found with id: {order_id}")
