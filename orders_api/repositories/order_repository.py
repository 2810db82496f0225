"""
Order Repository - PostgreSQL data access for orders

All SQL for the orders table lives here. Rows are returned as Order
domain models.
"""
from typing import List, Optional

from orders_api.core.database import get_db_connection_dict
from orders_api.core.exceptions import NotFoundError
from orders_api.domain.order import Order
from orders_api.repositories.base import OrderStore


ORDER_COLUMNS = "id, customer_name, order_date, shipping_address, total"


class OrderRepository(OrderStore):
    """
    Repository for Order data access backed by PostgreSQL

    Opens one connection per call and commits writes before closing it.
    Database errors propagate to the caller.
    """

    def save(self, order: Order) -> Order:
        """
        Insert a new order or overwrite an existing one

        Args:
            order: Order to store; id None means insert

        Returns:
            Stored Order with its database id
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            if order.id is None:
                cursor.execute(f"""
                    INSERT INTO orders (customer_name, order_date, shipping_address, total)
                    VALUES (%s, %s, %s, %s)
                    RETURNING {ORDER_COLUMNS}
                """, (order.customer_name, order.order_date, order.shipping_address, order.total))
            else:
                cursor.execute(f"""
                    UPDATE orders
                    SET customer_name = %s,
                        order_date = %s,
                        shipping_address = %s,
                        total = %s
                    WHERE id = %s
                    RETURNING {ORDER_COLUMNS}
                """, (order.customer_name, order.order_date, order.shipping_address, order.total, order.id))

            row = cursor.fetchone()
            if row is None:
                raise NotFoundError(order.id)
            conn.commit()

            return Order(**row)

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()

    def find_by_id(self, order_id: int) -> Optional[Order]:
        """
        Find order by ID

        Returns:
            Order or None if not found
        """
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                WHERE id = %s
            """, (order_id,))

            row = cursor.fetchone()
            if not row:
                return None

            return Order(**row)

        finally:
            cursor.close()
            conn.close()

    def find_all(self) -> List[Order]:
        """Return all orders, lowest id first"""
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute(f"""
                SELECT {ORDER_COLUMNS}
                FROM orders
                ORDER BY id
            """)

            return [Order(**row) for row in cursor.fetchall()]

        finally:
            cursor.close()
            conn.close()

    def delete(self, order: Order) -> None:
        conn = get_db_connection_dict()
        cursor = conn.cursor()

        try:
            cursor.execute("DELETE FROM orders WHERE id = %s", (order.id,))
            conn.commit()

        except Exception:
            conn.rollback()
            raise

        finally:
            cursor.close()
            conn.close()
