"""
Unit tests for OrderService
"""
import pytest
from unittest.mock import Mock
from datetime import date

from orders_api.core.exceptions import NotFoundError, ValidationError
from orders_api.domain.order import Order, OrderPayload
from orders_api.repositories.base import OrderStore
from orders_api.services.order_service import OrderService


@pytest.fixture
def valid_payload(sample_order_fields):
    return OrderPayload(**sample_order_fields)


class TestCreateOrder:

    def test_create_then_get_returns_same_fields(self, order_service, valid_payload):
        created = order_service.create_order(valid_payload)

        fetched = order_service.get_order_by_id(created.id)

        assert created.id is not None
        assert fetched == created
        assert fetched.customer_name == valid_payload.customer_name
        assert fetched.order_date == valid_payload.order_date
        assert fetched.shipping_address == valid_payload.shipping_address
        assert fetched.total == valid_payload.total

    def test_create_ignores_payload_id(self, order_service, sample_order_fields):
        created = order_service.create_order(OrderPayload(id=500, **sample_order_fields))

        assert created.id == 1

    def test_create_always_inserts(self, order_service, order_store, valid_payload):
        first = order_service.create_order(valid_payload)
        second = order_service.create_order(valid_payload)

        assert first.id != second.id
        assert len(order_store) == 2

    def test_empty_customer_name_rejected(self, order_service, sample_order_fields):
        sample_order_fields["customer_name"] = ""

        with pytest.raises(ValidationError) as exc_info:
            order_service.create_order(OrderPayload(**sample_order_fields))

        assert str(exc_info.value) == "Customer name is mandatory"

    @pytest.mark.parametrize("total", [0, -10.0])
    def test_non_positive_total_rejected(self, order_service, sample_order_fields, total):
        sample_order_fields["total"] = total

        with pytest.raises(ValidationError, match="Total must be positive"):
            order_service.create_order(OrderPayload(**sample_order_fields))

    def test_invalid_payload_never_reaches_store(self, sample_order_fields):
        store = Mock(spec=OrderStore)
        service = OrderService(store)
        sample_order_fields["shipping_address"] = "  "

        with pytest.raises(ValidationError, match="Shipping address is mandatory"):
            service.create_order(OrderPayload(**sample_order_fields))

        store.save.assert_not_called()

    def test_store_error_propagates(self, valid_payload):
        store = Mock(spec=OrderStore)
        store.save.side_effect = RuntimeError("database unavailable")

        with pytest.raises(RuntimeError, match="database unavailable"):
            OrderService(store).create_order(valid_payload)


class TestUpdateOrder:

    def test_update_is_full_overwrite(self, order_service, valid_payload):
        stored = order_service.create_order(valid_payload)
        assert stored.id == 1

        today = date.today()
        updated = order_service.update_order(1, OrderPayload(
            customer_name="Jane Doe",
            shipping_address="456 Oak St",
            total=150.00,
            order_date=today
        ))

        assert updated.id == 1
        assert updated.customer_name == "Jane Doe"
        assert updated.shipping_address == "456 Oak St"
        assert updated.total == 150.00
        assert updated.order_date == today
        assert order_service.get_order_by_id(1) == updated

    def test_update_clears_order_date(self, order_service, valid_payload):
        stored = order_service.create_order(valid_payload)

        updated = order_service.update_order(stored.id, OrderPayload(
            customer_name="Jane Doe", shipping_address="456 Oak St", total=10.0
        ))

        assert updated.order_date is None

    def test_path_id_is_authoritative(self, order_service, valid_payload):
        first = order_service.create_order(valid_payload)
        second = order_service.create_order(valid_payload)

        order_service.update_order(first.id, OrderPayload(
            id=second.id, customer_name="Jane Doe", shipping_address="456 Oak St", total=150.0
        ))

        assert order_service.get_order_by_id(first.id).customer_name == "Jane Doe"
        assert order_service.get_order_by_id(second.id).customer_name == valid_payload.customer_name

    def test_update_missing_order_raises_not_found(self, order_service, valid_payload):
        with pytest.raises(NotFoundError, match="Order not found with id: 999"):
            order_service.update_order(999, valid_payload)

    def test_update_validates_before_saving(self, order_service, order_store, valid_payload):
        stored = order_service.create_order(valid_payload)

        with pytest.raises(ValidationError, match="Customer name is mandatory"):
            order_service.update_order(stored.id, OrderPayload(
                customer_name=" ", shipping_address="456 Oak St", total=150.0
            ))

        assert order_store.find_by_id(stored.id) == stored


class TestGetAndDelete:

    def test_get_missing_order_raises_not_found(self, order_service):
        with pytest.raises(NotFoundError) as exc_info:
            order_service.get_order_by_id(42)

        assert exc_info.value.order_id == 42

    def test_delete_is_terminal(self, order_service, valid_payload):
        stored = order_service.create_order(valid_payload)

        assert order_service.delete_order(stored.id) is None

        with pytest.raises(NotFoundError):
            order_service.get_order_by_id(stored.id)

    def test_delete_missing_order_raises_not_found(self):
        store = Mock(spec=OrderStore)
        store.find_by_id.return_value = None

        with pytest.raises(NotFoundError):
            OrderService(store).delete_order(999)

        store.delete.assert_not_called()

    def test_delete_passes_loaded_order_to_store(self):
        order = Order(id=3, customer_name="Jane", shipping_address="Oak", total=1.0)
        store = Mock(spec=OrderStore)
        store.find_by_id.return_value = order

        OrderService(store).delete_order(3)

        store.delete.assert_called_once_with(order)

    def test_get_all_orders(self, order_service, valid_payload):
        assert order_service.get_all_orders() == []

        order_service.create_order(valid_payload)
        order_service.create_order(valid_payload)

        assert [o.id for o in order_service.get_all_orders()] == [1, 2]
