"""
Pytest fixtures and configuration for the Orders API tests

This file provides shared fixtures that can be used across all test modules.
"""
import os
from datetime import date

import pytest
from fastapi.testclient import TestClient

from orders_api.api.dependencies import get_order_store
from orders_api.main import app
from orders_api.repositories.memory_repository import InMemoryOrderRepository
from orders_api.services.order_service import OrderService


@pytest.fixture(scope="session")
def database_url():
    """
    Provides the database URL for integration tests

    Scope: session (created once per test session)
    """
    url = os.getenv("DATABASE_URL")
    if not url:
        pytest.skip("DATABASE_URL not configured")
    return url


@pytest.fixture
def order_store():
    """Fresh in-memory order store for each test"""
    return InMemoryOrderRepository()


@pytest.fixture
def order_service(order_store):
    return OrderService(order_store)


@pytest.fixture
def client(order_store):
    """
    TestClient whose order endpoints run against the in-memory store

    Dependency overrides are cleared after the test.
    """
    app.dependency_overrides[get_order_store] = lambda: order_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def sample_order_data():
    """
    Provides a valid order request body (JSON field names)
    """
    return {
        "customerName": "Jane Doe",
        "orderDate": "2024-01-01",
        "shippingAddress": "456 Elm St",
        "total": 200.0
    }


@pytest.fixture
def sample_order_fields():
    """
    Provides valid order fields (Python field names)
    """
    return {
        "customer_name": "John Doe",
        "order_date": date.today(),
        "shipping_address": "123 Main St",
        "total": 100.0
    }
