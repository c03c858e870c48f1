"""
Pytest fixtures and configuration for the CRM Dashboard API tests

No test needs a running database: repositories are exercised against a
mocked cursor and endpoints against mocked repositories.
"""
import pytest
from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

from fastapi.testclient import TestClient


@pytest.fixture(scope="session")
def client():
    """
    TestClient for the FastAPI app

    Used without a `with` block so the lifespan (pool creation) never runs.
    """
    from crm_api.main import app
    return TestClient(app)


@pytest.fixture
def mock_cursor():
    """A RealDictCursor stand-in"""
    return MagicMock()


@pytest.fixture
def sample_user_row():
    return {
        "user_id": 1,
        "email": "admin@crm.com",
        "full_name": "Admin User",
        "role": "admin",
        "avatar_initials": "AU",
    }


@pytest.fixture
def sample_customer_rows():
    return [
        {
            "customer_id": 3,
            "first_name": "Sarah",
            "last_name": "Johnson",
            "email": "sarah.j@email.com",
            "phone": "+1-555-0103",
            "avatar_initials": "SJ",
            "total_orders": 4,
            "total_spent": Decimal("1250.50"),
            "created_at": datetime(2025, 3, 5, 10, 30),
        },
        {
            "customer_id": 1,
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@email.com",
            "phone": None,
            "avatar_initials": "JD",
            "total_orders": 0,
            "total_spent": Decimal("0.00"),
            "created_at": datetime(2024, 11, 20, 8, 0),
        },
    ]


@pytest.fixture
def sample_product_rows():
    return [
        {
            "product_id": 2,
            "product_name": "Laptop Pro 15",
            "category": "Electronics",
            "price": Decimal("1299.99"),
            "stock_quantity": 25,
            "description": "15 inch laptop",
        },
        {
            "product_id": 7,
            "product_name": "Wireless Mouse",
            "category": "Electronics",
            "price": Decimal("29.99"),
            "stock_quantity": 0,
            "description": None,
        },
    ]


@pytest.fixture
def sample_order_rows():
    return [
        {
            "order_number": "ORD-1002",
            "order_date": datetime(2025, 3, 12, 14, 5),
            "total_amount": Decimal("100.00"),
            "status": "completed",
            "payment_status": "paid",
            "first_name": "Sarah",
            "last_name": "Johnson",
            "email": "sarah.j@email.com",
            "avatar_initials": "SJ",
        },
        {
            "order_number": "ORD-1001",
            "order_date": datetime(2025, 3, 10, 9, 0),
            "total_amount": Decimal("50.00"),
            "status": "completed",
            "payment_status": "paid",
            "first_name": "John",
            "last_name": "Doe",
            "email": "john.doe@email.com",
            "avatar_initials": "JD",
        },
    ]


@pytest.fixture
def sample_revenue_rows():
    return [
        {"date": date(2025, 1, 6), "daily_revenue": Decimal("1200.50")},
        {"date": date(2025, 1, 7), "daily_revenue": Decimal("980.00")},
        {"date": date(2025, 1, 8), "daily_revenue": Decimal("1430.25")},
    ]
