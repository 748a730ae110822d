"""Pytest fixtures for testing"""

import pytest
from datetime import date
from fastapi.testclient import TestClient
from payment_gateway.api.main import create_app
from payment_gateway.api.dependencies import get_clock
from payment_gateway.domain.models import PaymentRequest
from payment_gateway.infrastructure.storage.repositories import InMemoryPaymentRepository


# Fixed "now" for expiry checks
TODAY = date(2026, 6, 15)


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def valid_request() -> PaymentRequest:
    """Payment request that passes every validation rule on TODAY"""
    return PaymentRequest(
        card_number="4111111111111111",
        expiry_month=12,
        expiry_year=2099,
        currency="USD",
        amount=1050,
        cvv=123,
    )


@pytest.fixture
def repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client with a fresh store and a fixed clock"""
    app = create_app()
    app.dependency_overrides[get_clock] = lambda: (lambda: TODAY)
    return TestClient(app)
