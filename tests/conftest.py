"""
Pytest configuration and fixtures.
"""
import pytest
from fastapi.testclient import TestClient

from bank_api.app.main import create_app
from bank_api.app.schemas.payment import PaymentRequest
from bank_api.app.services.payment_service import PaymentLedger


@pytest.fixture
def ledger() -> PaymentLedger:
    """Create an empty ledger with the default acceptance token."""
    return PaymentLedger("896983")


@pytest.fixture
def client(ledger: PaymentLedger) -> TestClient:
    """Create a test HTTP client for an app serving ``ledger``."""
    return TestClient(create_app(ledger))


@pytest.fixture
def good_payment() -> PaymentRequest:
    return PaymentRequest(credit_card="1230896983", amount=43.7)


@pytest.fixture
def bad_payment() -> PaymentRequest:
    return PaymentRequest(credit_card="1234567890", amount=43.7)
