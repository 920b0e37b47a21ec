"""Pytest fixtures for testing"""

import pytest
from decimal import Decimal
from fastapi.testclient import TestClient
from balance_gateway.api.main import create_app
from balance_gateway.domain.models import Transaction, TransactionKind


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client against a fresh app"""
    return TestClient(create_app())


@pytest.fixture
def mixed_transactions() -> list[Transaction]:
    """Credits and debits with cent precision"""
    return [
        Transaction(kind=TransactionKind.CREDIT, amount=Decimal("500.10")),
        Transaction(kind=TransactionKind.DEBIT, amount=Decimal("300.20")),
        Transaction(kind=TransactionKind.CREDIT, amount=Decimal("200.30")),
        Transaction(kind=TransactionKind.DEBIT, amount=Decimal("150.45")),
        Transaction(kind=TransactionKind.CREDIT, amount=Decimal("0.10")),
        Transaction(kind=TransactionKind.CREDIT, amount=Decimal("0.20")),
    ]
