"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from credit_ledger.api.main import create_app
from credit_ledger.infrastructure.database.models import Base
from credit_ledger.infrastructure.database.session import get_db
from credit_ledger.domain.models import Account, Transaction


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# First month of the projection window used across tests
REFERENCE = date(2024, 11, 15)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def visa() -> Account:
    return Account(id=1, name="Visa", limit=100.0)


@pytest.fixture
def mastercard() -> Account:
    return Account(id=2, name="Mastercard", limit=500.0)


@pytest.fixture
def sample_transactions() -> list[Transaction]:
    """Mixed ledger: installment purchases on two cards plus non-card entries"""
    return [
        Transaction(
            id=1,
            kind="expense",
            account="Visa",
            amount=300.0,
            transaction_date=date(2024, 10, 28),
            installment_count=3,
            first_payment_date=date(2024, 11, 5),
            description="Laptop",
        ),
        Transaction(
            id=2,
            kind="expense",
            account="Mastercard",
            amount=120.0,
            transaction_date=date(2024, 12, 3),
            description="Groceries",
        ),
        Transaction(
            id=3,
            kind="income",
            account="Salary",
            amount=2000.0,
            transaction_date=date(2024, 11, 1),
        ),
        Transaction(
            id=4,
            kind="saving",
            account="Emergency fund",
            amount=250.0,
            transaction_date=date(2024, 11, 20),
        ),
        Transaction(
            id=5,
            kind="expense",
            account="Cash",
            amount=40.0,
            transaction_date=date(2024, 11, 12),
            description="Not a card",
        ),
    ]
