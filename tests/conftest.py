import os
import uuid
from datetime import datetime
from decimal import Decimal

# Settings are read at import time, point them at SQLite before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base
from app.dependencies import get_db
from app.models import Expense, ExpenseCategory
from app.auth.jwt_handler import create_access_token

DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def db_session():
    """
    Fresh in-memory database and session for every test.
    """
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with `get_db` overridden to use the test session.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.pop(get_db, None)


@pytest.fixture
def user_id() -> uuid.UUID:
    return uuid.UUID("6f1c2a0e-3d4b-4c5a-9e8f-1a2b3c4d5e6f")


@pytest.fixture
def other_user_id() -> uuid.UUID:
    return uuid.UUID("0b9a8c7d-6e5f-4a3b-8c2d-1e0f9a8b7c6d")


@pytest.fixture
def auth_headers(user_id):
    token = create_access_token(data={"sub": str(user_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_auth_headers(other_user_id):
    token = create_access_token(data={"sub": str(other_user_id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def test_category(db_session: Session) -> ExpenseCategory:
    category = ExpenseCategory(name="Groceries")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def test_second_category(db_session: Session) -> ExpenseCategory:
    category = ExpenseCategory(name="Transport")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def test_expense(db_session: Session, user_id, test_category) -> Expense:
    expense = Expense(
        user_id=user_id,
        expense_category_id=test_category.id,
        amount=Decimal("42.00"),
        description="Weekly shopping",
        date=datetime(2024, 3, 10, 18, 30),
    )
    db_session.add(expense)
    db_session.commit()
    db_session.refresh(expense)
    return expense


@pytest.fixture
def test_foreign_expense(db_session: Session, other_user_id, test_category) -> Expense:
    """
    Expense that belongs to the other user.
    """
    expense = Expense(
        user_id=other_user_id,
        expense_category_id=test_category.id,
        amount=Decimal("7.30"),
        description="Someone else's lunch",
        date=datetime(2024, 3, 11, 12, 0),
    )
    db_session.add(expense)
    db_session.commit()
    db_session.refresh(expense)
    return expense


@pytest.fixture
def test_expenses_history(db_session: Session, user_id, test_category, test_second_category):
    """
    Three expenses of the current user inserted out of date order.
    """
    expenses = [
        Expense(
            user_id=user_id,
            expense_category_id=test_category.id,
            amount=Decimal("10.00"),
            description="Middle",
            date=datetime(2024, 2, 15),
        ),
        Expense(
            user_id=user_id,
            expense_category_id=test_second_category.id,
            amount=Decimal("3.50"),
            description="Oldest",
            date=datetime(2024, 1, 5),
        ),
        Expense(
            user_id=user_id,
            expense_category_id=test_category.id,
            amount=Decimal("99.99"),
            description="Newest",
            date=datetime(2024, 4, 1),
        ),
    ]
    db_session.add_all(expenses)
    db_session.commit()
    return expenses
