# app/services/expense.py
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List
from uuid import UUID

from sqlalchemy.orm import Session

from app.crud import expense as expense_crud
from app.database import transactional
from app.errors.expense_errors import (
    ExpenseNotFound,
    ExpenseCategoryNotFound,
    ExpenseCategoryAlreadyExists,
)
from app.models import Expense, ExpenseCategory
from app.schemas.expense import (
    ExpenseRequest,
    ExpenseResponse,
    ExpenseCategoryCreate,
    ExpenseCategoryResponse,
)

logger = logging.getLogger(__name__)


def expense_to_response(expense: Expense, category: ExpenseCategory = None) -> ExpenseResponse:
    category = category or expense.category
    return ExpenseResponse(
        id=expense.id,
        amount=expense.amount,
        description=expense.description,
        date=expense.date,
        expense_category=ExpenseCategoryResponse(id=category.id, name=category.name),
    )


def to_utc_naive(value: datetime) -> datetime:
    """
    Dates are stored without an offset: aware values are shifted to UTC
    first, naive values are taken to be UTC already.
    """
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def request_to_fields(expense_data: ExpenseRequest) -> Dict[str, Any]:
    return {
        "amount": expense_data.amount,
        "description": expense_data.description,
        "date": to_utc_naive(expense_data.date),
        "expense_category_id": expense_data.expense_category_id,
    }


class ExpenseService:
    """
    Expense operations on behalf of a single authenticated owner.

    Every lookup is filtered by owner, so callers cannot tell a foreign
    expense from a missing one.
    """

    def __init__(self, db: Session):
        self.db = db

    def _require_category(self, category_id: UUID) -> ExpenseCategory:
        category = expense_crud.get_expense_category(self.db, category_id)
        if not category:
            raise ExpenseCategoryNotFound(category_id)
        return category

    def get_expenses(self, owner_id: UUID) -> List[ExpenseResponse]:
        expenses = expense_crud.get_expenses(self.db, owner_id)
        return [expense_to_response(expense) for expense in expenses]

    def get_expense(self, owner_id: UUID, expense_id: UUID) -> ExpenseResponse:
        expense = expense_crud.get_expense(self.db, owner_id, expense_id)
        if not expense:
            raise ExpenseNotFound(expense_id)
        return expense_to_response(expense)

    def create_expense(self, owner_id: UUID, expense_data: ExpenseRequest) -> ExpenseResponse:
        category = self._require_category(expense_data.expense_category_id)
        with transactional(self.db) as session:
            expense = expense_crud.create_expense(session, owner_id, request_to_fields(expense_data))
        logger.info(f"Created expense {expense.id} for user {owner_id}")
        return expense_to_response(expense, category)

    def update_expense(self, owner_id: UUID, expense_id: UUID, expense_data: ExpenseRequest) -> None:
        with transactional(self.db) as session:
            if not expense_crud.get_expense(session, owner_id, expense_id):
                raise ExpenseNotFound(expense_id)
            self._require_category(expense_data.expense_category_id)
            expense_crud.update_expense(session, owner_id, expense_id, request_to_fields(expense_data))

    def delete_expense(self, owner_id: UUID, expense_id: UUID) -> None:
        with transactional(self.db) as session:
            if not expense_crud.delete_expense(session, owner_id, expense_id):
                raise ExpenseNotFound(expense_id)
        logger.info(f"Deleted expense {expense_id} for user {owner_id}")

    def get_expense_categories(self) -> List[ExpenseCategory]:
        return expense_crud.get_expense_categories(self.db)

    def create_expense_category(self, category_data: ExpenseCategoryCreate) -> ExpenseCategory:
        if expense_crud.get_expense_category_by_name(self.db, category_data.name):
            raise ExpenseCategoryAlreadyExists(category_data.name)
        with transactional(self.db) as session:
            category = expense_crud.create_expense_category(session, category_data.name)
        logger.info(f"Created expense category {category.name}")
        return category
