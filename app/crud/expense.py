import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy.orm import Session, joinedload

from app.models.expense import Expense, ExpenseCategory

logger = logging.getLogger(__name__)


def _owned_expenses(db: Session, owner_id: UUID):
    return db.query(Expense).options(joinedload(Expense.category)).filter(Expense.user_id == owner_id)


def get_expense(db: Session, owner_id: UUID, expense_id: UUID) -> Optional[Expense]:
    """
    Returns the expense only if it exists and belongs to owner_id.
    A foreign expense is reported exactly like a missing one.
    """
    return _owned_expenses(db, owner_id).filter(Expense.id == expense_id).first()


def get_expenses(db: Session, owner_id: UUID) -> List[Expense]:
    return _owned_expenses(db, owner_id).order_by(Expense.date.desc()).all()


def create_expense(db: Session, owner_id: UUID, fields: Dict[str, Any]) -> Expense:
    db_expense = Expense(user_id=owner_id, **fields)
    db.add(db_expense)
    db.flush()
    logger.debug(f"Inserted expense {db_expense.id} for user {owner_id}")
    return db_expense


def update_expense(db: Session, owner_id: UUID, expense_id: UUID, fields: Dict[str, Any]) -> Optional[Expense]:
    db_expense = get_expense(db, owner_id, expense_id)
    if db_expense:
        for key, value in fields.items():
            setattr(db_expense, key, value)
        db.flush()
        logger.debug(f"Updated expense {expense_id} for user {owner_id}")
    return db_expense


def delete_expense(db: Session, owner_id: UUID, expense_id: UUID) -> bool:
    db_expense = get_expense(db, owner_id, expense_id)
    if not db_expense:
        return False
    db.delete(db_expense)
    db.flush()
    logger.debug(f"Deleted expense {expense_id} for user {owner_id}")
    return True


def get_expense_category(db: Session, category_id: UUID) -> Optional[ExpenseCategory]:
    return db.query(ExpenseCategory).filter(ExpenseCategory.id == category_id).first()


def get_expense_category_by_name(db: Session, name: str) -> Optional[ExpenseCategory]:
    return db.query(ExpenseCategory).filter(ExpenseCategory.name == name).first()


def get_expense_categories(db: Session) -> List[ExpenseCategory]:
    return db.query(ExpenseCategory).order_by(ExpenseCategory.name).all()


def create_expense_category(db: Session, name: str) -> ExpenseCategory:
    db_category = ExpenseCategory(name=name)
    db.add(db_category)
    db.flush()
    return db_category
