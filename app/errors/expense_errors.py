# app/errors/expense_errors.py
from uuid import UUID


class ExpenseError(Exception):
    """Base exception for expense-related errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ExpenseNotFound(ExpenseError):
    """Raised when an expense is missing or belongs to another user."""

    def __init__(self, expense_id: UUID):
        super().__init__(f"Expense {expense_id} not found")


class ExpenseCategoryNotFound(ExpenseError):
    """Raised when an expense references an unknown category."""

    def __init__(self, category_id: UUID):
        super().__init__(f"Expense category {category_id} does not exist")


class ExpenseCategoryAlreadyExists(ExpenseError):
    def __init__(self, name: str):
        super().__init__(f"Expense category '{name}' already exists")
