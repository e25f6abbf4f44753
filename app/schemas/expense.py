from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ExpenseCategoryBase(BaseModel):
    name: str = Field(..., max_length=100, description="Category name")


class ExpenseCategoryCreate(ExpenseCategoryBase):
    pass


class ExpenseCategoryResponse(ExpenseCategoryBase):
    id: UUID

    model_config = {"from_attributes": True}


class ExpenseRequest(BaseModel):
    """Payload accepted by POST and PUT"""
    model_config = ConfigDict(populate_by_name=True)

    amount: Decimal = Field(..., max_digits=12, decimal_places=2, description="Expense amount")
    description: str = Field(..., description="What the money was spent on")
    date: datetime = Field(..., description="When the expense happened")
    expense_category_id: UUID = Field(..., alias="expenseCategoryId", description="Category ID")


class ExpenseResponse(BaseModel):
    """Expense as returned to its owner"""
    model_config = ConfigDict(populate_by_name=True)

    id: UUID
    amount: float
    description: str
    date: datetime
    expense_category: ExpenseCategoryResponse = Field(..., alias="expenseCategory")
