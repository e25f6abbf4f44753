from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.auth.permissions import AuthenticatedIdentity, get_current_user
from app.dependencies import get_expense_service
from app.errors.expense_errors import ExpenseCategoryAlreadyExists
from app.schemas.expense import ExpenseCategoryCreate, ExpenseCategoryResponse
from app.services.expense import ExpenseService

router = APIRouter(
    prefix="/api/v1/expense-categories",
    tags=["expense categories"],
)


@router.get("/", response_model=List[ExpenseCategoryResponse])
def read_expense_categories(
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    return service.get_expense_categories()


@router.post("/", response_model=ExpenseCategoryResponse, status_code=status.HTTP_201_CREATED)
def create_expense_category(
    expense_category: ExpenseCategoryCreate,
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    try:
        return service.create_expense_category(expense_category)
    except ExpenseCategoryAlreadyExists as e:
        raise HTTPException(status_code=409, detail=e.message)
