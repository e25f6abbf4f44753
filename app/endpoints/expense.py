import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.auth.permissions import AuthenticatedIdentity, get_current_user
from app.dependencies import get_expense_service
from app.errors.expense_errors import ExpenseNotFound, ExpenseCategoryNotFound
from app.schemas.expense import ExpenseRequest, ExpenseResponse
from app.services.expense import ExpenseService

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api/v1/expenses",
    tags=["expenses"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[ExpenseResponse])
def read_expenses(
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    """
    All expenses of the current user, most recent first.
    """
    return service.get_expenses(current_user.subject_id)


@router.get("/{expense_id}", response_model=ExpenseResponse)
def read_expense(
    expense_id: UUID,
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    try:
        return service.get_expense(current_user.subject_id, expense_id)
    except ExpenseNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/", response_model=ExpenseResponse)
def create_expense(
    expense: ExpenseRequest,
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    """
    Create an expense owned by the current user.
    The response always carries the category name.
    """
    try:
        return service.create_expense(current_user.subject_id, expense)
    except ExpenseCategoryNotFound as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.put("/{expense_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_expense(
    expense_id: UUID,
    expense: ExpenseRequest,
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    """
    Overwrite every field of an owned expense.
    """
    try:
        service.update_expense(current_user.subject_id, expense_id, expense)
    except ExpenseNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    except ExpenseCategoryNotFound as e:
        raise HTTPException(status_code=400, detail=e.message)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{expense_id}")
def delete_expense(
    expense_id: UUID,
    current_user: AuthenticatedIdentity = Depends(get_current_user),
    service: ExpenseService = Depends(get_expense_service),
):
    try:
        service.delete_expense(current_user.subject_id, expense_id)
    except ExpenseNotFound as e:
        raise HTTPException(status_code=404, detail=e.message)
    return Response(status_code=status.HTTP_200_OK)
