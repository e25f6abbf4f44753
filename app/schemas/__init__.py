from .expense import ExpenseCategoryBase, ExpenseCategoryCreate, ExpenseCategoryResponse, ExpenseRequest, ExpenseResponse
