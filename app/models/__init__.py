from .expense import Expense, ExpenseCategory
