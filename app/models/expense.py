import uuid

from sqlalchemy import Column, String, Numeric, ForeignKey, DateTime, Text, Uuid
from sqlalchemy.orm import relationship
from app.database import Base


class Expense(Base):
    """Expense owned by a single user"""
    __tablename__ = "expenses"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, nullable=False, index=True)  # subject of the token that created it
    expense_category_id = Column(Uuid, ForeignKey("expense_categories.id"), nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=False)
    date = Column(DateTime, nullable=False)

    # Relationships
    category = relationship("ExpenseCategory", back_populates="expenses")

    def __repr__(self):
        return f"<Expense(id={self.id}, user_id={self.user_id}, amount={self.amount})>"


class ExpenseCategory(Base):
    """Shared expense category"""
    __tablename__ = "expense_categories"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False, unique=True)

    # Relationships
    expenses = relationship("Expense", back_populates="category")

    def __repr__(self):
        return f"<ExpenseCategory(id={self.id}, name={self.name})>"
