from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import SessionLocal
from app.services.expense import ExpenseService


# Функция для получения сессии базы данных
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_expense_service(db: Session = Depends(get_db)) -> ExpenseService:
    return ExpenseService(db)
