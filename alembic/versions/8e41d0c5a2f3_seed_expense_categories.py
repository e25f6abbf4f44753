"""Seed initial expense categories

Revision ID: 8e41d0c5a2f3
Revises: 3c2a9f1d7b10
Create Date: 2026-10-19 10:05:00.000000

"""
import uuid
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8e41d0c5a2f3'
down_revision: Union[str, None] = '3c2a9f1d7b10'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CATEGORY_NAMES = [
    'Groceries',
    'Dining',
    'Transport',
    'Housing',
    'Utilities',
    'Health',
    'Entertainment',
    'Other',
]

expense_categories = sa.table(
    'expense_categories',
    sa.column('id', sa.Uuid()),
    sa.column('name', sa.String()),
)


def upgrade() -> None:
    op.bulk_insert(
        expense_categories,
        [{'id': uuid.uuid4(), 'name': name} for name in CATEGORY_NAMES],
    )


def downgrade() -> None:
    op.execute(
        expense_categories.delete().where(expense_categories.c.name.in_(CATEGORY_NAMES))
    )
