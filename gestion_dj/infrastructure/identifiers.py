"""Identifier helpers shared by the data stores."""

from dataclasses import replace
from uuid import uuid4

from gestion_dj.domain.models import ExpenseItem


def new_id() -> str:
    return str(uuid4())


def with_expense_ids(
    expenses: tuple[ExpenseItem, ...],
) -> tuple[ExpenseItem, ...]:
    """Give an identifier to every expense item missing one."""
    return tuple(
        item if item.id else replace(item, id=new_id()) for item in expenses
    )


__all__ = ["new_id", "with_expense_ids"]
