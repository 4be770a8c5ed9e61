"""Domain package for business rules and core models."""

from .constants import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    ROLE_ADMIN,
    ROLE_USER,
    SUBSCRIPTION_TIERS,
)
from .errors import GestionError
from .models import Client, Event, ExpenseItem, User

__all__ = [
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "ROLE_ADMIN",
    "ROLE_USER",
    "SUBSCRIPTION_TIERS",
    "GestionError",
    "Client",
    "Event",
    "ExpenseItem",
    "User",
]
