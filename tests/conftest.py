"""Shared fixtures and builders for the test suite."""

from datetime import date, datetime
from unittest.mock import MagicMock

import pytest

from gestion_dj.domain.constants import ROLE_USER
from gestion_dj.domain.models import (
    Client,
    Event,
    ExpenseItem,
    User,
    UserDraft,
)
from gestion_dj.infrastructure.memory_store import InMemoryDataStore


class FakePasswordHasher:
    """Reversible hasher keeping tests fast."""

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


def make_event(
    event_id: str = "e1",
    name: str = "Boda Pérez",
    day: date = date(2024, 5, 10),
    client_id: str = "c1",
    amount_charged: int = 1000,
    expenses: tuple[tuple[str, int], ...] = (),
    income_category: str = "Boda",
    location: str = "Asunción",
    notes: str | None = None,
) -> Event:
    return Event(
        id=event_id,
        name=name,
        date=day,
        location=location,
        client_id=client_id,
        income_category=income_category,
        amount_charged=amount_charged,
        expenses=tuple(
            ExpenseItem(id=f"{event_id}-x{index}", category=cat, amount=amt)
            for index, (cat, amt) in enumerate(expenses)
        ),
        notes=notes,
    )


def make_client(client_id: str = "c1", name: str = "Ana") -> Client:
    return Client(id=client_id, name=name)


def make_user(
    user_id: str = "u1",
    username: str = "dj",
    password: str = "secret",
    role: str = ROLE_USER,
    active_until: datetime = datetime(2030, 1, 1),
    is_active: bool = True,
    password_change_required: bool = False,
) -> User:
    return User(
        id=user_id,
        username=username,
        password_hash=f"hashed:{password}",
        role=role,
        active_until=active_until,
        is_active=is_active,
        password_change_required=password_change_required,
    )


def add_user(
    store: InMemoryDataStore,
    username: str = "dj",
    password: str = "secret",
    **overrides,
) -> User:
    """Store a user whose hash matches FakePasswordHasher."""
    values = {
        "role": ROLE_USER,
        "active_until": datetime(2030, 1, 1),
    }
    values.update(overrides)
    return store.create_user(
        UserDraft(
            username=username,
            password_hash=f"hashed:{password}",
            **values,
        )
    )


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def hasher() -> FakePasswordHasher:
    return FakePasswordHasher()


@pytest.fixture
def store() -> InMemoryDataStore:
    return InMemoryDataStore()
