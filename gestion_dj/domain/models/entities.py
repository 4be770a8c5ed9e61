"""Domain entities: users, clients, events and their expenses."""

from dataclasses import dataclass, field, fields
from datetime import date, datetime

from gestion_dj.domain.constants import ROLE_ADMIN


@dataclass(frozen=True)
class User:
    """Account allowed to sign in.

    Attributes:
        id: Opaque identifier.
        username: Unique login name.
        password_hash: Salted one-way hash of the password.
        role: ``admin`` or ``user``.
        active_until: End of the subscription window.
        is_active: Admin-controlled switch.
        subscription_tier: Optional tier from ``SUBSCRIPTION_TIERS``.
        last_payment_amount: Optional last payment, in whole currency units.
        password_change_required: Whether the next session must change the
            password before doing anything else.
    """

    id: str
    username: str
    password_hash: str
    role: str
    active_until: datetime
    is_active: bool = True
    subscription_tier: str | None = None
    last_payment_amount: int | None = None
    password_change_required: bool = False

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN


@dataclass(frozen=True)
class UserDraft:
    """User data before the store assigns an identifier."""

    username: str
    password_hash: str
    role: str
    active_until: datetime
    is_active: bool = True
    subscription_tier: str | None = None
    last_payment_amount: int | None = None
    password_change_required: bool = False


@dataclass(frozen=True)
class UserPatch:
    """Partial update of a user; ``None`` fields are left untouched."""

    username: str | None = None
    password_hash: str | None = None
    active_until: datetime | None = None
    is_active: bool | None = None
    subscription_tier: str | None = None
    last_payment_amount: int | None = None
    password_change_required: bool | None = None

    def changes(self) -> dict[str, object]:
        """Return only the fields set on the patch."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


@dataclass(frozen=True)
class Client:
    """Customer of the DJ, owned by one user partition."""

    id: str
    name: str
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ClientDraft:
    name: str
    phone: str | None = None
    email: str | None = None


@dataclass(frozen=True)
class ExpenseItem:
    """Single expense line of an event."""

    id: str
    category: str
    amount: int


@dataclass(frozen=True)
class Event:
    """Billable event with its itemized expenses."""

    id: str
    name: str
    date: date
    location: str
    client_id: str
    income_category: str
    amount_charged: int
    expenses: tuple[ExpenseItem, ...] = field(default_factory=tuple)
    notes: str | None = None

    @property
    def total_expenses(self) -> int:
        return sum(expense.amount for expense in self.expenses)

    @property
    def profit(self) -> int:
        return self.amount_charged - self.total_expenses


@dataclass(frozen=True)
class EventDraft:
    """Event data before the store assigns an identifier."""

    name: str
    date: date
    location: str
    client_id: str
    income_category: str
    amount_charged: int
    expenses: tuple[ExpenseItem, ...] = field(default_factory=tuple)
    notes: str | None = None


__all__ = [
    "User",
    "UserDraft",
    "UserPatch",
    "Client",
    "ClientDraft",
    "ExpenseItem",
    "Event",
    "EventDraft",
]
