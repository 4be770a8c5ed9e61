"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date

from gestion_dj.domain.models.entities import Event


@dataclass(frozen=True)
class MonthlyBucket:
    """Totals of the events of one calendar month.

    Attributes:
        income: Sum of amounts charged.
        expense: Sum of all expense items.
        count: Number of events.
    """

    income: int = 0
    expense: int = 0
    count: int = 0

    @property
    def net_profit(self) -> int:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class TrendPoint:
    """Net profit of one month in the trend series."""

    month_key: str
    label: str
    net_profit: int


@dataclass(frozen=True)
class CategoryAmount:
    category: str
    amount: int


@dataclass(frozen=True)
class CategoryBreakdown:
    """Current-month amounts grouped by category."""

    income: list[CategoryAmount] = field(default_factory=list)
    expense: list[CategoryAmount] = field(default_factory=list)


@dataclass(frozen=True)
class DashboardView:
    """Figures rendered on the dashboard.

    Attributes:
        current: Bucket of the current calendar month.
        previous: Bucket of the preceding calendar month.
        profit_change: Percentage change of net profit versus last month.
        trend: Twelve months of net profit, oldest first.
        breakdown: Current-month income and expense by category.
    """

    current: MonthlyBucket
    previous: MonthlyBucket
    profit_change: float
    trend: list[TrendPoint]
    breakdown: CategoryBreakdown


@dataclass(frozen=True)
class ReportSummary:
    event_count: int
    total_charged: int
    total_expenses: int

    @property
    def net_profit(self) -> int:
        return self.total_charged - self.total_expenses


@dataclass(frozen=True)
class ClientFrequency:
    name: str
    count: int


@dataclass(frozen=True)
class EventProfit:
    name: str
    profit: int


@dataclass(frozen=True)
class ReportView:
    """Report over an inclusive date range."""

    start_date: date
    end_date: date
    events: list[Event]
    summary: ReportSummary
    top_clients: list[ClientFrequency]
    top_events: list[EventProfit]


@dataclass(frozen=True)
class EventListItem:
    """Event row with its resolved client name."""

    event: Event
    client_name: str


@dataclass(frozen=True)
class CalendarMonth:
    """Events of one month laid out for a Sunday-first calendar grid."""

    year: int
    month: int
    leading_blanks: int
    days_in_month: int
    events_by_day: dict[date, list[Event]]


@dataclass(frozen=True)
class SubscriptionWarning:
    """Banner shown to users whose subscription is about to end."""

    level: str
    days_remaining: float
    message: str


@dataclass(frozen=True)
class UserStats:
    total: int
    active: int

    @property
    def inactive(self) -> int:
        return self.total - self.active


__all__ = [
    "MonthlyBucket",
    "TrendPoint",
    "CategoryAmount",
    "CategoryBreakdown",
    "DashboardView",
    "ReportSummary",
    "ClientFrequency",
    "EventProfit",
    "ReportView",
    "EventListItem",
    "CalendarMonth",
    "SubscriptionWarning",
    "UserStats",
]
