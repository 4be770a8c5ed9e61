"""Domain models package."""

from .commands import (
    ClientCommand,
    CreateClient,
    CreateEvent,
    EventCommand,
    UpdateClient,
    UpdateEvent,
)
from .entities import (
    Client,
    ClientDraft,
    Event,
    EventDraft,
    ExpenseItem,
    User,
    UserDraft,
    UserPatch,
)
from .finance import (
    CalendarMonth,
    CategoryAmount,
    CategoryBreakdown,
    ClientFrequency,
    DashboardView,
    EventListItem,
    EventProfit,
    MonthlyBucket,
    ReportSummary,
    ReportView,
    SubscriptionWarning,
    TrendPoint,
    UserStats,
)

__all__ = [
    "User",
    "UserDraft",
    "UserPatch",
    "Client",
    "ClientDraft",
    "ExpenseItem",
    "Event",
    "EventDraft",
    "CreateEvent",
    "UpdateEvent",
    "CreateClient",
    "UpdateClient",
    "EventCommand",
    "ClientCommand",
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
