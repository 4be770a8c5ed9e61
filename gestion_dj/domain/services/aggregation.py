"""Aggregation engine for events and clients.

All functions are pure: they read the given collections and a reference
``now`` and never mutate their inputs.
"""

import calendar
from collections.abc import Iterable, Sequence
from datetime import date, datetime

from gestion_dj.domain.constants import TOP_RANKING_SIZE, TREND_MONTHS
from gestion_dj.domain.models import (
    CalendarMonth,
    CategoryAmount,
    CategoryBreakdown,
    Client,
    ClientFrequency,
    DashboardView,
    Event,
    EventProfit,
    MonthlyBucket,
    ReportSummary,
    ReportView,
    TrendPoint,
)
from gestion_dj.utils.dates import (
    end_of_day,
    month_key,
    shift_month,
    start_of_day,
)

SHORT_MONTH_NAMES = (
    "ene",
    "feb",
    "mar",
    "abr",
    "may",
    "jun",
    "jul",
    "ago",
    "sept",
    "oct",
    "nov",
    "dic",
)
UNKNOWN_CLIENT_NAME = "N/A"


def bucket_by_month(events: Iterable[Event]) -> dict[str, MonthlyBucket]:
    """Group events by calendar month.

    Args:
        events: Events of one user partition.

    Returns:
        dict[str, MonthlyBucket]: Buckets keyed by ``YYYY-MM``.
    """
    buckets: dict[str, MonthlyBucket] = {}
    for event in events:
        key = month_key(event.date)
        current = buckets.get(key, MonthlyBucket())
        buckets[key] = MonthlyBucket(
            income=current.income + event.amount_charged,
            expense=current.expense + event.total_expenses,
            count=current.count + 1,
        )
    return buckets


def current_and_previous_month(
    buckets: dict[str, MonthlyBucket],
    now: date,
) -> tuple[MonthlyBucket, MonthlyBucket]:
    """Return the buckets of the month of ``now`` and the month before.

    Missing buckets default to zero totals.
    """
    current_key = month_key(now)
    prev_year, prev_month = shift_month(now.year, now.month, -1)
    previous_key = f"{prev_year:04d}-{prev_month:02d}"
    return (
        buckets.get(current_key, MonthlyBucket()),
        buckets.get(previous_key, MonthlyBucket()),
    )


def compute_profit_change(current_profit: int, previous_profit: int) -> float:
    """Return the percentage change of net profit.

    With no previous profit the change is 100 when the current profit is
    positive and 0 otherwise.
    """
    if previous_profit != 0:
        return (current_profit - previous_profit) / abs(previous_profit) * 100
    return 100.0 if current_profit > 0 else 0.0


def format_month_label(year: int, month: int) -> str:
    """Return a short label such as ``ene 24``."""
    return f"{SHORT_MONTH_NAMES[month - 1]} {year % 100:02d}"


def build_profit_trend(
    buckets: dict[str, MonthlyBucket],
    now: date,
    months: int = TREND_MONTHS,
) -> list[TrendPoint]:
    """Return the net profit of the last ``months`` months, oldest first."""
    points = []
    for offset in range(months - 1, -1, -1):
        year, month = shift_month(now.year, now.month, -offset)
        key = f"{year:04d}-{month:02d}"
        bucket = buckets.get(key, MonthlyBucket())
        points.append(
            TrendPoint(
                month_key=key,
                label=format_month_label(year, month),
                net_profit=bucket.net_profit,
            )
        )
    return points


def events_in_month(
    events: Iterable[Event],
    year: int,
    month: int,
) -> list[Event]:
    return [
        event
        for event in events
        if event.date.year == year and event.date.month == month
    ]


def compute_category_breakdown(
    events: Iterable[Event],
    now: date,
) -> CategoryBreakdown:
    """Group the income and expenses of the current month by category.

    Categories are listed in the order they are first seen.
    """
    income: dict[str, int] = {}
    expense: dict[str, int] = {}
    for event in events_in_month(events, now.year, now.month):
        income[event.income_category] = (
            income.get(event.income_category, 0) + event.amount_charged
        )
        for item in event.expenses:
            expense[item.category] = (
                expense.get(item.category, 0) + item.amount
            )
    return CategoryBreakdown(
        income=[
            CategoryAmount(name, amount) for name, amount in income.items()
        ],
        expense=[
            CategoryAmount(name, amount) for name, amount in expense.items()
        ],
    )


def build_dashboard(events: Sequence[Event], now: date) -> DashboardView:
    """Compute every figure of the dashboard for the month of ``now``."""
    buckets = bucket_by_month(events)
    current, previous = current_and_previous_month(buckets, now)
    return DashboardView(
        current=current,
        previous=previous,
        profit_change=compute_profit_change(
            current.net_profit,
            previous.net_profit,
        ),
        trend=build_profit_trend(buckets, now),
        breakdown=compute_category_breakdown(events, now),
    )


def filter_events_by_range(
    events: Iterable[Event],
    start_date: date | None,
    end_date: date | None,
) -> list[Event]:
    """Keep events within ``[start 00:00:00, end 23:59:59]``.

    Either bound may be ``None`` to leave that side open.
    """
    lower = start_of_day(start_date) if start_date else None
    upper = end_of_day(end_date) if end_date else None
    kept = []
    for event in events:
        moment = start_of_day(event.date)
        if lower is not None and moment < lower:
            continue
        if upper is not None and moment > upper:
            continue
        kept.append(event)
    return kept


def client_names(clients: Iterable[Client]) -> dict[str, str]:
    return {client.id: client.name for client in clients}


def search_events(
    events: Iterable[Event],
    clients: Iterable[Client],
    term: str,
) -> list[Event]:
    """Keep events whose name, client name or location contains ``term``.

    The match is case-insensitive; an empty term keeps every event.
    """
    events = list(events)
    if not term:
        return events
    needle = term.lower()
    names = client_names(clients)
    return [
        event
        for event in events
        if needle in event.name.lower()
        or needle in names.get(event.client_id, "").lower()
        or needle in event.location.lower()
    ]


def summarize_events(events: Sequence[Event]) -> ReportSummary:
    return ReportSummary(
        event_count=len(events),
        total_charged=sum(event.amount_charged for event in events),
        total_expenses=sum(event.total_expenses for event in events),
    )


def rank_clients_by_frequency(
    events: Iterable[Event],
    clients: Iterable[Client],
    limit: int = TOP_RANKING_SIZE,
) -> list[ClientFrequency]:
    """Return the clients with the most events, ties in encounter order."""
    counts: dict[str, int] = {}
    for event in events:
        counts[event.client_id] = counts.get(event.client_id, 0) + 1
    names = client_names(clients)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [
        ClientFrequency(
            name=names.get(client_id, UNKNOWN_CLIENT_NAME),
            count=count,
        )
        for client_id, count in ranked[:limit]
    ]


def rank_events_by_profit(
    events: Iterable[Event],
    limit: int = TOP_RANKING_SIZE,
) -> list[EventProfit]:
    """Return the most profitable events, ties in encounter order."""
    ranked = sorted(events, key=lambda event: event.profit, reverse=True)
    return [
        EventProfit(name=event.name, profit=event.profit)
        for event in ranked[:limit]
    ]


def build_report(
    events: Iterable[Event],
    clients: Sequence[Client],
    start_date: date,
    end_date: date,
) -> ReportView:
    """Aggregate the events of an inclusive date range.

    Events of the range are listed oldest first; rankings use that order to
    break ties.
    """
    selected = sorted(
        filter_events_by_range(events, start_date, end_date),
        key=lambda event: event.date,
    )
    return ReportView(
        start_date=start_date,
        end_date=end_date,
        events=selected,
        summary=summarize_events(selected),
        top_clients=rank_clients_by_frequency(selected, clients),
        top_events=rank_events_by_profit(selected),
    )


def group_events_by_day(events: Iterable[Event]) -> dict[date, list[Event]]:
    grouped: dict[date, list[Event]] = {}
    for event in events:
        grouped.setdefault(event.date, []).append(event)
    return grouped


def build_calendar_month(
    events: Iterable[Event],
    year: int,
    month: int,
) -> CalendarMonth:
    """Lay out one month of events on a Sunday-first grid."""
    first_weekday, days_in_month = calendar.monthrange(year, month)
    return CalendarMonth(
        year=year,
        month=month,
        leading_blanks=(first_weekday + 1) % 7,
        days_in_month=days_in_month,
        events_by_day=group_events_by_day(
            events_in_month(events, year, month)
        ),
    )


def reference_date(now: datetime | date) -> date:
    """Return the calendar day of a reference timestamp."""
    if isinstance(now, datetime):
        return now.date()
    return now


__all__ = [
    "SHORT_MONTH_NAMES",
    "UNKNOWN_CLIENT_NAME",
    "bucket_by_month",
    "current_and_previous_month",
    "compute_profit_change",
    "format_month_label",
    "build_profit_trend",
    "events_in_month",
    "compute_category_breakdown",
    "build_dashboard",
    "filter_events_by_range",
    "client_names",
    "search_events",
    "summarize_events",
    "rank_clients_by_frequency",
    "rank_events_by_profit",
    "build_report",
    "group_events_by_day",
    "build_calendar_month",
    "reference_date",
]
