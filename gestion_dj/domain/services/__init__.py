"""Domain services package."""

from .aggregation import (
    bucket_by_month,
    build_calendar_month,
    build_dashboard,
    build_profit_trend,
    build_report,
    compute_category_breakdown,
    compute_profit_change,
    current_and_previous_month,
    filter_events_by_range,
    rank_clients_by_frequency,
    rank_events_by_profit,
    search_events,
    summarize_events,
)
from .backup import export_document, import_document
from .formatting import format_currency, report_title
from .subscription import (
    compute_subscription_warning,
    compute_user_stats,
    ensure_account_usable,
    subscription_warning_for,
)

__all__ = [
    "bucket_by_month",
    "build_calendar_month",
    "build_dashboard",
    "build_profit_trend",
    "build_report",
    "compute_category_breakdown",
    "compute_profit_change",
    "current_and_previous_month",
    "filter_events_by_range",
    "rank_clients_by_frequency",
    "rank_events_by_profit",
    "search_events",
    "summarize_events",
    "export_document",
    "import_document",
    "format_currency",
    "report_title",
    "compute_subscription_warning",
    "compute_user_stats",
    "ensure_account_usable",
    "subscription_warning_for",
]
