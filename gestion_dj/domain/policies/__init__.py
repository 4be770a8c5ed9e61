"""Domain policies package."""

from .guards import (
    ensure_client_deletable,
    ensure_client_named,
    ensure_client_owned,
    ensure_client_selected,
    ensure_event_owned,
    ensure_valid_password,
    sort_events_by_date_desc,
)

__all__ = [
    "ensure_client_deletable",
    "ensure_client_named",
    "ensure_client_owned",
    "ensure_client_selected",
    "ensure_event_owned",
    "ensure_valid_password",
    "sort_events_by_date_desc",
]
