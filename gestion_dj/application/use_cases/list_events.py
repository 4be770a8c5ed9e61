"""Use cases listing events as rows or on a calendar."""

from datetime import date

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.models import CalendarMonth, EventListItem
from gestion_dj.domain.services.aggregation import (
    UNKNOWN_CLIENT_NAME,
    build_calendar_month,
    client_names,
    filter_events_by_range,
    search_events,
)
from gestion_dj.infrastructure.logging.logger import get_app_logger


class ListEventsUseCase:
    """Filter the events of a user by date range and search term."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date | None = None,
        end_date: date | None = None,
        search_term: str = "",
    ) -> list[EventListItem]:
        """Return matching events, newest first, with their client names.

        Args:
            user_id: Owner of the partition.
            start_date: Optional first day, inclusive.
            end_date: Optional last day, inclusive.
            search_term: Case-insensitive text matched against the event
                name, the client name or the location.

        Returns:
            list[EventListItem]: Rows in stored order.
        """
        events = self._data_store.get_events(user_id)
        clients = self._data_store.get_clients(user_id)
        selected = search_events(
            filter_events_by_range(events, start_date, end_date),
            clients,
            search_term.strip(),
        )
        names = client_names(clients)
        self._logger.debug(
            f"Listed {len(selected)} of {len(events)} events for {user_id}"
        )
        return [
            EventListItem(
                event=event,
                client_name=names.get(event.client_id, UNKNOWN_CLIENT_NAME),
            )
            for event in selected
        ]


class GetCalendarUseCase:
    """Group the events of one month by day."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, year: int, month: int) -> CalendarMonth:
        calendar_month = build_calendar_month(
            self._data_store.get_events(user_id),
            year,
            month,
        )
        self._logger.debug(
            f"Calendar {year}-{month:02d}: "
            f"{len(calendar_month.events_by_day)} days with events"
        )
        return calendar_month


__all__ = ["ListEventsUseCase", "GetCalendarUseCase"]
