"""Use case to compute the dashboard figures of a user."""

from datetime import datetime
from typing import Callable

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.models import DashboardView
from gestion_dj.domain.services.aggregation import (
    build_dashboard,
    reference_date,
)
from gestion_dj.infrastructure.logging.logger import get_app_logger


class GetDashboardUseCase:
    """Compute monthly stats, profit trend and category breakdowns."""

    def __init__(
        self,
        data_store: DataStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            data_store: Port providing the user's events.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current time.
        """
        self._data_store = data_store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(self, user_id: str) -> DashboardView:
        """Return the dashboard of ``user_id`` for the current month."""
        events = self._data_store.get_events(user_id)
        view = build_dashboard(events, reference_date(self._clock()))
        self._logger.info(
            f"Dashboard computed from {len(events)} events: "
            f"income={view.current.income}, expense={view.current.expense}"
        )
        return view


__all__ = ["GetDashboardUseCase", "DashboardView"]
