"""Use case to build the report of a date range."""

from datetime import date

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.models import ReportView
from gestion_dj.domain.services.aggregation import build_report
from gestion_dj.infrastructure.logging.logger import get_app_logger


class GetReportUseCase:
    """Summarize the events of an inclusive date range."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> ReportView:
        """Return totals and top-5 rankings between both days included.

        Args:
            user_id: Owner of the partition.
            start_date: First day of the range.
            end_date: Last day of the range.

        Returns:
            ReportView: Events of the range with their aggregates.
        """
        report = build_report(
            self._data_store.get_events(user_id),
            self._data_store.get_clients(user_id),
            start_date,
            end_date,
        )
        self._logger.info(
            f"Report {start_date} to {end_date}: "
            f"{report.summary.event_count} events, "
            f"net profit={report.summary.net_profit}"
        )
        return report


__all__ = ["GetReportUseCase", "ReportView"]
