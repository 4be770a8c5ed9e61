"""Tests for the GetReportUseCase."""

from datetime import date
from unittest.mock import MagicMock

from conftest import make_client, make_event
from gestion_dj.application.use_cases.get_report import GetReportUseCase


def test_execute_builds_report_for_range() -> None:
    data_store = MagicMock()
    data_store.get_events.return_value = [
        make_event("e2", day=date(2024, 5, 31), amount_charged=200),
        make_event("e1", day=date(2024, 5, 1), amount_charged=100),
        make_event("e0", day=date(2024, 4, 30), amount_charged=900),
    ]
    data_store.get_clients.return_value = [make_client("c1", "Ana")]
    logger = MagicMock()

    report = GetReportUseCase(data_store, logger=logger).execute(
        "u1",
        date(2024, 5, 1),
        date(2024, 5, 31),
    )

    assert [event.id for event in report.events] == ["e1", "e2"]
    assert report.summary.total_charged == 300
    assert report.top_clients[0].name == "Ana"
    assert report.top_clients[0].count == 2
    logger.info.assert_called_once()
