"""Tests for the aggregation engine."""

from datetime import date

import pytest

from conftest import make_client, make_event
from gestion_dj.domain.models import MonthlyBucket
from gestion_dj.domain.services import aggregation


def test_bucket_by_month_sums_income_expense_and_count() -> None:
    events = [
        make_event("e1", day=date(2024, 5, 1), amount_charged=1000,
                   expenses=(("Transporte", 100), ("Música", 50))),
        make_event("e2", day=date(2024, 5, 31), amount_charged=500),
        make_event("e3", day=date(2024, 4, 30), amount_charged=300,
                   expenses=(("Marketing", 400),)),
    ]

    buckets = aggregation.bucket_by_month(events)

    assert buckets["2024-05"] == MonthlyBucket(
        income=1500,
        expense=150,
        count=2,
    )
    assert buckets["2024-04"].net_profit == -100


def test_current_and_previous_month_wraps_year() -> None:
    buckets = {
        "2023-12": MonthlyBucket(income=10, expense=0, count=1),
        "2024-01": MonthlyBucket(income=20, expense=5, count=1),
    }

    current, previous = aggregation.current_and_previous_month(
        buckets,
        date(2024, 1, 15),
    )

    assert current.income == 20
    assert previous.income == 10


def test_missing_months_default_to_zero() -> None:
    current, previous = aggregation.current_and_previous_month(
        {},
        date(2024, 6, 1),
    )

    assert current == MonthlyBucket()
    assert previous == MonthlyBucket()


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [
        (150, 100, 50.0),
        (50, -100, 150.0),
        (10, 0, 100.0),
        (-5, 0, 0.0),
        (0, 0, 0.0),
    ],
)
def test_compute_profit_change(current, previous, expected) -> None:
    assert aggregation.compute_profit_change(current, previous) == (
        pytest.approx(expected)
    )


def test_build_profit_trend_lists_twelve_months_oldest_first() -> None:
    buckets = aggregation.bucket_by_month(
        [
            make_event("e1", day=date(2023, 9, 2), amount_charged=700),
            make_event("e2", day=date(2024, 3, 1), amount_charged=200,
                       expenses=(("Otro", 50),)),
        ]
    )

    trend = aggregation.build_profit_trend(buckets, date(2024, 3, 5))

    assert len(trend) == 12
    assert trend[0].month_key == "2023-04"
    assert trend[-1].month_key == "2024-03"
    assert trend[-1].label == "mar 24"
    assert trend[-1].net_profit == 150
    september = next(p for p in trend if p.month_key == "2023-09")
    assert september.label == "sept 23"
    assert september.net_profit == 700
    assert sum(p.net_profit for p in trend) == 850


def test_category_breakdown_uses_current_month_in_first_seen_order() -> None:
    events = [
        make_event("e1", day=date(2024, 5, 3), income_category="Festival",
                   amount_charged=300, expenses=(("Música", 10),)),
        make_event("e2", day=date(2024, 5, 4), income_category="Boda",
                   amount_charged=200,
                   expenses=(("Transporte", 5), ("Música", 20))),
        make_event("e3", day=date(2024, 5, 5), income_category="Festival",
                   amount_charged=100),
        make_event("e4", day=date(2024, 4, 5), income_category="Otro",
                   amount_charged=999),
    ]

    breakdown = aggregation.compute_category_breakdown(
        events,
        date(2024, 5, 20),
    )

    assert [(c.category, c.amount) for c in breakdown.income] == [
        ("Festival", 400),
        ("Boda", 200),
    ]
    assert [(c.category, c.amount) for c in breakdown.expense] == [
        ("Música", 30),
        ("Transporte", 5),
    ]


def test_build_dashboard_combines_all_figures() -> None:
    events = [
        make_event("e1", day=date(2024, 5, 10), amount_charged=300),
        make_event("e2", day=date(2024, 4, 10), amount_charged=200),
    ]

    view = aggregation.build_dashboard(events, date(2024, 5, 20))

    assert view.current.net_profit == 300
    assert view.previous.net_profit == 200
    assert view.profit_change == pytest.approx(50.0)
    assert len(view.trend) == 12
    assert view.breakdown.income[0].amount == 300


def test_filter_events_by_range_is_inclusive_on_both_ends() -> None:
    events = [
        make_event("before", day=date(2024, 4, 30)),
        make_event("first", day=date(2024, 5, 1)),
        make_event("last", day=date(2024, 5, 31)),
        make_event("after", day=date(2024, 6, 1)),
    ]

    kept = aggregation.filter_events_by_range(
        events,
        date(2024, 5, 1),
        date(2024, 5, 31),
    )

    assert [event.id for event in kept] == ["first", "last"]


def test_filter_events_by_range_accepts_open_bounds() -> None:
    events = [
        make_event("old", day=date(2020, 1, 1)),
        make_event("new", day=date(2024, 1, 1)),
    ]

    assert [
        e.id
        for e in aggregation.filter_events_by_range(
            events,
            None,
            date(2021, 1, 1),
        )
    ] == ["old"]
    assert len(aggregation.filter_events_by_range(events, None, None)) == 2


def test_search_events_matches_name_client_and_location() -> None:
    clients = [make_client("c1", "Ana"), make_client("c2", "Bruno")]
    events = [
        make_event("e1", name="Boda", client_id="c1", location="Luque"),
        make_event("e2", name="Fiesta", client_id="c2", location="Luque"),
        make_event("e3", name="Cumple", client_id="c2",
                   location="San Lorenzo"),
    ]

    by_name = aggregation.search_events(events, clients, "BODA")
    by_client = aggregation.search_events(events, clients, "bru")
    by_location = aggregation.search_events(events, clients, "lorenzo")

    assert [e.id for e in by_name] == ["e1"]
    assert [e.id for e in by_client] == ["e2", "e3"]
    assert [e.id for e in by_location] == ["e3"]
    assert aggregation.search_events(events, clients, "") == events


def test_build_report_sorts_summarizes_and_ranks() -> None:
    clients = [make_client("c1", "Ana"), make_client("c2", "Bruno")]
    events = [
        make_event("e3", name="Tercero", day=date(2024, 5, 20),
                   client_id="c2", amount_charged=900,
                   expenses=(("Otro", 100),)),
        make_event("e1", name="Primero", day=date(2024, 5, 1),
                   client_id="c1", amount_charged=500),
        make_event("e2", name="Segundo", day=date(2024, 5, 10),
                   client_id="c2", amount_charged=500),
        make_event("e0", name="Fuera", day=date(2024, 6, 1),
                   client_id="c1", amount_charged=5000),
    ]

    report = aggregation.build_report(
        events,
        clients,
        date(2024, 5, 1),
        date(2024, 5, 31),
    )

    assert [e.id for e in report.events] == ["e1", "e2", "e3"]
    assert report.summary.event_count == 3
    assert report.summary.total_charged == 1900
    assert report.summary.total_expenses == 100
    assert report.summary.net_profit == 1800
    assert [(c.name, c.count) for c in report.top_clients] == [
        ("Bruno", 2),
        ("Ana", 1),
    ]
    assert [(e.name, e.profit) for e in report.top_events] == [
        ("Tercero", 800),
        ("Primero", 500),
        ("Segundo", 500),
    ]


def test_rankings_are_limited_and_name_unknown_clients() -> None:
    events = [
        make_event(f"e{i}", client_id=f"c{i}", amount_charged=i)
        for i in range(7)
    ]

    clients = aggregation.rank_clients_by_frequency(events, [])
    top = aggregation.rank_events_by_profit(events)

    assert len(clients) == 5
    assert {c.name for c in clients} == {aggregation.UNKNOWN_CLIENT_NAME}
    assert [e.profit for e in top] == [6, 5, 4, 3, 2]


def test_build_calendar_month_lays_out_sunday_first_grid() -> None:
    events = [
        make_event("e1", day=date(2024, 5, 1)),
        make_event("e2", day=date(2024, 5, 1)),
        make_event("e3", day=date(2024, 5, 18)),
        make_event("e4", day=date(2024, 6, 1)),
    ]

    month = aggregation.build_calendar_month(events, 2024, 5)

    assert month.leading_blanks == 3
    assert month.days_in_month == 31
    assert [e.id for e in month.events_by_day[date(2024, 5, 1)]] == [
        "e1",
        "e2",
    ]
    assert date(2024, 6, 1) not in month.events_by_day


def test_calendar_month_starting_on_sunday_has_no_blanks() -> None:
    month = aggregation.build_calendar_month([], 2024, 9)

    assert month.leading_blanks == 0
    assert month.days_in_month == 30
    assert month.events_by_day == {}
