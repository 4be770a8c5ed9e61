"""Tests for the mutation guards."""

from datetime import date

import pytest

from conftest import make_client, make_event
from gestion_dj.domain.errors import (
    ClientInUseError,
    ClientNameRequiredError,
    ClientNotFoundError,
    ClientRequiredError,
    EventNotFoundError,
    InvalidPasswordError,
)
from gestion_dj.domain.policies import guards


def test_client_with_events_cannot_be_deleted() -> None:
    events = [make_event(client_id="c1")]

    with pytest.raises(ClientInUseError):
        guards.ensure_client_deletable("c1", events)

    guards.ensure_client_deletable("c2", events)


@pytest.mark.parametrize("client_id", ["", "unknown"])
def test_event_requires_known_client(client_id) -> None:
    with pytest.raises(ClientRequiredError) as excinfo:
        guards.ensure_client_selected(client_id, [make_client("c1")])

    assert excinfo.value.message == "Por favor, seleccione un cliente."


def test_event_with_known_client_passes() -> None:
    guards.ensure_client_selected("c1", [make_client("c1")])


@pytest.mark.parametrize("name", ["", "   ", None])
def test_client_name_is_required(name) -> None:
    with pytest.raises(ClientNameRequiredError):
        guards.ensure_client_named(name)


def test_password_needs_four_characters() -> None:
    with pytest.raises(InvalidPasswordError) as excinfo:
        guards.ensure_valid_password("abc")

    assert "4 caracteres" in excinfo.value.message
    guards.ensure_valid_password("abcd")


def test_password_is_limited_to_72_utf8_bytes() -> None:
    with pytest.raises(InvalidPasswordError) as excinfo:
        guards.ensure_valid_password("x" * 73)

    assert "72 bytes" in excinfo.value.message
    guards.ensure_valid_password("x" * 72)
    with pytest.raises(InvalidPasswordError):
        guards.ensure_valid_password("ñ" * 37)


def test_password_confirmation_must_match() -> None:
    with pytest.raises(InvalidPasswordError) as excinfo:
        guards.ensure_valid_password("abcd", "abce")

    assert excinfo.value.message == "Las contraseñas no coinciden."
    guards.ensure_valid_password("abcd", "abcd")


def test_sort_events_by_date_desc_keeps_ties_in_order() -> None:
    events = [
        make_event("a", day=date(2024, 1, 1)),
        make_event("b", day=date(2024, 3, 1)),
        make_event("c", day=date(2024, 1, 1)),
    ]

    ordered = guards.sort_events_by_date_desc(events)

    assert [e.id for e in ordered] == ["b", "a", "c"]


def test_ownership_checks_look_only_at_the_given_partition() -> None:
    guards.ensure_client_owned("c1", [make_client("c1")])
    guards.ensure_event_owned("e1", [make_event("e1")])

    with pytest.raises(ClientNotFoundError):
        guards.ensure_client_owned("c2", [make_client("c1")])
    with pytest.raises(EventNotFoundError):
        guards.ensure_event_owned("e2", [make_event("e1")])
