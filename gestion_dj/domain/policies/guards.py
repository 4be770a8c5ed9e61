"""Rules checked before mutating a user partition."""

from collections.abc import Iterable

from gestion_dj.domain.constants import (
    MAX_PASSWORD_BYTES,
    MIN_PASSWORD_LENGTH,
)
from gestion_dj.domain.errors import (
    ClientInUseError,
    ClientNameRequiredError,
    ClientNotFoundError,
    ClientRequiredError,
    EventNotFoundError,
    InvalidPasswordError,
)
from gestion_dj.domain.models import Client, Event


def ensure_client_deletable(client_id: str, events: Iterable[Event]) -> None:
    """Reject deleting a client that events still reference.

    Raises:
        ClientInUseError: If any event points at ``client_id``.
    """
    if any(event.client_id == client_id for event in events):
        raise ClientInUseError()


def ensure_client_selected(client_id: str, clients: Iterable[Client]) -> None:
    """Require an event to reference an existing client of the partition.

    Raises:
        ClientRequiredError: If ``client_id`` is empty or unknown.
    """
    if not client_id or not any(c.id == client_id for c in clients):
        raise ClientRequiredError()


def ensure_client_owned(client_id: str, clients: Iterable[Client]) -> None:
    """Require ``client_id`` to belong to the partition being mutated.

    Raises:
        ClientNotFoundError: If no client of ``clients`` has that id.
    """
    if not any(client.id == client_id for client in clients):
        raise ClientNotFoundError()


def ensure_event_owned(event_id: str, events: Iterable[Event]) -> None:
    """Require ``event_id`` to belong to the partition being mutated.

    Raises:
        EventNotFoundError: If no event of ``events`` has that id.
    """
    if not any(event.id == event_id for event in events):
        raise EventNotFoundError()


def ensure_client_named(name: str) -> None:
    if not name or not name.strip():
        raise ClientNameRequiredError()


def ensure_valid_password(
    password: str,
    confirmation: str | None = None,
) -> None:
    """Check the length bounds and, when given, the confirmation.

    The upper bound is bcrypt's input limit, counted in UTF-8 bytes.

    Raises:
        InvalidPasswordError: With the reason in its message.
    """
    if len(password or "") < MIN_PASSWORD_LENGTH:
        raise InvalidPasswordError(
            "La contraseña debe tener al menos "
            f"{MIN_PASSWORD_LENGTH} caracteres."
        )
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidPasswordError(
            "La contraseña no puede superar los "
            f"{MAX_PASSWORD_BYTES} bytes."
        )
    if confirmation is not None and password != confirmation:
        raise InvalidPasswordError("Las contraseñas no coinciden.")


def sort_events_by_date_desc(events: Iterable[Event]) -> list[Event]:
    """Return events newest first; equal dates keep their relative order."""
    return sorted(events, key=lambda event: event.date, reverse=True)


__all__ = [
    "ensure_client_deletable",
    "ensure_client_selected",
    "ensure_client_owned",
    "ensure_event_owned",
    "ensure_client_named",
    "ensure_valid_password",
    "sort_events_by_date_desc",
]
