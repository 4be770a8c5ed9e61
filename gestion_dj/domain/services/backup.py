"""Backup document codec.

A backup is a single mapping ``{"events": [...], "clients": [...]}`` using
the camelCase field names of the exported files, with dates written as
``YYYY-MM-DD``.
"""

from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from gestion_dj.domain.errors import MalformedImportDocumentError
from gestion_dj.domain.models import Client, Event, ExpenseItem

EVENTS_KEY = "events"
CLIENTS_KEY = "clients"


def event_to_document(event: Event) -> dict[str, Any]:
    document: dict[str, Any] = {
        "id": event.id,
        "eventName": event.name,
        "date": event.date.isoformat(),
        "location": event.location,
        "clientId": event.client_id,
        "incomeCategory": event.income_category,
        "amountCharged": event.amount_charged,
        "expenses": [
            {"id": item.id, "category": item.category, "amount": item.amount}
            for item in event.expenses
        ],
    }
    if event.notes is not None:
        document["notes"] = event.notes
    return document


def client_to_document(client: Client) -> dict[str, Any]:
    document: dict[str, Any] = {"id": client.id, "name": client.name}
    if client.phone is not None:
        document["phone"] = client.phone
    if client.email is not None:
        document["email"] = client.email
    return document


def export_document(
    events: Iterable[Event],
    clients: Iterable[Client],
) -> dict[str, list[dict[str, Any]]]:
    """Build the backup document of one partition."""
    return {
        EVENTS_KEY: [event_to_document(event) for event in events],
        CLIENTS_KEY: [client_to_document(client) for client in clients],
    }


def _parse_date(raw: Any) -> date:
    # Older exports stored full ISO timestamps; keep the day part only.
    return date.fromisoformat(str(raw)[:10])


def _parse_amount(raw: Any) -> int:
    # Amounts are whole guaraníes; fractions and numeric strings are refused.
    if isinstance(raw, bool) or not isinstance(raw, int):
        raise ValueError(f"amount must be a whole number: {raw!r}")
    if raw < 0:
        raise ValueError(f"negative amount: {raw}")
    return raw


def event_from_document(raw: Mapping[str, Any]) -> Event:
    return Event(
        id=str(raw["id"]),
        name=str(raw["eventName"]),
        date=_parse_date(raw["date"]),
        location=str(raw.get("location", "")),
        client_id=str(raw["clientId"]),
        income_category=str(raw["incomeCategory"]),
        amount_charged=_parse_amount(raw["amountCharged"]),
        expenses=tuple(
            ExpenseItem(
                id=str(item["id"]),
                category=str(item["category"]),
                amount=_parse_amount(item["amount"]),
            )
            for item in raw.get("expenses", [])
        ),
        notes=raw.get("notes"),
    )


def client_from_document(raw: Mapping[str, Any]) -> Client:
    return Client(
        id=str(raw["id"]),
        name=str(raw["name"]),
        phone=raw.get("phone"),
        email=raw.get("email"),
    )


def import_document(
    document: Any,
) -> tuple[list[Event], list[Client]]:
    """Parse a backup document.

    Args:
        document: Decoded JSON content.

    Returns:
        tuple[list[Event], list[Client]]: Parsed events and clients.

    Raises:
        MalformedImportDocumentError: If a top-level key is missing or any
            entry cannot be parsed. Nothing is returned in that case.
    """
    if not isinstance(document, Mapping):
        raise MalformedImportDocumentError()
    if EVENTS_KEY not in document or CLIENTS_KEY not in document:
        raise MalformedImportDocumentError(
            "El archivo de respaldo debe contener 'events' y 'clients'."
        )
    try:
        events = [event_from_document(raw) for raw in document[EVENTS_KEY]]
        clients = [client_from_document(raw) for raw in document[CLIENTS_KEY]]
    except (KeyError, TypeError, ValueError) as exc:
        raise MalformedImportDocumentError(
            f"Entrada inválida en el archivo de respaldo: {exc}"
        ) from exc
    return events, clients


__all__ = [
    "EVENTS_KEY",
    "CLIENTS_KEY",
    "event_to_document",
    "client_to_document",
    "export_document",
    "event_from_document",
    "client_from_document",
    "import_document",
]
