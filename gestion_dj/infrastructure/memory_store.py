"""In-memory data store, used by tests and local demos."""

from dataclasses import asdict, replace

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.errors import UserNotFoundError
from gestion_dj.domain.models import (
    Client,
    ClientDraft,
    Event,
    EventDraft,
    User,
    UserDraft,
    UserPatch,
)
from gestion_dj.domain.policies import sort_events_by_date_desc
from gestion_dj.infrastructure.identifiers import new_id, with_expense_ids


class InMemoryDataStore(DataStorePort):
    """Keep users and partitions in dictionaries for the process lifetime.

    Event lists are re-sorted newest first after every mutation.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._events: dict[str, list[Event]] = {}
        self._clients: dict[str, list[Client]] = {}

    def get_users(self) -> list[User]:
        return list(self._users.values())

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def create_user(self, draft: UserDraft) -> User:
        user = User(id=new_id(), **asdict(draft))
        self._users[user.id] = user
        return user

    def update_user(self, user_id: str, patch: UserPatch) -> User:
        if user_id not in self._users:
            raise UserNotFoundError()
        user = replace(self._users[user_id], **patch.changes())
        self._users[user_id] = user
        return user

    def get_events(self, user_id: str) -> list[Event]:
        return list(self._events.get(user_id, []))

    def create_event(self, user_id: str, draft: EventDraft) -> Event:
        event = Event(
            id=new_id(),
            name=draft.name,
            date=draft.date,
            location=draft.location,
            client_id=draft.client_id,
            income_category=draft.income_category,
            amount_charged=draft.amount_charged,
            expenses=with_expense_ids(draft.expenses),
            notes=draft.notes,
        )
        events = self._events.setdefault(user_id, [])
        events.append(event)
        self._events[user_id] = sort_events_by_date_desc(events)
        return event

    def update_event(self, event: Event) -> Event:
        event = replace(event, expenses=with_expense_ids(event.expenses))
        for user_id, events in self._events.items():
            if any(stored.id == event.id for stored in events):
                self._events[user_id] = sort_events_by_date_desc(
                    event if stored.id == event.id else stored
                    for stored in events
                )
                return event
        raise KeyError(f"Unknown event: {event.id}")

    def delete_event(self, event_id: str) -> None:
        for user_id, events in self._events.items():
            self._events[user_id] = [e for e in events if e.id != event_id]

    def get_clients(self, user_id: str) -> list[Client]:
        return list(self._clients.get(user_id, []))

    def create_client(self, user_id: str, draft: ClientDraft) -> Client:
        client = Client(
            id=new_id(),
            name=draft.name,
            phone=draft.phone,
            email=draft.email,
        )
        self._clients.setdefault(user_id, []).append(client)
        return client

    def update_client(self, client: Client) -> Client:
        for user_id, clients in self._clients.items():
            if any(stored.id == client.id for stored in clients):
                self._clients[user_id] = [
                    client if stored.id == client.id else stored
                    for stored in clients
                ]
                return client
        raise KeyError(f"Unknown client: {client.id}")

    def delete_client(self, client_id: str) -> None:
        for user_id, clients in self._clients.items():
            self._clients[user_id] = [
                c for c in clients if c.id != client_id
            ]

    def replace_partition(
        self,
        user_id: str,
        events: list[Event],
        clients: list[Client],
    ) -> None:
        self._events[user_id] = sort_events_by_date_desc(events)
        self._clients[user_id] = list(clients)


__all__ = ["InMemoryDataStore"]
