"""Application port for persisting users and their partitions.

Clients and events are partitioned by the id of the owning user. Stores
raise ``StoreUnavailableError`` when the backing storage fails.
"""

from typing import Protocol

from gestion_dj.domain.models import (
    Client,
    ClientDraft,
    Event,
    EventDraft,
    User,
    UserDraft,
    UserPatch,
)


class DataStorePort(Protocol):
    """Port exposing CRUD access to users, clients and events."""

    def get_users(self) -> list[User]:
        """Return every user account."""

    def get_user(self, user_id: str) -> User | None:
        """Return one user, or None when unknown."""

    def create_user(self, draft: UserDraft) -> User:
        """Store a new user and return it with its identifier."""

    def update_user(self, user_id: str, patch: UserPatch) -> User:
        """Apply a partial update and return the stored user."""

    def get_events(self, user_id: str) -> list[Event]:
        """Return the events of a partition, newest first."""

    def create_event(self, user_id: str, draft: EventDraft) -> Event:
        """Store a new event in the partition."""

    def update_event(self, event: Event) -> Event:
        """Replace a stored event."""

    def delete_event(self, event_id: str) -> None:
        """Remove an event."""

    def get_clients(self, user_id: str) -> list[Client]:
        """Return the clients of a partition."""

    def create_client(self, user_id: str, draft: ClientDraft) -> Client:
        """Store a new client in the partition."""

    def update_client(self, client: Client) -> Client:
        """Replace a stored client."""

    def delete_client(self, client_id: str) -> None:
        """Remove a client."""

    def replace_partition(
        self,
        user_id: str,
        events: list[Event],
        clients: list[Client],
    ) -> None:
        """Replace every event and client of a partition at once."""


__all__ = ["DataStorePort"]
