"""Use case loading the data a signed-in user works with."""

from dataclasses import dataclass, field

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.errors import StoreUnavailableError
from gestion_dj.domain.models import Client, Event, User
from gestion_dj.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class Workspace:
    """Snapshot of the collections visible to the session.

    Administrators see the user accounts; users see their own events and
    clients.
    """

    users: list[User] = field(default_factory=list)
    events: list[Event] = field(default_factory=list)
    clients: list[Client] = field(default_factory=list)


class LoadWorkspaceUseCase:
    """Fetch the workspace of the session user."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, user: User) -> Workspace:
        """Return a fresh snapshot; store failures propagate."""
        if user.is_admin:
            return Workspace(users=self._data_store.get_users())
        return Workspace(
            events=self._data_store.get_events(user.id),
            clients=self._data_store.get_clients(user.id),
        )

    def refresh(self, user: User, previous: Workspace) -> Workspace:
        """Best-effort reload keeping ``previous`` when the store fails."""
        try:
            return self.execute(user)
        except StoreUnavailableError as exc:
            self._logger.error(
                f"Could not refresh data for user {user.id}: {exc.message}"
            )
            return previous


__all__ = ["LoadWorkspaceUseCase", "Workspace"]
