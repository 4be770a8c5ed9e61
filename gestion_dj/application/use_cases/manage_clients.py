"""Use cases for creating, editing and deleting clients."""

from dataclasses import replace

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.models import (
    Client,
    ClientCommand,
    CreateClient,
    UpdateClient,
)
from gestion_dj.domain.policies import (
    ensure_client_deletable,
    ensure_client_named,
    ensure_client_owned,
)
from gestion_dj.infrastructure.logging.logger import get_app_logger


class SaveClientUseCase:
    """Create or update a client of the user's partition."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, command: ClientCommand) -> Client:
        """Persist the client described by ``command``.

        Args:
            user_id: Owner of the partition.
            command: ``CreateClient`` or ``UpdateClient``.

        Returns:
            Client: The stored client.

        Raises:
            ClientNameRequiredError: If the name is blank.
            ClientNotFoundError: If an update targets a client outside the
                partition.
        """
        if isinstance(command, CreateClient):
            ensure_client_named(command.draft.name)
            draft = replace(command.draft, name=command.draft.name.strip())
            client = self._data_store.create_client(user_id, draft)
            self._logger.info(f"Created client {client.id} for user {user_id}")
            return client
        if isinstance(command, UpdateClient):
            ensure_client_named(command.client.name)
            ensure_client_owned(
                command.client.id,
                self._data_store.get_clients(user_id),
            )
            client = self._data_store.update_client(
                replace(command.client, name=command.client.name.strip())
            )
            self._logger.info(f"Updated client {client.id} for user {user_id}")
            return client
        raise TypeError(f"Unsupported client command: {command!r}")


class DeleteClientUseCase:
    """Delete a client no event refers to."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, client_id: str) -> None:
        """Delete the client.

        Raises:
            ClientNotFoundError: If the client is not in the partition.
            ClientInUseError: If an event of the partition references it.
        """
        ensure_client_owned(client_id, self._data_store.get_clients(user_id))
        ensure_client_deletable(
            client_id,
            self._data_store.get_events(user_id),
        )
        self._data_store.delete_client(client_id)
        self._logger.info(f"Deleted client {client_id} for user {user_id}")


__all__ = ["SaveClientUseCase", "DeleteClientUseCase"]
