"""Use cases for creating, editing and deleting events."""

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.models import (
    CreateEvent,
    Event,
    EventCommand,
    UpdateEvent,
)
from gestion_dj.domain.policies import (
    ensure_client_selected,
    ensure_event_owned,
)
from gestion_dj.infrastructure.logging.logger import get_app_logger


class SaveEventUseCase:
    """Create or update an event of the user's partition."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, command: EventCommand) -> Event:
        """Persist the event described by ``command``.

        Args:
            user_id: Owner of the partition.
            command: ``CreateEvent`` or ``UpdateEvent``.

        Returns:
            Event: The stored event.

        Raises:
            ClientRequiredError: If the event does not reference a client of
                the partition.
            EventNotFoundError: If an update targets an event outside the
                partition.
        """
        if isinstance(command, CreateEvent):
            client_id = command.draft.client_id
        elif isinstance(command, UpdateEvent):
            client_id = command.event.client_id
            ensure_event_owned(
                command.event.id,
                self._data_store.get_events(user_id),
            )
        else:
            raise TypeError(f"Unsupported event command: {command!r}")

        ensure_client_selected(
            client_id,
            self._data_store.get_clients(user_id),
        )

        if isinstance(command, CreateEvent):
            event = self._data_store.create_event(user_id, command.draft)
            self._logger.info(f"Created event {event.id} for user {user_id}")
        else:
            event = self._data_store.update_event(command.event)
            self._logger.info(f"Updated event {event.id} for user {user_id}")
        return event


class DeleteEventUseCase:
    """Delete an event; nothing else depends on it."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, event_id: str) -> None:
        """Delete the event.

        Raises:
            EventNotFoundError: If the event is not in the partition.
        """
        ensure_event_owned(event_id, self._data_store.get_events(user_id))
        self._data_store.delete_event(event_id)
        self._logger.info(f"Deleted event {event_id} for user {user_id}")


__all__ = ["SaveEventUseCase", "DeleteEventUseCase"]
