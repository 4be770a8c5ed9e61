"""Use cases exporting and importing a user's data."""

from typing import Any

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.domain.policies import sort_events_by_date_desc
from gestion_dj.domain.services.backup import export_document, import_document
from gestion_dj.infrastructure.logging.logger import get_usage_logger


class ExportBackupUseCase:
    """Build the backup document of a partition."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_usage_logger()

    def execute(self, user_id: str) -> dict[str, list[dict[str, Any]]]:
        events = self._data_store.get_events(user_id)
        clients = self._data_store.get_clients(user_id)
        self._logger.info(
            f"Exported {len(events)} events and {len(clients)} clients "
            f"for user {user_id}"
        )
        return export_document(events, clients)


class ImportBackupUseCase:
    """Replace a partition with the content of a backup document."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_usage_logger()

    def execute(self, user_id: str, document: Any) -> tuple[int, int]:
        """Import the document; nothing changes when it is malformed.

        Args:
            user_id: Owner of the partition to replace.
            document: Decoded backup content.

        Returns:
            tuple[int, int]: Number of imported events and clients.

        Raises:
            MalformedImportDocumentError: If the document shape is wrong.
        """
        events, clients = import_document(document)
        known = {client.id for client in clients}
        dangling = [
            event.id for event in events if event.client_id not in known
        ]
        if dangling:
            self._logger.warning(
                f"Imported events reference unknown clients: {dangling}"
            )
        self._data_store.replace_partition(
            user_id,
            sort_events_by_date_desc(events),
            clients,
        )
        self._logger.info(
            f"Imported {len(events)} events and {len(clients)} clients "
            f"for user {user_id}"
        )
        return len(events), len(clients)


__all__ = ["ExportBackupUseCase", "ImportBackupUseCase"]
