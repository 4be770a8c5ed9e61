"""CLI adapter exporting or importing the data of one user.

Usage::

    python -m gestion_dj.adapters.backup_cli export <username> <file.json>
    python -m gestion_dj.adapters.backup_cli import <username> <file.json>
"""

import argparse
import json
from pathlib import Path

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.use_cases.backup import (
    ExportBackupUseCase,
    ImportBackupUseCase,
)
from gestion_dj.domain.errors import (
    GestionError,
    MalformedImportDocumentError,
    UserNotFoundError,
)
from gestion_dj.infrastructure.container import build_data_store
from gestion_dj.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Export or import the events and clients of a user."
    )
    parser.add_argument("action", choices=("export", "import"))
    parser.add_argument("username")
    parser.add_argument("path", type=Path)
    return parser


def _resolve_user_id(data_store: DataStorePort, username: str) -> str:
    for user in data_store.get_users():
        if user.username == username:
            return user.id
    raise UserNotFoundError(f"El usuario '{username}' no existe.")


def _read_document(path: Path):
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise MalformedImportDocumentError(
            f"No se pudo leer el archivo {path}: {exc}"
        ) from exc


def main(argv: list[str] | None = None) -> int:
    """Run the export or import use case.

    Returns:
        int: Process exit code, 0 on success.
    """
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    data_store = build_data_store()

    try:
        user_id = _resolve_user_id(data_store, args.username)
        if args.action == "export":
            document = ExportBackupUseCase(data_store).execute(user_id)
            args.path.write_text(
                json.dumps(document, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            print(
                f"Exported {len(document['events'])} events and "
                f"{len(document['clients'])} clients to {args.path}"
            )
        else:
            events, clients = ImportBackupUseCase(data_store).execute(
                user_id,
                _read_document(args.path),
            )
            print(f"Imported {events} events and {clients} clients.")
    except GestionError as exc:
        logger.error(f"Backup {args.action} failed: {exc.message}")
        print(exc.message)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
