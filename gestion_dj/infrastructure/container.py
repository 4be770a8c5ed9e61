"""Composition root for wiring infrastructure adapters."""

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.ports.database import DatabaseEnginePort
from gestion_dj.application.ports.password_hasher import PasswordHasherPort
from gestion_dj.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from gestion_dj.infrastructure.logging.logger import get_app_logger
from gestion_dj.infrastructure.memory_store import InMemoryDataStore
from gestion_dj.infrastructure.password_hasher import BcryptPasswordHasher
from gestion_dj.infrastructure.settings import AppSettings
from gestion_dj.infrastructure.sqlalchemy_store import SqlAlchemyDataStore


def build_database_adapter(db_url: str | None = None) -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter(db_url=db_url)


def build_data_store(
    settings: AppSettings | None = None,
    db_port: DatabaseEnginePort | None = None,
) -> DataStorePort:
    """Return the configured data store."""
    resolved = settings or AppSettings.from_env()
    logger = get_app_logger()
    if resolved.store_backend == "memory":
        logger.warning("Using the in-memory data store; data is not saved")
        return InMemoryDataStore()
    if db_port is None and resolved.db_url is None:
        raise RuntimeError(
            "SQLAlchemy backend requires a GESTION_DB_URL value."
        )
    return SqlAlchemyDataStore(
        db_port or build_database_adapter(resolved.db_url),
        logger=logger,
    )


def build_password_hasher() -> PasswordHasherPort:
    """Return the password hasher."""
    return BcryptPasswordHasher()


__all__ = [
    "build_database_adapter",
    "build_data_store",
    "build_password_hasher",
]
