"""Database port for the SQL data store.

Infrastructure implementations provide the SQLAlchemy engine; the store
depends on this protocol instead of configuration details.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the engine of the application database."""

    def get_engine(self) -> Engine:
        """Get the engine for the application database.

        Returns:
            Engine: SQLAlchemy engine connected to the configured backend.
        """


__all__ = ["DatabaseEnginePort"]
