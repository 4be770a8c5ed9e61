"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

import dotenv

from gestion_dj.infrastructure.logging.logger import get_app_logger

SUPPORTED_BACKENDS = ("sqlalchemy", "memory")


@dataclass(frozen=True)
class AppSettings:
    """Settings for selecting the data store backend.

    Attributes:
        store_backend: Backend identifier (sqlalchemy or memory).
        db_url: Optional SQLAlchemy URL for the sqlalchemy backend.
        admin_password: Optional initial password for first-run setup.
    """

    store_backend: str = "sqlalchemy"
    db_url: Optional[str] = None
    admin_password: Optional[str] = None

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from the environment and ``.env``.
        """
        dotenv.load_dotenv()
        backend = (
            os.getenv("GESTION_STORE_BACKEND", "sqlalchemy").strip().lower()
        )
        if backend not in SUPPORTED_BACKENDS:
            get_app_logger().warning(
                f"Unknown store backend '{backend}', using sqlalchemy"
            )
            backend = "sqlalchemy"
        return cls(
            store_backend=backend,
            db_url=os.getenv("GESTION_DB_URL") or None,
            admin_password=os.getenv("GESTION_ADMIN_PASSWORD") or None,
        )


__all__ = ["AppSettings", "SUPPORTED_BACKENDS"]
