"""First-run setup creating the initial administrator."""

from datetime import datetime
from typing import Callable

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.ports.password_hasher import PasswordHasherPort
from gestion_dj.domain.constants import (
    ADMIN_SUBSCRIPTION_YEARS,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
    ROLE_ADMIN,
)
from gestion_dj.domain.models import User, UserDraft
from gestion_dj.domain.policies import ensure_valid_password
from gestion_dj.infrastructure.logging.logger import get_app_logger
from gestion_dj.utils.dates import add_years


class BootstrapAdminUseCase:
    """Create the ``admin`` account when no user exists yet.

    The account gets a ten-year subscription and must change its password
    on first sign-in.
    """

    def __init__(
        self,
        data_store: DataStorePort,
        password_hasher: PasswordHasherPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._data_store = data_store
        self._password_hasher = password_hasher
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(self, password: str | None = None) -> User | None:
        """Create the administrator if the user set is empty.

        Args:
            password: Initial password, ``admin`` when omitted.

        Returns:
            User | None: The created administrator, or None when users
            already exist.

        Raises:
            InvalidPasswordError: If the initial password is out of bounds.
        """
        if self._data_store.get_users():
            self._logger.info("Users already exist; skipping admin bootstrap")
            return None

        initial_password = password or DEFAULT_ADMIN_PASSWORD
        ensure_valid_password(initial_password)
        admin = self._data_store.create_user(
            UserDraft(
                username=DEFAULT_ADMIN_USERNAME,
                password_hash=self._password_hasher.hash(initial_password),
                role=ROLE_ADMIN,
                active_until=add_years(
                    self._clock(),
                    ADMIN_SUBSCRIPTION_YEARS,
                ),
                is_active=True,
                password_change_required=True,
            )
        )
        self._logger.warning(
            f"Created initial administrator '{admin.username}'; "
            "a password change is required on first sign-in"
        )
        return admin


__all__ = ["BootstrapAdminUseCase"]
