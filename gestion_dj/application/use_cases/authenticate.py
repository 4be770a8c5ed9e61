"""Use case to sign a user in."""

from datetime import datetime
from typing import Callable

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.ports.password_hasher import PasswordHasherPort
from gestion_dj.domain.errors import GestionError, InvalidCredentialsError
from gestion_dj.domain.models import User
from gestion_dj.domain.services.subscription import ensure_account_usable
from gestion_dj.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


class AuthenticateUseCase:
    """Validate credentials, the active flag and the subscription window.

    The check is read-only; loading the user's data is a separate step.
    """

    def __init__(
        self,
        data_store: DataStorePort,
        password_hasher: PasswordHasherPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            data_store: Port providing the user accounts.
            password_hasher: Port verifying password hashes.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger recording sign-in attempts.
            clock: Optional callable returning the current time.
        """
        self._data_store = data_store
        self._password_hasher = password_hasher
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock or datetime.now

    def execute(self, username: str, password: str) -> User:
        """Return the signed-in user.

        Args:
            username: Exact login name.
            password: Plain password typed by the user.

        Returns:
            User: The matching account, used as the session identity.

        Raises:
            InvalidCredentialsError: If no account matches both values.
            AccountDisabledError: If the account was switched off.
            SubscriptionExpiredError: If the subscription window has ended.
        """
        user = self._find_user(username)
        if user is None or not self._password_hasher.verify(
            password,
            user.password_hash,
        ):
            self._usage_logger.warning(
                f"Rejected login for username={username!r}: bad credentials"
            )
            raise InvalidCredentialsError()

        try:
            ensure_account_usable(user, self._clock())
        except GestionError as exc:
            self._usage_logger.warning(
                f"Rejected login for username={username!r}: "
                f"{type(exc).__name__}"
            )
            raise

        self._usage_logger.info(
            f"User {user.username} signed in with role={user.role}"
        )
        return user

    def _find_user(self, username: str) -> User | None:
        users = self._data_store.get_users()
        self._logger.debug(f"Looking up {username!r} among {len(users)} users")
        for user in users:
            if user.username == username:
                return user
        return None


__all__ = ["AuthenticateUseCase"]
