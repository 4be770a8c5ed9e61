"""Use cases for administering user accounts and passwords."""

from datetime import datetime
from typing import Callable

from gestion_dj.application.ports.data_store import DataStorePort
from gestion_dj.application.ports.password_hasher import PasswordHasherPort
from gestion_dj.domain.constants import ROLE_USER
from gestion_dj.domain.errors import (
    DuplicateUsernameError,
    UsernameRequiredError,
    UserNotFoundError,
)
from gestion_dj.domain.models import User, UserDraft, UserPatch, UserStats
from gestion_dj.domain.policies import ensure_valid_password
from gestion_dj.domain.services.subscription import compute_user_stats
from gestion_dj.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)


def _ensure_username_available(
    data_store: DataStorePort,
    username: str,
    user_id: str | None = None,
) -> None:
    for user in data_store.get_users():
        if user.username == username and user.id != user_id:
            raise DuplicateUsernameError()


class AddUserUseCase:
    """Create a ``user`` account from the admin panel."""

    def __init__(
        self,
        data_store: DataStorePort,
        password_hasher: PasswordHasherPort,
        logger=None,
    ) -> None:
        self._data_store = data_store
        self._password_hasher = password_hasher
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        username: str,
        password: str,
        active_until: datetime,
        subscription_tier: str | None = None,
        last_payment_amount: int | None = None,
    ) -> User:
        """Store a new account.

        Raises:
            UsernameRequiredError: If the username is blank.
            InvalidPasswordError: If the password is too short.
            DuplicateUsernameError: If the username is taken.
        """
        username = (username or "").strip()
        if not username:
            raise UsernameRequiredError()
        ensure_valid_password(password)
        _ensure_username_available(self._data_store, username)

        user = self._data_store.create_user(
            UserDraft(
                username=username,
                password_hash=self._password_hasher.hash(password),
                role=ROLE_USER,
                active_until=active_until,
                is_active=True,
                subscription_tier=subscription_tier,
                last_payment_amount=last_payment_amount,
            )
        )
        self._logger.info(
            f"Added user {user.username} active until {active_until:%Y-%m-%d}"
        )
        return user


class UpdateUserUseCase:
    """Edit the subscription data of an account, optionally its password."""

    def __init__(
        self,
        data_store: DataStorePort,
        password_hasher: PasswordHasherPort,
        logger=None,
    ) -> None:
        self._data_store = data_store
        self._password_hasher = password_hasher
        self._logger = logger or get_usage_logger()

    def execute(
        self,
        user_id: str,
        username: str | None = None,
        password: str | None = None,
        active_until: datetime | None = None,
        subscription_tier: str | None = None,
        last_payment_amount: int | None = None,
    ) -> User:
        """Apply the given changes; omitted values stay as they are.

        An empty ``password`` keeps the current one.
        """
        if username is not None:
            username = username.strip()
            if not username:
                raise UsernameRequiredError()
            _ensure_username_available(self._data_store, username, user_id)
        password_hash = None
        if password:
            ensure_valid_password(password)
            password_hash = self._password_hasher.hash(password)

        user = self._data_store.update_user(
            user_id,
            UserPatch(
                username=username,
                password_hash=password_hash,
                active_until=active_until,
                subscription_tier=subscription_tier,
                last_payment_amount=last_payment_amount,
            ),
        )
        self._logger.info(f"Updated user {user.username}")
        return user


class ToggleUserActiveUseCase:
    """Switch an account on or off."""

    def __init__(self, data_store: DataStorePort, logger=None) -> None:
        self._data_store = data_store
        self._logger = logger or get_usage_logger()

    def execute(self, user_id: str) -> User:
        current = self._data_store.get_user(user_id)
        if current is None:
            raise UserNotFoundError()
        user = self._data_store.update_user(
            user_id,
            UserPatch(is_active=not current.is_active),
        )
        state = "enabled" if user.is_active else "disabled"
        self._logger.info(f"User {user.username} {state}")
        return user


class ChangePasswordUseCase:
    """Self-service password change."""

    def __init__(
        self,
        data_store: DataStorePort,
        password_hasher: PasswordHasherPort,
        logger=None,
    ) -> None:
        self._data_store = data_store
        self._password_hasher = password_hasher
        self._logger = logger or get_usage_logger()

    def execute(self, user_id: str, password: str, confirmation: str) -> User:
        """Store the new password and lift any forced-change flag.

        Raises:
            InvalidPasswordError: If the password is shorter than four
                characters or differs from its confirmation.
        """
        ensure_valid_password(password, confirmation)
        user = self._data_store.update_user(
            user_id,
            UserPatch(
                password_hash=self._password_hasher.hash(password),
                password_change_required=False,
            ),
        )
        self._logger.info(f"User {user.username} changed their password")
        return user


class GetUserStatsUseCase:
    """Count accounts for the admin panel."""

    def __init__(
        self,
        data_store: DataStorePort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._data_store = data_store
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(self) -> UserStats:
        stats = compute_user_stats(self._data_store.get_users(), self._clock())
        self._logger.info(
            f"User stats: total={stats.total}, active={stats.active}"
        )
        return stats


__all__ = [
    "AddUserUseCase",
    "UpdateUserUseCase",
    "ToggleUserActiveUseCase",
    "ChangePasswordUseCase",
    "GetUserStatsUseCase",
]
