"""Tests for the BootstrapAdminUseCase."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from conftest import add_user
from gestion_dj.application.use_cases.authenticate import AuthenticateUseCase
from gestion_dj.application.use_cases.bootstrap_admin import (
    BootstrapAdminUseCase,
)
from gestion_dj.domain.constants import ROLE_ADMIN
from gestion_dj.domain.errors import InvalidPasswordError

NOW = datetime(2024, 5, 10, 12, 0)


def _use_case(store, hasher) -> BootstrapAdminUseCase:
    return BootstrapAdminUseCase(
        data_store=store,
        password_hasher=hasher,
        logger=MagicMock(),
        clock=lambda: NOW,
    )


def test_execute_creates_admin_on_empty_store(store, hasher) -> None:
    admin = _use_case(store, hasher).execute()

    assert admin is not None
    assert admin.username == "admin"
    assert admin.role == ROLE_ADMIN
    assert admin.is_active is True
    assert admin.password_change_required is True
    assert admin.active_until == datetime(2034, 5, 10, 12, 0)
    assert store.get_users() == [admin]


def test_bootstrapped_admin_can_sign_in(store, hasher) -> None:
    _use_case(store, hasher).execute()

    user = AuthenticateUseCase(
        data_store=store,
        password_hasher=hasher,
        logger=MagicMock(),
        usage_logger=MagicMock(),
        clock=lambda: NOW,
    ).execute("admin", "admin")

    assert user.is_admin


def test_execute_uses_configured_password(store, hasher) -> None:
    admin = _use_case(store, hasher).execute(password="s3cret!")

    assert hasher.verify("s3cret!", admin.password_hash)


def test_execute_skips_when_users_exist(store, hasher) -> None:
    add_user(store, "dj")

    assert _use_case(store, hasher).execute() is None
    assert len(store.get_users()) == 1


def test_execute_rejects_overlong_initial_password(store, hasher) -> None:
    with pytest.raises(InvalidPasswordError):
        _use_case(store, hasher).execute(password="x" * 73)

    assert store.get_users() == []
