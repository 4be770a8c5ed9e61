"""Tests for the user administration use cases."""

from datetime import datetime
from unittest.mock import MagicMock

import pytest

from conftest import add_user
from gestion_dj.application.use_cases.manage_users import (
    AddUserUseCase,
    ChangePasswordUseCase,
    GetUserStatsUseCase,
    ToggleUserActiveUseCase,
    UpdateUserUseCase,
)
from gestion_dj.domain.constants import ROLE_USER
from gestion_dj.domain.errors import (
    DuplicateUsernameError,
    InvalidPasswordError,
    UsernameRequiredError,
    UserNotFoundError,
)
from gestion_dj.infrastructure.password_hasher import BcryptPasswordHasher

UNTIL = datetime(2025, 1, 31, 23, 59, 59)


def test_add_user_stores_a_user_account(store, hasher) -> None:
    use_case = AddUserUseCase(store, hasher, logger=MagicMock())

    user = use_case.execute(
        "  nuevo ",
        "clave",
        UNTIL,
        subscription_tier="Mensual",
        last_payment_amount=150000,
    )

    assert user.username == "nuevo"
    assert user.role == ROLE_USER
    assert user.is_active is True
    assert user.password_change_required is False
    assert user.subscription_tier == "Mensual"
    assert user.last_payment_amount == 150000
    assert hasher.verify("clave", user.password_hash)
    assert store.get_user(user.id) == user


def test_add_user_rejects_duplicates(store, hasher) -> None:
    add_user(store, "dj")
    use_case = AddUserUseCase(store, hasher, logger=MagicMock())

    with pytest.raises(DuplicateUsernameError):
        use_case.execute("dj", "clave", UNTIL)


@pytest.mark.parametrize(
    ("username", "password", "error"),
    [
        ("", "clave", UsernameRequiredError),
        ("   ", "clave", UsernameRequiredError),
        ("dj", "abc", InvalidPasswordError),
    ],
)
def test_add_user_validates_input(store, hasher, username, password, error):
    use_case = AddUserUseCase(store, hasher, logger=MagicMock())

    with pytest.raises(error):
        use_case.execute(username, password, UNTIL)

    assert store.get_users() == []


def test_update_user_changes_only_given_fields(store, hasher) -> None:
    user = add_user(store, "dj", "secret", subscription_tier="Mensual")
    use_case = UpdateUserUseCase(store, hasher, logger=MagicMock())

    updated = use_case.execute(user.id, active_until=UNTIL, password="")

    assert updated.active_until == UNTIL
    assert updated.subscription_tier == "Mensual"
    assert updated.password_hash == user.password_hash


def test_update_user_rehashes_new_password(store, hasher) -> None:
    user = add_user(store, "dj", "secret")
    use_case = UpdateUserUseCase(store, hasher, logger=MagicMock())

    updated = use_case.execute(user.id, password="nueva")

    assert hasher.verify("nueva", updated.password_hash)


def test_update_user_rejects_taken_username(store, hasher) -> None:
    add_user(store, "ana")
    user = add_user(store, "dj")
    use_case = UpdateUserUseCase(store, hasher, logger=MagicMock())

    with pytest.raises(DuplicateUsernameError):
        use_case.execute(user.id, username="ana")

    assert use_case.execute(user.id, username="dj").username == "dj"


def test_toggle_user_active_flips_the_flag(store) -> None:
    user = add_user(store, "dj")
    use_case = ToggleUserActiveUseCase(store, logger=MagicMock())

    assert use_case.execute(user.id).is_active is False
    assert use_case.execute(user.id).is_active is True


def test_toggle_unknown_user_raises(store) -> None:
    use_case = ToggleUserActiveUseCase(store, logger=MagicMock())

    with pytest.raises(UserNotFoundError):
        use_case.execute("missing")


def test_change_password_clears_forced_change(store, hasher) -> None:
    user = add_user(store, "admin", "admin", password_change_required=True)
    use_case = ChangePasswordUseCase(store, hasher, logger=MagicMock())

    updated = use_case.execute(user.id, "nueva", "nueva")

    assert updated.password_change_required is False
    assert hasher.verify("nueva", updated.password_hash)


@pytest.mark.parametrize(
    ("password", "confirmation"),
    [("abc", "abc"), ("nueva", "otra"), ("x" * 80, "x" * 80)],
)
def test_change_password_validates(store, hasher, password, confirmation):
    user = add_user(store, "dj", "secret")
    use_case = ChangePasswordUseCase(store, hasher, logger=MagicMock())

    with pytest.raises(InvalidPasswordError):
        use_case.execute(user.id, password, confirmation)

    assert store.get_user(user.id).password_hash == user.password_hash


def test_get_user_stats(store) -> None:
    add_user(store, "a", active_until=datetime(2030, 1, 1))
    add_user(store, "b", active_until=datetime(2020, 1, 1))
    add_user(store, "c", is_active=False)
    use_case = GetUserStatsUseCase(
        store,
        logger=MagicMock(),
        clock=lambda: datetime(2024, 5, 10),
    )

    stats = use_case.execute()

    assert (stats.total, stats.active, stats.inactive) == (3, 1, 2)


def test_change_password_rejects_overlong_password_with_bcrypt(store):
    user = add_user(store, "dj", "secret")
    use_case = ChangePasswordUseCase(
        store,
        BcryptPasswordHasher(rounds=4),
        logger=MagicMock(),
    )

    with pytest.raises(InvalidPasswordError):
        use_case.execute(user.id, "x" * 80, "x" * 80)

    assert store.get_user(user.id).password_hash == user.password_hash
