"""Tests for subscription and account-access rules."""

from datetime import datetime, timedelta

import pytest

from conftest import make_user
from gestion_dj.domain.constants import ROLE_ADMIN
from gestion_dj.domain.errors import (
    AccountDisabledError,
    SubscriptionExpiredError,
)
from gestion_dj.domain.services import subscription

NOW = datetime(2024, 5, 10, 12, 0, 0)


def test_days_remaining_is_fractional() -> None:
    active_until = NOW + timedelta(days=1, hours=12)

    assert subscription.days_remaining(active_until, NOW) == 1.5


def test_expiry_is_strictly_after_active_until() -> None:
    assert subscription.is_subscription_expired(NOW, NOW) is False
    assert subscription.is_subscription_expired(
        NOW,
        NOW + timedelta(seconds=1),
    )


def test_ensure_account_usable_checks_disabled_first() -> None:
    user = make_user(is_active=False, active_until=NOW - timedelta(days=1))

    with pytest.raises(AccountDisabledError):
        subscription.ensure_account_usable(user, NOW)


def test_ensure_account_usable_rejects_expired_subscription() -> None:
    user = make_user(active_until=NOW - timedelta(minutes=1))

    with pytest.raises(SubscriptionExpiredError) as excinfo:
        subscription.ensure_account_usable(user, NOW)

    assert "expirado" in excinfo.value.message


def test_no_warning_beyond_seven_days() -> None:
    assert subscription.compute_subscription_warning(
        NOW + timedelta(days=7, seconds=1),
        NOW,
    ) is None


def test_warning_at_exactly_seven_days() -> None:
    warning = subscription.compute_subscription_warning(
        NOW + timedelta(days=7),
        NOW,
    )

    assert warning.level == subscription.LEVEL_WARNING
    assert warning.message == "Su suscripción vence en 7 días."


def test_urgent_at_exactly_two_days() -> None:
    warning = subscription.compute_subscription_warning(
        NOW + timedelta(days=2),
        NOW,
    )

    assert warning.level == subscription.LEVEL_URGENT
    assert warning.message == "¡Su suscripción vence en 2 día(s)!"


def test_just_over_two_days_is_a_plain_warning() -> None:
    warning = subscription.compute_subscription_warning(
        NOW + timedelta(days=2.01),
        NOW,
    )

    assert warning.level == subscription.LEVEL_WARNING
    assert warning.message == "Su suscripción vence en 3 días."


def test_partial_day_rounds_up() -> None:
    warning = subscription.compute_subscription_warning(
        NOW + timedelta(hours=5),
        NOW,
    )

    assert warning.level == subscription.LEVEL_URGENT
    assert "1 día(s)" in warning.message


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(days=-3)])
def test_expired_level_at_zero_or_less(offset) -> None:
    warning = subscription.compute_subscription_warning(NOW + offset, NOW)

    assert warning.level == subscription.LEVEL_EXPIRED
    assert warning.message == "Su suscripción ha expirado."


def test_admins_never_get_a_warning() -> None:
    admin = make_user(role=ROLE_ADMIN, active_until=NOW + timedelta(days=1))
    user = make_user(active_until=NOW + timedelta(days=1))

    assert subscription.subscription_warning_for(admin, NOW) is None
    assert subscription.subscription_warning_for(user, NOW) is not None


def test_compute_user_stats_counts_usable_accounts() -> None:
    users = [
        make_user("u1", active_until=NOW + timedelta(days=3)),
        make_user("u2", active_until=NOW - timedelta(days=3)),
        make_user("u3", is_active=False),
    ]

    stats = subscription.compute_user_stats(users, NOW)

    assert stats.total == 3
    assert stats.active == 1
    assert stats.inactive == 2
