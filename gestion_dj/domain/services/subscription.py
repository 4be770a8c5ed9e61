"""Subscription and account-access rules."""

import math
from collections.abc import Iterable
from datetime import datetime, timedelta

from gestion_dj.domain.constants import (
    ROLE_USER,
    URGENT_WARNING_DAYS,
    WARNING_DAYS,
)
from gestion_dj.domain.errors import (
    AccountDisabledError,
    SubscriptionExpiredError,
)
from gestion_dj.domain.models import SubscriptionWarning, User, UserStats

LEVEL_EXPIRED = "expired"
LEVEL_URGENT = "urgent"
LEVEL_WARNING = "warning"

_ONE_DAY = timedelta(days=1)


def days_remaining(active_until: datetime, now: datetime) -> float:
    """Return the fractional number of days left in the subscription."""
    return (active_until - now) / _ONE_DAY


def is_subscription_expired(active_until: datetime, now: datetime) -> bool:
    """Return True once ``now`` is strictly after ``active_until``."""
    return now > active_until


def ensure_account_usable(user: User, now: datetime) -> None:
    """Check the active flag, then the subscription window.

    Args:
        user: Account whose credentials were already verified.
        now: Reference timestamp.

    Raises:
        AccountDisabledError: If the account was switched off.
        SubscriptionExpiredError: If the subscription window has ended.
    """
    if not user.is_active:
        raise AccountDisabledError()
    if is_subscription_expired(user.active_until, now):
        raise SubscriptionExpiredError()


def compute_subscription_warning(
    active_until: datetime,
    now: datetime,
) -> SubscriptionWarning | None:
    """Classify how close a subscription is to its end.

    Args:
        active_until: End of the subscription window.
        now: Reference timestamp.

    Returns:
        SubscriptionWarning | None: ``expired`` at zero days or less,
        ``urgent`` up to 2 days, ``warning`` up to 7 days, else None.
    """
    remaining = days_remaining(active_until, now)
    if remaining > WARNING_DAYS:
        return None
    if remaining <= 0:
        return SubscriptionWarning(
            level=LEVEL_EXPIRED,
            days_remaining=remaining,
            message="Su suscripción ha expirado.",
        )
    days = math.ceil(remaining)
    if remaining <= URGENT_WARNING_DAYS:
        return SubscriptionWarning(
            level=LEVEL_URGENT,
            days_remaining=remaining,
            message=f"¡Su suscripción vence en {days} día(s)!",
        )
    return SubscriptionWarning(
        level=LEVEL_WARNING,
        days_remaining=remaining,
        message=f"Su suscripción vence en {days} días.",
    )


def subscription_warning_for(
    user: User,
    now: datetime,
) -> SubscriptionWarning | None:
    """Return the banner for ``user``; only ``user`` accounts get one."""
    if user.role != ROLE_USER:
        return None
    return compute_subscription_warning(user.active_until, now)


def compute_user_stats(users: Iterable[User], now: datetime) -> UserStats:
    """Count users and those currently able to sign in."""
    users = list(users)
    active = sum(
        1 for user in users if user.is_active and user.active_until > now
    )
    return UserStats(total=len(users), active=active)


__all__ = [
    "LEVEL_EXPIRED",
    "LEVEL_URGENT",
    "LEVEL_WARNING",
    "days_remaining",
    "is_subscription_expired",
    "ensure_account_usable",
    "compute_subscription_warning",
    "subscription_warning_for",
    "compute_user_stats",
]
