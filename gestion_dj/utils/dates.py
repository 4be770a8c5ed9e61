"""Calendar helpers shared by the aggregation services."""

from datetime import date, datetime, time


def start_of_day(value: date) -> datetime:
    """Return the first instant of the given day."""
    return datetime.combine(value, time.min)


def end_of_day(value: date) -> datetime:
    """Return the last instant of the given day."""
    return datetime.combine(value, time.max)


def month_key(value: date) -> str:
    """Return the sortable ``YYYY-MM`` key of a date."""
    return f"{value.year:04d}-{value.month:02d}"


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """Move a (year, month) pair by ``offset`` months.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        offset: Number of months to move, negative to go back.

    Returns:
        tuple[int, int]: The shifted (year, month) pair.
    """
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def add_years(value: datetime, years: int) -> datetime:
    """Return ``value`` moved by whole years, clamping 29 February."""
    try:
        return value.replace(year=value.year + years)
    except ValueError:
        return value.replace(year=value.year + years, day=28)


__all__ = [
    "start_of_day",
    "end_of_day",
    "month_key",
    "shift_month",
    "add_years",
]
