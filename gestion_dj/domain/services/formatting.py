"""Presentation helpers shared by the interface adapters."""

from datetime import date


def format_currency(value: int | float) -> str:
    """Format an amount in guaraníes, e.g. ``Gs. 1.250.000``."""
    rounded = round(value)
    grouped = f"{abs(rounded):,}".replace(",", ".")
    sign = "-" if rounded < 0 else ""
    return f"Gs. {sign}{grouped}"


def format_day(value: date) -> str:
    return value.strftime("%d/%m/%Y")


def report_title(start_date: date, end_date: date) -> str:
    return f"Reporte del {format_day(start_date)} al {format_day(end_date)}"


__all__ = ["format_currency", "format_day", "report_title"]
