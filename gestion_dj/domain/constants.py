"""Domain constants shared with the interface collaborators."""

ROLE_ADMIN = "admin"
ROLE_USER = "user"
ROLES = (ROLE_ADMIN, ROLE_USER)

INCOME_CATEGORIES = (
    "Boda",
    "Evento Privado",
    "Evento Corporativo",
    "Discoteca/Club",
    "Festival",
    "Otro",
)

EXPENSE_CATEGORIES = (
    "Transporte",
    "Alquiler de Equipo",
    "Marketing",
    "Música",
    "Comida y Bebida",
    "Alojamiento",
    "Asistentes",
    "Otro",
)

SUBSCRIPTION_TIERS = (
    "Mensual",
    "Trimestral",
    "Anual",
    "Vitalicio",
)

DEFAULT_ADMIN_USERNAME = "admin"
DEFAULT_ADMIN_PASSWORD = "admin"
ADMIN_SUBSCRIPTION_YEARS = 10

MIN_PASSWORD_LENGTH = 4
MAX_PASSWORD_BYTES = 72
TOP_RANKING_SIZE = 5
TREND_MONTHS = 12
URGENT_WARNING_DAYS = 2
WARNING_DAYS = 7


__all__ = [
    "ROLE_ADMIN",
    "ROLE_USER",
    "ROLES",
    "INCOME_CATEGORIES",
    "EXPENSE_CATEGORIES",
    "SUBSCRIPTION_TIERS",
    "DEFAULT_ADMIN_USERNAME",
    "DEFAULT_ADMIN_PASSWORD",
    "ADMIN_SUBSCRIPTION_YEARS",
    "MIN_PASSWORD_LENGTH",
    "MAX_PASSWORD_BYTES",
    "TOP_RANKING_SIZE",
    "TREND_MONTHS",
    "URGENT_WARNING_DAYS",
    "WARNING_DAYS",
]
