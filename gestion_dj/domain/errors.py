"""Error taxonomy for the domain and its collaborators.

Every error carries a human-readable ``message`` that interface adapters can
show to the user as is.
"""


class GestionError(Exception):
    """Base class for expected, user-facing failures."""

    default_message = "Ocurrió un error inesperado."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidCredentialsError(GestionError):
    default_message = "Usuario o contraseña incorrectos."


class AccountDisabledError(GestionError):
    default_message = (
        "Su cuenta ha sido desactivada. Contacte al administrador."
    )


class SubscriptionExpiredError(GestionError):
    default_message = "Su suscripción ha expirado. Contacte al administrador."


class ClientRequiredError(GestionError):
    default_message = "Por favor, seleccione un cliente."


class ClientNameRequiredError(GestionError):
    default_message = "El nombre del cliente es obligatorio."


class ClientInUseError(GestionError):
    default_message = (
        "No se puede eliminar el cliente porque tiene eventos asociados."
    )


class MalformedImportDocumentError(GestionError):
    default_message = "El archivo de respaldo no tiene el formato esperado."


class StoreUnavailableError(GestionError):
    """Raised by data stores when the backing storage fails."""

    default_message = "No se pudo conectar con el servidor."


class DuplicateUsernameError(GestionError):
    default_message = "El nombre de usuario ya existe."


class InvalidPasswordError(GestionError):
    default_message = "La contraseña no es válida."


class UsernameRequiredError(GestionError):
    default_message = "El nombre de usuario es obligatorio."


class UserNotFoundError(GestionError):
    default_message = "El usuario no existe."


class ClientNotFoundError(GestionError):
    default_message = "El cliente no existe."


class EventNotFoundError(GestionError):
    default_message = "El evento no existe."


class InvalidAmountError(GestionError):
    default_message = "Los montos deben ser números enteros no negativos."


__all__ = [
    "GestionError",
    "InvalidCredentialsError",
    "AccountDisabledError",
    "SubscriptionExpiredError",
    "ClientRequiredError",
    "ClientNameRequiredError",
    "ClientInUseError",
    "MalformedImportDocumentError",
    "StoreUnavailableError",
    "DuplicateUsernameError",
    "InvalidPasswordError",
    "UsernameRequiredError",
    "UserNotFoundError",
    "ClientNotFoundError",
    "EventNotFoundError",
    "InvalidAmountError",
]
