"""Application port for one-way password hashing."""

from typing import Protocol


class PasswordHasherPort(Protocol):
    """Port hiding the hashing algorithm from the use cases."""

    def hash(self, password: str) -> str:
        """Return a salted hash of ``password``."""

    def verify(self, password: str, hashed: str) -> bool:
        """Return True when ``password`` matches ``hashed``."""


__all__ = ["PasswordHasherPort"]
