"""bcrypt implementation of the password hasher port."""

import bcrypt

from gestion_dj.application.ports.password_hasher import PasswordHasherPort


class BcryptPasswordHasher(PasswordHasherPort):
    """Salted bcrypt hashes stored as UTF-8 strings."""

    def __init__(self, rounds: int = 12) -> None:
        """Initialize the hasher.

        Args:
            rounds: bcrypt cost factor.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Compare in constant time; malformed hashes never match."""
        if not password or not hashed:
            return False
        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                hashed.encode("utf-8"),
            )
        except ValueError:
            return False


__all__ = ["BcryptPasswordHasher"]
