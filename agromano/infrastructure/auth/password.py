from __future__ import annotations

from passlib.context import CryptContext

# Cost factor of the hashes already stored in usuarios.contrasena_hash ($2a$10$...)
BCRYPT_ROUNDS = 10


class PasswordHasher:
    def __init__(self, rounds: int = BCRYPT_ROUNDS) -> None:
        self._pwd_context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, contrasena: str) -> str:
        return self._pwd_context.hash(contrasena)

    def verify(self, contrasena: str, contrasena_hash: str) -> bool:
        """False for a wrong password and for a stored value that is not a bcrypt hash."""
        if not contrasena_hash or self._pwd_context.identify(contrasena_hash) is None:
            return False
        return self._pwd_context.verify(contrasena, contrasena_hash)
