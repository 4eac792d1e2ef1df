from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from jose import jwt
from jose.exceptions import JWTError

from agromano.application.errors import AuthError


class SessionTokenService:
    """Signs and reads the value stored in the session cookie.

    The token only references a row in the session store; revocation is done
    by deleting that row, not by expiring the token.
    """

    def __init__(self, *, secret_key: str, algorithm: str, expires_minutes: int) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_minutes = expires_minutes

    def create_token(self, *, sesion_id: UUID, usuario_id: int) -> str:
        now = datetime.now(timezone.utc)
        to_encode: dict[str, Any] = {
            "sub": str(usuario_id),
            "sid": str(sesion_id),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(minutes=self.expires_minutes)).timestamp()),
            "typ": "session",
        }
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> tuple[UUID, int]:
        """Return ``(sesion_id, usuario_id)`` from a cookie value."""
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise AuthError("Sesión no válida") from exc
        if claims.get("typ") != "session":
            raise AuthError("Sesión no válida")
        try:
            return UUID(str(claims["sid"])), int(claims["sub"])
        except (KeyError, TypeError, ValueError) as exc:
            raise AuthError("Sesión no válida") from exc
