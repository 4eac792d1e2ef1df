from __future__ import annotations

from uuid import uuid4

import pytest

from agromano.application.errors import AuthError
from agromano.infrastructure.auth.session_tokens import SessionTokenService


def _service(secret: str = "s3cret") -> SessionTokenService:
    return SessionTokenService(secret_key=secret, algorithm="HS256", expires_minutes=10)


def test_token_round_trips_session_and_usuario():
    sesion_id = uuid4()
    token = _service().create_token(sesion_id=sesion_id, usuario_id=42)
    assert _service().decode(token) == (sesion_id, 42)


def test_token_signed_with_other_key_is_rejected():
    token = _service("other").create_token(sesion_id=uuid4(), usuario_id=1)
    with pytest.raises(AuthError):
        _service().decode(token)


def test_expired_token_is_rejected():
    service = SessionTokenService(secret_key="s3cret", algorithm="HS256", expires_minutes=-1)
    token = service.create_token(sesion_id=uuid4(), usuario_id=1)
    with pytest.raises(AuthError):
        service.decode(token)
