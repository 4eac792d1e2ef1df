from __future__ import annotations

from typing import Iterable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse, Response

from agromano.application.errors import AuthError
from agromano.config.settings import Settings
from agromano.infrastructure.auth.context import AuthContext, resolve_session

PUBLIC_PATHS: Iterable[str] = (
    "/api/health",
    "/api/login",
    "/api/register",
    "/api/logout",
    "/api/check-auth",
)


def _is_public(path: str) -> bool:
    # Only the /api tree is guarded; docs and openapi.json stay open
    if not path.startswith("/api"):
        return True
    return path in PUBLIC_PATHS


class AuthMiddleware(BaseHTTPMiddleware):
    """Resolves the session cookie into ``request.state.auth_context``.

    Public paths still get the context when the cookie is valid, so
    check-auth and logout can see who is calling.
    """

    def __init__(self, app, *, settings: Settings) -> None:
        super().__init__(app)
        self.settings = settings

    async def dispatch(self, request: Request, call_next) -> Response:
        # Let CORS preflight pass without auth checks
        if request.method == "OPTIONS":
            return await call_next(request)

        context = None
        token = request.cookies.get(self.settings.session_cookie_name)
        if token:
            try:
                context = await self._resolve(request, token)
            except AuthError:
                context = None
        request.state.auth_context = context

        if context is None and not _is_public(request.url.path):
            error = AuthError("Autenticación requerida")
            payload = {"code": error.code, "message": error.message}
            return JSONResponse(status_code=error.status_code, content=payload)
        return await call_next(request)

    async def _resolve(self, request: Request, token: str) -> AuthContext:
        session_tokens = getattr(request.app.state, "session_tokens", None)
        if session_tokens is None:
            raise RuntimeError("Session token service not configured")
        sesion_id, usuario_id = session_tokens.decode(token)
        session_factory = getattr(request.app.state, "session_factory", None)
        if session_factory is None:
            raise RuntimeError("Session factory not configured")
        async with session_factory() as session:
            usuario = await resolve_session(session, sesion_id, usuario_id)
        if usuario is None:
            raise AuthError("Sesión expirada o revocada")
        return AuthContext(
            usuario_id=usuario.id,
            email=usuario.email,
            nombre_usuario=usuario.nombre_usuario,
            sesion_id=sesion_id,
        )
