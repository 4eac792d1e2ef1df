from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status

from agromano.application.use_cases.auth import login_user, logout_user, register_account
from agromano.config.settings import Settings
from agromano.infrastructure.auth.context import AuthContext
from agromano.infrastructure.auth.password import PasswordHasher
from agromano.infrastructure.auth.session_tokens import SessionTokenService
from agromano.interfaces.http.deps import (
    get_app_settings,
    get_optional_auth_context,
    get_password_hasher,
    get_session_tokens,
    get_uow,
)
from agromano.interfaces.http.schemas.auth import (
    CheckAuthResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
)
from agromano.interfaces.http.schemas.usuarios import UsuarioResponse

router = APIRouter(prefix="", tags=["auth"])
logger = logging.getLogger(__name__)


@router.post("/register", response_model=UsuarioResponse, status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
) -> UsuarioResponse:
    created = await register_account.execute(
        uow=uow,
        payload=register_account.RegisterInput(**payload.model_dump()),
        password_hasher=password_hasher,
    )
    logger.info("Registered usuario %s", created.id)
    return UsuarioResponse.model_validate(created)


@router.post("/login", response_model=MessageResponse)
async def login(
    payload: LoginRequest,
    response: Response,
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    session_tokens: SessionTokenService = Depends(get_session_tokens),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    result = await login_user.execute(
        uow=uow,
        payload=login_user.LoginInput(email=payload.email, contrasena=payload.contrasena),
        password_hasher=password_hasher,
        session_tokens=session_tokens,
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=result.token,
        max_age=settings.session_expires_minutes * 60,
        httponly=True,
        samesite=settings.cookie_samesite,
        secure=settings.cookie_secure,
        path="/",
    )
    return MessageResponse(message="Login exitoso")


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    context: AuthContext | None = Depends(get_optional_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> MessageResponse:
    await logout_user.execute(uow=uow, sesion_id=context.sesion_id if context else None)
    response.delete_cookie(settings.session_cookie_name, path="/")
    return MessageResponse(message="Logout exitoso")


@router.get("/check-auth", response_model=CheckAuthResponse)
async def check_auth(
    context: AuthContext | None = Depends(get_optional_auth_context),
    uow=Depends(get_uow),
) -> CheckAuthResponse:
    if context is None:
        return CheckAuthResponse(isAuthenticated=False, user=None)
    usuario = await uow.usuarios.get(context.usuario_id)
    if usuario is None:
        return CheckAuthResponse(isAuthenticated=False, user=None)
    return CheckAuthResponse(isAuthenticated=True, user=UsuarioResponse.model_validate(usuario))
