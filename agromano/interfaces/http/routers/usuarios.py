from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from agromano.application.use_cases.auth import register_account
from agromano.application.use_cases.usuarios import delete_usuario, update_usuario
from agromano.config.settings import Settings
from agromano.infrastructure.auth.context import AuthContext
from agromano.infrastructure.auth.password import PasswordHasher
from agromano.interfaces.http.deps import (
    get_app_settings,
    get_auth_context,
    get_password_hasher,
    get_uow,
)
from agromano.interfaces.http.schemas.usuarios import (
    UsuarioCreate,
    UsuarioResponse,
    UsuarioUpdate,
)

router = APIRouter(prefix="/usuarios", tags=["usuarios"])


@router.get("", response_model=list[UsuarioResponse])
async def list_usuarios(_: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)):
    items = await uow.usuarios.list()
    return [UsuarioResponse.model_validate(item) for item in items]


@router.get("/{usuario_id}", response_model=UsuarioResponse | None)
async def get_usuario(
    usuario_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.usuarios.get(usuario_id)
    return UsuarioResponse.model_validate(item) if item else None


@router.post("", response_model=UsuarioResponse, status_code=status.HTTP_201_CREATED)
async def create_usuario(
    payload: UsuarioCreate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    created = await register_account.execute(
        uow=uow,
        payload=register_account.RegisterInput(**payload.model_dump()),
        password_hasher=password_hasher,
    )
    return UsuarioResponse.model_validate(created)


@router.put("/{usuario_id}", response_model=UsuarioResponse | None)
async def update_usuario_endpoint(
    usuario_id: int,
    payload: UsuarioUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    updated = await update_usuario.execute(
        uow=uow,
        usuario_id=usuario_id,
        data=payload.model_dump(exclude_unset=True),
        password_hasher=password_hasher,
    )
    return UsuarioResponse.model_validate(updated) if updated else None


@router.delete("/{usuario_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_usuario_endpoint(
    usuario_id: int,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    settings: Settings = Depends(get_app_settings),
) -> Response:
    own_account = await delete_usuario.execute(
        uow=uow, usuario_id=usuario_id, acting_usuario_id=context.usuario_id
    )
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    if own_account:
        response.delete_cookie(settings.session_cookie_name, path="/")
    return response
