from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.explotacion import Explotacion
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.explotaciones import ExplotacionCreate, ExplotacionResponse, ExplotacionUpdate

router = APIRouter(prefix="/explotaciones", tags=["explotaciones"])


@router.get("", response_model=list[ExplotacionResponse])
async def list_explotaciones(
    response: Response,
    id_titular: int | None = Query(None),
    q: str | None = Query(None, description="Busca en código, nombre y localidad"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.explotaciones.list(id_titular=id_titular, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [ExplotacionResponse.model_validate(item) for item in items]


@router.get("/{explotacion_id}", response_model=ExplotacionResponse | None)
async def get_explotacion(
    explotacion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.explotaciones.get(explotacion_id)
    return ExplotacionResponse.model_validate(item) if item else None


@router.post("", response_model=ExplotacionResponse, status_code=status.HTTP_201_CREATED)
async def create_explotacion(
    payload: ExplotacionCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.explotaciones.add(Explotacion(id=None, **payload.model_dump()))
    await uow.commit()
    return ExplotacionResponse.model_validate(created)


@router.put("/{explotacion_id}", response_model=ExplotacionResponse | None)
async def update_explotacion(
    explotacion_id: int,
    payload: ExplotacionUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.explotaciones.update(explotacion_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return ExplotacionResponse.model_validate(updated) if updated else None


@router.delete("/{explotacion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_explotacion(
    explotacion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.explotaciones.delete(explotacion_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
