from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.alimentacion import Alimentacion
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.alimentaciones import AlimentacionCreate, AlimentacionResponse, AlimentacionUpdate

router = APIRouter(prefix="/alimentaciones", tags=["alimentaciones"])


@router.get("", response_model=list[AlimentacionResponse])
async def list_alimentaciones(
    response: Response,
    id_explotacion: int | None = Query(None),
    q: str | None = Query(None, description="Busca en tipo, lote y factura"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.alimentaciones.list(id_explotacion=id_explotacion, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [AlimentacionResponse.model_validate(item) for item in items]


@router.get("/{alimentacion_id}", response_model=AlimentacionResponse | None)
async def get_alimentacion(
    alimentacion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.alimentaciones.get(alimentacion_id)
    return AlimentacionResponse.model_validate(item) if item else None


@router.post("", response_model=AlimentacionResponse, status_code=status.HTTP_201_CREATED)
async def create_alimentacion(
    payload: AlimentacionCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.alimentaciones.add(Alimentacion(id=None, **payload.model_dump()))
    await uow.commit()
    return AlimentacionResponse.model_validate(created)


@router.put("/{alimentacion_id}", response_model=AlimentacionResponse | None)
async def update_alimentacion(
    alimentacion_id: int,
    payload: AlimentacionUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.alimentaciones.update(alimentacion_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return AlimentacionResponse.model_validate(updated) if updated else None


@router.delete("/{alimentacion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_alimentacion(
    alimentacion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.alimentaciones.delete(alimentacion_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
