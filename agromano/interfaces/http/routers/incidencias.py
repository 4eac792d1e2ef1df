from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.incidencia import Incidencia
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.incidencias import IncidenciaCreate, IncidenciaResponse, IncidenciaUpdate

router = APIRouter(prefix="/incidencias", tags=["incidencias"])


@router.get("", response_model=list[IncidenciaResponse])
async def list_incidencias(
    response: Response,
    id_animal: int | None = Query(None),
    q: str | None = Query(None, description="Busca en descripción y códigos"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.incidencias.list(id_animal=id_animal, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [IncidenciaResponse.model_validate(item) for item in items]


@router.get("/{incidencia_id}", response_model=IncidenciaResponse | None)
async def get_incidencia(
    incidencia_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.incidencias.get(incidencia_id)
    return IncidenciaResponse.model_validate(item) if item else None


@router.post("", response_model=IncidenciaResponse, status_code=status.HTTP_201_CREATED)
async def create_incidencia(
    payload: IncidenciaCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.incidencias.add(Incidencia(id=None, **payload.model_dump()))
    await uow.commit()
    return IncidenciaResponse.model_validate(created)


@router.put("/{incidencia_id}", response_model=IncidenciaResponse | None)
async def update_incidencia(
    incidencia_id: int,
    payload: IncidenciaUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.incidencias.update(incidencia_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return IncidenciaResponse.model_validate(updated) if updated else None


@router.delete("/{incidencia_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_incidencia(
    incidencia_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.incidencias.delete(incidencia_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
