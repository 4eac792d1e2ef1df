from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.inspeccion import Inspeccion
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.inspecciones import InspeccionCreate, InspeccionResponse, InspeccionUpdate

router = APIRouter(prefix="/inspecciones", tags=["inspecciones"])


@router.get("", response_model=list[InspeccionResponse])
async def list_inspecciones(
    response: Response,
    id_explotacion: int | None = Query(None),
    q: str | None = Query(None, description="Busca en tipo y número de acta"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.inspecciones.list(id_explotacion=id_explotacion, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [InspeccionResponse.model_validate(item) for item in items]


@router.get("/{inspeccion_id}", response_model=InspeccionResponse | None)
async def get_inspeccion(
    inspeccion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.inspecciones.get(inspeccion_id)
    return InspeccionResponse.model_validate(item) if item else None


@router.post("", response_model=InspeccionResponse, status_code=status.HTTP_201_CREATED)
async def create_inspeccion(
    payload: InspeccionCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.inspecciones.add(Inspeccion(id=None, **payload.model_dump()))
    await uow.commit()
    return InspeccionResponse.model_validate(created)


@router.put("/{inspeccion_id}", response_model=InspeccionResponse | None)
async def update_inspeccion(
    inspeccion_id: int,
    payload: InspeccionUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.inspecciones.update(inspeccion_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return InspeccionResponse.model_validate(updated) if updated else None


@router.delete("/{inspeccion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_inspeccion(
    inspeccion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.inspecciones.delete(inspeccion_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
