from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.vacunacion import Vacunacion
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.vacunaciones import VacunacionCreate, VacunacionResponse, VacunacionUpdate

router = APIRouter(prefix="/vacunaciones", tags=["vacunaciones"])


@router.get("", response_model=list[VacunacionResponse])
async def list_vacunaciones(
    response: Response,
    id_explotacion: int | None = Query(None),
    q: str | None = Query(None, description="Busca en tipo, nombre comercial y veterinario"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.vacunaciones.list(id_explotacion=id_explotacion, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [VacunacionResponse.model_validate(item) for item in items]


@router.get("/{vacunacion_id}", response_model=VacunacionResponse | None)
async def get_vacunacion(
    vacunacion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.vacunaciones.get(vacunacion_id)
    return VacunacionResponse.model_validate(item) if item else None


@router.post("", response_model=VacunacionResponse, status_code=status.HTTP_201_CREATED)
async def create_vacunacion(
    payload: VacunacionCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.vacunaciones.add(Vacunacion(id=None, **payload.model_dump()))
    await uow.commit()
    return VacunacionResponse.model_validate(created)


@router.put("/{vacunacion_id}", response_model=VacunacionResponse | None)
async def update_vacunacion(
    vacunacion_id: int,
    payload: VacunacionUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.vacunaciones.update(vacunacion_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return VacunacionResponse.model_validate(updated) if updated else None


@router.delete("/{vacunacion_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vacunacion(
    vacunacion_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.vacunaciones.delete(vacunacion_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
