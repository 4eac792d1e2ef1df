from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.vacunacion import VacunacionAnimal
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.vacunaciones import (
    VacunacionAnimalCreate,
    VacunacionAnimalResponse,
    VacunacionAnimalUpdate,
)

router = APIRouter(prefix="/vacunaciones_animal", tags=["vacunaciones"])


@router.get("", response_model=list[VacunacionAnimalResponse])
async def list_vacunaciones_animal(
    response: Response,
    id_vacunacion: int | None = Query(None),
    id_animal: int | None = Query(None),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.vacunaciones_animal.list(
        id_vacunacion=id_vacunacion, id_animal=id_animal, limit=limit, offset=offset
    )
    response.headers["X-Total-Count"] = str(total)
    return [VacunacionAnimalResponse.model_validate(item) for item in items]


@router.get("/{link_id}", response_model=VacunacionAnimalResponse | None)
async def get_vacunacion_animal(
    link_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.vacunaciones_animal.get(link_id)
    return VacunacionAnimalResponse.model_validate(item) if item else None


@router.post("", response_model=VacunacionAnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_vacunacion_animal(
    payload: VacunacionAnimalCreate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    created = await uow.vacunaciones_animal.add(
        VacunacionAnimal(id=None, id_vacunacion=payload.id_vacunacion, id_animal=payload.id_animal)
    )
    await uow.commit()
    return VacunacionAnimalResponse.model_validate(created)


@router.put("/{link_id}", response_model=VacunacionAnimalResponse | None)
async def update_vacunacion_animal(
    link_id: int,
    payload: VacunacionAnimalUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.vacunaciones_animal.update(link_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return VacunacionAnimalResponse.model_validate(updated) if updated else None


@router.delete("/{link_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_vacunacion_animal(
    link_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.vacunaciones_animal.delete(link_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
