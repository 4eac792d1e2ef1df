from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.animal import Animal
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.animales import AnimalCreate, AnimalResponse, AnimalUpdate

router = APIRouter(prefix="/animales", tags=["animales"])


@router.get("", response_model=list[AnimalResponse])
async def list_animales(
    response: Response,
    id_explotacion: int | None = Query(None),
    q: str | None = Query(None, description="Busca en identificación, especie y estado"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.animales.list(id_explotacion=id_explotacion, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [AnimalResponse.model_validate(item) for item in items]


@router.get("/{animal_id}", response_model=AnimalResponse | None)
async def get_animal(
    animal_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.animales.get(animal_id)
    return AnimalResponse.model_validate(item) if item else None


@router.post("", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(
    payload: AnimalCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.animales.add(Animal(id=None, **payload.model_dump()))
    await uow.commit()
    return AnimalResponse.model_validate(created)


@router.put("/{animal_id}", response_model=AnimalResponse | None)
async def update_animal(
    animal_id: int,
    payload: AnimalUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.animales.update(animal_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return AnimalResponse.model_validate(updated) if updated else None


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal(
    animal_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.animales.delete(animal_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
