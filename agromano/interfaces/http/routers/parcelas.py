from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.parcela import Parcela
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.parcelas import ParcelaCreate, ParcelaResponse, ParcelaUpdate

router = APIRouter(prefix="/parcelas", tags=["parcelas"])


@router.get("", response_model=list[ParcelaResponse])
async def list_parcelas(
    response: Response,
    id_explotacion: int | None = Query(None),
    q: str | None = Query(None, description="Busca en coordenadas"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.parcelas.list(id_explotacion=id_explotacion, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [ParcelaResponse.model_validate(item) for item in items]


@router.get("/{parcela_id}", response_model=ParcelaResponse | None)
async def get_parcela(
    parcela_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.parcelas.get(parcela_id)
    return ParcelaResponse.model_validate(item) if item else None


@router.post("", response_model=ParcelaResponse, status_code=status.HTTP_201_CREATED)
async def create_parcela(
    payload: ParcelaCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.parcelas.add(Parcela(id=None, **payload.model_dump()))
    await uow.commit()
    return ParcelaResponse.model_validate(created)


@router.put("/{parcela_id}", response_model=ParcelaResponse | None)
async def update_parcela(
    parcela_id: int,
    payload: ParcelaUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.parcelas.update(parcela_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return ParcelaResponse.model_validate(updated) if updated else None


@router.delete("/{parcela_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_parcela(
    parcela_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.parcelas.delete(parcela_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
