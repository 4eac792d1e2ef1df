from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.movimiento import Movimiento
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.movimientos import MovimientoCreate, MovimientoResponse, MovimientoUpdate

router = APIRouter(prefix="/movimientos", tags=["movimientos"])


@router.get("", response_model=list[MovimientoResponse])
async def list_movimientos(
    response: Response,
    id_animal: int | None = Query(None),
    q: str | None = Query(None, description="Busca en tipo, motivo y procedencia/destino"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.movimientos.list(id_animal=id_animal, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [MovimientoResponse.model_validate(item) for item in items]


@router.get("/{movimiento_id}", response_model=MovimientoResponse | None)
async def get_movimiento(
    movimiento_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.movimientos.get(movimiento_id)
    return MovimientoResponse.model_validate(item) if item else None


@router.post("", response_model=MovimientoResponse, status_code=status.HTTP_201_CREATED)
async def create_movimiento(
    payload: MovimientoCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.movimientos.add(Movimiento(id=None, **payload.model_dump()))
    await uow.commit()
    return MovimientoResponse.model_validate(created)


@router.put("/{movimiento_id}", response_model=MovimientoResponse | None)
async def update_movimiento(
    movimiento_id: int,
    payload: MovimientoUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.movimientos.update(movimiento_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return MovimientoResponse.model_validate(updated) if updated else None


@router.delete("/{movimiento_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_movimiento(
    movimiento_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.movimientos.delete(movimiento_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
