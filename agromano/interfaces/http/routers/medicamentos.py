from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from agromano.domain.models.medicamento import Medicamento
from agromano.infrastructure.auth.context import AuthContext
from agromano.interfaces.http.deps import get_auth_context, get_uow
from agromano.interfaces.http.schemas.medicamentos import MedicamentoCreate, MedicamentoResponse, MedicamentoUpdate

router = APIRouter(prefix="/medicamentos", tags=["medicamentos"])


@router.get("", response_model=list[MedicamentoResponse])
async def list_medicamentos(
    response: Response,
    id_explotacion: int | None = Query(None),
    q: str | None = Query(None, description="Busca en medicamento, receta y factura"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.medicamentos.list(id_explotacion=id_explotacion, q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [MedicamentoResponse.model_validate(item) for item in items]


@router.get("/{medicamento_id}", response_model=MedicamentoResponse | None)
async def get_medicamento(
    medicamento_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.medicamentos.get(medicamento_id)
    return MedicamentoResponse.model_validate(item) if item else None


@router.post("", response_model=MedicamentoResponse, status_code=status.HTTP_201_CREATED)
async def create_medicamento(
    payload: MedicamentoCreate, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    created = await uow.medicamentos.add(Medicamento(id=None, **payload.model_dump()))
    await uow.commit()
    return MedicamentoResponse.model_validate(created)


@router.put("/{medicamento_id}", response_model=MedicamentoResponse | None)
async def update_medicamento(
    medicamento_id: int,
    payload: MedicamentoUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    updated = await uow.medicamentos.update(medicamento_id, payload.model_dump(exclude_unset=True))
    await uow.commit()
    return MedicamentoResponse.model_validate(updated) if updated else None


@router.delete("/{medicamento_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_medicamento(
    medicamento_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.medicamentos.delete(medicamento_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
