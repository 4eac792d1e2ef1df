from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Query, Response, status
from starlette.concurrency import run_in_threadpool

from agromano.application.errors import InfrastructureError, NotFound, ValidationError
from agromano.domain.models.informe import DateRange
from agromano.domain.models.titular import Titular
from agromano.infrastructure.auth.context import AuthContext
from agromano.infrastructure.reports.pdf_generator import PDFGenerator
from agromano.infrastructure.reports.report_service import TitularReportService
from agromano.interfaces.http.deps import (
    get_auth_context,
    get_pdf_generator,
    get_report_service,
    get_uow,
)
from agromano.interfaces.http.schemas.reports import InformeRequest, TitularDatosResponse
from agromano.interfaces.http.schemas.titulares import (
    TitularCreate,
    TitularResponse,
    TitularUpdate,
    TitularUsuarioResponse,
)

router = APIRouter(tags=["titulares"])
logger = logging.getLogger(__name__)


@router.get("/titularesAdmin", response_model=list[TitularResponse])
async def list_all_titulares(
    response: Response,
    q: str | None = Query(None, description="Busca en nombre, NIF y localidad"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    items, total = await uow.titulares.list(q=q, limit=limit, offset=offset)
    response.headers["X-Total-Count"] = str(total)
    return [TitularResponse.model_validate(item) for item in items]


@router.get("/titulares", response_model=list[TitularResponse])
async def list_my_titulares(
    response: Response,
    q: str | None = Query(None, description="Busca en nombre, NIF y localidad"),
    limit: int | None = Query(None, ge=1, le=500),
    offset: int = Query(0, ge=0),
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    """Titulares owned by the logged-in usuario."""
    items, total = await uow.titulares.list(
        id_usuario=context.usuario_id, q=q, limit=limit, offset=offset
    )
    response.headers["X-Total-Count"] = str(total)
    return [TitularResponse.model_validate(item) for item in items]


@router.get("/titulares/usuario/{titular_id}", response_model=TitularUsuarioResponse)
async def get_titular_usuario(
    titular_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    return TitularUsuarioResponse(id_usuario=await uow.titulares.get_usuario_id(titular_id))


@router.get("/titulares/{titular_id}", response_model=TitularResponse | None)
async def get_titular(
    titular_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
):
    item = await uow.titulares.get(titular_id)
    return TitularResponse.model_validate(item) if item else None


@router.post("/titulares", response_model=TitularResponse, status_code=status.HTTP_201_CREATED)
async def create_titular(
    payload: TitularCreate,
    context: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    data = payload.model_dump()
    if data["id_usuario"] is None:
        data["id_usuario"] = context.usuario_id
    created = await uow.titulares.add(Titular(id=None, **data))
    await uow.commit()
    return TitularResponse.model_validate(created)


@router.put("/titulares/{titular_id}", response_model=TitularResponse | None)
async def update_titular(
    titular_id: int,
    payload: TitularUpdate,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
):
    data = payload.model_dump(exclude_unset=True)
    if data.get("id_usuario", 0) is None:
        data.pop("id_usuario")
    updated = await uow.titulares.update(titular_id, data)
    await uow.commit()
    return TitularResponse.model_validate(updated) if updated else None


@router.delete("/titulares/{titular_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_titular(
    titular_id: int, _: AuthContext = Depends(get_auth_context), uow=Depends(get_uow)
) -> Response:
    await uow.titulares.delete(titular_id)
    await uow.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/titulares/{titular_id}/datos", response_model=TitularDatosResponse | None)
async def get_titular_datos(
    titular_id: int,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    report_service: TitularReportService = Depends(get_report_service),
):
    """Full titular tree, unfiltered, with every date as YYYY-MM-DD."""
    tree = await report_service.build_tree(uow, titular_id)
    return TitularDatosResponse.from_tree(tree) if tree else None


@router.post("/titulares/{titular_id}/informe")
async def generate_informe(
    titular_id: int,
    payload: InformeRequest,
    _: AuthContext = Depends(get_auth_context),
    uow=Depends(get_uow),
    report_service: TitularReportService = Depends(get_report_service),
    pdf_generator: PDFGenerator = Depends(get_pdf_generator),
) -> Response:
    if payload.start_date > payload.end_date:
        raise ValidationError("La fecha de inicio no puede ser posterior a la fecha de fin")
    date_range = DateRange(start=payload.start_date, end=payload.end_date)

    pdf = None
    try:
        tree = await report_service.build_tree(uow, titular_id, date_range)
        if tree is not None:
            elements = pdf_generator.create_report(tree, date_range)
            pdf = await run_in_threadpool(pdf_generator.generate_pdf, elements)
    except Exception as exc:
        logger.exception("Error al generar el informe PDF del titular %s", titular_id)
        raise InfrastructureError("Error al generar el informe PDF") from exc

    if pdf is None:
        raise NotFound("Titular no encontrado")
    return Response(
        content=pdf,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename=Informe_{titular_id}.pdf"},
    )
