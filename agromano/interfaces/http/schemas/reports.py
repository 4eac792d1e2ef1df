from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from agromano.domain.models.informe import AnimalNode, ExplotacionNode, TitularNode
from agromano.interfaces.http.schemas.alimentaciones import AlimentacionResponse
from agromano.interfaces.http.schemas.inspecciones import InspeccionResponse
from agromano.interfaces.http.schemas.medicamentos import MedicamentoResponse
from agromano.interfaces.http.schemas.movimientos import MovimientoResponse
from agromano.interfaces.http.schemas.usuarios import UsuarioResponse


class InformeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")


class ParcelaDatos(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    coordenadas: str | None
    extension: float | None


class IncidenciaDatos(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    descripcion: str | None
    codigo_anterior: str | None
    codigo_actual: str | None


class VacunacionDatos(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    fecha: date
    tipo: str
    dosis: str | None
    nombre_comercial: str | None
    veterinario: str | None


class AnimalDatos(BaseModel):
    id: int
    identificacion: str
    especie: str | None
    estado: str | None
    fecha_nacimiento: date | None
    fecha_alta: date | None
    movimientos: list[MovimientoResponse]
    incidencias: list[IncidenciaDatos]
    vacunaciones: list[VacunacionDatos]

    @classmethod
    def from_node(cls, node: AnimalNode) -> AnimalDatos:
        animal = node.animal
        return cls(
            id=animal.id,
            identificacion=animal.identificacion,
            especie=animal.especie,
            estado=animal.estado,
            fecha_nacimiento=animal.fecha_nacimiento,
            fecha_alta=animal.fecha_alta,
            movimientos=[MovimientoResponse.model_validate(m) for m in node.movimientos],
            incidencias=[IncidenciaDatos.model_validate(i) for i in node.incidencias],
            vacunaciones=[VacunacionDatos.model_validate(v) for v in node.vacunaciones],
        )


class ExplotacionDatos(BaseModel):
    id: int
    codigo: str
    nombre: str
    direccion: str | None
    localidad: str | None
    provincia: str | None
    codigo_postal: str | None
    especies: str | None
    coordenadas: str | None
    parcelas: list[ParcelaDatos]
    animales: list[AnimalDatos]
    alimentacion: list[AlimentacionResponse]
    medicamentos: list[MedicamentoResponse]
    inspecciones: list[InspeccionResponse]

    @classmethod
    def from_node(cls, node: ExplotacionNode) -> ExplotacionDatos:
        explotacion = node.explotacion
        return cls(
            id=explotacion.id,
            codigo=explotacion.codigo,
            nombre=explotacion.nombre,
            direccion=explotacion.direccion,
            localidad=explotacion.localidad,
            provincia=explotacion.provincia,
            codigo_postal=explotacion.codigo_postal,
            especies=explotacion.especies,
            coordenadas=explotacion.coordenadas,
            parcelas=[ParcelaDatos.model_validate(p) for p in node.parcelas],
            animales=[AnimalDatos.from_node(a) for a in node.animales],
            alimentacion=[AlimentacionResponse.model_validate(a) for a in node.alimentacion],
            medicamentos=[MedicamentoResponse.model_validate(m) for m in node.medicamentos],
            inspecciones=[InspeccionResponse.model_validate(i) for i in node.inspecciones],
        )


class TitularDatos(BaseModel):
    id: int
    nombre: str
    nif: str
    domicilio: str | None
    localidad: str | None
    provincia: str | None
    codigo_postal: str | None
    telefono: str | None
    usuario: UsuarioResponse | None


class TitularDatosResponse(BaseModel):
    titular: TitularDatos
    explotaciones: list[ExplotacionDatos]

    @classmethod
    def from_tree(cls, tree: TitularNode) -> TitularDatosResponse:
        titular = tree.titular
        usuario = UsuarioResponse.model_validate(tree.usuario) if tree.usuario else None
        return cls(
            titular=TitularDatos(
                id=titular.id,
                nombre=titular.nombre,
                nif=titular.nif,
                domicilio=titular.domicilio,
                localidad=titular.localidad,
                provincia=titular.provincia,
                codigo_postal=titular.codigo_postal,
                telefono=titular.telefono,
                usuario=usuario,
            ),
            explotaciones=[ExplotacionDatos.from_node(e) for e in tree.explotaciones],
        )
