from __future__ import annotations

from typing import Protocol

from agromano.application.interfaces.repositories.alimentaciones import AlimentacionesRepository
from agromano.application.interfaces.repositories.animales import AnimalesRepository
from agromano.application.interfaces.repositories.explotaciones import ExplotacionesRepository
from agromano.application.interfaces.repositories.incidencias import IncidenciasRepository
from agromano.application.interfaces.repositories.inspecciones import InspeccionesRepository
from agromano.application.interfaces.repositories.medicamentos import MedicamentosRepository
from agromano.application.interfaces.repositories.movimientos import MovimientosRepository
from agromano.application.interfaces.repositories.parcelas import ParcelasRepository
from agromano.application.interfaces.repositories.sesiones import SesionesRepository
from agromano.application.interfaces.repositories.titulares import TitularesRepository
from agromano.application.interfaces.repositories.usuarios import UsuariosRepository
from agromano.application.interfaces.repositories.vacunaciones import (
    VacunacionesAnimalRepository,
    VacunacionesRepository,
)


class UnitOfWork(Protocol):
    usuarios: UsuariosRepository
    sesiones: SesionesRepository
    titulares: TitularesRepository
    explotaciones: ExplotacionesRepository
    parcelas: ParcelasRepository
    animales: AnimalesRepository
    movimientos: MovimientosRepository
    incidencias: IncidenciasRepository
    alimentaciones: AlimentacionesRepository
    medicamentos: MedicamentosRepository
    vacunaciones: VacunacionesRepository
    vacunaciones_animal: VacunacionesAnimalRepository
    inspecciones: InspeccionesRepository

    async def __aenter__(self) -> UnitOfWork: ...

    async def __aexit__(self, exc_type, exc, tb) -> None: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...
