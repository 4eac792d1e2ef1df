from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from agromano.domain.models.alimentacion import Alimentacion
from agromano.domain.models.animal import Animal
from agromano.domain.models.explotacion import Explotacion
from agromano.domain.models.incidencia import Incidencia
from agromano.domain.models.inspeccion import Inspeccion
from agromano.domain.models.medicamento import Medicamento
from agromano.domain.models.movimiento import Movimiento
from agromano.domain.models.parcela import Parcela
from agromano.domain.models.titular import Titular
from agromano.domain.models.usuario import Usuario
from agromano.domain.models.vacunacion import Vacunacion


@dataclass(slots=True, frozen=True)
class DateRange:
    """Inclusive [start, end] calendar range."""

    start: date
    end: date

    def contains(self, value: date | None) -> bool:
        if value is None:
            return False
        return self.start <= value <= self.end


@dataclass(slots=True)
class AnimalNode:
    animal: Animal
    movimientos: list[Movimiento] = field(default_factory=list)
    incidencias: list[Incidencia] = field(default_factory=list)
    vacunaciones: list[Vacunacion] = field(default_factory=list)


@dataclass(slots=True)
class ExplotacionNode:
    explotacion: Explotacion
    parcelas: list[Parcela] = field(default_factory=list)
    animales: list[AnimalNode] = field(default_factory=list)
    alimentacion: list[Alimentacion] = field(default_factory=list)
    medicamentos: list[Medicamento] = field(default_factory=list)
    inspecciones: list[Inspeccion] = field(default_factory=list)


@dataclass(slots=True)
class TitularNode:
    titular: Titular
    usuario: Usuario | None
    explotaciones: list[ExplotacionNode] = field(default_factory=list)
