from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from typing import Callable, TypeVar

from agromano.application.interfaces.unit_of_work import UnitOfWork
from agromano.domain.models.informe import AnimalNode, DateRange, ExplotacionNode, TitularNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _group_by(items: Iterable[T], key: Callable[[T], int]) -> dict[int, list[T]]:
    grouped: dict[int, list[T]] = defaultdict(list)
    for item in items:
        grouped[key(item)].append(item)
    return grouped


def _within(items: list[T], date_range: DateRange | None) -> list[T]:
    if date_range is None:
        return items
    return [item for item in items if date_range.contains(item.fecha)]


class TitularReportService:
    """Assembles the titular → explotaciones → animales tree used by both exports.

    Every level is fetched with a single ``IN (...)`` query and grouped by
    parent id in memory. Parcelas and animales are never date filtered; the
    dated child records are, when a range is given.
    """

    async def build_tree(
        self,
        uow: UnitOfWork,
        titular_id: int,
        date_range: DateRange | None = None,
    ) -> TitularNode | None:
        titular = await uow.titulares.get(titular_id)
        if titular is None:
            return None
        usuario = await uow.usuarios.get(titular.id_usuario) if titular.id_usuario else None

        explotaciones = await uow.explotaciones.list_for_titular(titular_id)
        explotacion_ids = [e.id for e in explotaciones]

        parcelas = _group_by(
            await uow.parcelas.list_for_explotaciones(explotacion_ids), lambda p: p.id_explotacion
        )
        animales = _group_by(
            await uow.animales.list_for_explotaciones(explotacion_ids), lambda a: a.id_explotacion
        )
        alimentacion = _group_by(
            _within(await uow.alimentaciones.list_for_explotaciones(explotacion_ids), date_range),
            lambda a: a.id_explotacion,
        )
        medicamentos = _group_by(
            _within(await uow.medicamentos.list_for_explotaciones(explotacion_ids), date_range),
            lambda m: m.id_explotacion,
        )
        inspecciones = _group_by(
            _within(await uow.inspecciones.list_for_explotaciones(explotacion_ids), date_range),
            lambda i: i.id_explotacion,
        )

        animal_ids = [a.id for group in animales.values() for a in group]
        movimientos = _group_by(
            _within(await uow.movimientos.list_for_animales(animal_ids), date_range),
            lambda m: m.id_animal,
        )
        incidencias = _group_by(
            _within(await uow.incidencias.list_for_animales(animal_ids), date_range),
            lambda i: i.id_animal,
        )
        vacunaciones: dict[int, list] = defaultdict(list)
        for id_animal, vacunacion in await uow.vacunaciones.list_for_animales(animal_ids):
            if date_range is None or date_range.contains(vacunacion.fecha):
                vacunaciones[id_animal].append(vacunacion)

        nodes = []
        for explotacion in explotaciones:
            animal_nodes = [
                AnimalNode(
                    animal=animal,
                    movimientos=movimientos.get(animal.id, []),
                    incidencias=incidencias.get(animal.id, []),
                    vacunaciones=vacunaciones.get(animal.id, []),
                )
                for animal in animales.get(explotacion.id, [])
            ]
            nodes.append(
                ExplotacionNode(
                    explotacion=explotacion,
                    parcelas=parcelas.get(explotacion.id, []),
                    animales=animal_nodes,
                    alimentacion=alimentacion.get(explotacion.id, []),
                    medicamentos=medicamentos.get(explotacion.id, []),
                    inspecciones=inspecciones.get(explotacion.id, []),
                )
            )

        logger.info(
            "Built report tree for titular %s: %d explotaciones, %d animales",
            titular_id,
            len(nodes),
            len(animal_ids),
        )
        return TitularNode(titular=titular, usuario=usuario, explotaciones=nodes)
