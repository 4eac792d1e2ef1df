from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from agromano.domain.models.alimentacion import Alimentacion
from agromano.domain.models.animal import Animal
from agromano.domain.models.explotacion import Explotacion
from agromano.domain.models.incidencia import Incidencia
from agromano.domain.models.informe import DateRange
from agromano.domain.models.inspeccion import Inspeccion
from agromano.domain.models.medicamento import Medicamento
from agromano.domain.models.movimiento import Movimiento
from agromano.domain.models.parcela import Parcela
from agromano.domain.models.titular import Titular
from agromano.domain.models.usuario import Usuario
from agromano.domain.models.vacunacion import Vacunacion
from agromano.infrastructure.reports.report_service import TitularReportService


class CallCounter:
    """Records how many batched queries each repository receives."""

    def __init__(self, items):
        self.items = items
        self.calls = []

    async def _batch(self, ids):
        self.calls.append(list(ids))
        return list(self.items)

    list_for_explotaciones = _batch
    list_for_animales = _batch


def make_uow():
    explotaciones = [
        Explotacion(id=1, codigo="R1", nombre="Norte", id_titular=7),
        Explotacion(id=2, codigo="R2", nombre="Sur", id_titular=7),
    ]
    animales = [
        Animal(id=10, identificacion="A10", id_explotacion=1),
        Animal(id=11, identificacion="A11", id_explotacion=1),
        Animal(id=20, identificacion="A20", id_explotacion=2),
    ]

    async def get_titular(titular_id):
        if titular_id != 7:
            return None
        return Titular(id=7, nombre="Ana", nif="1Z", id_usuario=3)

    async def get_usuario(usuario_id):
        return Usuario(id=3, nombre_usuario="ana", email="a@example.com", contrasena_hash="x")

    async def list_for_titular(titular_id):
        return explotaciones

    vacunaciones = SimpleNamespace(calls=[])

    async def vacunaciones_for_animales(ids):
        vacunaciones.calls.append(list(ids))
        return [
            (10, Vacunacion(id=1, fecha=date(2024, 3, 1), tipo="BT", id_explotacion=1)),
            (10, Vacunacion(id=2, fecha=date(2022, 3, 1), tipo="BT", id_explotacion=1)),
            (20, Vacunacion(id=3, fecha=date(2024, 5, 1), tipo="TB", id_explotacion=2)),
        ]

    vacunaciones.list_for_animales = vacunaciones_for_animales

    return SimpleNamespace(
        titulares=SimpleNamespace(get=get_titular),
        usuarios=SimpleNamespace(get=get_usuario),
        explotaciones=SimpleNamespace(list_for_titular=list_for_titular),
        parcelas=CallCounter([Parcela(id=1, id_explotacion=2, extension=3.5)]),
        animales=CallCounter(animales),
        alimentaciones=CallCounter(
            [
                Alimentacion(id=1, fecha=date(2024, 2, 1), tipo="p", factura="F1", id_explotacion=1),
                Alimentacion(id=2, fecha=date(2021, 2, 1), tipo="p", factura="F2", id_explotacion=1),
            ]
        ),
        medicamentos=CallCounter(
            [Medicamento(id=1, fecha=date(2020, 1, 1), medicamento="m", factura="M", id_explotacion=2)]
        ),
        inspecciones=CallCounter(
            [Inspeccion(id=1, fecha=date(2024, 7, 7), numero_acta="1", id_explotacion=2)]
        ),
        movimientos=CallCounter(
            [
                Movimiento(id=1, tipo="entrada", fecha=date(2024, 1, 2), id_animal=11),
                Movimiento(id=2, tipo="salida", fecha=date(2025, 1, 2), id_animal=11),
            ]
        ),
        incidencias=CallCounter([Incidencia(id=1, fecha=date(2024, 4, 4), id_animal=20)]),
        vacunaciones=vacunaciones,
    )


@pytest.mark.asyncio
async def test_tree_groups_children_by_parent():
    uow = make_uow()
    tree = await TitularReportService().build_tree(uow, 7)

    assert tree.usuario.email == "a@example.com"
    norte, sur = tree.explotaciones
    assert [a.animal.identificacion for a in norte.animales] == ["A10", "A11"]
    assert [a.animal.identificacion for a in sur.animales] == ["A20"]
    assert [p.id for p in sur.parcelas] == [1]
    assert norte.parcelas == []
    assert len(norte.animales[0].vacunaciones) == 2
    assert len(norte.animales[1].movimientos) == 2
    assert len(norte.alimentacion) == 2


@pytest.mark.asyncio
async def test_each_level_is_loaded_with_one_batched_query():
    uow = make_uow()
    await TitularReportService().build_tree(uow, 7)

    assert uow.animales.calls == [[1, 2]]
    assert uow.parcelas.calls == [[1, 2]]
    assert uow.alimentaciones.calls == [[1, 2]]
    assert sorted(uow.movimientos.calls[0]) == [10, 11, 20]
    assert len(uow.incidencias.calls) == 1
    assert len(uow.vacunaciones.calls) == 1


@pytest.mark.asyncio
async def test_date_range_filters_dated_children_only():
    uow = make_uow()
    rango = DateRange(start=date(2024, 1, 1), end=date(2024, 12, 31))
    tree = await TitularReportService().build_tree(uow, 7, rango)

    norte, sur = tree.explotaciones
    assert [a.id for a in norte.alimentacion] == [1]
    assert sur.medicamentos == []
    assert [i.id for i in sur.inspecciones] == [1]
    assert [m.id for m in norte.animales[1].movimientos] == [1]
    assert [v.id for v in norte.animales[0].vacunaciones] == [1]
    assert [i.id for i in sur.animales[0].incidencias] == [1]
    # Parcelas and animals are never filtered
    assert len(sur.parcelas) == 1
    assert len(norte.animales) == 2


@pytest.mark.asyncio
async def test_missing_titular_yields_none():
    assert await TitularReportService().build_tree(make_uow(), 99) is None
