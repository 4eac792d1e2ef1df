from __future__ import annotations

from datetime import date

import pytest

from agromano.infrastructure.db.session import SQLAlchemyUnitOfWork


@pytest.mark.asyncio
async def test_lookups_by_natural_key(app, client, explotacion):
    id_explotacion = explotacion["id"]
    animal = await client.post(
        "/api/animales", json={"identificacion": "ES-77", "id_explotacion": id_explotacion}
    )
    alimentacion = await client.post(
        "/api/alimentaciones",
        json={
            "fecha": "2024-02-01",
            "tipo": "pienso",
            "factura": "F-9",
            "id_explotacion": id_explotacion,
        },
    )
    medicamento = await client.post(
        "/api/medicamentos",
        json={
            "fecha": "2024-02-02",
            "medicamento": "Ivermectina",
            "factura": "F-9",
            "id_explotacion": id_explotacion,
        },
    )
    vacunacion = await client.post(
        "/api/vacunaciones",
        json={"fecha": "2024-03-10", "tipo": "Lengua azul", "id_explotacion": id_explotacion},
    )
    inspeccion = await client.post(
        "/api/inspecciones",
        json={"fecha": "2024-05-05", "numero_acta": "ACTA-1", "id_explotacion": id_explotacion},
    )

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        assert (await uow.titulares.get_by_nif("12345678Z")).id == explotacion["id_titular"]
        assert (await uow.animales.get_by_identificacion("ES-77")).id == animal.json()["id"]
        found = await uow.alimentaciones.get_by_factura("F-9", id_explotacion)
        assert found.id == alimentacion.json()["id"]
        found = await uow.medicamentos.get_by_factura("F-9", id_explotacion)
        assert found.id == medicamento.json()["id"]
        fecha = date(2024, 3, 10)
        found = await uow.vacunaciones.get_by_pareja(fecha, "Lengua azul", id_explotacion)
        assert found.id == vacunacion.json()["id"]
        found = await uow.inspecciones.get_by_acta("ACTA-1", id_explotacion)
        assert found.id == inspeccion.json()["id"]


@pytest.mark.asyncio
async def test_lookups_are_scoped_and_return_none_when_absent(app, client, explotacion):
    await client.post(
        "/api/alimentaciones",
        json={
            "fecha": "2024-02-01",
            "tipo": "pienso",
            "factura": "F-1",
            "id_explotacion": explotacion["id"],
        },
    )
    other_explotacion = explotacion["id"] + 1000

    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        assert await uow.titulares.get_by_nif("00000000T") is None
        assert await uow.animales.get_by_identificacion("NO-EXISTE") is None
        assert await uow.alimentaciones.get_by_factura("F-1", other_explotacion) is None
        assert await uow.medicamentos.get_by_factura("F-1", explotacion["id"]) is None
        missing = await uow.vacunaciones.get_by_pareja(date(2024, 1, 1), "BT", explotacion["id"])
        assert missing is None
        assert await uow.inspecciones.get_by_acta("ACTA-X", explotacion["id"]) is None
