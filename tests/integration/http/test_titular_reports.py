from __future__ import annotations

import re
from datetime import date

import pytest

from agromano.domain.models.informe import DateRange
from agromano.infrastructure.db.session import SQLAlchemyUnitOfWork

ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


async def _seed_tree(client, titular: dict, explotaciones: int, animales: int) -> list[dict]:
    created = []
    for e in range(explotaciones):
        explotacion = (
            await client.post(
                "/api/explotaciones",
                json={"codigo": f"REGA-{e}", "nombre": f"Finca {e}", "id_titular": titular["id"]},
            )
        ).json()
        created.append(explotacion)
        await client.post(
            "/api/parcelas",
            json={"coordenadas": "40.4,-3.7", "extension": 12.5, "id_explotacion": explotacion["id"]},
        )
        for a in range(animales):
            animal = (
                await client.post(
                    "/api/animales",
                    json={
                        "identificacion": f"ES-{e}-{a}",
                        "especie": "Bovino",
                        "fecha_nacimiento": "2022-01-10",
                        "id_explotacion": explotacion["id"],
                    },
                )
            ).json()
            await client.post(
                "/api/movimientos",
                json={"tipo": "entrada", "fecha": "2024-01-15", "id_animal": animal["id"]},
            )
    return created


def _dates(node):
    if isinstance(node, dict):
        for key, value in node.items():
            if key.startswith("fecha") and value is not None:
                yield value
            else:
                yield from _dates(value)
    elif isinstance(node, list):
        for item in node:
            yield from _dates(item)


@pytest.mark.asyncio
async def test_datos_has_every_explotacion_and_animal(client, titular):
    await _seed_tree(client, titular, explotaciones=3, animales=2)

    response = await client.get(f"/api/titulares/{titular['id']}/datos")
    assert response.status_code == 200
    datos = response.json()

    assert datos["titular"]["nif"] == "12345678Z"
    assert datos["titular"]["usuario"]["email"] == "ganadero@example.com"
    assert len(datos["explotaciones"]) == 3
    for explotacion in datos["explotaciones"]:
        assert len(explotacion["animales"]) == 2
        assert len(explotacion["parcelas"]) == 1
        for animal in explotacion["animales"]:
            assert len(animal["movimientos"]) == 1

    dates = list(_dates(datos))
    assert dates
    assert all(ISO_DATE.match(value) for value in dates)


@pytest.mark.asyncio
async def test_datos_for_missing_titular_is_null(client, logged_in):
    response = await client.get("/api/titulares/4040/datos")
    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_informe_returns_pdf_attachment(client, titular):
    await _seed_tree(client, titular, explotaciones=2, animales=1)

    response = await client.post(
        f"/api/titulares/{titular['id']}/informe",
        json={"startDate": "2024-01-01", "endDate": "2024-12-31"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"] == (
        f"attachment; filename=Informe_{titular['id']}.pdf"
    )
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_informe_rejects_inverted_range(client, titular):
    response = await client.post(
        f"/api/titulares/{titular['id']}/informe",
        json={"startDate": "2024-12-31", "endDate": "2024-01-01"},
    )
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_informe_for_missing_titular_is_404(client, logged_in):
    response = await client.post(
        "/api/titulares/4040/informe", json={"startDate": "2024-01-01", "endDate": "2024-01-31"}
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_date_range_filters_every_dated_section(app, client, explotacion):
    animal = (
        await client.post(
            "/api/animales",
            json={"identificacion": "ES-RANGO", "id_explotacion": explotacion["id"]},
        )
    ).json()
    inside, outside = "2024-06-15", "2023-06-15"
    for fecha, suffix in ((inside, "in"), (outside, "out")):
        await client.post(
            "/api/movimientos",
            json={"tipo": "salida", "fecha": fecha, "id_animal": animal["id"]},
        )
        await client.post(
            "/api/incidencias",
            json={"fecha": fecha, "descripcion": suffix, "id_animal": animal["id"]},
        )
        vacunacion = (
            await client.post(
                "/api/vacunaciones",
                json={"fecha": fecha, "tipo": "Brucelosis", "id_explotacion": explotacion["id"]},
            )
        ).json()
        await client.post(
            "/api/vacunaciones_animal",
            json={"id_vacunacion": vacunacion["id"], "id_animal": animal["id"]},
        )
        await client.post(
            "/api/alimentaciones",
            json={
                "fecha": fecha,
                "tipo": "forraje",
                "factura": f"F-{suffix}",
                "id_explotacion": explotacion["id"],
            },
        )
        await client.post(
            "/api/medicamentos",
            json={
                "fecha": fecha,
                "medicamento": "Oxitetraciclina",
                "factura": f"M-{suffix}",
                "id_explotacion": explotacion["id"],
            },
        )
        await client.post(
            "/api/inspecciones",
            json={"fecha": fecha, "numero_acta": f"A-{suffix}", "id_explotacion": explotacion["id"]},
        )

    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 12, 31))
    async with SQLAlchemyUnitOfWork(app.state.session_factory) as uow:
        tree = await app.state.report_service.build_tree(
            uow, explotacion["id_titular"], date_range
        )

    node = tree.explotaciones[0]
    animal_node = node.animales[0]
    dated = [
        animal_node.movimientos,
        animal_node.incidencias,
        animal_node.vacunaciones,
        node.alimentacion,
        node.medicamentos,
        node.inspecciones,
    ]
    for section in dated:
        assert len(section) == 1
        assert date_range.contains(section[0].fecha)


@pytest.mark.asyncio
async def test_informe_flows_multi_page_descripcion(client, explotacion):
    animal = (
        await client.post(
            "/api/animales",
            json={"identificacion": "ES-LARGO", "id_explotacion": explotacion["id"]},
        )
    ).json()
    created = await client.post(
        "/api/incidencias",
        json={
            "fecha": "2024-03-10",
            "descripcion": "palabra " * 3000,
            "id_animal": animal["id"],
        },
    )
    assert created.status_code == 201

    response = await client.post(
        f"/api/titulares/{explotacion['id_titular']}/informe",
        json={"startDate": "2024-01-01", "endDate": "2024-12-31"},
    )
    assert response.status_code == 200, response.text
    assert response.content.startswith(b"%PDF")
