from __future__ import annotations

import pytest

FACTURA_DUPLICADA = "La factura ya está en uso, no se pueden duplicar facturas"


@pytest.mark.asyncio
async def test_duplicate_animal_identificacion(client, explotacion):
    payload = {"identificacion": "ES999", "id_explotacion": explotacion["id"]}
    assert (await client.post("/api/animales", json=payload)).status_code == 201

    duplicate = await client.post("/api/animales", json=payload)
    assert duplicate.status_code == 400
    assert duplicate.json()["message"].startswith("El número de identificación ya está en uso")

    listed = await client.get("/api/animales")
    assert listed.headers["X-Total-Count"] == "1"


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/alimentaciones", "/api/medicamentos"])
async def test_duplicate_factura_per_explotacion(client, explotacion, path):
    other = await client.post(
        "/api/explotaciones",
        json={"codigo": "ES2", "nombre": "Otra", "id_titular": explotacion["id_titular"]},
    )
    base = {"fecha": "2024-02-01", "factura": "F-001", "id_explotacion": explotacion["id"]}
    if path.endswith("alimentaciones"):
        base.update({"tipo": "pienso", "cantidad": 500})
    else:
        base.update({"medicamento": "Ivermectina", "receta": "R-1"})

    assert (await client.post(path, json=base)).status_code == 201
    duplicate = await client.post(path, json=base)
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == FACTURA_DUPLICADA

    elsewhere = await client.post(path, json={**base, "id_explotacion": other.json()["id"]})
    assert elsewhere.status_code == 201


@pytest.mark.asyncio
async def test_duplicate_vacunacion_same_day_and_type(client, explotacion):
    payload = {"fecha": "2024-03-10", "tipo": "Lengua azul", "id_explotacion": explotacion["id"]}
    assert (await client.post("/api/vacunaciones", json=payload)).status_code == 201
    duplicate = await client.post("/api/vacunaciones", json=payload)
    assert duplicate.status_code == 400
    assert duplicate.json()["message"].startswith("El tipo de vacuna ya existe para esa fecha.")

    next_day = await client.post("/api/vacunaciones", json={**payload, "fecha": "2024-03-11"})
    assert next_day.status_code == 201


@pytest.mark.asyncio
async def test_duplicate_numero_acta(client, explotacion):
    payload = {
        "fecha": "2024-05-05",
        "oficial": True,
        "numero_acta": "ACTA-7",
        "id_explotacion": explotacion["id"],
    }
    assert (await client.post("/api/inspecciones", json=payload)).status_code == 201
    duplicate = await client.post("/api/inspecciones", json=payload)
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == (
        "El número de acta ya está registrado para esta explotación."
    )


@pytest.mark.asyncio
async def test_duplicate_nif(client, titular):
    duplicate = await client.post("/api/titulares", json={"nombre": "Otra", "nif": titular["nif"]})
    assert duplicate.status_code == 400
    assert duplicate.json()["message"] == "El NIF ya está en uso"


@pytest.mark.asyncio
async def test_update_into_existing_key_is_rejected(client, explotacion):
    first = await client.post(
        "/api/animales", json={"identificacion": "A-1", "id_explotacion": explotacion["id"]}
    )
    second = await client.post(
        "/api/animales", json={"identificacion": "A-2", "id_explotacion": explotacion["id"]}
    )
    assert first.status_code == second.status_code == 201

    collision = await client.put(
        f"/api/animales/{second.json()['id']}",
        json={"identificacion": "A-1", "id_explotacion": explotacion["id"]},
    )
    assert collision.status_code == 400
    unchanged = await client.get(f"/api/animales/{second.json()['id']}")
    assert unchanged.json()["identificacion"] == "A-2"
