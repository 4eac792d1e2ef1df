from __future__ import annotations

import pytest

from tests.support import register_and_login


@pytest.mark.asyncio
async def test_animal_crud_flow(client, explotacion):
    payload = {
        "identificacion": "ES0123456789",
        "especie": "Bovino",
        "estado": "vivo",
        "fecha_nacimiento": "2023-04-01",
        "fecha_alta": "2023-04-15",
        "id_explotacion": explotacion["id"],
    }
    created = await client.post("/api/animales", json=payload)
    assert created.status_code == 201
    animal = created.json()
    assert animal["fecha_nacimiento"] == "2023-04-01"

    fetched = await client.get(f"/api/animales/{animal['id']}")
    assert fetched.status_code == 200
    assert fetched.json()["identificacion"] == "ES0123456789"

    updated = await client.put(
        f"/api/animales/{animal['id']}", json={**payload, "estado": "vendido"}
    )
    assert updated.status_code == 200
    assert updated.json()["estado"] == "vendido"

    deleted = await client.delete(f"/api/animales/{animal['id']}")
    assert deleted.status_code == 204
    gone = await client.get(f"/api/animales/{animal['id']}")
    assert gone.status_code == 200
    assert gone.json() is None


@pytest.mark.asyncio
async def test_missing_ids_return_null_and_delete_is_idempotent(client, logged_in):
    assert (await client.get("/api/animales/999")).json() is None
    updated = await client.put(
        "/api/parcelas/999", json={"coordenadas": "40.1,-3.2", "id_explotacion": 1}
    )
    assert updated.status_code == 200
    assert updated.json() is None
    assert (await client.delete("/api/medicamentos/999")).status_code == 204


@pytest.mark.asyncio
async def test_list_filters_search_and_pagination(client, explotacion):
    other = await client.post(
        "/api/explotaciones",
        json={"codigo": "ES100000000002", "nombre": "El Soto", "id_titular": explotacion["id_titular"]},
    )
    for index in range(3):
        await client.post(
            "/api/animales",
            json={
                "identificacion": f"OV-{index}",
                "especie": "Ovino",
                "id_explotacion": explotacion["id"],
            },
        )
    await client.post(
        "/api/animales",
        json={"identificacion": "CAP-1", "especie": "Caprino", "id_explotacion": other.json()["id"]},
    )

    everything = await client.get("/api/animales")
    assert everything.headers["X-Total-Count"] == "4"

    by_parent = await client.get("/api/animales", params={"id_explotacion": explotacion["id"]})
    assert [a["identificacion"] for a in by_parent.json()] == ["OV-0", "OV-1", "OV-2"]

    search = await client.get("/api/animales", params={"q": "caprino"})
    assert [a["identificacion"] for a in search.json()] == ["CAP-1"]

    page = await client.get("/api/animales", params={"limit": 2, "offset": 1})
    assert len(page.json()) == 2
    assert page.headers["X-Total-Count"] == "4"


@pytest.mark.asyncio
async def test_search_treats_wildcards_literally(client, explotacion):
    for identificacion in ("ES_1", "ESX1"):
        await client.post(
            "/api/animales",
            json={"identificacion": identificacion, "id_explotacion": explotacion["id"]},
        )

    underscore = await client.get("/api/animales", params={"q": "ES_1"})
    assert [a["identificacion"] for a in underscore.json()] == ["ES_1"]
    assert underscore.headers["X-Total-Count"] == "1"

    percent = await client.get("/api/animales", params={"q": "%"})
    assert percent.json() == []


@pytest.mark.asyncio
async def test_titulares_are_scoped_to_session_usuario(client, titular):
    client.cookies.clear()
    await register_and_login(client, email="vecino@example.com")
    await client.post("/api/titulares", json={"nombre": "Benito", "nif": "87654321X"})

    mine = await client.get("/api/titulares")
    assert [t["nif"] for t in mine.json()] == ["87654321X"]

    everyone = await client.get("/api/titularesAdmin")
    assert {t["nif"] for t in everyone.json()} == {"12345678Z", "87654321X"}

    owner = await client.get(f"/api/titulares/usuario/{titular['id']}")
    assert owner.json() == {"id_usuario": titular["id_usuario"]}


@pytest.mark.asyncio
async def test_malformed_body_is_rejected(client, explotacion):
    response = await client.post(
        "/api/movimientos", json={"tipo": "entrada", "fecha": "no-es-fecha", "id_animal": 1}
    )
    assert response.status_code == 422
    body = response.json()
    assert body["code"] == "validation_error"
    assert body["details"]["errors"][0]["loc"] == ["body", "fecha"]
