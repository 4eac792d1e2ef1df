from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_deleting_titular_leaves_explotaciones_to_the_database(client, explotacion):
    titular_id = explotacion["id_titular"]

    response = await client.delete(f"/api/titulares/{titular_id}")
    assert response.status_code == 204
    assert (await client.get(f"/api/titulares/{titular_id}")).json() is None

    # No application-level cascade: without enforced foreign keys the holding survives
    survivor = await client.get(f"/api/explotaciones/{explotacion['id']}")
    assert survivor.status_code == 200
    assert survivor.json()["id_titular"] == titular_id


@pytest.mark.asyncio
async def test_titular_create_defaults_to_session_usuario(client, logged_in):
    response = await client.post("/api/titulares", json={"nombre": "Carmen", "nif": "11111111H"})
    assert response.status_code == 201
    assert response.json()["id_usuario"] == logged_in["id"]


@pytest.mark.asyncio
async def test_titular_update_keeps_owner_when_omitted(client, titular):
    response = await client.put(
        f"/api/titulares/{titular['id']}",
        json={"nombre": "Ana Pérez López", "nif": titular["nif"], "telefono": "600000000"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["nombre"] == "Ana Pérez López"
    assert body["telefono"] == "600000000"
    assert body["id_usuario"] == titular["id_usuario"]
