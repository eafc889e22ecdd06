"""Rutas /levels: listado, CRUD y eliminación protegida."""


async def test_list_empty(client):
    response = await client.get("/levels")
    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


async def test_list_without_pagination_has_no_meta(client, create_nivel):
    for nome in ("Senior", "Junior", "Pleno"):
        await create_nivel(nome)

    body = (await client.get("/levels")).json()
    assert "meta" not in body
    ids = [n["id"] for n in body["data"]]
    assert ids == sorted(ids)
    assert len(ids) == 3


async def test_list_paginated(client, create_nivel):
    for nome in ("Junior", "Pleno", "Senior"):
        await create_nivel(nome)

    body = (await client.get("/levels", params={"page": 1, "limit": 2})).json()
    assert len(body["data"]) == 2
    assert body["meta"] == {"total": 3, "per_page": 2, "current_page": 1, "last_page": 2}

    body = (await client.get("/levels", params={"page": 2, "limit": 2})).json()
    assert [n["nivel"] for n in body["data"]] == ["Senior"]


async def test_page_beyond_last_returns_empty_data(client, create_nivel):
    await create_nivel("Junior")
    body = (await client.get("/levels", params={"page": 5, "limit": 10})).json()
    assert body["data"] == []
    assert body["meta"]["last_page"] == 1


async def test_search_is_case_insensitive(client, create_nivel):
    for nome in ("Junior Frontend", "Senior Backend", "Pleno Fullstack"):
        await create_nivel(nome)

    body = (await client.get("/levels", params={"search": "senior"})).json()
    assert [n["nivel"] for n in body["data"]] == ["Senior Backend"]
    assert body["meta"]["total"] == 1
    assert body["meta"]["per_page"] == 10


async def test_sort_by_nivel(client, create_nivel):
    for nome in ("Senior", "Junior", "Pleno"):
        await create_nivel(nome)

    body = (await client.get("/levels", params={"sort": "nivel", "order": "ASC"})).json()
    assert [n["nivel"] for n in body["data"]] == ["Junior", "Pleno", "Senior"]

    body = (await client.get("/levels", params={"sort": "nivel", "order": "desc"})).json()
    assert [n["nivel"] for n in body["data"]] == ["Senior", "Pleno", "Junior"]


async def test_unknown_sort_falls_back_to_id(client, create_nivel):
    created = [await create_nivel(nome) for nome in ("B", "A", "C")]

    response = await client.get("/levels", params={"sort": "senha", "page": 1})
    assert response.status_code == 200
    assert [n["id"] for n in response.json()["data"]] == [n["id"] for n in created]


async def test_total_desenvolvedores_per_row(client, create_nivel, create_desenvolvedor):
    junior = await create_nivel("Junior")
    senior = await create_nivel("Senior")
    await create_desenvolvedor(junior["id"], "Ana")
    await create_desenvolvedor(junior["id"], "Bruno")

    body = (await client.get("/levels")).json()
    totals = {n["nivel"]: n["total_desenvolvedores"] for n in body["data"]}
    assert totals == {"Junior": 2, "Senior": 0}

    body = (
        await client.get("/levels", params={"sort": "total_desenvolvedores", "order": "desc"})
    ).json()
    assert [n["id"] for n in body["data"]] == [junior["id"], senior["id"]]


async def test_invalid_pagination_params(client):
    response = await client.get("/levels", params={"page": "0"})
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "page must be a number greater than 0",
    }

    response = await client.get("/levels", params={"limit": "101"})
    assert response.status_code == 400
    assert response.json()["message"] == "limit must be a number between 1 and 100"


async def test_get_by_id(client, create_nivel):
    created = await create_nivel("Especialista")
    response = await client.get(f"/levels/{created['id']}")
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["nivel"] == "Especialista"
    assert data["total_desenvolvedores"] == 0
    assert data["created_at"] is not None


async def test_get_missing_returns_404(client):
    response = await client.get("/levels/999")
    assert response.status_code == 404
    body = response.json()
    assert body["success"] is False
    assert "not found" in body["message"]


async def test_get_invalid_id(client):
    response = await client.get("/levels/abc")
    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Invalid ID"}


async def test_create_trims_label(client):
    response = await client.post("/levels", json={"nivel": "  Pleno  "})
    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["data"]["nivel"] == "Pleno"
    assert isinstance(body["data"]["id"], int)


async def test_create_requires_label(client):
    for payload in ({}, {"nivel": "   "}):
        response = await client.post("/levels", json=payload)
        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "message": "Invalid data",
            "errors": ["nivel is required"],
        }


async def test_update(client, create_nivel):
    created = await create_nivel("Pleno")
    response = await client.put(f"/levels/{created['id']}", json={"nivel": " Pleno II "})
    assert response.status_code == 200
    assert response.json()["data"]["nivel"] == "Pleno II"

    fetched = (await client.get(f"/levels/{created['id']}")).json()["data"]
    assert fetched["nivel"] == "Pleno II"


async def test_update_missing_returns_404(client):
    response = await client.put("/levels/999", json={"nivel": "Senior"})
    assert response.status_code == 404


async def test_delete_without_developers(client, create_nivel):
    created = await create_nivel("Specialist")

    response = await client.delete(f"/levels/{created['id']}")
    assert response.status_code == 204
    assert response.content == b""

    assert (await client.get(f"/levels/{created['id']}")).status_code == 404


async def test_delete_with_developers_is_refused(client, create_nivel, create_desenvolvedor):
    created = await create_nivel("Junior")
    await create_desenvolvedor(created["id"], "Ana")

    response = await client.delete(f"/levels/{created['id']}")
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Cannot remove a level with associated developers"

    still_there = await client.get(f"/levels/{created['id']}")
    assert still_there.status_code == 200
    assert still_there.json()["data"]["total_desenvolvedores"] == 1


async def test_delete_allowed_after_developers_removed(
    client, create_nivel, create_desenvolvedor
):
    created = await create_nivel("Junior")
    dev = await create_desenvolvedor(created["id"], "Ana")

    assert (await client.delete(f"/levels/{created['id']}")).status_code == 400
    assert (await client.delete(f"/developers/{dev['id']}")).status_code == 204
    assert (await client.delete(f"/levels/{created['id']}")).status_code == 204


async def test_delete_missing_returns_404(client):
    response = await client.delete("/levels/999")
    assert response.status_code == 404
    assert response.json()["success"] is False


async def test_search_wildcards_are_literal(client, create_nivel):
    for nome in ("Junior", "Senior", "Dev_Ops", "100% Remoto"):
        await create_nivel(nome)

    body = (await client.get("/levels", params={"search": "_"})).json()
    assert [n["nivel"] for n in body["data"]] == ["Dev_Ops"]

    body = (await client.get("/levels", params={"search": "%"})).json()
    assert [n["nivel"] for n in body["data"]] == ["100% Remoto"]


async def test_id_beyond_integer_range_is_invalid(client):
    for method in ("get", "delete"):
        response = await getattr(client, method)("/levels/99999999999999999999")
        assert response.status_code == 400
        assert response.json() == {"success": False, "message": "Invalid ID"}

    response = await client.put("/levels/99999999999999999999", json={"nivel": "Senior"})
    assert response.status_code == 400


async def test_huge_page_returns_empty_data(client, create_nivel):
    await create_nivel("Junior")

    response = await client.get(
        "/levels", params={"page": "99999999999999999999", "limit": 10}
    )
    assert response.status_code == 200
    body = response.json()
    assert body["data"] == []
    assert body["meta"]["total"] == 1
    assert body["meta"]["current_page"] == 99999999999999999999


async def test_foreign_key_rejection_is_reported_as_conflict(
    client, create_nivel, create_desenvolvedor, monkeypatch
):
    from app.crud.nivel import nivel as crud_nivel

    created = await create_nivel("Junior")
    await create_desenvolvedor(created["id"], "Ana")

    async def sem_desenvolvedores(db, nivel_id):
        return 0

    # la verificación no ve al desenvolvedor; la FK RESTRICT rechaza el DELETE
    monkeypatch.setattr(crud_nivel, "count_desenvolvedores", sem_desenvolvedores)

    response = await client.delete(f"/levels/{created['id']}")
    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "message": "Cannot remove a level with associated developers",
    }

    monkeypatch.undo()
    still_there = await client.get(f"/levels/{created['id']}")
    assert still_there.status_code == 200
    assert still_there.json()["data"]["total_desenvolvedores"] == 1
