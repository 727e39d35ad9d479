async def test_list_all_destinations(client):
    resp = await client.get("/destinations")

    assert resp.status_code == 200
    data = resp.json()
    assert [d["id"] for d in data["results"]] == ["sahel", "ras-el-hekma"]
    assert data["empty"] is False
    assert data["language"] == "en"


async def test_search_destinations_arabic(client):
    resp = await client.get("/destinations", params={"q": "hekma", "lang": "ar"})

    data = resp.json()
    assert data["is_rtl"] is True
    assert [d["name"] for d in data["results"]] == ["رأس الحكمة"]


async def test_search_destinations_no_results(client):
    resp = await client.get("/destinations", params={"q": "alps"})

    data = resp.json()
    assert data["empty"] is True
    assert data["results"] == []
    assert data["clear_query_route"] == "/destinations"


async def test_get_destination(client):
    resp = await client.get("/destinations/sahel")

    assert resp.status_code == 200
    data = resp.json()
    assert "Marassi" in data["neighborhoods"]
    assert data["best_seasons"] == ["Summer"]


async def test_get_destination_not_found(client):
    resp = await client.get("/destinations/atlantis")
    assert resp.status_code == 404


async def test_unknown_language_rejected(client):
    resp = await client.get("/destinations", params={"lang": "fr"})
    assert resp.status_code == 422
