"""Author routes — CRUD over HTTP and the sole-author delete constraint."""

from tests.services.factories import paper_json


async def test_create_author_returns_201(client):
    res = await client.post(
        "/api/authors", json={"name": "Alice", "affiliation": "MIT"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["name"] == "Alice"
    assert body["email"] is None
    assert body["papers"] == []


async def test_create_author_requires_name(client):
    res = await client.post("/api/authors", json={"name": "   "})
    assert res.status_code == 400


async def test_get_author_embeds_papers(client):
    created = await client.post(
        "/api/papers", json=paper_json(title="X", authors=[{"name": "Alice"}]),
    )
    alice_id = created.json()["authors"][0]["id"]

    res = await client.get(f"/api/authors/{alice_id}")
    assert res.status_code == 200
    papers = res.json()["papers"]
    assert papers == [
        {"id": created.json()["id"], "title": "X", "publishedIn": "ICSE", "year": 2024},
    ]


async def test_list_authors(client):
    for name in ("Alice Smith", "Bob Smith", "Carol"):
        await client.post("/api/authors", json={"name": name})
    res = await client.get("/api/authors", params={"name": "smith", "limit": 1})
    body = res.json()
    assert [a["name"] for a in body["authors"]] == ["Alice Smith"]
    assert body["total"] == 2
    assert body["limit"] == 1


async def test_update_author(client):
    created = (await client.post("/api/authors", json={"name": "Alice"})).json()
    res = await client.put(
        f"/api/authors/{created['id']}", json={"name": "Alice", "email": "a@x.org"},
    )
    assert res.status_code == 200
    assert res.json()["email"] == "a@x.org"


async def test_update_missing_author_returns_404(client):
    res = await client.put("/api/authors/999", json={"name": "Ghost"})
    assert res.status_code == 404


async def test_delete_sole_author_returns_400(client):
    created = await client.post(
        "/api/papers", json=paper_json(authors=[{"name": "Alice"}]),
    )
    alice_id = created.json()["authors"][0]["id"]

    res = await client.delete(f"/api/authors/{alice_id}")
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "CONSTRAINT_VIOLATION"
    assert error["context"]["paper_ids"] == [created.json()["id"]]


async def test_delete_co_author_returns_204(client):
    created = await client.post(
        "/api/papers",
        json=paper_json(authors=[{"name": "Alice"}, {"name": "Bob"}]),
    )
    bob_id = created.json()["authors"][1]["id"]

    res = await client.delete(f"/api/authors/{bob_id}")
    assert res.status_code == 204

    paper = await client.get(f"/api/papers/{created.json()['id']}")
    assert [a["name"] for a in paper.json()["authors"]] == ["Alice"]


async def test_delete_missing_author_returns_404(client):
    res = await client.delete("/api/authors/999")
    assert res.status_code == 404
