"""Paper routes — HTTP status codes, camelCase payloads, query validation."""

import pytest

from tests.services.factories import paper_json


async def _create(client, **kwargs) -> dict:
    res = await client.post("/api/papers", json=paper_json(**kwargs))
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_returns_201_with_authors(client):
    body = await _create(
        client, title="Graphs", authors=[{"name": "Alice", "email": "a@x.org"}],
    )
    assert body["title"] == "Graphs"
    assert body["publishedIn"] == "ICSE"
    assert "createdAt" in body and "updatedAt" in body
    assert body["authors"][0]["name"] == "Alice"
    assert body["authors"][0]["email"] == "a@x.org"
    assert body["authors"][0]["affiliation"] is None


@pytest.mark.parametrize("payload", [
    {"publishedIn": "ICSE", "year": 2020, "authors": [{"name": "A"}]},
    {"title": "  ", "publishedIn": "ICSE", "year": 2020, "authors": [{"name": "A"}]},
    {"title": "T", "publishedIn": "", "year": 2020, "authors": [{"name": "A"}]},
    {"title": "T", "publishedIn": "ICSE", "year": 1900, "authors": [{"name": "A"}]},
    {"title": "T", "publishedIn": "ICSE", "year": "2020", "authors": [{"name": "A"}]},
    {"title": "T", "publishedIn": "ICSE", "year": 2020, "authors": []},
    {"title": "T", "publishedIn": "ICSE", "year": 2020, "authors": [{"name": " "}]},
])
async def test_create_rejects_invalid_body(client, payload):
    res = await client.post("/api/papers", json=payload)
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_get_paper(client):
    created = await _create(client)
    res = await client.get(f"/api/papers/{created['id']}")
    assert res.status_code == 200
    assert res.json()["id"] == created["id"]


async def test_get_missing_paper_returns_404(client):
    res = await client.get("/api/papers/999")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


@pytest.mark.parametrize("bad_id", ["abc", "0", "-3"])
async def test_invalid_id_returns_400(client, bad_id):
    res = await client.get(f"/api/papers/{bad_id}")
    assert res.status_code == 400


async def test_list_with_repeated_author_params(client):
    await _create(client, title="P1", authors=[{"name": "Alice"}, {"name": "Bob"}])
    await _create(client, title="P2", authors=[{"name": "Alice"}])
    await _create(client, title="P3", authors=[{"name": "Carol"}])

    res = await client.get("/api/papers", params=[("author", "alice"), ("author", "bob")])
    assert res.status_code == 200
    body = res.json()
    assert [p["title"] for p in body["papers"]] == ["P1"]
    assert body["total"] == 1
    assert (body["limit"], body["offset"]) == (10, 0)


async def test_list_by_year_and_venue(client):
    await _create(client, title="Old", year=2001, published_in="VLDB")
    await _create(client, title="New", year=2024, published_in="ICSE")
    res = await client.get("/api/papers", params={"year": 2024, "publishedIn": "icse"})
    assert [p["title"] for p in res.json()["papers"]] == ["New"]


@pytest.mark.parametrize("params", [
    {"year": "abc"}, {"year": 1900}, {"limit": 0}, {"limit": 101},
    {"offset": -1}, {"publishedIn": " "}, {"author": " "},
])
async def test_list_rejects_invalid_query(client, params):
    res = await client.get("/api/papers", params=params)
    assert res.status_code == 400


async def test_list_treats_empty_terms_as_absent(client):
    await _create(client, title="P1", authors=[{"name": "Alice"}])
    await _create(client, title="P2", authors=[{"name": "Bob"}])
    res = await client.get(
        "/api/papers",
        params=[("publishedIn", ""), ("author", ""), ("author", "bob")],
    )
    assert res.status_code == 200
    assert [p["title"] for p in res.json()["papers"]] == ["P2"]


async def test_update_paper(client):
    created = await _create(client, authors=[{"name": "Alice"}])
    res = await client.put(
        f"/api/papers/{created['id']}",
        json=paper_json(title="Renamed", authors=[{"name": "Bob"}]),
    )
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Renamed"
    assert [a["name"] for a in body["authors"]] == ["Bob"]


async def test_update_missing_paper_returns_404(client):
    res = await client.put("/api/papers/999", json=paper_json())
    assert res.status_code == 404


async def test_delete_paper_returns_204(client):
    created = await _create(client)
    res = await client.delete(f"/api/papers/{created['id']}")
    assert res.status_code == 204
    assert (await client.get(f"/api/papers/{created['id']}")).status_code == 404


async def test_delete_missing_paper_returns_404(client):
    res = await client.delete("/api/papers/999")
    assert res.status_code == 404
