"""Author Routes — verifies the /api/authors CRUD surface end to end.

Invariants:
    - List is 200 with an array (empty when no authors)
    - POST returns 201, summary body and a Location that GETs back the same author
    - Missing/blank names return 400 with a violation per field and persist nothing
    - Unknown ids return 404 with an empty body for GET, PUT and DELETE
"""

import pytest


async def test_list_authors_empty_returns_empty_array(client):
    res = await client.get("/api/authors")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_authors_returns_summary_fields_only(client, seed_book):
    res = await client.get("/api/authors")
    assert res.status_code == 200
    authors = res.json()
    assert len(authors) == 1
    assert set(authors[0]) == {"id", "firstName", "lastName"}


async def test_create_author_returns_201_with_location(client):
    res = await client.post(
        "/api/authors", json={"firstName": "Octavia", "lastName": "Butler"},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["firstName"] == "Octavia"
    assert body["lastName"] == "Butler"
    assert isinstance(body["id"], int)
    assert res.headers["location"] == f"http://test/api/authors/{body['id']}"


async def test_created_author_is_fetchable_at_location(client):
    payload = {"firstName": "Octavia", "lastName": "Butler"}
    created = await client.post("/api/authors", json=payload)

    res = await client.get(created.headers["location"])
    assert res.status_code == 200
    assert res.json()["firstName"] == payload["firstName"]
    assert res.json()["lastName"] == payload["lastName"]


async def test_create_author_with_blank_last_name_returns_400(client):
    res = await client.post(
        "/api/authors", json={"firstName": "Octavia", "lastName": "   "},
    )
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert [d["field"] for d in details] == ["lastName"]

    listed = await client.get("/api/authors")
    assert listed.json() == []


async def test_create_author_with_empty_body_reports_both_names(client):
    res = await client.post("/api/authors", json={})
    assert res.status_code == 400
    fields = {d["field"] for d in res.json()["error"]["details"]}
    assert fields == {"firstName", "lastName"}


async def test_create_author_with_too_long_name_returns_400(client):
    res = await client.post(
        "/api/authors", json={"firstName": "x" * 256, "lastName": "Butler"},
    )
    assert res.status_code == 400
    detail = res.json()["error"]["details"][0]
    assert detail["field"] == "firstName"
    assert detail["type"] == "string_too_long"


async def test_create_author_with_wrong_type_returns_400(client):
    res = await client.post(
        "/api/authors", json={"firstName": 42, "lastName": "Butler"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "firstName"


async def test_get_unknown_author_returns_empty_404(client):
    res = await client.get("/api/authors/999999")
    assert res.status_code == 404
    assert res.content == b""


async def test_update_author_overwrites_present_fields_only(client, seed_author):
    res = await client.put(
        f"/api/authors/{seed_author.id}", json={"firstName": "U. K."},
    )
    assert res.status_code == 204
    assert res.content == b""

    fetched = (await client.get(f"/api/authors/{seed_author.id}")).json()
    assert fetched["firstName"] == "U. K."
    assert fetched["lastName"] == "Le Guin"


async def test_update_author_with_blank_name_returns_400_and_keeps_data(
    client, seed_author,
):
    res = await client.put(
        f"/api/authors/{seed_author.id}", json={"lastName": ""},
    )
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "lastName"

    fetched = (await client.get(f"/api/authors/{seed_author.id}")).json()
    assert fetched["lastName"] == "Le Guin"


async def test_update_unknown_author_returns_404(client):
    res = await client.put("/api/authors/999999", json={"firstName": "Nobody"})
    assert res.status_code == 404
    assert res.content == b""


async def test_delete_author_then_get_returns_404(client, seed_author):
    res = await client.delete(f"/api/authors/{seed_author.id}")
    assert res.status_code == 204

    res = await client.get(f"/api/authors/{seed_author.id}")
    assert res.status_code == 404


async def test_delete_author_detaches_their_books(client, seed_book):
    author_id = seed_book.author_id
    await client.delete(f"/api/authors/{author_id}")

    book = (await client.get(f"/api/books/{seed_book.id}")).json()
    assert book["title"] == "The Dispossessed"
    assert book["author"] is None


async def test_repeated_delete_returns_404_and_creates_nothing(client, seed_author):
    first = await client.delete(f"/api/authors/{seed_author.id}")
    second = await client.delete(f"/api/authors/{seed_author.id}")

    assert first.status_code == 204
    assert second.status_code == 404
    assert (await client.get("/api/authors")).json() == []


async def test_non_integer_id_returns_400(client):
    res = await client.get("/api/authors/abc")
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "author_id"


@pytest.mark.parametrize("author_id", [0, -3, 2**31, 99999999999])
async def test_out_of_range_author_id_returns_404(client, author_id):
    assert (await client.get(f"/api/authors/{author_id}")).status_code == 404
    res = await client.put(f"/api/authors/{author_id}", json={"firstName": "x"})
    assert res.status_code == 404
    assert (await client.delete(f"/api/authors/{author_id}")).status_code == 404
