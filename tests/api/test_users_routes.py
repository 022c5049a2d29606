"""User Routes: the HTTP surface end to end over in-memory SQLite.

Tests:
    - every response body is the {success, message, responseObject, statusCode} envelope
    - status line always equals the envelope's statusCode
    - create/get round-trip, duplicate email, partial update, delete idempotence
"""

from datetime import datetime, timezone

import pytest


async def _create(client, **body):
    body.setdefault("name", "Ann")
    body.setdefault("email", "ann@x.com")
    return await client.post("/users", json=body)


def _parse(ts: str) -> datetime:
    return datetime.fromisoformat(ts.replace("Z", "+00:00"))


async def test_empty_table_then_one_user(client):
    res = await client.get("/users")
    assert res.status_code == 404
    assert res.json() == {
        "success": False,
        "message": "No Users found",
        "responseObject": None,
        "statusCode": 404,
    }

    await _create(client, name="Ann", email="ann@x.com")

    res = await client.get("/users")
    body = res.json()
    assert res.status_code == 200
    assert body["message"] == "Users found"
    [ann] = body["responseObject"]
    assert ann["name"] == "Ann"
    assert isinstance(ann["id"], int)
    assert ann["createdAt"] and ann["updatedAt"]


async def test_create_returns_201_with_server_fields(client):
    before = datetime.now(timezone.utc)
    res = await _create(client, email="fresh@x.com", age=31)
    body = res.json()
    assert res.status_code == 201
    assert body["statusCode"] == 201
    assert body["message"] == "User created successfully"
    user = body["responseObject"]
    assert user["email"] == "fresh@x.com"
    assert user["age"] == 31
    assert user["id"] >= 1
    assert _parse(user["createdAt"]) >= before
    assert _parse(user["updatedAt"]) >= before


async def test_create_then_get_round_trips(client):
    created = (await _create(client)).json()["responseObject"]
    res = await client.get(f"/users/{created['id']}")
    assert res.status_code == 200
    assert res.json()["message"] == "User found"
    assert res.json()["responseObject"] == created


async def test_duplicate_email_is_409_and_table_unchanged(client):
    await _create(client, name="Ay", email="a@x.com")
    res = await _create(client, name="Bee", email="a@x.com")
    assert res.status_code == 409
    assert res.json()["message"] == "Email already in use"
    assert res.json()["responseObject"] is None
    assert len((await client.get("/users")).json()["responseObject"]) == 1


async def test_partial_update_keeps_other_fields(client):
    created = (await _create(client, age=20)).json()["responseObject"]
    res = await client.put(f"/users/{created['id']}", json={"age": 40})
    user = res.json()["responseObject"]
    assert res.status_code == 200
    assert res.json()["message"] == "User updated successfully"
    assert (user["name"], user["email"], user["age"]) == ("Ann", "ann@x.com", 40)
    assert user["createdAt"] == created["createdAt"]
    assert _parse(user["updatedAt"]) > _parse(user["createdAt"])


async def test_update_to_taken_email_is_409(client):
    await _create(client, email="first@x.com")
    second = (await _create(client, email="second@x.com")).json()["responseObject"]
    res = await client.put(f"/users/{second['id']}", json={"email": "first@x.com"})
    assert res.status_code == 409


async def test_update_with_own_email_is_allowed(client):
    created = (await _create(client)).json()["responseObject"]
    res = await client.put(f"/users/{created['id']}", json={"email": "ann@x.com"})
    assert res.status_code == 200


async def test_delete_twice_is_204_then_404(client):
    created = (await _create(client)).json()["responseObject"]
    first = await client.delete(f"/users/{created['id']}")
    assert first.status_code == 204
    assert first.content == b""
    second = await client.delete(f"/users/{created['id']}")
    assert second.status_code == 404
    assert second.json()["message"] == "User not found"


@pytest.mark.parametrize("method,kwargs", [
    ("get", {}),
    ("put", {"json": {"age": 1}}),
    ("delete", {}),
])
@pytest.mark.parametrize("user_id", [
    "12345", "2147483648", "9223372036854775808", "99999999999999999999",
])
async def test_unknown_id_is_404_with_null_payload(client, method, kwargs, user_id):
    res = await getattr(client, method)(f"/users/{user_id}", **kwargs)
    assert res.status_code == 404
    assert res.json()["responseObject"] is None
    assert res.json()["message"] == "User not found"
