"""Request Validation: schema violations short-circuit with a 400 envelope.

Tests:
    - the message is "Invalid input: " followed by the joined violation messages
    - invalid requests never reach the repository (no calls recorded)
    - path and body violations of one request are joined, path first
"""

import pytest

from users_api.api.validation import invalid_input_response


async def test_non_numeric_id_never_reaches_repository(fake_client, fake_repository):
    res = await fake_client.get("/users/abc")
    assert res.status_code == 400
    assert res.json() == {
        "success": False,
        "message": "Invalid input: ID must be a numeric value",
        "responseObject": None,
        "statusCode": 400,
    }
    assert fake_repository.calls == []


@pytest.mark.parametrize("path", ["/users/0", "/users/-4"])
async def test_non_positive_id_is_rejected(fake_client, fake_repository, path):
    res = await fake_client.delete(path)
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input: ID must be a positive number"
    assert fake_repository.calls == []


@pytest.mark.parametrize("user_id", ["1", "999"])
async def test_empty_update_body_is_400_regardless_of_id(fake_client, fake_repository, user_id):
    await fake_client.post("/users", json={"name": "Ann", "email": "ann@x.com"})
    fake_repository.calls.clear()

    res = await fake_client.put(f"/users/{user_id}", json={})
    assert res.status_code == 400
    assert res.json()["message"] == (
        "Invalid input: At least one field must be provided for update"
    )
    assert fake_repository.calls == []


async def test_create_joins_every_violation(fake_client, fake_repository):
    res = await fake_client.post(
        "/users", json={"name": "A", "email": "not-an-email", "age": -1},
    )
    assert res.status_code == 400
    assert res.json()["message"] == (
        "Invalid input: Name must be at least 2 characters, "
        "Invalid email format, Age must be a positive number"
    )
    assert fake_repository.calls == []


async def test_create_without_body_is_400(fake_client):
    res = await fake_client.post("/users")
    assert res.status_code == 400
    assert res.json()["message"].startswith("Invalid input: ")


async def test_valid_input_passes_through_unchanged(fake_client, fake_repository):
    res = await fake_client.post(
        "/users", json={"name": "  Ann  ", "email": "Ann@X.com", "age": 0},
    )
    assert res.status_code == 201
    [(name, (new_user,))] = [c for c in fake_repository.calls if c[0] == "create"]
    assert (new_user.name, new_user.email, new_user.age) == ("  Ann  ", "Ann@X.com", 0)


def test_invalid_input_response_joins_messages():
    resp = invalid_input_response([{"msg": "first"}, {"msg": "second"}])
    assert resp.message == "Invalid input: first, second"
    assert resp.status_code == 400
    assert resp.success is False


async def test_update_reports_id_and_body_violations_together(fake_client, fake_repository):
    res = await fake_client.put("/users/abc", json={})
    assert res.status_code == 400
    assert res.json()["message"] == (
        "Invalid input: ID must be a numeric value, "
        "At least one field must be provided for update"
    )
    assert fake_repository.calls == []


async def test_update_accepts_integral_float_age(fake_client, fake_repository):
    created = (await fake_client.post(
        "/users", json={"name": "Ann", "email": "ann@x.com"},
    )).json()["responseObject"]

    res = await fake_client.put(f"/users/{created['id']}", json={"age": 40.0})
    assert res.status_code == 200
    assert res.json()["responseObject"]["age"] == 40
    [(_, (_, patch))] = [c for c in fake_repository.calls if c[0] == "update"]
    assert patch.age == 40
