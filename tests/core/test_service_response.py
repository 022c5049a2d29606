"""Service Response: verifies the two construction paths and the wire shape."""

import dataclasses

import pytest

from users_api.core.service_response import ServiceResponse, failure, success


def test_success_defaults_to_200():
    resp = success("Users found", [1, 2])
    assert resp.success is True
    assert resp.message == "Users found"
    assert resp.response_object == [1, 2]
    assert resp.status_code == 200


def test_success_with_explicit_status():
    resp = success("User created successfully", {"id": 1}, 201)
    assert resp.status_code == 201


def test_failure_carries_no_payload_by_default():
    resp = failure("User not found", status_code=404)
    assert resp.success is False
    assert resp.response_object is None
    assert resp.status_code == 404


def test_delete_style_success_has_no_payload():
    resp = success("User deleted successfully", None, 204)
    assert resp.success is True
    assert resp.response_object is None


def test_envelope_is_immutable():
    resp = success("ok", None)
    with pytest.raises(dataclasses.FrozenInstanceError):
        resp.status_code = 500  # type: ignore[misc]


def test_to_dict_uses_wire_names():
    assert failure("Email already in use", None, 409).to_dict() == {
        "success": False,
        "message": "Email already in use",
        "responseObject": None,
        "statusCode": 409,
    }


def test_status_code_is_plain_int():
    from http import HTTPStatus
    resp = failure("x", None, HTTPStatus.CONFLICT)
    assert type(resp.status_code) is int
    assert isinstance(resp, ServiceResponse)
