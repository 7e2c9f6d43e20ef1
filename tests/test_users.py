# File: tests/test_users.py

"""
Behaviour of the /api/v1/users routes with a valid Authorization header.

These use FastAPI's TestClient. To run:
    pytest -q
"""

import pytest
from fastapi.testclient import TestClient

from users_api.api.v1.routes_users import parse_user_id
from users_api.core.config import Settings
from users_api.main import app, create_application

client = TestClient(app)

AUTH = {"Authorization": "Bearer anything"}


def test_list_users_is_fixed():
    resp = client.get("/api/v1/users", headers=AUTH)
    assert resp.status_code == 200
    assert resp.json() == [
        {"id": 1, "username": "user1", "password": "password"},
        {"id": 2, "username": "user2", "password": "password"},
        {"id": 3, "username": "user3", "password": "password"},
    ]


@pytest.mark.parametrize("raw,expected", [("5", 5), ("0", 0), ("-3", -3), ("+8", 8), ("007", 7)])
def test_get_user_echoes_numeric_id(raw, expected):
    resp = client.get(f"/api/v1/users/{raw}", headers=AUTH)
    assert resp.status_code == 200
    assert resp.json() == {"id": expected, "username": "mertcakmak", "password": "password"}


@pytest.mark.parametrize("raw", ["abc", "1.5", "12a", "1_000", "5%0A", "%205"])
def test_get_user_non_numeric_id_becomes_zero(raw):
    resp = client.get(f"/api/v1/users/{raw}", headers=AUTH)
    assert resp.status_code == 200
    assert resp.json()["id"] == 0


def test_parse_user_id_clamps_to_int64():
    assert parse_user_id("99999999999999999999") == 2**63 - 1
    assert parse_user_id("-99999999999999999999") == -(2**63)
    assert parse_user_id(" 1") is None
    assert parse_user_id("5\n") is None
    assert parse_user_id("") is None


def test_get_user_strict_ids():
    strict_client = TestClient(create_application(Settings(strict_id_params=True)))
    resp = strict_client.get("/api/v1/users/abc", headers=AUTH)
    assert resp.status_code == 422
    assert "'id'" in resp.json()["detail"]

    resp = strict_client.get("/api/v1/users/12", headers=AUTH)
    assert resp.json()["id"] == 12


def test_add_user_replaces_credentials():
    resp = client.post(
        "/api/v1/users",
        json={"id": 5, "username": "x", "password": "y"},
        headers=AUTH,
    )
    assert resp.status_code == 200
    assert resp.json() == {"id": 5, "username": "saved_mertcakmak", "password": "saved_password"}


def test_add_user_missing_fields_default_to_zero_values():
    resp = client.post("/api/v1/users", json={"username": "x"}, headers=AUTH)
    assert resp.status_code == 200
    assert resp.json()["id"] == 0


@pytest.mark.parametrize(
    "body,expected_id",
    [
        (b"null", 0),
        (b'{"id": null, "username": "x"}', 0),
        (b'{"id": 3, "username": null, "password": null}', 3),
        (b'{"id": 9223372036854775807}', 2**63 - 1),
    ],
)
def test_add_user_null_values_keep_zero_values(body, expected_id):
    resp = client.post(
        "/api/v1/users",
        content=body,
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "id": expected_id,
        "username": "saved_mertcakmak",
        "password": "saved_password",
    }


@pytest.mark.parametrize("body", [b'{"ID": 5}', b'{"Id": 5, "USERNAME": "x"}', b'{"id": 1, "ID": 5}'])
def test_add_user_keys_match_case_insensitively(body):
    resp = client.post(
        "/api/v1/users",
        content=body,
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 200
    assert resp.json()["id"] == 5


@pytest.mark.parametrize(
    "body",
    [
        b"{not json",
        b"",
        b"[1, 2]",
        b'{"id": "5"}',
        b'{"id": 5.5}',
        b'"user"',
        b'{"id": 99999999999999999999}',
        b'{"id": -9223372036854775809}',
    ],
)
def test_add_user_bad_body(body):
    resp = client.post(
        "/api/v1/users",
        content=body,
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == "Unauthorization"


def test_add_user_bad_body_as_validation_error():
    labelled = TestClient(create_application(Settings(label_body_errors_as_auth=False)))
    resp = labelled.post(
        "/api/v1/users",
        content=b'{"id": "five"}',
        headers={**AUTH, "Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    data = resp.json()
    assert data["detail"] == "Invalid request body"
    assert data["errors"][0]["loc"] == ["id"]


def test_delete_user_no_content():
    resp = client.delete("/api/v1/users/42", headers=AUTH)
    assert resp.status_code == 204
    assert resp.content == b""


def test_delete_user_echo_message():
    echo_client = TestClient(create_application(Settings(delete_echo_message=True)))
    resp = echo_client.delete("/api/v1/users/42", headers=AUTH)
    assert resp.status_code == 200
    assert "42" in resp.text
    assert resp.json() == "deleted user: 42"


def test_delete_user_id_is_not_parsed():
    echo_client = TestClient(create_application(Settings(delete_echo_message=True)))
    resp = echo_client.delete("/api/v1/users/abc", headers=AUTH)
    assert resp.json() == "deleted user: abc"


@pytest.mark.parametrize(
    "method,path",
    [("get", "/api/v1/users"), ("get", "/api/v1/users/9"), ("delete", "/api/v1/users/9")],
)
def test_repeated_requests_are_identical(method, path):
    first = client.request(method, path, headers=AUTH)
    second = client.request(method, path, headers=AUTH)
    assert first.status_code == second.status_code
    assert first.content == second.content
