from __future__ import annotations

from uuid import uuid4

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from labs.infrastructure.security import BcryptPasswordHasher
from labs.main.app import create_app
from labs.main.container import get_container
from tests.conftest import FakeMongoDatabase

SIGNUP = {
    "firstName": "Amira",
    "lastName": "Ben Salah",
    "email": "amira@example.com",
    "password": "a-long-secret",
    "companyName": "Labs",
}


@pytest.fixture()
def client():
    app = create_app()
    container = get_container()
    container.mongo_database.override(providers.Object(FakeMongoDatabase()))
    container.password_hasher.override(providers.Object(BcryptPasswordHasher(rounds=4)))

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def signed_in(client):
    response = client.post("/api/auth/signup", json=SIGNUP)
    assert response.status_code == 201
    assert response.json()["responseKey"] == "Created"

    response = client.post(
        "/api/auth/signin",
        json={"email": SIGNUP["email"], "password": SIGNUP["password"]},
    )
    assert response.status_code == 200
    data = response.json()["data"]
    return {
        "company_id": data["user"]["workCompanyId"],
        "user_id": data["user"]["ID"],
        "headers": {"Authorization": f"Bearer {data['accessToken']}"},
    }


def test_signup_twice_is_rejected(client, signed_in):
    response = client.post("/api/auth/signup", json=SIGNUP)

    assert response.status_code == 400
    assert response.json()["responseKey"] == "Invalid Request"


def test_wrong_password_is_unauthorized(client, signed_in):
    response = client.post(
        "/api/auth/signin",
        json={"email": SIGNUP["email"], "password": "not-the-password"},
    )

    assert response.status_code == 401
    body = response.json()
    assert body["responseKey"] == "Unauthorized"
    assert body["data"] is None


def test_users_require_token(client, signed_in):
    response = client.get(f"/api/users/{signed_in['company_id']}")

    assert response.status_code == 401
    assert response.json()["responseKey"] == "Unauthorized"


def test_user_listing_and_gender(client, signed_in):
    company_id = signed_in["company_id"]
    headers = signed_in["headers"]

    response = client.post(
        f"/api/users/{company_id}",
        headers=headers,
        json={
            "firstName": "Walid",
            "lastName": "Jaziri",
            "email": "walid@example.com",
            "password": "another-secret",
            "roleName": "Manager",
            "gender": "male",
        },
    )
    assert response.status_code == 201

    response = client.get(
        f"/api/users/{company_id}", headers=headers, params={"page": 1, "limit": 5}
    )
    assert response.status_code == 200
    page = response.json()["data"]
    assert page["totalCount"] == 2
    assert page["limit"] == 5
    assert {item["email"] for item in page["items"]} == {
        "amira@example.com",
        "walid@example.com",
    }

    response = client.get(f"/api/users/{company_id}/gender", headers=headers)
    assert response.json()["data"] == {"malePercentage": 50, "femalePercentage": 50}

    response = client.get(f"/api/users/{company_id}/count", headers=headers)
    assert response.json()["data"] == {"count": 2}


def test_other_company_is_rejected(client, signed_in):
    response = client.get(f"/api/users/{uuid4()}", headers=signed_in["headers"])

    assert response.status_code == 400
    assert response.json()["responseKey"] == "Invalid Request"


def test_unknown_record_is_not_found(client, signed_in):
    response = client.get(
        f"/api/users/{signed_in['company_id']}/{uuid4()}",
        headers=signed_in["headers"],
    )

    assert response.status_code == 404
    assert response.json()["responseKey"] == "Data Not Found"


def test_invalid_body_uses_envelope(client, signed_in):
    response = client.post(
        f"/api/users/{signed_in['company_id']}",
        headers=signed_in["headers"],
        json={"firstName": "Walid"},
    )

    assert response.status_code == 400
    body = response.json()
    assert body["responseKey"] == "Invalid Request"
    assert body["message"].startswith("body.")


def test_leave_request_uses_type_key(client, signed_in):
    company_id = signed_in["company_id"]
    user_id = signed_in["user_id"]
    headers = signed_in["headers"]

    response = client.post(
        f"/api/leave-requests/{company_id}/{user_id}",
        headers=headers,
        json={
            "startDate": "2026-05-04T08:00:00Z",
            "endDate": "2026-05-06T18:00:00Z",
            "type": "annual",
        },
    )
    assert response.status_code == 201
    record_id = response.json()["data"]["id"]

    response = client.put(
        f"/api/leave-requests/{company_id}/{user_id}/{record_id}",
        headers=headers,
        json={"status": "approved"},
    )
    assert response.status_code == 200

    response = client.get(
        f"/api/leave-requests/{company_id}/{user_id}/{record_id}", headers=headers
    )
    data = response.json()["data"]
    assert data["type"] == "annual"
    assert data["status"] == "approved"

    response = client.get(f"/api/notifications/{user_id}/count", headers=headers)
    assert response.json()["data"] == {"count": 1}


def test_health_is_not_enveloped(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "up"
    assert "responseKey" not in body


def test_leave_request_dates_without_offset(client, signed_in):
    base = f"/api/leave-requests/{signed_in['company_id']}/{signed_in['user_id']}"
    headers = signed_in["headers"]

    response = client.post(
        base,
        headers=headers,
        json={
            "startDate": "2026-05-04T08:00:00",
            "endDate": "2026-05-06T18:00:00Z",
            "type": "annual",
        },
    )
    assert response.status_code == 201
    record_id = response.json()["data"]["id"]

    response = client.put(
        f"{base}/{record_id}", headers=headers, json={"startDate": "2026-05-05T08:00:00"}
    )
    assert response.status_code == 200

    response = client.put(
        f"{base}/{record_id}", headers=headers, json={"endDate": "2026-05-01T00:00:00"}
    )
    assert response.status_code == 400
    assert response.json()["responseKey"] == "Invalid Request"

    response = client.get(f"{base}/{record_id}", headers=headers)
    assert response.json()["data"]["startDate"].startswith("2026-05-05T08:00:00")
