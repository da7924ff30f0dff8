"""
Endpoint tests for the local HTTP API (TestClient over an in-memory store).
"""
from __future__ import annotations

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from anymais.app import create_app
from anymais.database import open_database
from anymais.repositories.base import MemoryStorage


@pytest.fixture()
def database():
    return open_database(storage=MemoryStorage())


@pytest.fixture()
def client(database):
    return TestClient(create_app(database))


def _login_maria(client):
    response = client.post("/auth/login", json={"email": "maria@example.com", "password": "123"})
    assert response.status_code == status.HTTP_200_OK
    return response.json()


def _signup(client, email="novo@example.com", plan="basic"):
    response = client.post(
        "/auth/signup",
        json={"name": "Novo Usuario", "email": email, "password": "senha123!", "plan": plan},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()


def test_login_success_hides_password(client):
    data = _login_maria(client)
    assert data["id"] == "u1"
    assert "password" not in data
    assert client.get("/auth/session").json()["id"] == "u1"


def test_login_wrong_password(client):
    response = client.post("/auth/login", json={"email": "maria@example.com", "password": "errada"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED


def test_signup_duplicate_and_invalid_email(client):
    response = client.post(
        "/auth/signup", json={"name": "Maria", "email": "maria@example.com", "password": "x"}
    )
    assert response.status_code == status.HTTP_409_CONFLICT

    response = client.post("/auth/signup", json={"name": "Maria", "email": "not-an-email", "password": "x"})
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_signup_opens_session(client):
    user = _signup(client)
    assert user["plan"] == "basic"
    assert user["favorites"] == []
    assert client.get("/auth/session").json()["id"] == user["id"]


def test_logout(client):
    _login_maria(client)
    assert client.post("/auth/logout").json() == {"ok": True}
    assert client.get("/auth/session").status_code == status.HTTP_401_UNAUTHORIZED
    assert client.get("/pets").status_code == status.HTTP_401_UNAUTHORIZED


def test_update_profile_keeps_plan_and_password(client, database):
    _login_maria(client)
    response = client.put("/auth/me", json={"name": "Maria Souza", "phone": "(11) 90000-0000"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["name"] == "Maria Souza"
    assert response.json()["plan"] == "start"
    assert database.auth.login("maria@example.com", "123") is not None


def test_update_profile_can_clear_location(client, database):
    _login_maria(client)
    response = client.put("/auth/me", json={"location": {"lat": -23.55, "lng": -46.63}})
    assert response.json()["location"] == {"lat": -23.55, "lng": -46.63}

    response = client.put("/auth/me", json={"location": None, "name": None})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["location"] is None
    assert response.json()["name"] == "Maria Silva"
    assert "location" not in database.users.get("u1")


def test_update_profile_rejects_taken_email(client):
    _signup(client, email="outro@example.com")
    _login_maria(client)
    response = client.put("/auth/me", json={"email": "outro@example.com"})
    assert response.status_code == status.HTTP_409_CONFLICT


def test_change_plan_and_favorites(client):
    _login_maria(client)
    assert client.put("/auth/me/plan", json={"plan": "premium"}).json()["plan"] == "premium"
    assert client.put("/auth/me/plan", json={"plan": "gold"}).status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
    assert client.post("/auth/me/favorites/adopt-3").json()["favorites"] == ["adopt-3"]
    assert client.post("/auth/me/favorites/adopt-3").json()["favorites"] == []


def test_delete_pet_removes_its_appointments(client):
    _login_maria(client)
    assert [a["id"] for a in client.get("/appointments").json()] == ["apt-1"]

    assert client.delete("/pets/pet-1").json() == {"ok": True}

    assert [p["id"] for p in client.get("/pets").json()] == ["pet-2"]
    assert client.get("/appointments").json() == []


def test_cannot_touch_other_owners_pet(client):
    _signup(client)
    assert client.delete("/pets/pet-1").status_code == status.HTTP_404_NOT_FOUND
    response = client.put("/pets/pet-1", json={"name": "Meu", "type": "dog"})
    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_dating_requires_premium(client):
    _login_maria(client)
    payload = {"name": "Thor", "type": "dog", "availableForDating": True}
    assert client.post("/pets", json=payload).status_code == status.HTTP_403_FORBIDDEN
    assert client.get("/pets/dating").status_code == status.HTTP_403_FORBIDDEN

    client.put("/auth/me/plan", json={"plan": "premium"})
    response = client.post("/pets", json=payload)
    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["ownerId"] == "u1"
    # own pets never show up in the dating list
    assert client.get("/pets/dating").json() == []


def test_update_pet_and_add_vaccine(client):
    _login_maria(client)
    response = client.put("/pets/pet-2", json={"name": "Mimi", "type": "cat", "bio": "Dorminhoca"})
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["bio"] == "Dorminhoca"

    response = client.post(
        "/pets/pet-2/vaccines", json={"name": "Raiva", "date": "2024-05-01", "nextDueDate": "2025-05-01"}
    )
    assert response.status_code == status.HTTP_201_CREATED
    assert [v["name"] for v in response.json()["vaccines"]] == ["Raiva"]


def test_booking_flow(client):
    _login_maria(client)
    response = client.post(
        "/appointments",
        json={"petId": "pet-2", "providerId": "sp-2", "providerName": "Banho & Tosa", "date": "2024-01-05", "time": "14:00"},
    )
    assert response.status_code == status.HTTP_201_CREATED
    created = response.json()
    assert created["status"] == "scheduled"
    assert [a["id"] for a in client.get("/appointments").json()] == [created["id"], "apt-1"]

    response = client.patch(f"/appointments/{created['id']}/status", json={"status": "cancelled"})
    assert response.json()["status"] == "cancelled"
    assert client.patch("/appointments/apt-404/status", json={"status": "cancelled"}).status_code == 404


def test_booking_requires_start_plan(client):
    _signup(client)
    pet = client.post("/pets", json={"name": "Bidu", "type": "dog"}).json()
    response = client.post(
        "/appointments",
        json={"petId": pet["id"], "providerId": "sp-1", "date": "2024-01-05", "time": "14:00"},
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_ong_registration_and_search(client):
    anonymous = client.post("/ongs", json={"name": "Abrigo Anonimo", "location": "Salvador, BA"})
    assert anonymous.status_code == status.HTTP_201_CREATED
    assert anonymous.json()["ownerId"] is None

    _login_maria(client)
    mine = client.post("/ongs", json={"name": "Lar da Maria", "location": "Belo Horizonte, MG"}).json()
    assert mine["ownerId"] == "u1"
    assert [o["id"] for o in client.get("/ongs/mine").json()] == [mine["id"]]
    assert [o["name"] for o in client.get("/ongs", params={"q": "belo"}).json()] == ["Lar da Maria"]
    assert client.get(f"/ongs/{mine['id']}").json()["name"] == "Lar da Maria"
    assert client.get("/ongs/ong-404").status_code == status.HTTP_404_NOT_FOUND

    response = client.put(f"/ongs/{mine['id']}", json={"name": "Lar da Maria", "pixKey": "maria@pix"})
    assert response.json()["pixKey"] == "maria@pix"
    assert client.put("/ongs/ong-1", json={"name": "Tomada"}).status_code == status.HTTP_403_FORBIDDEN


def test_adoption_interests(client):
    _login_maria(client)
    first = client.post("/adoption/interests", json={"petId": "adopt-1"})
    assert first.status_code == status.HTTP_201_CREATED
    assert first.json()["status"] == "pending"

    interest_id = first.json()["id"]
    response = client.patch(f"/adoption/interests/{interest_id}/status", json={"status": "approved"})
    assert response.json()["status"] == "approved"
    assert [i["id"] for i in client.get("/adoption/interests").json()] == [interest_id]


def test_utils_endpoints(client):
    assert client.post("/utils/password-strength", json={"password": "abcdef1!"}).json() == {"strength": "strong"}
    response = client.get("/utils/distance", params={"lat1": 0, "lng1": 0, "lat2": 0, "lng2": 0})
    assert response.json() == {"km": 0.0}
