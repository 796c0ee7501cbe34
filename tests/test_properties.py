"""
Tests for property endpoints
"""
from conftest import auth_header


def test_guest_cannot_create_property(client, guest):
    response = client.post("/properties", json={"title": "x"}, headers=auth_header(guest["token"]))
    assert response.status_code == 403


def test_create_requires_fields(client, owner):
    response = client.post("/properties", json={"title": "Sunrise PG"}, headers=auth_header(owner["token"]))
    assert response.status_code == 400
    assert "city is required" in response.json()["errors"]


def test_create_and_fetch(client, owner, create_property):
    prop = create_property(owner, amenities=["wifi"], deposit=5000)
    assert prop["owner_id"] == owner["id"]
    assert prop["gender"] == "Any"
    assert prop["amenities"] == ["wifi"]

    response = client.get(f"/properties/{prop['id']}")
    assert response.status_code == 200
    assert response.json()["data"]["owner"]["email"] == "ravi@example.com"


def test_list_newest_first(client, owner, create_property):
    first = create_property(owner, title="First")
    second = create_property(owner, title="Second")
    data = client.get("/properties").json()
    assert data["count"] == 2
    assert [p["id"] for p in data["data"]] == [second["id"], first["id"]]


def test_update_applies_only_present_fields(client, owner, create_property):
    prop = create_property(owner, description="Near metro")
    response = client.put(f"/properties/{prop['id']}", json={"pricePerMonth": 9500, "description": None},
                          headers=auth_header(owner["token"]))
    assert response.status_code == 200
    updated = response.json()["data"]
    assert updated["price_per_month"] == 9500
    assert updated["description"] is None
    assert updated["title"] == prop["title"]
    assert updated["available_beds"] == prop["available_beds"]


def test_update_cannot_null_required_field(client, owner, create_property):
    prop = create_property(owner)
    response = client.put(f"/properties/{prop['id']}", json={"title": None}, headers=auth_header(owner["token"]))
    assert response.status_code == 400


def test_update_by_other_owner(client, owner, register_user, create_property):
    prop = create_property(owner)
    rival = register_user(name="Other Owner", email="rival@example.com", phone="7000000001", role="owner")
    response = client.put(f"/properties/{prop['id']}", json={"title": "Mine"}, headers=auth_header(rival["token"]))
    assert response.status_code == 403


def test_soft_delete_and_restore(client, owner, create_property):
    prop = create_property(owner)
    url = f"/properties/{prop['id']}"

    assert client.delete(url, headers=auth_header(owner["token"])).status_code == 200
    assert client.get(url).status_code == 404
    assert client.get("/properties").json()["count"] == 0
    assert client.delete(url, headers=auth_header(owner["token"])).status_code == 400

    response = client.patch(f"{url}/restore", headers=auth_header(owner["token"]))
    assert response.status_code == 200
    assert response.json()["data"]["is_deleted"] is False
    assert client.get(url).status_code == 200
    assert client.patch(f"{url}/restore", headers=auth_header(owner["token"])).status_code == 400


def test_missing_property(client):
    assert client.get("/properties/999").status_code == 404


def test_mock_payment(client, guest):
    response = client.post("/payments/mock-success", json={"amount": 4500}, headers=auth_header(guest["token"]))
    assert response.status_code == 200
    data = response.json()["data"]
    assert data["status"] == "success"
    assert data["payment_id"].startswith("MOCK_PAY_")


def test_mock_payment_requires_amount(client, guest):
    response = client.post("/payments/mock-success", json={"amount": 0}, headers=auth_header(guest["token"]))
    assert response.status_code == 400
