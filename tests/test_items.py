import pytest

from qr_inventory_api.app.api.deps import get_inventory_service
from qr_inventory_api.app.services.inventory_service import InventoryService
from qr_inventory_api.client.scanner import decode_data_uri


def test_create_get_and_adjust_scenario(client, auth_headers):
    headers = auth_headers()
    r = client.post(
        "/api/items",
        json={"itemName": "USB Cable", "category": "Electronics", "quantity": 3, "location": "Shelf A2"},
        headers=headers,
    )
    assert r.status_code == 201
    item = r.json()
    assert item["quantity"] == 3
    assert item["qrCode"].startswith("data:image/png;base64,")

    r = client.get(f"/api/items/{item['id']}", headers=headers)
    assert r.status_code == 200
    assert r.json() == item

    r = client.patch(f"/api/items/{item['id']}/quantity", json={"delta": -5}, headers=headers)
    assert r.status_code == 400
    assert "cannot be negative" in r.json()["detail"]
    assert client.get(f"/api/items/{item['id']}", headers=headers).json()["quantity"] == 3

    r = client.patch(f"/api/items/{item['id']}/quantity", json={"delta": -3}, headers=headers)
    assert r.status_code == 200
    assert r.json()["quantity"] == 0


def test_created_item_fields(client, signup, make_item):
    account = signup()
    headers = {"Authorization": f"Bearer {account['token']}"}
    item = make_item(headers, itemName="  Drill  ", location="Garage")
    assert item["itemName"] == "Drill"
    assert item["category"] == "Electronics"
    assert item["location"] == "Garage"
    assert item["userId"] == account["user"]["id"]
    assert item["createdAt"]
    assert item["updatedAt"]


def test_qr_code_decodes_to_item_id(auth_headers, make_item):
    headers = auth_headers()
    for name in ("Hammer", "Nails", "Saw"):
        item = make_item(headers, itemName=name)
        assert decode_data_uri(item["qrCode"]) == str(item["id"])


def test_quantity_zero_is_allowed(auth_headers, make_item):
    item = make_item(auth_headers(), quantity=0)
    assert item["quantity"] == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"quantity": None},
        {"quantity": -1},
        {"quantity": "many"},
        {"quantity": "3"},
        {"quantity": True},
        {"quantity": 2**63},
        {"itemName": ""},
        {"category": "   "},
        {"location": None},
    ],
)
def test_create_rejects_invalid_fields(client, auth_headers, overrides):
    body = {"itemName": "USB Cable", "category": "Electronics", "quantity": 3, "location": "Shelf A2"}
    body.update(overrides)
    r = client.post("/api/items", json=body, headers=auth_headers())
    assert r.status_code == 400


def test_create_requires_every_field(client, auth_headers):
    r = client.post(
        "/api/items",
        json={"itemName": "USB Cable", "category": "Electronics", "location": "Shelf A2"},
        headers=auth_headers(),
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "All fields are required."


def test_create_requires_token(client):
    r = client.post(
        "/api/items",
        json={"itemName": "USB Cable", "category": "Electronics", "quantity": 3, "location": "Shelf A2"},
    )
    assert r.status_code == 401


def test_list_is_newest_first_and_owner_scoped(client, auth_headers, make_item):
    ana = auth_headers(email="ana@x.com")
    bob = auth_headers(name="Bob", email="bob@x.com")
    first = make_item(ana, itemName="First")
    make_item(bob, itemName="Bob's")
    second = make_item(ana, itemName="Second")
    third = make_item(ana, itemName="Third")

    r = client.get("/api/items", headers=ana)
    assert r.status_code == 200
    assert [i["id"] for i in r.json()] == [third["id"], second["id"], first["id"]]


@pytest.mark.parametrize("deltas", [[2, -1, -4, 5, -6], [-1, -1, -1, 1], [0, 10, -13, -3]])
def test_adjustments_never_go_negative(client, auth_headers, make_item, deltas):
    headers = auth_headers()
    item = make_item(headers, quantity=3)
    expected = 3
    for delta in deltas:
        r = client.patch(f"/api/items/{item['id']}/quantity", json={"delta": delta}, headers=headers)
        if expected + delta < 0:
            assert r.status_code == 400
        else:
            assert r.status_code == 200
            expected += delta
        stored = client.get(f"/api/items/{item['id']}", headers=headers).json()["quantity"]
        assert stored == expected


@pytest.mark.parametrize("body", [{"delta": "5"}, {"delta": 1.5}, {"delta": True}, {"delta": None}, {}])
def test_adjust_rejects_non_integer_delta(client, auth_headers, make_item, body):
    headers = auth_headers()
    item = make_item(headers)
    r = client.patch(f"/api/items/{item['id']}/quantity", json=body, headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "delta (number) is required."


def test_adjust_unknown_item(client, auth_headers):
    r = client.patch("/api/items/999/quantity", json={"delta": 1}, headers=auth_headers())
    assert r.status_code == 404


@pytest.mark.parametrize("item_id", ["999", "abc", "1.5", "-1", "99999999999999999999"])
def test_get_unknown_item(client, auth_headers, item_id):
    r = client.get(f"/api/items/{item_id}", headers=auth_headers())
    assert r.status_code == 404
    assert r.json()["detail"] == "Item not found."


def test_other_accounts_items_look_missing(client, auth_headers, make_item):
    ana = auth_headers(email="ana@x.com")
    bob = auth_headers(name="Bob", email="bob@x.com")
    make_item(ana, itemName="Ana's")
    bobs = make_item(bob, itemName="Bob's", quantity=4)

    r = client.get(f"/api/items/{bobs['id']}", headers=ana)
    assert r.status_code == 404
    assert r.json() == {"detail": "Item not found."}

    r = client.patch(f"/api/items/{bobs['id']}/quantity", json={"delta": -1}, headers=ana)
    assert r.status_code == 404
    assert client.get(f"/api/items/{bobs['id']}", headers=bob).json()["quantity"] == 4

    assert all(i["id"] != bobs["id"] for i in client.get("/api/items", headers=ana).json())


def test_failed_encoding_leaves_no_item_behind(app, settings, auth_headers):
    from fastapi.testclient import TestClient

    def broken_encoder(payload):
        raise RuntimeError("encoder exploded with secret details")

    app.dependency_overrides[get_inventory_service] = lambda: InventoryService(settings, encoder=broken_encoder)
    headers = auth_headers()
    with TestClient(app, raise_server_exceptions=False) as c:
        r = c.post(
            "/api/items",
            json={"itemName": "USB Cable", "category": "Electronics", "quantity": 3, "location": "Shelf A2"},
            headers=headers,
        )
        assert r.status_code == 500
        assert r.json() == {"detail": "Internal server error"}
        assert c.get("/api/items", headers=headers).json() == []


def test_adjust_huge_unknown_id_is_not_found(client, auth_headers):
    r = client.patch(
        "/api/items/99999999999999999999/quantity", json={"delta": 1}, headers=auth_headers()
    )
    assert r.status_code == 404


@pytest.mark.parametrize("delta", [2**63, -(2**63)])
def test_adjust_rejects_delta_outside_integer_range(client, auth_headers, make_item, delta):
    headers = auth_headers()
    item = make_item(headers)
    r = client.patch(f"/api/items/{item['id']}/quantity", json={"delta": delta}, headers=headers)
    assert r.status_code == 400
    assert client.get(f"/api/items/{item['id']}", headers=headers).json()["quantity"] == 3


def test_adjust_cannot_push_quantity_past_integer_range(client, auth_headers, make_item):
    headers = auth_headers()
    item = make_item(headers, quantity=2**63 - 1)

    r = client.patch(f"/api/items/{item['id']}/quantity", json={"delta": 1}, headers=headers)
    assert r.status_code == 400
    assert r.json()["detail"] == "Quantity is too large."

    r = client.get("/api/items", headers=headers)
    assert r.status_code == 200
    assert r.json()[0]["quantity"] == 2**63 - 1

    r = client.patch(f"/api/items/{item['id']}/quantity", json={"delta": -(2**63 - 1)}, headers=headers)
    assert r.status_code == 200
    assert r.json()["quantity"] == 0
