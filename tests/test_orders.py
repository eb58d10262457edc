import pytest

from conftest import onboard_vendor, order_payload, sign_up


@pytest.fixture
def vendor(client):
    return onboard_vendor(client, sign_up(client)["id"])


def test_create_order(client, vendor):
    resp = client.post("/api/orders", json=order_payload(vendor["id"]))

    assert resp.status_code == 200
    order = resp.json()["order"]
    assert order["id"]
    assert order["status"] == "pending"
    assert order["driverId"] is None
    assert order["items"][0]["productName"] == "Bread"
    assert order["totalAmount"] == 30


@pytest.mark.parametrize("override", [
    {"items": []},
    {"totalAmount": 0},
    {"status": "lost"},
    {"customerName": ""},
    {"driverId": "d1"},
])
def test_create_order_validation(client, storage, vendor, override):
    resp = client.post("/api/orders", json=order_payload(vendor["id"], **override))

    assert resp.status_code == 400
    assert storage.orders == {}


def test_create_order_rejects_bad_items(client, vendor):
    item = {"productId": "p1", "productName": "Bread", "quantity": 0, "price": 15}

    resp = client.post("/api/orders", json=order_payload(vendor["id"], items=[item]))

    assert resp.status_code == 400
    assert "quantity" in resp.json()["message"]


def test_vendor_orders(client, vendor):
    ids = {client.post("/api/orders", json=order_payload(vendor["id"])).json()["order"]["id"] for _ in range(2)}
    client.post("/api/orders", json=order_payload("another-vendor"))

    orders = client.get(f"/api/vendors/{vendor['id']}/orders").json()["orders"]

    assert {o["id"] for o in orders} == ids


def test_patch_order_status(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"])).json()["order"]

    resp = client.patch(f"/api/orders/{order['id']}", json={"status": "preparing"})

    updated = resp.json()["order"]
    assert updated["status"] == "preparing"
    assert updated["items"] == order["items"]
    assert updated["customerAddress"] == order["customerAddress"]


def test_driver_cannot_be_assigned_before_dispatch(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"])).json()["order"]

    resp = client.patch(f"/api/orders/{order['id']}", json={"driverId": "d1"})

    assert resp.status_code == 400
    assert client.get(f"/api/orders/{order['id']}").json()["order"]["driverId"] is None


def test_driver_assigned_on_dispatch(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"])).json()["order"]

    resp = client.patch(f"/api/orders/{order['id']}", json={"driverId": "d1", "status": "delivering"})

    assert resp.status_code == 200
    assert resp.json()["order"]["driverId"] == "d1"
    assert resp.json()["order"]["status"] == "delivering"


def test_driver_assigned_once_ready(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"], status="ready")).json()["order"]

    resp = client.patch(f"/api/orders/{order['id']}", json={"driverId": "d1"})

    assert resp.status_code == 200
    assert resp.json()["order"]["status"] == "ready"


def test_dispatched_order_cannot_go_back_with_driver(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"], status="ready")).json()["order"]
    client.patch(f"/api/orders/{order['id']}", json={"driverId": "d1"})

    for status in ("pending", "preparing"):
        resp = client.patch(f"/api/orders/{order['id']}", json={"status": status})
        assert resp.status_code == 400, status

    current = client.get(f"/api/orders/{order['id']}").json()["order"]
    assert current["status"] == "ready"
    assert current["driverId"] == "d1"


def test_order_goes_back_once_driver_is_released(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"], status="ready")).json()["order"]
    client.patch(f"/api/orders/{order['id']}", json={"driverId": "d1"})

    resp = client.patch(f"/api/orders/{order['id']}", json={"status": "preparing", "driverId": None})

    assert resp.status_code == 200
    assert resp.json()["order"]["driverId"] is None
    assert resp.json()["order"]["status"] == "preparing"


def test_cancelling_releases_driver(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"], status="ready")).json()["order"]
    client.patch(f"/api/orders/{order['id']}", json={"driverId": "d1", "status": "delivering"})

    resp = client.patch(f"/api/orders/{order['id']}", json={"status": "cancelled"})

    assert resp.status_code == 200
    assert resp.json()["order"]["status"] == "cancelled"
    assert resp.json()["order"]["driverId"] is None
    assert client.get("/api/drivers/d1/orders").json() == {"orders": []}


def test_patch_order_validation(client, vendor):
    order = client.post("/api/orders", json=order_payload(vendor["id"])).json()["order"]

    for payload in ({"items": []}, {"totalAmount": -1}, {"status": None}):
        assert client.patch(f"/api/orders/{order['id']}", json=payload).status_code == 400, payload


def test_unknown_order(client):
    assert client.get("/api/orders/missing").json() == {"message": "Order not found"}

    resp = client.patch("/api/orders/missing", json={"status": "cancelled"})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Order not found"}

    resp = client.patch("/api/orders/missing", json={"driverId": "d1", "status": "delivering"})
    assert resp.status_code == 404
