from conftest import onboard_driver, onboard_vendor, order_payload, sign_up


def test_driver_onboarding(client):
    user = sign_up(client, email="ada@rides.ng", role="driver")

    driver = onboard_driver(client, user["id"], vehicleType="keke")

    assert driver["id"]
    assert driver["userId"] == user["id"]
    assert driver["vehicleType"] == "keke"
    assert driver["isAvailable"] is True
    assert driver["totalEarnings"] == 0
    assert client.get(f"/api/users/{user['id']}").json()["user"]["onboardingComplete"] is True


def test_driver_onboarding_validation(client, storage):
    user = sign_up(client, email="ada@rides.ng", role="driver")
    base = {
        "userId": user["id"], "fullName": "Ada Okafor", "phoneNumber": "08031234567",
        "vehicleType": "bike", "vehicleNumber": "LAG-123-XY", "vehicleColor": "Red",
    }
    for override in ({"phoneNumber": "0803"}, {"vehicleType": "truck"}, {"fullName": "A"}, {"vehicleColor": ""}):
        resp = client.post("/api/drivers", json={**base, **override})
        assert resp.status_code == 400, override

    assert storage.drivers == {}


def test_get_driver(client):
    driver = onboard_driver(client, sign_up(client, email="ada@rides.ng", role="driver")["id"])

    assert client.get(f"/api/drivers/{driver['id']}").json() == {"driver": driver}
    assert client.get("/api/drivers/missing").json() == {"message": "Driver not found"}


def test_patch_driver_availability_and_earnings(client):
    driver = onboard_driver(client, sign_up(client, email="ada@rides.ng", role="driver")["id"])

    resp = client.patch(f"/api/drivers/{driver['id']}", json={"isAvailable": False, "totalEarnings": 4500.5})

    updated = resp.json()["driver"]
    assert updated["isAvailable"] is False
    assert updated["totalEarnings"] == 4500.5
    assert updated["vehicleNumber"] == driver["vehicleNumber"]


def test_patch_driver_rejects_negative_earnings(client, storage):
    driver = onboard_driver(client, sign_up(client, email="ada@rides.ng", role="driver")["id"])

    resp = client.patch(f"/api/drivers/{driver['id']}", json={"totalEarnings": -1})

    assert resp.status_code == 400
    assert storage.get_driver(driver["id"]).total_earnings == 0


def test_patch_unknown_driver(client):
    resp = client.patch("/api/drivers/missing", json={"isAvailable": False})

    assert resp.status_code == 404
    assert resp.json() == {"message": "Driver not found"}


def test_driver_orders(client):
    vendor = onboard_vendor(client, sign_up(client)["id"])
    driver = onboard_driver(client, sign_up(client, email="ada@rides.ng", role="driver")["id"])
    order = client.post("/api/orders", json=order_payload(vendor["id"], status="ready")).json()["order"]
    client.post("/api/orders", json=order_payload(vendor["id"]))

    client.patch(f"/api/orders/{order['id']}", json={"driverId": driver["id"], "status": "delivering"})

    orders = client.get(f"/api/drivers/{driver['id']}/orders").json()["orders"]
    assert [o["id"] for o in orders] == [order["id"]]
    assert client.get("/api/drivers/nobody/orders").json() == {"orders": []}


def test_user_can_only_onboard_one_driver(client, storage):
    user = sign_up(client, email="ada@rides.ng", role="driver")
    onboard_driver(client, user["id"])

    resp = client.post("/api/drivers", json={
        "userId": user["id"], "fullName": "Ada Okafor", "phoneNumber": "08031234567",
        "vehicleType": "car", "vehicleNumber": "LAG-999-XY", "vehicleColor": "Blue",
    })

    assert resp.status_code == 400
    assert resp.json() == {"message": "Driver profile already exists"}
    assert len(storage.drivers) == 1


def test_vendor_account_cannot_onboard_driver(client, storage):
    user = sign_up(client)

    resp = client.post("/api/drivers", json={
        "userId": user["id"], "fullName": "Joe Bello", "phoneNumber": "08031234567",
        "vehicleType": "bike", "vehicleNumber": "LAG-123-XY", "vehicleColor": "Red",
    })

    assert resp.status_code == 400
    assert resp.json() == {"message": "Only driver accounts can create a driver profile"}
    assert storage.drivers == {}
