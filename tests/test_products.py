import pytest

from conftest import onboard_vendor, sign_up


@pytest.fixture
def vendor(client):
    return onboard_vendor(client, sign_up(client)["id"])


def create_product(client, vendor_id, **overrides):
    payload = {"vendorId": vendor_id, "name": "Jollof Rice", "price": 2500, "category": "Meals"}
    payload.update(overrides)
    return client.post("/api/products", json=payload)


@pytest.mark.parametrize("price", [0, -5])
def test_non_positive_price_is_rejected(client, storage, vendor, price):
    resp = create_product(client, vendor["id"], price=price)

    assert resp.status_code == 400
    assert "price" in resp.json()["message"]
    assert storage.get_products_by_vendor(vendor["id"]) == []


def test_smallest_positive_price_is_accepted(client, vendor):
    resp = create_product(client, vendor["id"], price=0.01)

    assert resp.status_code == 200
    product = resp.json()["product"]
    assert product["price"] == 0.01
    assert product["inStock"] is True
    assert product["description"] is None


def test_create_product_with_addons(client, vendor):
    resp = create_product(client, vendor["id"], customOptions={
        "addons": [{"name": "Extra chicken", "price": 800}, {"name": "Plantain", "price": 300}],
    })

    product = resp.json()["product"]
    assert [a["name"] for a in product["customOptions"]["addons"]] == ["Extra chicken", "Plantain"]
    assert client.get(f"/api/products/{product['id']}").json()["product"] == product


def test_create_product_rejects_unknown_fields(client, vendor):
    resp = create_product(client, vendor["id"], id="chosen-by-client")

    assert resp.status_code == 400


def test_products_listed_per_vendor(client, vendor):
    other = onboard_vendor(client, sign_up(client, email="ama@suyaspot.ng")["id"], brandName="Suya Spot")
    ids = {create_product(client, vendor["id"], name=name).json()["product"]["id"] for name in ("Rice", "Beans")}
    create_product(client, other["id"], name="Suya")

    listed = client.get(f"/api/vendors/{vendor['id']}/products").json()["products"]

    assert {p["id"] for p in listed} == ids


def test_patch_product(client, vendor):
    product = create_product(client, vendor["id"], description="Smoky party rice").json()["product"]

    resp = client.patch(f"/api/products/{product['id']}", json={"inStock": False, "price": 3000})

    assert resp.status_code == 200
    updated = resp.json()["product"]
    assert updated["inStock"] is False
    assert updated["price"] == 3000
    assert updated["name"] == product["name"]
    assert updated["description"] == "Smoky party rice"


def test_patch_product_validates_before_merge(client, vendor):
    product = create_product(client, vendor["id"]).json()["product"]

    for payload in ({"price": 0}, {"name": None}, {"vendorId": "elsewhere"}):
        assert client.patch(f"/api/products/{product['id']}", json=payload).status_code == 400, payload

    assert client.get(f"/api/products/{product['id']}").json()["product"] == product


def test_patch_unknown_product(client):
    resp = client.patch("/api/products/missing", json={"price": 10})

    assert resp.status_code == 404
    assert resp.json() == {"message": "Product not found"}


def test_delete_product(client, vendor):
    product = create_product(client, vendor["id"]).json()["product"]

    resp = client.delete(f"/api/products/{product['id']}")

    assert resp.status_code == 200
    assert resp.json() == {"success": True}
    assert client.get(f"/api/products/{product['id']}").status_code == 404
    assert client.delete(f"/api/products/{product['id']}").json() == {"message": "Product not found"}
