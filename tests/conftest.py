import pytest
from fastapi.testclient import TestClient

from marketplace.main import create_app
from marketplace.storage import MemStorage, SqlStorage


class FakeBlobStore:
    """Keeps uploads in memory and hands out predictable URLs."""

    def __init__(self):
        self.uploads = []

    def upload(self, data, folder):
        self.uploads.append((folder, data.read()))
        return f"https://cdn.marketplace.dev/{folder}/{len(self.uploads)}.jpg"


@pytest.fixture
def storage():
    return MemStorage()


@pytest.fixture(params=["memory", "sql"])
def any_storage(request):
    if request.param == "memory":
        yield MemStorage()
    else:
        store = SqlStorage("sqlite://")
        yield store
        store.close()


@pytest.fixture
def blob_store():
    return FakeBlobStore()


@pytest.fixture
def client(storage, blob_store):
    app = create_app(storage=storage, blob_store=blob_store)
    with TestClient(app) as test_client:
        yield test_client


def sign_up(client, email="joe@joesbakery.com", password="secret123", role="vendor"):
    resp = client.post("/api/auth/signup", json={"email": email, "password": password, "role": role})
    assert resp.status_code == 200, resp.text
    return resp.json()["user"]


def onboard_vendor(client, user_id, **overrides):
    payload = {"userId": user_id, "brandName": "Joe's", "category": "Bakery"}
    payload.update(overrides)
    resp = client.post("/api/vendors", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["vendor"]


def onboard_driver(client, user_id, **overrides):
    payload = {
        "userId": user_id,
        "fullName": "Ada Okafor",
        "phoneNumber": "08031234567",
        "vehicleType": "bike",
        "vehicleNumber": "LAG-123-XY",
        "vehicleColor": "Red",
    }
    payload.update(overrides)
    resp = client.post("/api/drivers", json=payload)
    assert resp.status_code == 200, resp.text
    return resp.json()["driver"]


def order_payload(vendor_id, **overrides):
    payload = {
        "vendorId": vendor_id,
        "customerName": "Bola",
        "customerAddress": "12 Allen Avenue, Ikeja",
        "items": [
            {"productId": "p1", "productName": "Bread", "quantity": 2, "price": 15},
        ],
        "totalAmount": 30,
    }
    payload.update(overrides)
    return payload
