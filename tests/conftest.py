import pytest
from fastapi.testclient import TestClient

from qr_inventory_api.app.core.config import Settings
from qr_inventory_api.app.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=str(tmp_path / "inventory.db"),
        secret_key="test-secret",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def signup(client):
    """Register an account and return the response JSON."""

    def _signup(name="Ana", email="ana@x.com", password="secret1"):
        r = client.post(
            "/api/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert r.status_code == 201, r.text
        return r.json()

    return _signup


@pytest.fixture
def auth_headers(signup):
    """Authorization header for a freshly registered account."""

    def _headers(**kwargs):
        return {"Authorization": f"Bearer {signup(**kwargs)['token']}"}

    return _headers


@pytest.fixture
def make_item(client):
    def _make_item(headers, **overrides):
        body = {
            "itemName": "USB Cable",
            "category": "Electronics",
            "quantity": 3,
            "location": "Shelf A2",
        }
        body.update(overrides)
        r = client.post("/api/items", json=body, headers=headers)
        assert r.status_code == 201, r.text
        return r.json()

    return _make_item
