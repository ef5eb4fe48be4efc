import pytest
from fastapi.testclient import TestClient

from product_api.main import app
from product_api.config import Settings, get_settings
from product_api.services.product_store import ProductStore
from product_api.storage import get_store


TEST_API_KEY = "test-api-key"


def override_get_settings():
    """Override settings dependency for testing."""
    return Settings(API_KEY=TEST_API_KEY)


@pytest.fixture(scope="function")
def store():
    """Fresh, empty product store for each test."""
    return ProductStore()


@pytest.fixture(scope="function")
def client(store):
    """Create test client wired to the per-test store."""
    app.dependency_overrides[get_settings] = override_get_settings
    app.dependency_overrides[get_store] = lambda: store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def product_payload():
    return {
        "name": "Laptop",
        "description": "High-performance laptop for professionals",
        "price": 1299.99,
        "category": "Electronics",
        "inStock": True
    }
