from fastapi import Request

from product_api.schemas.product import ProductCreate
from product_api.services.product_store import ProductStore

SAMPLE_PRODUCTS = [
    {
        "name": "Laptop",
        "description": "High-performance laptop for professionals",
        "price": 1299.99,
        "category": "Electronics",
        "inStock": True,
    },
    {
        "name": "Office Chair",
        "description": "Ergonomic office chair with lumbar support",
        "price": 299.99,
        "category": "Furniture",
        "inStock": True,
    },
    {
        "name": "Wireless Mouse",
        "description": "Bluetooth wireless mouse",
        "price": 29.99,
        "category": "Electronics",
        "inStock": False,
    },
    {
        "name": "Desk Lamp",
        "description": "LED desk lamp with adjustable brightness",
        "price": 49.99,
        "category": "Furniture",
        "inStock": True,
    },
]


def create_store(seed: bool = False) -> ProductStore:
    """Create a product store, optionally pre-filled with the sample catalog."""
    store = ProductStore()
    if seed:
        for item in SAMPLE_PRODUCTS:
            store.insert(ProductCreate.model_validate(item))
    return store


def get_store(request: Request) -> ProductStore:
    """
    Dependency returning the application's product store.

    The store is created during application startup and kept on
    `app.state`; tests replace this dependency with a fresh store.
    """
    return request.app.state.product_store
