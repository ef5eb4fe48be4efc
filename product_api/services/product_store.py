import logging
import threading
import uuid
from typing import Optional, List

from product_api.models.product import Product
from product_api.schemas.product import ProductCreate

logger = logging.getLogger(__name__)


class ProductStore:
    """
    In-memory, insertion-ordered collection of products.

    The store is the only owner of its records. Callers receive the stored
    `Product` instances, so they must not mutate them outside of
    `replace()`.

    Mutations are serialized with a lock because FastAPI runs sync route
    handlers in a thread pool.
    """

    def __init__(self):
        self._products: List[Product] = []
        self._lock = threading.Lock()

    def list(self) -> List[Product]:
        """Return all products in insertion order."""
        with self._lock:
            return list(self._products)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Look up a product by ID.

        Args:
            product_id: ID to look up

        Returns:
            Product instance or None if not found
        """
        with self._lock:
            return self._find(product_id)

    def insert(self, product_data: ProductCreate) -> Product:
        """
        Append a new product with a freshly generated ID.

        Args:
            product_data: Validated product fields

        Returns:
            The stored product
        """
        product = Product(
            id=str(uuid.uuid4()),
            name=product_data.name,
            description=product_data.description,
            price=product_data.price,
            category=product_data.category,
            in_stock=product_data.in_stock
        )
        with self._lock:
            self._products.append(product)
        logger.info(f"Product {product.id} created ({product.name})")
        return product

    def replace(self, product_id: str, product_data: ProductCreate) -> Optional[Product]:
        """
        Overwrite every mutable field of a product in place.

        The ID and position in the store are preserved.

        Args:
            product_id: ID of product to replace
            product_data: New field values

        Returns:
            Updated product or None if not found
        """
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return None

            product.name = product_data.name
            product.description = product_data.description
            product.price = product_data.price
            product.category = product_data.category
            product.in_stock = product_data.in_stock

        logger.info(f"Product {product_id} updated")
        return product

    def remove(self, product_id: str) -> Optional[Product]:
        """
        Remove a product permanently.

        Returns:
            The removed product or None if not found
        """
        with self._lock:
            for index, product in enumerate(self._products):
                if product.id == product_id:
                    del self._products[index]
                    break
            else:
                return None

        logger.info(f"Product {product_id} deleted")
        return product

    def clear(self) -> None:
        with self._lock:
            self._products.clear()

    def _find(self, product_id: str) -> Optional[Product]:
        for product in self._products:
            if product.id == product_id:
                return product
        return None
