from typing import Optional, List

from product_api.models.product import Product
from product_api.schemas.product import ProductStats
from product_api.services.product_store import ProductStore


class ProductService:
    """
    Read-side queries computed over a ProductStore.

    This service handles:
    - Name search
    - Aggregate statistics
    - Category filtering with offset pagination
    """

    def __init__(self, store: ProductStore):
        self.store = store

    def search(self, query: str) -> List[Product]:
        """
        Find products whose name contains `query`, ignoring case.

        Results keep store order.
        """
        needle = query.lower()
        return [p for p in self.store.list() if needle in p.name.lower()]

    def stats(self) -> ProductStats:
        """Count products overall, by stock status, and per category."""
        products = self.store.list()

        by_category: dict[str, int] = {}
        for product in products:
            by_category[product.category] = by_category.get(product.category, 0) + 1

        in_stock = sum(1 for p in products if p.in_stock)

        return ProductStats(
            total=len(products),
            in_stock=in_stock,
            out_of_stock=len(products) - in_stock,
            by_category=by_category
        )

    def get_all(
        self,
        page: int = 1,
        limit: int = 10,
        category: Optional[str] = None
    ) -> tuple[List[Product], int]:
        """
        Get a page of products, optionally filtered by category.

        Args:
            page: Page number (1-indexed)
            limit: Number of items per page
            category: Optional category, matched case-insensitively

        Returns:
            Tuple of (products on this page, total matching products)
        """
        products = self.store.list()

        if category:
            wanted = category.lower()
            products = [p for p in products if p.category.lower() == wanted]

        total = len(products)

        skip = (page - 1) * limit
        return products[skip:skip + limit], total
