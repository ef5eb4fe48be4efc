from fastapi import APIRouter, Depends, Query, status
from typing import Optional

from product_api.api.security import require_api_key
from product_api.api.validation import validated_product
from product_api.exceptions import NotFoundError, ValidationError
from product_api.services.product_service import ProductService
from product_api.services.product_store import ProductStore
from product_api.storage import get_store
from product_api.schemas.product import (
    ErrorResponse,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductMutationEnvelope,
    ProductResponse,
    ProductSearchEnvelope,
    ProductStatsEnvelope
)

router = APIRouter(prefix="/products", tags=["Products"])

ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
}
MUTATION_ERROR_RESPONSES = {
    **ERROR_RESPONSES,
    status.HTTP_401_UNAUTHORIZED: {"model": ErrorResponse},
}


def _not_found(product_id: str) -> NotFoundError:
    return NotFoundError(f"Product with id {product_id} not found")


# Literal paths are registered before /{product_id} so they are not read as IDs

@router.get(
    "/search",
    response_model=ProductSearchEnvelope,
    responses=ERROR_RESPONSES,
    summary="Search products",
    description="Case-insensitive substring search on product name."
)
def search_products(
    q: Optional[str] = Query(None, description="Text to look for in product names"),
    store: ProductStore = Depends(get_store)
):
    """Search products by name."""
    if not q:
        raise ValidationError('Search query parameter "q" is required')

    results = ProductService(store).search(q)

    return ProductSearchEnvelope(
        count=len(results),
        data=[ProductResponse.model_validate(p) for p in results]
    )


@router.get(
    "/stats",
    response_model=ProductStatsEnvelope,
    summary="Product statistics",
    description="Total, in-stock and out-of-stock counts plus a per-category breakdown."
)
def product_stats(store: ProductStore = Depends(get_store)):
    return ProductStatsEnvelope(data=ProductService(store).stats())


@router.get(
    "",
    response_model=ProductListEnvelope,
    responses=ERROR_RESPONSES,
    summary="List products",
    description="Get a paginated list of products with an optional category filter."
)
def list_products(
    category: Optional[str] = Query(None, description="Filter by category (case-insensitive)"),
    page: int = Query(1, ge=1, description="Page number"),
    limit: int = Query(10, ge=1, description="Items per page"),
    store: ProductStore = Depends(get_store)
):
    """
    Get a page of products.

    A page past the end returns an empty `data` list with the real `total`.
    """
    products, total = ProductService(store).get_all(page, limit, category)

    return ProductListEnvelope(
        count=len(products),
        total=total,
        page=page,
        limit=limit,
        data=[ProductResponse.model_validate(p) for p in products]
    )


@router.get(
    "/{product_id}",
    response_model=ProductEnvelope,
    responses=ERROR_RESPONSES,
    summary="Get product by ID"
)
def get_product(
    product_id: str,
    store: ProductStore = Depends(get_store)
):
    """Get a product by ID."""
    product = store.find_by_id(product_id)

    if not product:
        raise _not_found(product_id)

    return ProductEnvelope(data=ProductResponse.model_validate(product))


@router.post(
    "",
    response_model=ProductMutationEnvelope,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_api_key)],
    responses=MUTATION_ERROR_RESPONSES,
    summary="Create a new product",
    description="Create a product. Requires the API key header."
)
def create_product(
    product_data: ProductCreate = Depends(validated_product),
    store: ProductStore = Depends(get_store)
):
    """
    Create a new product.

    - **name**: Product name, non-empty (required)
    - **description**: Product description (required)
    - **price**: Non-negative number (required)
    - **category**: Category name, non-empty (required)
    - **inStock**: Availability flag (required)
    """
    product = store.insert(product_data)

    return ProductMutationEnvelope(
        message="Product created successfully",
        data=ProductResponse.model_validate(product)
    )


@router.put(
    "/{product_id}",
    response_model=ProductMutationEnvelope,
    dependencies=[Depends(require_api_key)],
    responses=MUTATION_ERROR_RESPONSES,
    summary="Replace a product",
    description="Overwrite every field of a product except its ID. Requires the API key header."
)
def update_product(
    product_id: str,
    product_data: ProductCreate = Depends(validated_product),
    store: ProductStore = Depends(get_store)
):
    """
    Update a product.

    All fields must be supplied; there are no partial updates.
    """
    product = store.replace(product_id, product_data)

    if not product:
        raise _not_found(product_id)

    return ProductMutationEnvelope(
        message="Product updated successfully",
        data=ProductResponse.model_validate(product)
    )


@router.delete(
    "/{product_id}",
    response_model=ProductMutationEnvelope,
    dependencies=[Depends(require_api_key)],
    responses=MUTATION_ERROR_RESPONSES,
    summary="Delete a product",
    description="Delete a product by ID and return it. Requires the API key header."
)
def delete_product(
    product_id: str,
    store: ProductStore = Depends(get_store)
):
    """Delete a product."""
    product = store.remove(product_id)

    if not product:
        raise _not_found(product_id)

    return ProductMutationEnvelope(
        message="Product deleted successfully",
        data=ProductResponse.model_validate(product)
    )
