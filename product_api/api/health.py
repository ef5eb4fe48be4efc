from fastapi import APIRouter, Depends

from product_api.services.product_store import ProductStore
from product_api.storage import get_store

router = APIRouter(prefix="/health", tags=["Health"])


@router.get(
    "",
    summary="Health check",
    description="Basic health check including the number of stored products."
)
def health_check(store: ProductStore = Depends(get_store)):
    """Simple health check."""
    return {"status": "healthy", "products": store.count()}
