import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from product_api.config import get_settings
from product_api.storage import create_store
from product_api.utils.errors import register_exception_handlers
from product_api.api import products, health

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup and shutdown events.
    """
    logger.info("Starting up application...")

    app.state.product_store = create_store(seed=settings.SEED_SAMPLE_DATA)
    logger.info(f"Product store ready with {app.state.product_store.count()} products")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title=settings.APP_NAME,
    description="""
    A small product catalog API backed by an in-memory store.

    - **Listing**: category filter with page/limit pagination
    - **Search**: case-insensitive name search
    - **Stats**: stock and per-category counts
    - **CRUD**: create, replace and delete products

    ## Authentication
    POST, PUT and DELETE require the shared API key in the `x-api-key` header.

    ## Errors
    Every failure is returned as `{"success": false, "message": "..."}`.
    """,
    version=settings.APP_VERSION,
    license_info={
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT"
    },
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log method, path, status and duration of every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)"
    )
    return response


# Include API routers
app.include_router(health.router, prefix=settings.API_PREFIX)
app.include_router(products.router, prefix=settings.API_PREFIX)


@app.get("/", tags=["Root"])
def root():
    """Root endpoint with a welcome message and API pointers."""
    products_path = f"{settings.API_PREFIX}/products"
    return {
        "message": f"Welcome to the Product API! Go to {products_path} to see all products.",
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "products": products_path,
        "docs": "/docs"
    }


def run():
    """Run the API with uvicorn using the configured host and port."""
    uvicorn.run("product_api.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
