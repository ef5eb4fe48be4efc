import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.exceptions import ProductAPIError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the uniform `{success: false, message}` error envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message}
    )


async def product_api_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
    """Translate a typed application error into its status code."""
    logger.info(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Report malformed query or path parameters as a 400.

    Only the first error is reported, naming the offending parameter.
    """
    errors = exc.errors()
    if not errors:
        return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request")

    first = errors[0]
    loc = [str(part) for part in first.get("loc", ())]
    source = loc[0] if loc else "request"
    name = ".".join(loc[1:]) if len(loc) > 1 else source
    message = f"Invalid {source} parameter '{name}': {first.get('msg', 'invalid value')}"
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Wrap framework-level HTTP errors (unknown route, bad method) in the envelope."""
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    response = error_response(exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Install every error handler so no failure escapes unformatted."""
    app.add_exception_handler(ProductAPIError, product_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
