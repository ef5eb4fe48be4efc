import secrets
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import APIKeyHeader

from product_api.config import Settings, get_settings
from product_api.exceptions import UnauthorizedError

# The header name is configurable, so the scheme only documents the default
# and the actual value is read from the request in require_api_key.
api_key_scheme = APIKeyHeader(name=get_settings().API_KEY_HEADER, auto_error=False)


def require_api_key(
    request: Request,
    _documented_key: Optional[str] = Depends(api_key_scheme),
    settings: Settings = Depends(get_settings)
) -> None:
    """
    Reject the request unless it carries the shared API key.

    Attach this only to mutating routes; read-only routes stay open.

    Raises:
        UnauthorizedError: If the header is missing or does not match
    """
    provided = request.headers.get(settings.API_KEY_HEADER)
    if not provided or not secrets.compare_digest(
        provided.encode("utf-8"), settings.API_KEY.encode("utf-8")
    ):
        raise UnauthorizedError("Unauthorized: invalid or missing API key")
