from typing import Optional

from fastapi import status


class ProductAPIError(Exception):
    """
    Base class for errors that map onto an HTTP status code.

    Anything raised during request handling that is not a subclass of this
    is reported as a 500 by the error handlers.
    """
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ProductAPIError):
    """Raised when no product has the requested ID."""
    status_code = status.HTTP_404_NOT_FOUND


class ValidationError(ProductAPIError):
    """Raised when a payload or query parameter fails validation."""
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ProductAPIError):
    """Raised when a mutating request carries a missing or wrong API key."""
    status_code = status.HTTP_401_UNAUTHORIZED
