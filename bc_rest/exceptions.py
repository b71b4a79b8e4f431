"""Exception types raised by the BigCommerce client."""

from typing import Any, Dict, List, Optional


class BigCommerceError(Exception):
    """Base exception for all BigCommerce client errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TransportError(BigCommerceError):
    """Raised when the request never produced a response (network failure)."""


class DecodeError(BigCommerceError):
    """Raised when a response body is not valid JSON or does not fit the model."""

    def __init__(
        self,
        message: str,
        body: str = "",
        status_code: Optional[int] = None,
    ):
        super().__init__(message, status_code=status_code)
        self.body = body


class ApiValidationError(BigCommerceError):
    """Raised on 422 Unprocessable Entity with per-field error messages."""

    def __init__(
        self,
        message: str,
        fields: Optional[Dict[str, str]] = None,
        status_code: int = 422,
    ):
        super().__init__(message, status_code=status_code)
        self.fields = fields or {}


class ApiError(BigCommerceError):
    """Raised when the API answers with a ``{status, title}`` error envelope."""

    def __init__(self, message: str, status_code: Optional[int] = None, title: str = ""):
        super().__init__(message, status_code=status_code)
        self.title = title or message


class NoContentError(BigCommerceError):
    """Raised when a request that should return content answers 204."""

    def __init__(self, message: str = "no content"):
        super().__init__(message, status_code=204)


class MaxRetriesError(BigCommerceError):
    """Raised when a paginated walk exhausts its retry budget.

    ``items`` holds everything collected before the walk gave up, so the
    caller can decide whether a partial result is usable.
    """

    def __init__(self, message: str = "max retries reached", items: Optional[List[Any]] = None):
        super().__init__(message)
        self.items = items if items is not None else []
