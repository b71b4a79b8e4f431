"""Typed client for the BigCommerce REST API."""

from bc_rest.client import (
    BigCommerceClient,
    close_bigcommerce_client,
    get_bigcommerce_client,
)
from bc_rest.exceptions import (
    ApiError,
    ApiValidationError,
    BigCommerceError,
    DecodeError,
    MaxRetriesError,
    NoContentError,
    TransportError,
)
from bc_rest.pager import PageResult, paginate

__all__ = [
    "BigCommerceClient",
    "get_bigcommerce_client",
    "close_bigcommerce_client",
    "BigCommerceError",
    "ApiError",
    "ApiValidationError",
    "DecodeError",
    "MaxRetriesError",
    "NoContentError",
    "TransportError",
    "PageResult",
    "paginate",
]
