"""Typed models for BigCommerce API resources."""

from bc_rest.models.common import (
    ErrorEnvelope,
    ItemEnvelope,
    ListEnvelope,
    Pagination,
    ValidationErrorResult,
)
from bc_rest.models.metafields import Metafield, index_metafields
from bc_rest.models.posts import CreatePostPayload, Post, PublishedDate, PublishedDateObject
from bc_rest.models.products import (
    ALL_PRODUCT_INCLUDES,
    DEFAULT_PRODUCT_FIELDS,
    BulkPricingRule,
    CreateProductPayload,
    CustomField,
    CustomURL,
    Image,
    OptionValue,
    Product,
    ProductInclude,
    Variant,
)
from bc_rest.models.videos import Video

__all__ = [
    "ALL_PRODUCT_INCLUDES",
    "DEFAULT_PRODUCT_FIELDS",
    "BulkPricingRule",
    "CreatePostPayload",
    "CreateProductPayload",
    "CustomField",
    "CustomURL",
    "ErrorEnvelope",
    "Image",
    "ItemEnvelope",
    "ListEnvelope",
    "Metafield",
    "OptionValue",
    "Pagination",
    "Post",
    "Product",
    "ProductInclude",
    "PublishedDate",
    "PublishedDateObject",
    "ValidationErrorResult",
    "Variant",
    "Video",
    "index_metafields",
]
