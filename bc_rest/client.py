"""BigCommerce REST API client.

This module provides a synchronous client for the BigCommerce store API:
blog posts (v2), catalog products (v3) and the product sub-resources
(metafields, videos, custom fields, bulk pricing rules). Paged collections
are walked with :func:`bc_rest.pager.paginate`.

Usage:
    client = get_bigcommerce_client()
    products = client.get_all_products(
        filters={"is_visible": "true"},
        include={ProductInclude.VARIANTS, ProductInclude.IMAGES},
    )
    post = client.create_post(CreatePostPayload(title="Hello", body="<p>Hi</p>"))
"""

import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type, TypeVar, Union

import httpx

from bc_rest.config import settings
from bc_rest.decoding import decode_as, read_payload, unwrap_single
from bc_rest.exceptions import ApiError, BigCommerceError, TransportError
from bc_rest.models.common import ItemEnvelope, ListEnvelope, PayloadModel
from bc_rest.models.metafields import Metafield, index_metafields
from bc_rest.models.posts import CreatePostPayload, Post
from bc_rest.models.products import (
    ALL_PRODUCT_INCLUDES,
    BulkPricingRule,
    CreateProductPayload,
    CustomField,
    Product,
    ProductInclude,
)
from bc_rest.models.videos import Video
from bc_rest.pager import LEGACY_PAGE_LIMIT, PageResult, count_has_more, meta_has_more, paginate

logger = logging.getLogger(__name__)

T = TypeVar("T")

IncludeSet = Iterable[Union[ProductInclude, str]]


def format_include(include: Optional[IncludeSet]) -> Optional[str]:
    """Serialize an include set as a sorted, comma-separated list."""
    if not include:
        return None
    return ",".join(sorted({ProductInclude(i).value for i in include}))


class BigCommerceClient:
    """Synchronous BigCommerce API client.

    Every accessor issues its requests one at a time and blocks until the
    response is read; response bodies are always closed before returning.

    Attributes:
        base_url: Store API root, e.g. ``https://api.bigcommerce.com/stores/abc123``
        headers: HTTP headers including authentication
        max_retries: Consecutive page failures tolerated while paginating
    """

    def __init__(
        self,
        store_hash: Optional[str] = None,
        access_token: Optional[str] = None,
        api_base_url: Optional[str] = None,
        max_retries: Optional[int] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        """Initialize the client.

        Args:
            store_hash: Store hash from the API account
            access_token: API account access token
            api_base_url: API host (default: from settings)
            max_retries: Pagination retry budget (default: from settings)
            http_client: Preconfigured transport; one is created lazily if omitted
        """
        self.store_hash = store_hash or settings.bigcommerce_store_hash
        self.access_token = access_token or settings.bigcommerce_access_token
        api_base_url = api_base_url or settings.bigcommerce_api_base_url
        self.max_retries = (
            max_retries if max_retries is not None else settings.bigcommerce_max_retries
        )

        if not self.store_hash or not self.access_token:
            logger.warning(
                "BigCommerce credentials not configured. "
                "Set BIGCOMMERCE_STORE_HASH and BIGCOMMERCE_ACCESS_TOKEN in .env"
            )

        self.base_url = f"{api_base_url.rstrip('/')}/stores/{self.store_hash}"
        self.headers = {
            "X-Auth-Token": self.access_token,
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        self._client: Optional[httpx.Client] = http_client

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                timeout=httpx.Timeout(
                    settings.bigcommerce_timeout_seconds,
                    connect=settings.bigcommerce_connect_timeout_seconds,
                ),
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            self._client.close()
            self._client = None

    def __enter__(self) -> "BigCommerceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def build_request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> httpx.Request:
        """Build an authenticated request for an API path.

        Args:
            method: HTTP method
            path: Path below the store root (e.g. "/v3/catalog/products")
            params: Query parameters, sent in the given order
            body: JSON-serializable request body
        """
        content = json.dumps(body).encode("utf-8") if body is not None else None
        return self._get_client().build_request(
            method,
            f"{self.base_url}{path}",
            params=params,
            content=content,
            headers=self.headers,
        )

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Any:
        """Send a request and return the parsed JSON payload.

        Raises:
            TransportError: If no response was received
            BigCommerceError: If the API reported a failure (see bc_rest.decoding)
        """
        request = self.build_request(method, path, params=params, body=body)
        logger.debug(f"BigCommerce API {method} {request.url}")

        try:
            response = self._get_client().send(request)
        except httpx.TransportError as e:
            logger.error(f"BigCommerce API {method} {path} failed: {e}")
            raise TransportError(f"{method} {path}: {e}") from e

        try:
            return read_payload(response)
        finally:
            response.close()

    def _create(self, path: str, payload: PayloadModel, model: Type[T]) -> T:
        # Create endpoints take a one-element batch
        data = self._request("POST", path, body=[payload.to_wire()])
        return decode_as(unwrap_single(data), model)

    def _get_v3_page(
        self,
        path: str,
        model: Type[T],
        page: int,
        params: Optional[Mapping[str, Any]] = None,
    ) -> PageResult[T]:
        query: Dict[str, Any] = {"page": page}
        if params:
            query.update(params)

        data = self._request("GET", path, params=query)
        envelope = decode_as(data, ListEnvelope[model])
        if envelope.status != 0 and not 200 <= envelope.status < 300:
            raise ApiError(envelope.title, status_code=envelope.status)
        return PageResult(envelope.data, meta_has_more(envelope.meta.pagination))

    def _get_all_v3(
        self,
        path: str,
        model: Type[T],
        params: Optional[Mapping[str, Any]] = None,
    ) -> List[T]:
        return paginate(
            lambda page: self._get_v3_page(path, model, page, params),
            self.max_retries,
        )

    # =========================================================================
    # Blog Posts (v2)
    # =========================================================================

    def get_posts(self, page: int) -> PageResult[Post]:
        """Get one page of blog posts.

        Args:
            page: Page number, starting at 1

        Returns:
            The page; ``has_more`` is set when the page is full
        """
        data = self._request(
            "GET",
            "/v2/blog/posts",
            params={"limit": LEGACY_PAGE_LIMIT, "page": page},
        )
        posts = decode_as(data, List[Post])
        return PageResult(posts, count_has_more(posts, LEGACY_PAGE_LIMIT))

    def get_all_posts(self) -> List[Post]:
        """Get every blog post, walking all pages.

        Raises:
            MaxRetriesError: With the posts fetched so far, if the retry
                budget runs out
        """
        return paginate(self.get_posts, self.max_retries)

    def get_post(self, post_id: int) -> Post:
        """Get a blog post by ID."""
        logger.debug(f"Getting post: {post_id}")
        data = self._request("GET", f"/v2/blog/posts/{post_id}")
        return decode_as(data, Post)

    def create_post(self, payload: CreatePostPayload) -> Post:
        """Create a blog post.

        Raises:
            ApiValidationError: If the API rejected the payload (422)
        """
        logger.info(f"Creating blog post: {payload.title}")
        post = self._create("/v2/blog/posts", payload, Post)
        logger.info(f"Created post ID: {post.id}")
        return post

    # =========================================================================
    # Products (v3)
    # =========================================================================

    def get_products(
        self,
        page: int,
        filters: Optional[Mapping[str, str]] = None,
        include: Optional[IncludeSet] = None,
        include_fields: Optional[Iterable[str]] = None,
    ) -> PageResult[Product]:
        """Get one page of products.

        Args:
            page: Page number, starting at 1
            filters: Extra query parameters passed through as-is
                (e.g. {"is_visible": "true", "limit": "250"})
            include: Sub-resources to expand
            include_fields: Sparse fieldset; see DEFAULT_PRODUCT_FIELDS

        Raises:
            NoContentError: If the API answered 204 for the page
        """
        params: Dict[str, Any] = dict(filters or {})
        expand = format_include(include)
        if expand:
            params["include"] = expand
        if include_fields:
            params["include_fields"] = ",".join(include_fields)

        return self._get_v3_page("/v3/catalog/products", Product, page, params)

    def get_all_products(
        self,
        filters: Optional[Mapping[str, str]] = None,
        include: Optional[IncludeSet] = None,
        include_fields: Optional[Iterable[str]] = None,
    ) -> List[Product]:
        """Get every product matching ``filters``, walking all pages."""
        include_fields = list(include_fields) if include_fields else None
        return paginate(
            lambda page: self.get_products(page, filters, include, include_fields),
            self.max_retries,
        )

    def get_product(
        self,
        product_id: int,
        include: Optional[IncludeSet] = ALL_PRODUCT_INCLUDES,
    ) -> Product:
        """Get a product by ID, expanding every sub-resource by default."""
        logger.debug(f"Getting product: {product_id}")
        expand = format_include(include)
        params = {"include": expand} if expand else None
        data = self._request("GET", f"/v3/catalog/products/{product_id}", params=params)
        return decode_as(data, ItemEnvelope[Product]).data

    def create_product(self, payload: CreateProductPayload) -> Product:
        """Create a product.

        Raises:
            ApiValidationError: If the API rejected the payload (422)
        """
        logger.info(f"Creating product: {payload.name}")
        product = self._create("/v3/catalog/products", payload, Product)
        logger.info(f"Created product ID: {product.id}")
        return product

    # =========================================================================
    # Product Sub-resources (v3)
    # =========================================================================

    def get_product_metafields(self, product_id: int) -> Dict[str, Metafield]:
        """Get a product's metafields keyed by metafield key."""
        metafields = self._get_all_v3(
            f"/v3/catalog/products/{product_id}/metafields", Metafield
        )
        return index_metafields(metafields)

    def get_product_videos(self, product_id: int) -> List[Video]:
        """Get every video attached to a product."""
        return self._get_all_v3(f"/v3/catalog/products/{product_id}/videos", Video)

    def get_product_custom_fields(self, product_id: int) -> List[CustomField]:
        """Get every custom field of a product."""
        return self._get_all_v3(
            f"/v3/catalog/products/{product_id}/custom-fields", CustomField
        )

    def get_product_bulk_pricing_rules(self, product_id: int) -> List[BulkPricingRule]:
        """Get a product's bulk pricing rules, ordered as the API returns them."""
        return self._get_all_v3(
            f"/v3/catalog/products/{product_id}/bulk-pricing-rules", BulkPricingRule
        )

    # =========================================================================
    # Health Check
    # =========================================================================

    def health_check(self) -> bool:
        """Check if the store API is reachable and the credentials are valid."""
        try:
            self._request("GET", "/v2/store")
            return True
        except BigCommerceError as e:
            logger.error(f"BigCommerce health check failed: {e}")
            return False


# =============================================================================
# Factory Function
# =============================================================================

_client_instance: Optional[BigCommerceClient] = None


def get_bigcommerce_client() -> BigCommerceClient:
    """Get or create the global client instance configured from settings."""
    global _client_instance

    if _client_instance is None:
        _client_instance = BigCommerceClient()

    return _client_instance


def close_bigcommerce_client() -> None:
    """Close the global client."""
    global _client_instance

    if _client_instance is not None:
        _client_instance.close()
        _client_instance = None
