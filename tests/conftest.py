"""Pytest configuration and fixtures."""

import json
from typing import Callable, List

import httpx
import pytest

from bc_rest.client import BigCommerceClient


class MockAPI:
    """Routes requests to a handler and records every request it sees."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def bodies(self) -> list:
        return [json.loads(r.content) for r in self.requests if r.content]


@pytest.fixture
def make_client():
    """Build a client whose transport is served by a MockAPI."""

    def _make(handler, max_retries: int = 3):
        api = MockAPI(handler)
        client = BigCommerceClient(
            store_hash="abc123",
            access_token="test_token",
            api_base_url="https://api.test",
            max_retries=max_retries,
            http_client=httpx.Client(transport=httpx.MockTransport(api)),
        )
        return client, api

    return _make


@pytest.fixture
def sample_product():
    """A v3 product as returned with variants and custom fields included."""
    return {
        "id": 111,
        "name": "Widget",
        "type": "physical",
        "sku": "WID-1",
        "weight": 1.5,
        "price": 19.99,
        "categories": [18, 23],
        "option_set_id": None,
        "inventory_level": 0,
        "date_created": "2023-01-10T12:00:00+00:00",
        "custom_url": {"url": "/widget/", "is_customized": False},
        "variants": [
            {
                "id": 7,
                "product_id": 111,
                "sku": "WID-1-RED",
                "sku_id": None,
                "price": None,
                "inventory_level": 4,
                "option_values": [
                    {"id": 1, "label": "Red", "option_id": 9, "option_display_name": "Color"}
                ],
            }
        ],
        "custom_fields": [{"id": 3, "name": "material", "value": "steel"}],
        "some_new_field": "ignored",
    }


@pytest.fixture
def sample_post():
    """A v2 blog post."""
    return {
        "id": 5,
        "title": "Spring sale",
        "url": "/blog/spring-sale/",
        "body": "<p>Sale</p>",
        "tags": ["sale"],
        "is_published": True,
        "published_date": {
            "date": "2023-03-01 10:00:00.000000",
            "timezone_type": 1,
            "timezone": "+00:00",
        },
        "published_date_iso8601": "2023-03-01T10:00:00+00:00",
        "author": "Store Team",
    }
