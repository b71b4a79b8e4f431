"""Blog post models (v2 API)."""

from typing import List, Optional, Union

from pydantic import AliasChoices, Field

from bc_rest.models.common import BigCommerceModel, PayloadModel


class PublishedDateObject(BigCommerceModel):
    """Date object form the v2 API uses for ``published_date``."""

    date: str = ""
    timezone_type: int = 0
    timezone: str = ""


# Either the date object above or a bare date string (RFC 2822 on most stores)
PublishedDate = Union[PublishedDateObject, str]


class Post(BigCommerceModel):
    """A BigCommerce blog post."""

    id: int = 0
    title: str = ""
    url: str = ""
    preview_url: str = ""
    body: str = ""
    tags: List[str] = Field(default_factory=list)
    summary: str = ""
    is_published: bool = False
    published_date: Optional[PublishedDate] = Field(
        default=None,
        validation_alias=AliasChoices("published_date", "publisheddate"),
    )
    published_date_iso8601: str = Field(
        default="",
        validation_alias=AliasChoices("published_date_iso8601", "publisheddate_iso8601"),
    )
    meta_description: str = ""
    meta_keywords: str = ""
    author: str = ""
    thumbnail_path: str = ""


class CreatePostPayload(PayloadModel):
    """Fields accepted when creating a blog post. ``title`` and ``body`` are required."""

    title: str
    body: str
    url: Optional[str] = None
    tags: Optional[List[str]] = None
    is_published: Optional[bool] = None
    meta_description: Optional[str] = None
    meta_keywords: Optional[str] = None
    author: Optional[str] = None
    thumbnail_path: Optional[str] = None
    published_date: Optional[str] = None
