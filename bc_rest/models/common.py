"""Shared model base classes and API envelope shapes."""

from typing import Any, Dict, Generic, List, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

T = TypeVar("T")


class BigCommerceModel(BaseModel):
    """Base for read-side models decoded from API responses.

    A JSON ``null`` on a field that has a default decodes to that default,
    so ``"author": null`` reads as ``""``. Required fields still reject it.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is not None or info.field_name is None:
            return value
        field = cls.model_fields.get(info.field_name)
        if field is None or field.is_required():
            return value
        return field.get_default(call_default_factory=True)


class PayloadModel(BaseModel):
    """Base for write-side payloads.

    Optional fields default to ``None`` and are dropped on serialization, so
    an unset field never reaches the wire while an explicit zero still does.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        """Serialize to the JSON-compatible dict sent to the API."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PaginationLinks(BigCommerceModel):
    previous: Optional[str] = None
    current: Optional[str] = None
    next: Optional[str] = None


class Pagination(BigCommerceModel):
    """v3 ``meta.pagination`` block."""

    total: int = 0
    count: int = 0
    per_page: int = 0
    current_page: int = 0
    total_pages: int = 0
    links: PaginationLinks = Field(default_factory=PaginationLinks)


class Meta(BigCommerceModel):
    pagination: Pagination = Field(default_factory=Pagination)


class ListEnvelope(BigCommerceModel, Generic[T]):
    """v3 list response: ``{status, title, data: [...], meta: {pagination}}``."""

    status: int = 0
    title: str = ""
    data: List[T] = Field(default_factory=list)
    meta: Meta = Field(default_factory=Meta)


class ItemEnvelope(BigCommerceModel, Generic[T]):
    """v3 single-object response: ``{data: {...}}``."""

    data: T


class ErrorEnvelope(BigCommerceModel):
    """Generic API failure: ``{status, title}``."""

    status: int = 0
    title: str = ""
    type: Optional[str] = None


class ValidationErrorResult(BigCommerceModel):
    """422 body. ``errors`` maps field names to messages (or is a plain list)."""

    errors: Union[Dict[str, str], List[str]] = Field(default_factory=dict)
