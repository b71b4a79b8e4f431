"""Catalog product models (v3 API)."""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import Field

from bc_rest.models.common import BigCommerceModel, PayloadModel
from bc_rest.models.videos import Video

# Sparse fieldset the catalog sync historically requested
DEFAULT_PRODUCT_FIELDS = ("name", "sku", "custom_url", "is_visible", "price")


class ProductInclude(str, Enum):
    """Sub-resources that can be expanded with ``?include=``."""

    VARIANTS = "variants"
    IMAGES = "images"
    CUSTOM_FIELDS = "custom_fields"
    BULK_PRICING_RULES = "bulk_pricing_rules"
    PRIMARY_IMAGE = "primary_image"
    MODIFIERS = "modifiers"
    OPTIONS = "options"
    VIDEOS = "videos"


ALL_PRODUCT_INCLUDES = frozenset(ProductInclude)


class CustomURL(BigCommerceModel):
    url: str = ""
    is_customized: bool = False


class OptionValue(BigCommerceModel):
    id: Optional[int] = None
    label: str = ""
    option_id: Optional[int] = None
    option_display_name: str = ""


class Variant(BigCommerceModel):
    """A single SKU of a product, with its own pricing and inventory."""

    id: Optional[int] = None
    product_id: Optional[int] = None
    sku: str = ""
    sku_id: Optional[int] = None
    price: Optional[float] = None
    calculated_price: float = 0.0
    sale_price: Optional[float] = None
    retail_price: Optional[float] = None
    map_price: Optional[float] = None
    weight: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    depth: Optional[float] = None
    is_free_shipping: bool = False
    fixed_cost_shipping_price: Optional[float] = None
    calculated_weight: float = 0.0
    purchasing_disabled: bool = False
    purchasing_disabled_message: str = ""
    image_url: str = ""
    cost_price: Optional[float] = None
    upc: str = ""
    mpn: str = ""
    gtin: str = ""
    inventory_level: int = 0
    inventory_warning_level: int = 0
    bin_picking_number: str = ""
    option_values: List[OptionValue] = Field(default_factory=list)


class Image(BigCommerceModel):
    id: Optional[int] = None
    product_id: Optional[int] = None
    is_thumbnail: bool = False
    sort_order: int = 0
    description: str = ""
    image_file: str = ""
    image_url: Optional[str] = None
    url_zoom: str = ""
    url_standard: str = ""
    url_thumbnail: str = ""
    url_tiny: str = ""
    date_modified: Optional[datetime] = None


class CustomField(BigCommerceModel):
    """Name/value pair scoped to one product."""

    id: Optional[int] = None
    name: str
    value: str


class BulkPricingRule(BigCommerceModel):
    """Maps a quantity range to a price adjustment (``price``, ``percent`` or ``fixed``)."""

    id: Optional[int] = None
    quantity_min: int
    quantity_max: int
    type: str
    amount: float


class Product(BigCommerceModel):
    """A BigCommerce catalog product.

    ``images``, ``primary_image``, ``videos``, ``custom_fields``,
    ``bulk_pricing_rules``, ``options`` and ``modifiers`` are only populated
    when requested through ``include``.
    """

    id: int = 0
    name: str = ""
    type: str = ""
    sku: str = ""
    description: str = ""
    weight: float = 0.0
    width: float = 0.0
    depth: float = 0.0
    height: float = 0.0
    price: float = 0.0
    cost_price: float = 0.0
    retail_price: float = 0.0
    sale_price: float = 0.0
    map_price: float = 0.0
    tax_class_id: int = 0
    product_tax_code: str = ""
    calculated_price: float = 0.0
    categories: List[int] = Field(default_factory=list)
    brand_id: int = 0
    option_set_id: Optional[int] = None
    option_set_display: str = ""
    inventory_level: int = 0
    inventory_warning_level: int = 0
    inventory_tracking: str = ""
    reviews_rating_sum: int = 0
    reviews_count: int = 0
    total_sold: int = 0
    fixed_cost_shipping_price: float = 0.0
    is_free_shipping: bool = False
    is_visible: bool = False
    is_featured: bool = False
    related_products: List[int] = Field(default_factory=list)
    warranty: str = ""
    bin_picking_number: str = ""
    layout_file: str = ""
    upc: str = ""
    mpn: str = ""
    gtin: str = ""
    search_keywords: str = ""
    availability: str = ""
    availability_description: str = ""
    gift_wrapping_options_type: str = ""
    gift_wrapping_options_list: List[int] = Field(default_factory=list)
    sort_order: int = 0
    condition: str = ""
    is_condition_shown: bool = False
    order_quantity_minimum: int = 0
    order_quantity_maximum: int = 0
    page_title: str = ""
    meta_keywords: List[str] = Field(default_factory=list)
    meta_description: str = ""
    date_created: Optional[datetime] = None
    date_modified: Optional[datetime] = None
    view_count: int = 0
    preorder_release_date: Optional[str] = None
    preorder_message: str = ""
    is_preorder_only: bool = False
    is_price_hidden: bool = False
    price_hidden_label: str = ""
    custom_url: CustomURL = Field(default_factory=CustomURL)
    base_variant_id: Optional[int] = None
    open_graph_type: str = ""
    open_graph_title: str = ""
    open_graph_description: str = ""
    open_graph_use_meta_description: bool = False
    open_graph_use_product_name: bool = False
    open_graph_use_image: bool = False
    variants: List[Variant] = Field(default_factory=list)
    images: List[Image] = Field(default_factory=list)
    primary_image: Optional[Image] = None
    videos: List[Video] = Field(default_factory=list)
    custom_fields: List[CustomField] = Field(default_factory=list)
    bulk_pricing_rules: List[BulkPricingRule] = Field(default_factory=list)
    options: List[Dict[str, Any]] = Field(default_factory=list)
    modifiers: List[Dict[str, Any]] = Field(default_factory=list)


class CreateProductPayload(PayloadModel):
    """Fields accepted when creating a product.

    ``name``, ``type``, ``weight`` and ``price`` are required.
    """

    name: str
    type: str
    weight: float
    price: float
    sku: Optional[str] = None
    description: Optional[str] = None
    width: Optional[float] = None
    depth: Optional[float] = None
    height: Optional[float] = None
    cost_price: Optional[float] = None
    retail_price: Optional[float] = None
    sale_price: Optional[float] = None
    inventory_level: Optional[int] = None
    inventory_warning_level: Optional[int] = None
    inventory_tracking: Optional[str] = None
    availability: Optional[str] = None
    availability_description: Optional[str] = None
    gift_wrapping_options_type: Optional[str] = None
    gift_wrapping_options_list: Optional[List[int]] = None
    sort_order: Optional[int] = None
    condition: Optional[str] = None
    is_condition_shown: Optional[bool] = None
    categories: Optional[List[int]] = None
    brand_id: Optional[int] = None
    meta_keywords: Optional[List[str]] = None
    meta_description: Optional[str] = None
    images: Optional[List[Image]] = None
    videos: Optional[List[Video]] = None
    custom_fields: Optional[List[CustomField]] = None
    bulk_pricing_rules: Optional[List[BulkPricingRule]] = None
    option_set_id: Optional[int] = None
    option_set_display: Optional[str] = None
    upc: Optional[str] = None
    search_keywords: Optional[str] = None
    tax_class_id: Optional[int] = None
    view_count: Optional[int] = None
    preorder_release_date: Optional[str] = None
    preorder_message: Optional[str] = None
    order_quantity_minimum: Optional[int] = None
    order_quantity_maximum: Optional[int] = None
    page_title: Optional[str] = None
    is_visible: Optional[bool] = None
    is_featured: Optional[bool] = None
    warranty: Optional[str] = None
    bin_picking_number: Optional[str] = None
    layout_file: Optional[str] = None
    up_selling_related_products: Optional[List[int]] = None
    event_date_field_name: Optional[str] = None
    event_date_type: Optional[str] = None
    event_date_start: Optional[str] = None
    event_date_end: Optional[str] = None
    myob_asset_account: Optional[str] = None
    myob_expense_account: Optional[str] = None
    myob_income_account: Optional[str] = None
    xero_sales_account: Optional[str] = None
    xero_sales_tax_type: Optional[str] = None
    xero_purchase_account: Optional[str] = None
    xero_purchase_tax_type: Optional[str] = None
