"""
Pydantic models for validation and serialization.
"""

from models.base import BaseSchema
from models.shopify import (
    ShopifyCredentials,
    Variant,
    CatalogProduct,
    CatalogPage,
)
from models.matching import (
    ProductRequest,
    MatchedVariant,
    MatchResult,
    LineItem,
    LineItemSet,
)
from models.draft_order import (
    DraftOrderInput,
    DraftOrder,
    InvoiceReceipt,
    DraftOrderRequest,
    DraftOrderResponse,
)
from models.product_search import (
    ProductSearchRequest,
    ProductSearchResponse,
    QuantityOverrideRequest,
    MatchListResponse,
)

__all__ = [
    # Base
    "BaseSchema",

    # Shopify
    "ShopifyCredentials",
    "Variant",
    "CatalogProduct",
    "CatalogPage",

    # Matching
    "ProductRequest",
    "MatchedVariant",
    "MatchResult",
    "LineItem",
    "LineItemSet",

    # Draft orders
    "DraftOrderInput",
    "DraftOrder",
    "InvoiceReceipt",
    "DraftOrderRequest",
    "DraftOrderResponse",

    # Product search
    "ProductSearchRequest",
    "ProductSearchResponse",
    "QuantityOverrideRequest",
    "MatchListResponse",
]
