"""
Custom exceptions module.

Each error exposes `code` (machine-checkable kind) and `message`.
"""

from exceptions.errors import (
    # Base exceptions
    AppError,
    ValidationError,
    ExternalServiceError,

    # Reconciliation
    EmptyLineItemsError,
    QuantityOverrideIndexError,

    # Shopify
    ShopifyError,
    CatalogFetchError,
    DraftOrderCreateError,
    InvoiceSendError,
    ShopifyPayloadError,
)

__all__ = [
    # Base
    "AppError",
    "ValidationError",
    "ExternalServiceError",

    # Reconciliation
    "EmptyLineItemsError",
    "QuantityOverrideIndexError",

    # Shopify
    "ShopifyError",
    "CatalogFetchError",
    "DraftOrderCreateError",
    "InvoiceSendError",
    "ShopifyPayloadError",
]
