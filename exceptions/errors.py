"""
Custom exception classes for the application.

Every error carries a machine-checkable code plus a human-readable message.
"""

from typing import Optional, Any
from datetime import datetime, timezone


class AppError(Exception):
    """
    Base exception for all application errors.
    
    All custom exceptions inherit from this.
    
    Attributes:
        code: Error code (e.g., "EMPTY_LINE_ITEMS")
        message: Human-readable message
        status_code: HTTP status code
        details: Additional context
    """
    
    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(message)
    
    def to_dict(self) -> dict:
        """Convert to API response format."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
                "timestamp": self.timestamp
            }
        }


class ValidationError(AppError):
    """Validation failed (422)."""
    
    def __init__(
        self,
        message: str,
        code: str = "VALIDATION_ERROR",
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code,
            message=message,
            status_code=422,
            details=details
        )


class ExternalServiceError(AppError):
    """External service failure (502)."""
    
    def __init__(
        self,
        service: str,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict] = None
    ):
        super().__init__(
            code=code or f"{service.upper()}_ERROR",
            message=message,
            status_code=502,
            details={"service": service, **(details or {})}
        )


# ===================
# RECONCILIATION ERRORS
# ===================

class EmptyLineItemsError(ValidationError):
    """No matched products, so there is nothing to order."""

    def __init__(self, unmatched_count: int = 0):
        super().__init__(
            code="EMPTY_LINE_ITEMS",
            message="No matched products to add to the draft order",
            details={"unmatched_count": unmatched_count}
        )


class QuantityOverrideIndexError(ValidationError):
    """Quantity override points outside the match list."""

    def __init__(self, index: int, size: int):
        super().__init__(
            code="INVALID_MATCH_INDEX",
            message=f"Match index {index} is out of range",
            details={"index": index, "size": size}
        )


# ===================
# SHOPIFY ERRORS
# ===================

class ShopifyError(ExternalServiceError):
    """Base for Shopify Admin API failures."""

    def __init__(
        self,
        code: str,
        message: str,
        status: Optional[int] = None,
        details: Optional[dict] = None
    ):
        super().__init__(
            service="shopify",
            code=code,
            message=message,
            details={"http_status": status, **(details or {})}
        )
        self.http_status = status


class CatalogFetchError(ShopifyError):
    """Product catalog could not be fetched."""

    def __init__(self, reason: str, status: Optional[int] = None):
        super().__init__(
            code="SHOPIFY_FETCH_ERROR",
            message=f"Product fetch failed: {reason}",
            status=status
        )


class DraftOrderCreateError(ShopifyError):
    """Draft order could not be created."""

    def __init__(self, reason: str, status: Optional[int] = None):
        super().__init__(
            code="SHOPIFY_CREATE_ERROR",
            message=f"Create draft failed: {reason}",
            status=status
        )


class InvoiceSendError(ShopifyError):
    """
    Invoice could not be sent.

    The draft order already exists at this point, so its id travels
    with the error.
    """

    def __init__(self, draft_order_id: int, reason: str, status: Optional[int] = None):
        super().__init__(
            code="SHOPIFY_SEND_ERROR",
            message=f"Draft order #{draft_order_id} was created but sending the invoice failed: {reason}",
            status=status,
            details={"draft_order_id": draft_order_id}
        )
        self.draft_order_id = draft_order_id


class ShopifyPayloadError(ShopifyError):
    """Shopify answered 2xx with a body we cannot interpret."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            code="SHOPIFY_PAYLOAD_ERROR",
            message=f"Unexpected Shopify response for {operation}: {reason}",
            details={"operation": operation}
        )
