"""
Draft order schemas: Shopify payloads and the API bodies around them.
"""

from typing import Optional

from pydantic import Field

from models.base import BaseSchema
from models.matching import LineItem, MatchResult


# ===================
# SHOPIFY PAYLOADS
# ===================

class DraftOrderInput(BaseSchema):
    """Fields sent as `draft_order` to POST /draft_orders.json."""

    email: Optional[str] = None
    note: Optional[str] = None
    use_customer_default_address: bool = True
    line_items: list[LineItem]


class DraftOrder(BaseSchema):
    """Narrowed `draft_order` from Shopify's create response."""

    id: int
    name: Optional[str] = None
    status: Optional[str] = None
    invoice_url: Optional[str] = None


class InvoiceReceipt(BaseSchema):
    """Narrowed `draft_order_invoice` acknowledgement."""

    to: Optional[str] = None
    subject: Optional[str] = None
    custom_message: Optional[str] = None


# ===================
# API BODIES
# ===================

class DraftOrderRequest(BaseSchema):
    """POST /api/draft-order body."""

    store_domain: str = Field(..., min_length=1)
    admin_token: str = Field(..., min_length=1)
    customer_name: str = Field(..., min_length=1)
    customer_email: str = Field(..., min_length=3, pattern=r"^[^@\s]+@[^@\s]+$")
    matches: list[MatchResult]
    email_subject: Optional[str] = None
    email_body: Optional[str] = None


class DraftOrderResponse(BaseSchema):
    """Outcome of creating a draft order and sending its invoice."""

    ok: bool = True
    draft_order_id: int
    invoice_sent: bool
    unmatched_count: int = 0
