"""
Reconciliation pipeline schemas.

ProductRequest -> MatchResult (1:1) -> LineItem (0 or 1 per match).
"""

from decimal import Decimal
from typing import Optional

from pydantic import Field, field_serializer

from models.base import BaseSchema


class ProductRequest(BaseSchema):
    """One parsed line of the operator's product list."""

    name: str = Field(..., min_length=1, description="Requested product name")
    quantity: int = Field(default=1, ge=1, description="Requested quantity")


class MatchedVariant(BaseSchema):
    """
    Catalog variant selected for a request.

    quantity starts as the requested quantity and is overridden
    independently afterwards.
    """

    product_title: str
    variant_id: int
    price: Decimal
    quantity: int = Field(..., ge=1)


class MatchResult(BaseSchema):
    """A request paired with its catalog match, if any."""

    requested: ProductRequest
    matched: Optional[MatchedVariant] = None


class LineItem(BaseSchema):
    """Draft order line item. price=None lets Shopify use the catalog price."""

    variant_id: int
    quantity: int = Field(..., ge=1)
    price: Optional[Decimal] = None

    @field_serializer("price")
    def serialize_price(self, price: Optional[Decimal]) -> Optional[str]:
        return None if price is None else str(price)


class LineItemSet(BaseSchema):
    """Line items ready for order creation plus what was left out."""

    line_items: list[LineItem] = Field(default_factory=list)
    unmatched_count: int = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        return not self.line_items
