"""
Product search schemas (parse + match exchange).
"""

from typing import Optional

from pydantic import Field, model_validator

from models.base import BaseSchema
from models.matching import MatchResult, ProductRequest


class ProductSearchRequest(BaseSchema):
    """
    POST /api/product-search body.

    Either raw `text` (parsed server-side) or pre-parsed `queries`.
    """

    store_domain: str = Field(..., min_length=1)
    admin_token: str = Field(..., min_length=1)
    text: Optional[str] = Field(None, description="Free-text product list")
    queries: Optional[list[ProductRequest]] = Field(None, description="Already-parsed requests")

    @model_validator(mode="after")
    def one_source(self) -> "ProductSearchRequest":
        if self.text is None and self.queries is None:
            raise ValueError("Provide either text or queries")
        if self.text is not None and self.queries is not None:
            raise ValueError("Provide text or queries, not both")
        return self


class ProductSearchResponse(BaseSchema):
    """Match results in request order."""

    matches: list[MatchResult]
    unmatched_count: int = 0


class QuantityOverrideRequest(BaseSchema):
    """POST /api/matches/quantity body."""

    matches: list[MatchResult]
    index: int
    quantity: float = Field(..., allow_inf_nan=True)


class MatchListResponse(BaseSchema):
    matches: list[MatchResult]
