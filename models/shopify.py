"""
Shopify-side schemas.

Shopify responses are narrowed into these models at the integration
boundary; nothing downstream touches raw JSON.
"""

from decimal import Decimal

from pydantic import Field, field_validator

from models.base import BaseSchema


class ShopifyCredentials(BaseSchema):
    """Per-request store credentials. Never persisted, never logged."""

    store_domain: str = Field(
        ...,
        min_length=1,
        description="Store domain",
        examples=["mystore.myshopify.com"]
    )
    admin_token: str = Field(..., min_length=1, description="Admin API access token")

    @field_validator("store_domain")
    @classmethod
    def bare_domain(cls, v: str) -> str:
        """Accept pasted URLs: drop scheme and trailing slashes."""
        v = v.strip()
        for prefix in ("https://", "http://"):
            if v.lower().startswith(prefix):
                v = v[len(prefix):]
        v = v.rstrip("/").lower()
        if not v:
            raise ValueError("store_domain must name a store, e.g. mystore.myshopify.com")
        return v


class Variant(BaseSchema):
    """A purchasable configuration of a catalog product."""

    id: int
    title: str = ""
    price: Decimal = Field(..., description="Variant price (Shopify sends a decimal string)")


class CatalogProduct(BaseSchema):
    """Catalog product with its variants in Shopify order."""

    id: int
    title: str
    variants: list[Variant] = Field(default_factory=list)


class CatalogPage(BaseSchema):
    """Body of GET /products.json."""

    products: list[CatalogProduct]
