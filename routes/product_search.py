"""
Product search API routes.

POST /api/product-search     parse + match against the live catalog
POST /api/matches/quantity   apply an operator quantity edit
"""

from fastapi import APIRouter

from models.product_search import (
    ProductSearchRequest,
    ProductSearchResponse,
    QuantityOverrideRequest,
    MatchListResponse,
)
from models.shopify import ShopifyCredentials
from services.draft_order_service import get_draft_order_service
from services.reconciliation_service import apply_quantity_override
from routes.errors import handle_error

router = APIRouter(prefix="/api", tags=["Product Search"])


@router.post("/product-search", response_model=ProductSearchResponse)
def search_products(data: ProductSearchRequest):
    """
    Match a product list against the store catalog.

    Accepts raw `text` or pre-parsed `queries`.

    Raises:
        422: Neither or both of text/queries given
        502: Shopify catalog fetch failed
    """
    try:
        credentials = ShopifyCredentials(
            store_domain=data.store_domain,
            admin_token=data.admin_token
        )
        service = get_draft_order_service()
        return service.search(credentials, text=data.text, queries=data.queries)

    except Exception as e:
        return handle_error(e)


@router.post("/matches/quantity", response_model=MatchListResponse)
def override_quantity(data: QuantityOverrideRequest):
    """
    Set one entry's quantity and return the updated match list.

    Quantities are clamped to positive integers.

    Raises:
        422: Index out of range
    """
    try:
        matches = apply_quantity_override(data.matches, data.index, data.quantity)
        return MatchListResponse(matches=matches)

    except Exception as e:
        return handle_error(e)
