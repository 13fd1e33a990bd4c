"""
Draft order API routes.

POST /api/draft-order   create a draft order from matches and send its invoice
"""

from fastapi import APIRouter

from models.draft_order import DraftOrderRequest, DraftOrderResponse
from models.shopify import ShopifyCredentials
from services.draft_order_service import get_draft_order_service
from routes.errors import handle_error

router = APIRouter(prefix="/api", tags=["Draft Orders"])


@router.post("/draft-order", response_model=DraftOrderResponse)
def create_draft_order(data: DraftOrderRequest):
    """
    Create a draft order and email the invoice.

    Unmatched entries are left out and counted in `unmatched_count`.

    Raises:
        422: No matched products (EMPTY_LINE_ITEMS)
        502: Shopify create failed (SHOPIFY_CREATE_ERROR)
        502: Invoice failed after the draft was created
             (SHOPIFY_SEND_ERROR, details.draft_order_id set)
    """
    try:
        credentials = ShopifyCredentials(
            store_domain=data.store_domain,
            admin_token=data.admin_token
        )
        service = get_draft_order_service()
        return service.create_and_send(
            credentials,
            customer_name=data.customer_name,
            customer_email=data.customer_email,
            matches=data.matches,
            email_subject=data.email_subject,
            email_body=data.email_body,
        )

    except Exception as e:
        return handle_error(e)
