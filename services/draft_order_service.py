"""
Draft order workflow.

Two exchanges with the operator UI:
    search:  text/requests -> fetch catalog -> match -> MatchResult[]
    submit:  MatchResult[] -> line items -> create draft -> send invoice

Calls to Shopify run strictly in sequence; the invoice needs the id of
the draft order created before it.
"""

from typing import Optional, Sequence

import structlog

from config import settings
from exceptions import EmptyLineItemsError
from integrations import shopify
from models.draft_order import DraftOrderInput, DraftOrderResponse
from models.matching import MatchResult, ProductRequest
from models.product_search import ProductSearchResponse
from models.shopify import ShopifyCredentials
from parsers.line_parser import parse_product_lines
from services.matching_service import MatchingService, get_matching_service
from services.reconciliation_service import to_line_items

logger = structlog.get_logger(__name__)


class DraftOrderService:
    """
    Orchestrates parsing, matching and Shopify calls.

    Holds no credentials; every method receives them.
    """

    def __init__(self, matcher: Optional[MatchingService] = None):
        self.matcher = matcher or get_matching_service()

    # ===================
    # SEARCH
    # ===================

    def search(
        self,
        credentials: ShopifyCredentials,
        text: Optional[str] = None,
        queries: Optional[Sequence[ProductRequest]] = None
    ) -> ProductSearchResponse:
        """
        Match a product list against the store's current catalog.

        Args:
            credentials: Store credentials
            text: Free-text list (parsed here) ...
            queries: ... or requests already parsed by the caller

        Returns:
            ProductSearchResponse with one match per request

        Raises:
            CatalogFetchError: Catalog could not be fetched
            ShopifyPayloadError: Catalog response was malformed
        """
        product_requests = list(queries) if queries is not None else parse_product_lines(text)

        # Nothing to match: skip the round trip
        if not product_requests:
            logger.info("product_search_empty")
            return ProductSearchResponse(matches=[], unmatched_count=0)

        catalog = shopify.fetch_catalog(credentials)
        matches = self.matcher.match(product_requests, catalog)
        unmatched = sum(1 for m in matches if m.matched is None)

        return ProductSearchResponse(matches=matches, unmatched_count=unmatched)

    # ===================
    # SUBMIT
    # ===================

    def create_and_send(
        self,
        credentials: ShopifyCredentials,
        customer_name: str,
        customer_email: str,
        matches: Sequence[MatchResult],
        email_subject: Optional[str] = None,
        email_body: Optional[str] = None
    ) -> DraftOrderResponse:
        """
        Create a draft order from match results and email its invoice.

        Args:
            credentials: Store credentials
            customer_name: Used in the order note and default message
            customer_email: Invoice recipient (set on the draft)
            matches: Final match results, overrides already applied
            email_subject: Invoice subject (settings default if None)
            email_body: Invoice message (templated default if None)

        Returns:
            DraftOrderResponse with the new draft order id

        Raises:
            EmptyLineItemsError: No matched entries, nothing created
            DraftOrderCreateError: Shopify rejected the draft order
            InvoiceSendError: Draft exists but the invoice failed
                (error details carry draft_order_id)
        """
        line_item_set = to_line_items(matches)

        if line_item_set.is_empty:
            logger.warning(
                "draft_order_blocked_no_line_items",
                unmatched=line_item_set.unmatched_count
            )
            raise EmptyLineItemsError(line_item_set.unmatched_count)

        order = DraftOrderInput(
            email=customer_email,
            note=settings.draft_note_template.format(customer_name=customer_name),
            use_customer_default_address=True,
            line_items=line_item_set.line_items,
        )
        draft_order = shopify.create_draft_order(credentials, order)

        # Only missing values get defaults; an empty string is sent as-is
        if email_subject is None:
            email_subject = settings.default_invoice_subject
        if email_body is None:
            email_body = settings.default_invoice_message.format(customer_name=customer_name)

        shopify.send_invoice(
            credentials,
            draft_order.id,
            subject=email_subject,
            custom_message=email_body,
        )

        logger.info(
            "draft_order_invoiced",
            draft_order_id=draft_order.id,
            line_items=len(line_item_set.line_items),
            unmatched=line_item_set.unmatched_count
        )

        return DraftOrderResponse(
            ok=True,
            draft_order_id=draft_order.id,
            invoice_sent=True,
            unmatched_count=line_item_set.unmatched_count,
        )


# Singleton instance for convenience
_draft_order_service: Optional[DraftOrderService] = None

def get_draft_order_service() -> DraftOrderService:
    """Get or create DraftOrderService instance."""
    global _draft_order_service
    if _draft_order_service is None:
        _draft_order_service = DraftOrderService()
    return _draft_order_service
