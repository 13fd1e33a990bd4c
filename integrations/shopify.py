"""
Shopify Admin REST integration.

Three calls, each taking the store credentials explicitly:
    fetch_catalog       GET  /products.json
    create_draft_order  POST /draft_orders.json
    send_invoice        POST /draft_orders/{id}/send_invoice.json

Responses are validated into typed models before they leave this module.
No retries: a failed call raises and the caller decides what to do.
"""

from typing import Any, Optional

import pydantic
import requests
import structlog

from config import settings
from exceptions import (
    CatalogFetchError,
    DraftOrderCreateError,
    InvoiceSendError,
    ShopifyPayloadError,
)
from models.draft_order import DraftOrder, DraftOrderInput, InvoiceReceipt
from models.shopify import CatalogPage, CatalogProduct, ShopifyCredentials

logger = structlog.get_logger(__name__)


# ===================
# REQUEST HELPERS
# ===================

def base_url(credentials: ShopifyCredentials) -> str:
    """Admin API root for the store."""
    return f"https://{credentials.store_domain}/admin/api/{settings.shopify_api_version}"


def _headers(credentials: ShopifyCredentials) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "X-Shopify-Access-Token": credentials.admin_token,
    }


def _failure_reason(response: requests.Response) -> str:
    """
    Human-readable reason from a non-2xx response.

    Shopify puts details under "errors" (string, list or field dict).
    """
    reason = f"{response.status_code} {response.reason or ''}".strip()
    try:
        body = response.json()
    except ValueError:
        return reason

    errors = body.get("errors") if isinstance(body, dict) else None
    if not errors:
        return reason
    if isinstance(errors, dict):
        errors = "; ".join(
            f"{field} {', '.join(map(str, msgs)) if isinstance(msgs, list) else msgs}"
            for field, msgs in errors.items()
        )
    elif isinstance(errors, list):
        errors = "; ".join(map(str, errors))
    return f"{reason}: {errors}"


def _json_body(response: requests.Response, operation: str) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        raise ShopifyPayloadError(operation, "response is not JSON")
    if not isinstance(body, dict):
        raise ShopifyPayloadError(operation, "response is not a JSON object")
    return body


# ===================
# OPERATIONS
# ===================

def fetch_catalog(
    credentials: ShopifyCredentials,
    page_limit: Optional[int] = None
) -> list[CatalogProduct]:
    """
    Fetch the first page of the store's products.

    Always hits the API; catalog data is never cached.

    Args:
        credentials: Store domain and admin token
        page_limit: Products per page (default from settings, max 250)

    Returns:
        List of CatalogProduct in Shopify order

    Raises:
        CatalogFetchError: Transport failure or non-2xx response
        ShopifyPayloadError: Body could not be interpreted
    """
    limit = min(page_limit or settings.shopify_page_limit, 250)
    url = f"{base_url(credentials)}/products.json"

    logger.info("fetching_catalog", store=credentials.store_domain, limit=limit)

    try:
        response = requests.get(
            url,
            headers=_headers(credentials),
            params={"limit": limit},
            timeout=settings.shopify_timeout_seconds,
        )
    except requests.exceptions.RequestException as e:
        logger.error("catalog_fetch_request_failed", store=credentials.store_domain, error=str(e))
        raise CatalogFetchError(str(e))

    if not response.ok:
        reason = _failure_reason(response)
        logger.error(
            "catalog_fetch_failed",
            store=credentials.store_domain,
            status=response.status_code,
            reason=reason
        )
        raise CatalogFetchError(reason, status=response.status_code)

    body = _json_body(response, "fetch_catalog")
    try:
        products = CatalogPage.model_validate(body).products
    except pydantic.ValidationError as e:
        raise ShopifyPayloadError("fetch_catalog", f"{e.error_count()} invalid fields")

    logger.info("catalog_fetched", store=credentials.store_domain, products=len(products))

    return products


def create_draft_order(
    credentials: ShopifyCredentials,
    order: DraftOrderInput
) -> DraftOrder:
    """
    Create a draft order.

    Line items without a price are sent without one, so Shopify
    applies the variant's catalog price.

    Args:
        credentials: Store domain and admin token
        order: Draft order fields

    Returns:
        Created DraftOrder (id always present)

    Raises:
        DraftOrderCreateError: Transport failure or non-2xx response
        ShopifyPayloadError: Body lacks a draft_order with an id
    """
    url = f"{base_url(credentials)}/draft_orders.json"
    payload = {"draft_order": order.model_dump(mode="json", exclude_none=True)}

    logger.info(
        "creating_draft_order",
        store=credentials.store_domain,
        line_items=len(order.line_items)
    )

    try:
        response = requests.post(
            url,
            headers=_headers(credentials),
            json=payload,
            timeout=settings.shopify_timeout_seconds,
        )
    except requests.exceptions.RequestException as e:
        logger.error("draft_order_request_failed", store=credentials.store_domain, error=str(e))
        raise DraftOrderCreateError(str(e))

    if not response.ok:
        reason = _failure_reason(response)
        logger.error(
            "draft_order_create_failed",
            store=credentials.store_domain,
            status=response.status_code,
            reason=reason
        )
        raise DraftOrderCreateError(reason, status=response.status_code)

    body = _json_body(response, "create_draft_order")
    try:
        draft_order = DraftOrder.model_validate(body.get("draft_order"))
    except pydantic.ValidationError as e:
        raise ShopifyPayloadError("create_draft_order", f"{e.error_count()} invalid fields")

    logger.info(
        "draft_order_created",
        store=credentials.store_domain,
        draft_order_id=draft_order.id,
        name=draft_order.name
    )

    return draft_order


def send_invoice(
    credentials: ShopifyCredentials,
    draft_order_id: int,
    subject: Optional[str] = None,
    custom_message: Optional[str] = None
) -> InvoiceReceipt:
    """
    Email the draft order's invoice to the customer on the draft.

    Args:
        credentials: Store domain and admin token
        draft_order_id: Id returned by create_draft_order
        subject: Email subject
        custom_message: Email body

    Returns:
        InvoiceReceipt acknowledgement

    Raises:
        InvoiceSendError: Transport failure or non-2xx response
    """
    url = f"{base_url(credentials)}/draft_orders/{draft_order_id}/send_invoice.json"
    payload = {
        "draft_order_invoice": {
            "to": None,  # Shopify falls back to the draft's email
            "subject": subject,
            "custom_message": custom_message,
        }
    }

    logger.info("sending_invoice", store=credentials.store_domain, draft_order_id=draft_order_id)

    try:
        response = requests.post(
            url,
            headers=_headers(credentials),
            json=payload,
            timeout=settings.shopify_timeout_seconds,
        )
    except requests.exceptions.RequestException as e:
        logger.error("invoice_request_failed", draft_order_id=draft_order_id, error=str(e))
        raise InvoiceSendError(draft_order_id, str(e))

    if not response.ok:
        reason = _failure_reason(response)
        logger.error(
            "invoice_send_failed",
            draft_order_id=draft_order_id,
            status=response.status_code,
            reason=reason
        )
        raise InvoiceSendError(draft_order_id, reason, status=response.status_code)

    # The order exists and the invoice went out; a body we cannot read
    # does not change that.
    try:
        receipt = InvoiceReceipt.model_validate(
            _json_body(response, "send_invoice").get("draft_order_invoice") or {}
        )
    except (ShopifyPayloadError, pydantic.ValidationError):
        logger.warning("invoice_ack_unreadable", draft_order_id=draft_order_id)
        receipt = InvoiceReceipt(subject=subject, custom_message=custom_message)

    logger.info("invoice_sent", draft_order_id=draft_order_id, to=receipt.to)

    return receipt
