"""
Unit tests for DraftOrderService.

Shopify calls are patched at the integration module.

Run: pytest tests/unit/test_draft_order_service.py -v
"""

import pytest
from unittest.mock import patch

from services.draft_order_service import DraftOrderService
from services.matching_service import MatchingService
from models.draft_order import DraftOrder, InvoiceReceipt
from models.matching import ProductRequest
from exceptions import (
    CatalogFetchError,
    DraftOrderCreateError,
    EmptyLineItemsError,
    InvoiceSendError,
)

from tests.factories import MatchFactory


@pytest.fixture
def service() -> DraftOrderService:
    return DraftOrderService(matcher=MatchingService(score_cutoff=60))


# ===================
# SEARCH
# ===================

class TestSearch:
    """Tests for DraftOrderService.search()"""

    def test_parses_text_and_matches(self, service, credentials, sample_catalog):
        with patch("integrations.shopify.fetch_catalog", return_value=sample_catalog) as fetch:
            response = service.search(credentials, text="Hoodie x2\nMug")

        fetch.assert_called_once_with(credentials)
        assert [m.requested.name for m in response.matches] == ["Hoodie", "Mug"]
        assert response.matches[0].matched.variant_id == 11
        assert response.matches[0].matched.quantity == 2
        assert response.matches[1].matched is None
        assert response.unmatched_count == 1

    def test_accepts_parsed_queries(self, service, credentials, sample_catalog):
        queries = [ProductRequest(name="baseball cap", quantity=3)]

        with patch("integrations.shopify.fetch_catalog", return_value=sample_catalog):
            response = service.search(credentials, queries=queries)

        assert response.matches[0].matched.variant_id == 21
        assert response.matches[0].matched.quantity == 3

    def test_empty_text_skips_fetch(self, service, credentials):
        with patch("integrations.shopify.fetch_catalog") as fetch:
            response = service.search(credentials, text=" ,\n ")

        fetch.assert_not_called()
        assert response.matches == []

    def test_fetches_catalog_every_call(self, service, credentials, sample_catalog):
        with patch("integrations.shopify.fetch_catalog", return_value=sample_catalog) as fetch:
            service.search(credentials, text="Hoodie")
            service.search(credentials, text="Hoodie")

        assert fetch.call_count == 2

    def test_fetch_error_propagates(self, service, credentials):
        with patch("integrations.shopify.fetch_catalog", side_effect=CatalogFetchError("401 Unauthorized", 401)):
            with pytest.raises(CatalogFetchError):
                service.search(credentials, text="Hoodie")


# ===================
# CREATE AND SEND
# ===================

class TestCreateAndSend:
    """Tests for DraftOrderService.create_and_send()"""

    def test_creates_then_invoices(self, service, credentials):
        matches = [
            MatchFactory.matched(name="Hoodie", variant_id=11, quantity=2),
            MatchFactory.unmatched(name="Mug"),
        ]

        with patch("integrations.shopify.create_draft_order", return_value=DraftOrder(id=987)) as create, \
             patch("integrations.shopify.send_invoice", return_value=InvoiceReceipt()) as send:
            response = service.create_and_send(credentials, "Jane", "jane@example.com", matches)

        order = create.call_args.args[1]
        assert order.email == "jane@example.com"
        assert order.note == "OrderSnap for Jane"
        assert order.use_customer_default_address is True
        assert [(i.variant_id, i.quantity, i.price) for i in order.line_items] == [(11, 2, None)]

        send.assert_called_once_with(
            credentials,
            987,
            subject="Your invoice",
            custom_message="Hi Jane, here is your invoice.",
        )
        assert response.draft_order_id == 987
        assert response.invoice_sent is True
        assert response.unmatched_count == 1

    def test_custom_subject_and_body(self, service, credentials):
        with patch("integrations.shopify.create_draft_order", return_value=DraftOrder(id=5)), \
             patch("integrations.shopify.send_invoice", return_value=InvoiceReceipt()) as send:
            service.create_and_send(
                credentials, "Jane", "jane@example.com",
                [MatchFactory.matched()],
                email_subject="Order", email_body="Thanks!"
            )

        assert send.call_args.kwargs == {"subject": "Order", "custom_message": "Thanks!"}

    def test_empty_subject_and_body_are_sent_as_given(self, service, credentials):
        with patch("integrations.shopify.create_draft_order", return_value=DraftOrder(id=5)), \
             patch("integrations.shopify.send_invoice", return_value=InvoiceReceipt()) as send:
            service.create_and_send(
                credentials, "Jane", "jane@example.com",
                [MatchFactory.matched()],
                email_subject="", email_body=""
            )

        assert send.call_args.kwargs == {"subject": "", "custom_message": ""}

    def test_no_matches_blocks_creation(self, service, credentials):
        matches = [MatchFactory.unmatched(name="Mug"), MatchFactory.unmatched(name="Pen")]

        with patch("integrations.shopify.create_draft_order") as create:
            with pytest.raises(EmptyLineItemsError) as exc_info:
                service.create_and_send(credentials, "Jane", "jane@example.com", matches)

        create.assert_not_called()
        assert exc_info.value.code == "EMPTY_LINE_ITEMS"
        assert exc_info.value.details["unmatched_count"] == 2

    def test_create_failure_skips_invoice(self, service, credentials):
        with patch("integrations.shopify.create_draft_order", side_effect=DraftOrderCreateError("422")), \
             patch("integrations.shopify.send_invoice") as send:
            with pytest.raises(DraftOrderCreateError):
                service.create_and_send(credentials, "Jane", "jane@example.com", [MatchFactory.matched()])

        send.assert_not_called()

    def test_invoice_failure_reports_created_draft(self, service, credentials):
        with patch("integrations.shopify.create_draft_order", return_value=DraftOrder(id=987)), \
             patch("integrations.shopify.send_invoice", side_effect=InvoiceSendError(987, "422")):
            with pytest.raises(InvoiceSendError) as exc_info:
                service.create_and_send(credentials, "Jane", "jane@example.com", [MatchFactory.matched()])

        assert exc_info.value.details["draft_order_id"] == 987
