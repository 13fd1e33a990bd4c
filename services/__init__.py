"""
Business logic services.

Each service handles one step of the draft order workflow.
"""

from services.matching_service import (
    MatchingService,
    get_matching_service,
    match_requests,
)
from services.reconciliation_service import (
    apply_quantity_override,
    to_line_items,
)
from services.draft_order_service import DraftOrderService, get_draft_order_service

__all__ = [
    "MatchingService",
    "get_matching_service",
    "match_requests",
    "apply_quantity_override",
    "to_line_items",
    "DraftOrderService",
    "get_draft_order_service",
]
