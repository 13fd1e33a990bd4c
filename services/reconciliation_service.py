"""
Reconciliation aggregator.

Applies operator quantity edits to match results and turns the final
state into draft order line items.
"""

from typing import Any, Sequence

import structlog

from exceptions import QuantityOverrideIndexError
from models.matching import LineItem, LineItemSet, MatchResult
from utils.quantity import clamp_quantity

logger = structlog.get_logger(__name__)


def apply_quantity_override(
    results: Sequence[MatchResult],
    index: int,
    new_quantity: Any
) -> list[MatchResult]:
    """
    Set the quantity of one entry, returning a new result list.

    Matched entries get the override on `matched.quantity`; unmatched
    ones on `requested.quantity`. Quantities are clamped to a positive
    integer (0, negatives, NaN -> 1; 3.7 -> 3).

    The input sequence and its entries are left untouched.

    Args:
        results: Current match results
        index: Position to update (0-based, no negative indexing)
        new_quantity: Raw quantity from the operator

    Returns:
        New list of MatchResult

    Raises:
        QuantityOverrideIndexError: If index is out of range
    """
    if not 0 <= index < len(results):
        raise QuantityOverrideIndexError(index, len(results))

    quantity = clamp_quantity(new_quantity)
    current = results[index]

    if current.matched is not None:
        updated = current.model_copy(update={
            "matched": current.matched.model_copy(update={"quantity": quantity})
        })
    else:
        updated = current.model_copy(update={
            "requested": current.requested.model_copy(update={"quantity": quantity})
        })

    logger.debug(
        "quantity_overridden",
        index=index,
        raw=new_quantity,
        quantity=quantity,
        matched=current.matched is not None
    )

    # Copy every entry so no caller holds a reference into the new state
    return [
        updated if i == index else r.model_copy(deep=True)
        for i, r in enumerate(results)
    ]


def to_line_items(results: Sequence[MatchResult]) -> LineItemSet:
    """
    Build draft order line items from matched results.

    Price is left out so Shopify charges the current catalog price.
    Unmatched entries are dropped but counted. An empty result is
    returned as-is; refusing to order nothing is the caller's call.

    Args:
        results: Match results in display order

    Returns:
        LineItemSet with line items in original order
    """
    line_items = [
        LineItem(variant_id=r.matched.variant_id, quantity=r.matched.quantity)
        for r in results
        if r.matched is not None
    ]
    unmatched_count = len(results) - len(line_items)

    logger.info(
        "line_items_built",
        line_items=len(line_items),
        unmatched=unmatched_count
    )

    return LineItemSet(line_items=line_items, unmatched_count=unmatched_count)
