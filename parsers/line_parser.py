"""
Free-text product list parser.

Turns what an operator pastes ("2x Mug, Hoodie x3\nSticker - 10") into
ordered ProductRequest records.

Accepted line shapes, tried in this order:
    "2x Mug"       leading multiplier
    "Mug x2"       trailing multiplier
    "Mug - 3"      dash suffix  (also "Mug: 3")
    "Mug"          anything else, quantity 1
"""

import re
from typing import Optional

import structlog

from models.matching import ProductRequest
from utils.quantity import clamp_quantity

logger = structlog.get_logger(__name__)


# ===================
# PATTERNS
# ===================

SEGMENT_SPLIT = re.compile(r"\r?\n|,")

LEADING_MULTIPLIER = re.compile(r"^(\d+)\s*x\s*(.+)$", re.IGNORECASE)
TRAILING_MULTIPLIER = re.compile(r"^(.+?)\s*x\s*(\d+)$", re.IGNORECASE)
SEPARATOR_SUFFIX = re.compile(r"^(.+?)\s*[-:]\s*(\d+)$")


# ===================
# HELPERS
# ===================

def split_segments(text: Optional[str]) -> list[str]:
    """Split on newlines and commas, trim, drop empties."""
    if not text:
        return []
    segments = (s.strip() for s in SEGMENT_SPLIT.split(text))
    return [s for s in segments if s]


def _parse_segment(segment: str) -> ProductRequest:
    """Classify one trimmed, non-empty segment."""
    match = LEADING_MULTIPLIER.match(segment)
    if match:
        return _request(match.group(2), match.group(1), segment)

    match = TRAILING_MULTIPLIER.match(segment)
    if match:
        return _request(match.group(1), match.group(2), segment)

    match = SEPARATOR_SUFFIX.match(segment)
    if match:
        return _request(match.group(1), match.group(2), segment)

    return ProductRequest(name=segment, quantity=1)


def _request(name: str, digits: str, segment: str) -> ProductRequest:
    name = name.strip()
    if not name:
        # Degrade rather than fail
        return ProductRequest(name=segment, quantity=1)

    try:
        raw = int(digits, 10)
    except ValueError:
        # Past the interpreter's int-conversion digit limit
        logger.debug("parsed_quantity_unreadable", digits=len(digits))
        return ProductRequest(name=segment, quantity=1)

    # Digits only, so the one case clamping changes is "0"
    quantity = clamp_quantity(raw)
    if quantity != raw:
        logger.debug("parsed_quantity_coerced", segment=segment, raw=digits, quantity=quantity)

    return ProductRequest(name=name, quantity=quantity)


# ===================
# PUBLIC API
# ===================

def parse_product_lines(text: Optional[str]) -> list[ProductRequest]:
    """
    Parse a free-text product list.

    Never raises: lines that fit no quantity pattern become
    name-only requests with quantity 1.

    Args:
        text: Raw text, newline- and/or comma-separated

    Returns:
        One ProductRequest per non-empty segment, in input order
    """
    requests = [_parse_segment(segment) for segment in split_segments(text)]

    logger.info("product_lines_parsed", count=len(requests))

    return requests
