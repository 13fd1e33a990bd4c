"""
Text utilities for comparing product names.

Used by the catalog matcher so that "Café Mug" and "cafe mug" compare equal.
"""

import re
import unicodedata
from typing import Optional


_NON_WORD = re.compile(r"[\W_]+", re.UNICODE)


def strip_accents(text: str) -> str:
    """
    Remove accent marks, keeping the base characters.

    - "Café" → "Cafe"
    - "Piñata" → "Pinata"
    """
    # NFD splits base characters from combining marks (category 'Mn')
    normalized = unicodedata.normalize('NFD', text)
    return ''.join(
        c for c in normalized
        if unicodedata.category(c) != 'Mn'
    )


def normalize_product_name(name: Optional[str]) -> str:
    """
    Normalize a product name or catalog title for fuzzy comparison.

    - "  Hoodie (XL) " → "hoodie xl"
    - "Café-Mug" → "cafe mug"
    - None → ""

    Args:
        name: Raw product name

    Returns:
        Lowercase accent-free string with punctuation collapsed to spaces
    """
    if not name:
        return ""

    ascii_name = strip_accents(name).lower()

    # Punctuation and underscores become single spaces
    collapsed = _NON_WORD.sub(" ", ascii_name)

    return " ".join(collapsed.split())
