"""
Text parsers module.
"""

from parsers.line_parser import (
    parse_product_lines,
    split_segments,
)

__all__ = [
    "parse_product_lines",
    "split_segments",
]
