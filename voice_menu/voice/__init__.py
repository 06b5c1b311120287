"""
Voice Package.

Transcript-side processing for the voice ordering agent.

Exports:
- Normalizer: normalize_transcript_to_menu_items, generate_match_hints,
  calculate_similarity
- Order lines: normalize_order_items
- Pronunciation lexicons: parse_pls_content
"""

from .normalize_transcript import (
    calculate_similarity,
    normalize_transcript_to_menu_items,
    generate_match_hints,
)
from .order_items import normalize_order_items
from .pronunciation import parse_pls_content

__all__ = [
    "calculate_similarity",
    "normalize_transcript_to_menu_items",
    "generate_match_hints",
    "normalize_order_items",
    "parse_pls_content",
]
