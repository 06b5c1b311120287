"""
Order Item Name Normalization.

When a voice agent submits an order, each line carries the item name as the
agent heard it ("pow bhajee"). Before the order is priced and stored the
names are rewritten to the restaurant's own menu names so they line up with
its menu rows.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from ..config import ORDER_ITEM_MATCH_THRESHOLD
from ..schemas.menu import MenuItemVariant
from .normalize_transcript import normalize_transcript_to_menu_items

logger = logging.getLogger(__name__)


def normalize_order_items(
    items: Iterable[Mapping[str, Any]],
    menu_items: Sequence[MenuItemVariant],
    threshold: float = ORDER_ITEM_MATCH_THRESHOLD,
) -> List[Dict[str, Any]]:
    """
    Rewrite spoken order line names to canonical menu item names.

    Args:
        items: Order lines, each a mapping with at least a "name" key.
            Other keys (quantity, price, notes...) are carried over as-is.
        menu_items: The restaurant's enriched menu items.
        threshold: Minimum similarity for a name to be rewritten.

    Returns:
        New line dicts in input order. A matched line gets "name" set to the
        first match's canonical name and "original_name" set to what was
        spoken; other lines are returned unchanged.
    """
    normalized = []

    for item in items:
        line = dict(item)
        original_name = line.get("name")

        if isinstance(original_name, str) and original_name:
            result = normalize_transcript_to_menu_items(original_name, menu_items, threshold)
            if result.matches:
                best_match = result.matches[0]
                logger.info(
                    "Normalized item: %r -> %r (similarity: %.2f)",
                    original_name, best_match.canonical_name, best_match.similarity,
                )
                line["name"] = best_match.canonical_name
                line["original_name"] = original_name

        normalized.append(line)

    return normalized
