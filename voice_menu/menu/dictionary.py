"""
Phonetic Dictionary Helpers.

Pure functions over dictionary entries (catalog entries or enriched items):

- build_asr_hints / build_asr_keywords: flatten entries into the keyword list
  a voice platform uses to bias its speech recognition.
- find_catalog_entry / enrich_menu_items_with_variants: join a restaurant's
  live menu with the catalog so its own items inherit pronunciation variants.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Sequence, Set, Union

from ..config import ASR_HINT_LIMIT
from ..schemas.menu import EnrichedMenuItem, LiveMenuItem, MenuItemVariant

logger = logging.getLogger(__name__)


def _iter_hint_values(items: Iterable[MenuItemVariant]) -> Iterable[str]:
    for item in items:
        yield item.canonical_name
        yield from item.phonetic_variants


def build_asr_hints(items: Iterable[MenuItemVariant]) -> Set[str]:
    """
    Collect every canonical name and phonetic variant into one hint set.

    Values are deduplicated as-is; case folding happens only when the
    normalizer compares strings.
    """
    return set(_iter_hint_values(items))


def build_asr_keywords(
    items: Iterable[MenuItemVariant],
    limit: Optional[int] = ASR_HINT_LIMIT,
) -> List[str]:
    """
    Build the keyword boost list for a voice platform.

    Args:
        items: Dictionary entries, e.g. a restaurant's enriched menu.
        limit: Maximum number of keywords the platform accepts. None keeps all.

    Returns:
        Distinct hint values in first-seen order (each item's canonical name,
        then its variants), truncated to limit.
    """
    keywords = list(dict.fromkeys(_iter_hint_values(items)))
    if limit is not None and len(keywords) > limit:
        logger.debug("Truncating %d ASR keywords to %d", len(keywords), limit)
        keywords = keywords[:limit]
    return keywords


def find_catalog_entry(
    name: str,
    catalog: Sequence[MenuItemVariant],
) -> Optional[MenuItemVariant]:
    """
    Find the catalog entry a menu item name refers to.

    Compares case-insensitively against each entry's canonical name and
    variants. Catalog order breaks ties: the first entry listing the name wins.
    """
    key = name.lower()
    for entry in catalog:
        if entry.canonical_name.lower() == key:
            return entry
        if any(variant.lower() == key for variant in entry.phonetic_variants):
            return entry
    return None


def enrich_menu_items_with_variants(
    live_items: Iterable[Union[LiveMenuItem, Mapping[str, Any]]],
    catalog: Sequence[MenuItemVariant],
) -> List[EnrichedMenuItem]:
    """
    Merge a restaurant's live menu rows with the phonetic catalog.

    The restaurant's id and name are kept (they drive display and pricing);
    the catalog only contributes category and phonetic variants. Items with
    no catalog entry get their lowercased name as the single variant.

    Args:
        live_items: Menu rows with id, name and optional category_id.
        catalog: Catalog entries, in priority order.

    Returns:
        One enriched item per live item, in input order.
    """
    enriched = []
    for raw in live_items:
        live = raw if isinstance(raw, LiveMenuItem) else LiveMenuItem.model_validate(raw)
        entry = find_catalog_entry(live.name, catalog)

        if entry is not None:
            enriched.append(EnrichedMenuItem(
                id=live.id,
                canonical_name=live.name,
                category=entry.category,
                phonetic_variants=entry.phonetic_variants,
                catalog_id=entry.id,
            ))
        else:
            logger.debug("No catalog entry for menu item %r, using its name only", live.name)
            enriched.append(EnrichedMenuItem(
                id=live.id,
                canonical_name=live.name,
                phonetic_variants=(live.name.lower(),),
            ))

    return enriched
