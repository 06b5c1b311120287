"""
Menu Package.

Phonetic dictionary of menu items: the curated catalog and the helpers that
merge it with a restaurant's live menu and flatten it into ASR hints.

Exports:
- Catalog: load_catalog, get_default_catalog
- Dictionary: build_asr_hints, build_asr_keywords, find_catalog_entry,
  enrich_menu_items_with_variants
"""

from .catalog import load_catalog, get_default_catalog
from .dictionary import (
    build_asr_hints,
    build_asr_keywords,
    find_catalog_entry,
    enrich_menu_items_with_variants,
)

__all__ = [
    "load_catalog",
    "get_default_catalog",
    "build_asr_hints",
    "build_asr_keywords",
    "find_catalog_entry",
    "enrich_menu_items_with_variants",
]
