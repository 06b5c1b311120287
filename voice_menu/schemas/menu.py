"""
Menu Item Schemas for Voice Menu
================================

This module defines the Pydantic models for the phonetic dictionary.

Menu Item Concepts:
-------------------
1. **Catalog entries** (MenuItemVariant): A curated canonical dish name with
   the spellings and mispronunciations an ASR engine is likely to produce
   for it (e.g., "Pav Bhaji" -> "pow bhajee", "pao bhaji").

2. **Live menu rows** (LiveMenuItem): What a restaurant actually sells, as
   stored by the ordering backend. The restaurant's name is authoritative
   for display and pricing.

3. **Enriched items** (EnrichedMenuItem): A live row joined with the catalog
   entry that shares its name, so the restaurant's own item inherits the
   catalog's pronunciation variants. Recomputed per request, never stored.

Usage:
------
    entry = MenuItemVariant(
        id="vada-pav",
        canonical_name="Vada Pav",
        category="Bhaji Pav",
        phonetic_variants=["vada pav", "wada pav", "vada pow"],
    )
"""

from collections import Counter
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator


class MenuItemVariant(BaseModel):
    """
    A dictionary entry mapping phonetic variants to one canonical name.

    Attributes:
        id: Stable identifier, unique within a catalog
        canonical_name: Authoritative display name (e.g., "Pav Bhaji")
        category: Optional grouping label, display only
        phonetic_variants: Spellings that should resolve to canonical_name.
            A tuple, so entries shared from the cached catalog stay read-only
    """
    model_config = ConfigDict(frozen=True)

    id: str
    canonical_name: str
    category: Optional[str] = None
    phonetic_variants: Tuple[str, ...] = ()


class PhoneticCatalog(BaseModel):
    """Shape of the catalog data file: {"items": [...]}."""
    model_config = ConfigDict(frozen=True)

    items: List[MenuItemVariant]

    @model_validator(mode="after")
    def check_unique_ids(self) -> "PhoneticCatalog":
        counts = Counter(item.id for item in self.items)
        duplicates = sorted(item_id for item_id, count in counts.items() if count > 1)
        if duplicates:
            raise ValueError(f"duplicate catalog ids: {', '.join(duplicates)}")
        return self


class LiveMenuItem(BaseModel):
    """
    A menu row as the ordering backend stores it.

    Extra columns selected alongside id and name are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    category_id: Optional[str] = None


class EnrichedMenuItem(MenuItemVariant):
    """
    A live menu item carrying catalog-derived phonetic variants.

    Attributes:
        catalog_id: Id of the catalog entry that supplied the variants,
            None when no entry matched and the live name is the only variant
    """
    catalog_id: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.catalog_id is None
