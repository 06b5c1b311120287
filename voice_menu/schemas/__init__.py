"""
Schemas Package for Voice Menu
==============================

Pydantic models shared by the phonetic dictionary and the transcript
normalizer.

Schema Organization:
--------------------
- **menu.py**: Catalog entries, live menu rows and enriched items
- **normalization.py**: Transcript matches and normalization results
- **pronunciation.py**: Pronunciation lexicon entries

Pydantic Configuration:
-----------------------
Catalog and result models are frozen so they can be shared between callers
without copying.
"""

from .menu import (
    MenuItemVariant,
    PhoneticCatalog,
    LiveMenuItem,
    EnrichedMenuItem,
)
from .normalization import (
    NormalizationMatch,
    NormalizationResult,
)
from .pronunciation import Pronunciation

__all__ = [
    "MenuItemVariant",
    "PhoneticCatalog",
    "LiveMenuItem",
    "EnrichedMenuItem",
    "NormalizationMatch",
    "NormalizationResult",
    "Pronunciation",
]
