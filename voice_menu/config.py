"""
Configuration Module for Voice Menu
===================================

This module centralizes the settings and constants used by the phonetic
dictionary and the transcript normalizer.

Configuration Categories:
-------------------------
- **Matching Thresholds**: Similarity floors used when matching transcript
  windows against menu item names and their phonetic variants.

- **Order Items**: The more lenient threshold the order-creation handler uses
  when rewriting spoken item names.

- **ASR Hints**: Ceiling on the number of keyword boosts handed to a voice
  platform.

- **Catalog**: Location of the phonetic catalog data file.

Environment Variables:
----------------------
- ORDER_ITEM_MATCH_THRESHOLD: Threshold for order line names (default: 0.7)
- ASR_HINT_LIMIT: Max keyword boosts sent to the ASR engine (default: 100)
- PHONETIC_CATALOG_PATH: Path to a catalog JSON file (default: packaged catalog)

Usage:
------
    from voice_menu.config import (
        DEFAULT_MATCH_THRESHOLD,
        ASR_HINT_LIMIT,
    )
"""

import os
from pathlib import Path
from typing import Optional


# =============================================================================
# Matching Thresholds
# =============================================================================
# Similarity is 1 - edit_distance / max_length, so 0.75 allows roughly one
# edit per four characters.

DEFAULT_MATCH_THRESHOLD: float = 0.75

# Matches at or above the default threshold but below this one are accepted
# yet reported to the LLM as uncertain.
UNCERTAIN_MATCH_THRESHOLD: float = 0.85

# Longest transcript window tried, in words ("mysore masala dosa").
MAX_NGRAM_SIZE: int = 3


# =============================================================================
# Order Item Configuration
# =============================================================================

ORDER_ITEM_MATCH_THRESHOLD: float = float(os.getenv("ORDER_ITEM_MATCH_THRESHOLD", "0.7"))


# =============================================================================
# ASR Hint Configuration
# =============================================================================
# Voice platforms cap the number of boosted keywords they accept.

ASR_HINT_LIMIT: int = int(os.getenv("ASR_HINT_LIMIT", "100"))


# =============================================================================
# Catalog Configuration
# =============================================================================

DEFAULT_CATALOG_PATH: Path = Path(__file__).parent / "menu" / "data" / "phonetic_catalog.json"

PHONETIC_CATALOG_PATH: Optional[str] = os.getenv("PHONETIC_CATALOG_PATH") or None


def get_catalog_path() -> Path:
    """
    Return the catalog file to load when no explicit path is given.

    Returns:
        PHONETIC_CATALOG_PATH if set, otherwise the packaged catalog.
    """
    if PHONETIC_CATALOG_PATH:
        return Path(PHONETIC_CATALOG_PATH)
    return DEFAULT_CATALOG_PATH
