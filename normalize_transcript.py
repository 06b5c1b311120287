#!/usr/bin/env python3
"""
Transcript normalization debugging script.

Runs a transcript through the phonetic catalog and prints the rewritten text,
each match with its score, and the hints the LLM would receive. Useful when
tuning phonetic variants for a restaurant.

Usage:
    # Normalize against the packaged catalog
    python normalize_transcript.py "one pow bhajee and one wada pow please"

    # Use a restaurant's own menu names (enriched from the catalog)
    python normalize_transcript.py "two masala dose" --menu-item "Masala Dosa" --menu-item "Filter Coffee"

    # Lower the threshold and use a custom catalog file
    python normalize_transcript.py "gobi manchoori" --threshold 0.7 --catalog my_catalog.json
"""

# Load environment variables FIRST, before voice_menu.config reads them
from dotenv import load_dotenv
load_dotenv()

import argparse
import logging

from voice_menu.config import DEFAULT_MATCH_THRESHOLD
from voice_menu.logging_config import setup_logging
from voice_menu.menu import enrich_menu_items_with_variants, load_catalog
from voice_menu.voice import generate_match_hints, normalize_transcript_to_menu_items

logger = logging.getLogger(__name__)


def print_result(result, hints: str) -> None:
    """Print a normalization result as a small report."""
    print(f"\n{'=' * 60}")
    print(f"Normalized: {result.normalized_text}")
    print(f"{'=' * 60}")

    if not result.matches:
        print("No menu items matched.")
    for match in result.matches:
        print(
            f"  [{match.start_index}-{match.end_index}] {match.original_text!r:<25} "
            f"-> {match.canonical_name:<22} via {match.matched_variant!r} ({match.similarity:.2f})"
        )

    if hints:
        print(f"\nLLM hints: {hints}")
    print()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Normalize a voice transcript against the phonetic menu catalog"
    )
    parser.add_argument(
        "transcript",
        help="Transcript text as produced by the speech engine",
    )
    parser.add_argument(
        "--threshold",
        "-t",
        type=float,
        default=DEFAULT_MATCH_THRESHOLD,
        help=f"Minimum similarity for a match (default: {DEFAULT_MATCH_THRESHOLD})",
    )
    parser.add_argument(
        "--catalog",
        "-c",
        help="Path to a catalog JSON file (default: PHONETIC_CATALOG_PATH or packaged catalog)",
    )
    parser.add_argument(
        "--menu-item",
        "-m",
        action="append",
        default=[],
        dest="menu_items",
        help="Live menu item name; repeat for each item. Enriched from the catalog.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: LOG_LEVEL env var or INFO)",
    )

    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    catalog = load_catalog(args.catalog)
    dictionary = catalog
    if args.menu_items:
        live_items = [
            {"id": f"cli-{i}", "name": name}
            for i, name in enumerate(args.menu_items, start=1)
        ]
        dictionary = enrich_menu_items_with_variants(live_items, catalog)
        logger.info("Using %d enriched menu items", len(dictionary))

    result = normalize_transcript_to_menu_items(args.transcript, dictionary, args.threshold)
    print_result(result, generate_match_hints(result.matches))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
