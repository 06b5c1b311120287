"""
Transcript Normalization.

Finds menu item mentions in an ASR transcript and rewrites them to canonical
names. Matching is fuzzy: a transcript window matches a dictionary entry when
its normalized edit-distance similarity to the canonical name or one of the
phonetic variants reaches the threshold.

Windows are tried longest first (three words, then two, then one) so that
multi-word dishes like "pav bhaji" claim their words before the single words
can match shorter entries. A word belongs to at most one match.

Usage:
    result = normalize_transcript_to_menu_items(
        "one pow bhajee and one wada pow please", enriched_items
    )
    result.normalized_text  # "one Pav Bhaji and one Vada Pav please"
"""

import logging
from typing import Iterator, List, NamedTuple, Optional, Sequence, Set

from rapidfuzz.distance import Levenshtein

from ..config import DEFAULT_MATCH_THRESHOLD, MAX_NGRAM_SIZE, UNCERTAIN_MATCH_THRESHOLD
from ..schemas.menu import MenuItemVariant
from ..schemas.normalization import NormalizationMatch, NormalizationResult

logger = logging.getLogger(__name__)


class _Ngram(NamedTuple):
    text: str
    start_index: int
    end_index: int


class _BestMatch(NamedTuple):
    item: MenuItemVariant
    variant: str
    similarity: float


def calculate_similarity(str1: str, str2: str) -> float:
    """
    Similarity between two strings, from 0.0 to 1.0 (exact match).

    Both strings are lowercased and stripped, then scored as
    1 - levenshtein_distance / length_of_longer_string.
    """
    s1 = str1.lower().strip()
    s2 = str2.lower().strip()

    if s1 == s2:
        return 1.0

    max_len = max(len(s1), len(s2))
    return 1.0 - Levenshtein.distance(s1, s2) / max_len


def _generate_ngrams(words: Sequence[str], n: int) -> Iterator[_Ngram]:
    for i in range(len(words) - n + 1):
        yield _Ngram(" ".join(words[i:i + n]), i, i + n - 1)


def _find_best_match(
    text: str,
    menu_items: Sequence[MenuItemVariant],
    threshold: float,
) -> Optional[_BestMatch]:
    best = None

    for item in menu_items:
        # Canonical name first, then variants; equal scores keep the earlier one
        for candidate in (item.canonical_name, *item.phonetic_variants):
            similarity = calculate_similarity(text, candidate)
            if similarity >= threshold and (best is None or similarity > best.similarity):
                best = _BestMatch(item, candidate, similarity)

    return best


def normalize_transcript_to_menu_items(
    transcript: str,
    menu_items: Sequence[MenuItemVariant],
    threshold: float = DEFAULT_MATCH_THRESHOLD,
) -> NormalizationResult:
    """
    Replace fuzzy mentions of menu items with their canonical names.

    Args:
        transcript: Raw transcript from the speech engine.
        menu_items: Dictionary entries (catalog or enriched menu items).
            Order matters only to break ties between equal scores.
        threshold: Minimum similarity (0-1) for a window to match.

    Returns:
        NormalizationResult with the rewritten text and the matches found,
        ordered by start_index. Match indices refer to the words of the
        original transcript.

    Raises:
        TypeError: If transcript is not a string.
    """
    if not isinstance(transcript, str):
        raise TypeError(f"transcript must be a str, got {type(transcript).__name__}")

    words = transcript.split()
    if not words or not menu_items:
        return NormalizationResult(normalized_text=transcript, matches=[])

    matches: List[NormalizationMatch] = []
    claimed: Set[int] = set()

    for n in range(MAX_NGRAM_SIZE, 0, -1):
        for ngram in _generate_ngrams(words, n):
            span = range(ngram.start_index, ngram.end_index + 1)
            if any(i in claimed for i in span):
                continue

            best = _find_best_match(ngram.text, menu_items, threshold)
            if best is None:
                continue

            matches.append(NormalizationMatch(
                canonical_name=best.item.canonical_name,
                matched_variant=best.variant,
                original_text=ngram.text,
                similarity=best.similarity,
                start_index=ngram.start_index,
                end_index=ngram.end_index,
            ))
            claimed.update(span)
            logger.debug(
                "Matched %r -> %r via %r (similarity %.2f)",
                ngram.text, best.item.canonical_name, best.variant, best.similarity,
            )

    matches.sort(key=lambda m: m.start_index)

    # Right to left so earlier replacements don't shift later indices
    result_words = list(words)
    for match in reversed(matches):
        result_words[match.start_index:match.end_index + 1] = [match.canonical_name]

    return NormalizationResult(
        normalized_text=" ".join(result_words),
        matches=matches,
    )


def generate_match_hints(
    matches: Sequence[NormalizationMatch],
    uncertain_threshold: float = UNCERTAIN_MATCH_THRESHOLD,
) -> str:
    """
    Describe low-confidence matches for an LLM's instructions.

    Matches that were accepted (similarity >= 0.75) but fall below
    uncertain_threshold each get one sentence telling the model which menu
    item the caller most likely meant.

    Returns:
        The sentences joined by spaces, or "" if no match is uncertain.
    """
    hints = [
        f"If the user said something like '{m.original_text}', assume they meant '{m.canonical_name}'."
        for m in matches
        if DEFAULT_MATCH_THRESHOLD <= m.similarity < uncertain_threshold
    ]
    return " ".join(hints)
