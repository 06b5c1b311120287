"""
Transcript Normalization Schemas.

Result structures returned by the transcript normalizer.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class NormalizationMatch(BaseModel):
    """
    One transcript span recognized as a menu item.

    start_index and end_index are inclusive word positions in the
    whitespace-tokenized original transcript.
    """
    model_config = ConfigDict(frozen=True)

    canonical_name: str
    matched_variant: str
    original_text: str
    similarity: float
    start_index: int
    end_index: int


class NormalizationResult(BaseModel):
    """Rewritten transcript plus the matches applied to it, ordered by start_index."""
    model_config = ConfigDict(frozen=True)

    normalized_text: str
    matches: List[NormalizationMatch] = Field(default_factory=list)
