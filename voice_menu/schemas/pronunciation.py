"""
Pronunciation Lexicon Schemas.
"""

from pydantic import BaseModel, ConfigDict


class Pronunciation(BaseModel):
    """A word and how a voice platform should speak it."""
    model_config = ConfigDict(frozen=True)

    word: str
    alphabet: str = "ipa"
    phoneme: str
