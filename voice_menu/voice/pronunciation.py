"""
Pronunciation Lexicon Parsing.

Restaurants upload a W3C Pronunciation Lexicon (PLS) file so the voice agent
says dish names the way their customers do. Only the grapheme/phoneme pairs
are used:

    <lexeme>
        <grapheme>Pav Bhaji</grapheme>
        <phoneme>pɑːv bʱɑːdʒi</phoneme>
    </lexeme>
"""

import logging
import re
from typing import List

from ..schemas.pronunciation import Pronunciation

logger = logging.getLogger(__name__)

LEXEME_PATTERN = re.compile(
    r"<lexeme>\s*<grapheme>([^<]+)</grapheme>\s*<phoneme>([^<]+)</phoneme>\s*</lexeme>",
    re.IGNORECASE,
)


def parse_pls_content(pls_content: str) -> List[Pronunciation]:
    """
    Extract pronunciation entries from a PLS document.

    Lexemes whose grapheme or phoneme is blank are skipped. Phonemes are
    assumed to be IPA.

    Args:
        pls_content: The PLS XML text.

    Returns:
        Pronunciations in document order.

    Raises:
        TypeError: If pls_content is not a string.
    """
    if not isinstance(pls_content, str):
        raise TypeError(f"pls_content must be a str, got {type(pls_content).__name__}")

    pronunciations = []
    for match in LEXEME_PATTERN.finditer(pls_content):
        word = match.group(1).strip()
        phoneme = match.group(2).strip()
        if word and phoneme:
            pronunciations.append(Pronunciation(word=word, alphabet="ipa", phoneme=phoneme))

    logger.info("Parsed %d pronunciation entries from PLS file", len(pronunciations))
    return pronunciations
