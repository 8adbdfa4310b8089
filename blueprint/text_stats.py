from __future__ import annotations

import math
import re
from collections import Counter
from typing import List

KEYWORD_LIMIT = 5
MIN_KEYWORD_LENGTH = 5
TOKENS_PER_WORD = 1.3

_NON_WORD = re.compile(r"[^a-z0-9\s]")


def extract_keywords(content: str, limit: int = KEYWORD_LIMIT) -> List[str]:
    """
    Most frequent significant words of `content`, lowercase.

    Words shorter than five characters are ignored. Equal counts keep the
    order in which the words first appear.
    """
    words = _NON_WORD.sub(" ", content.lower()).split()
    frequency = Counter(w for w in words if len(w) >= MIN_KEYWORD_LENGTH)
    # Counter keeps insertion order and sorted() is stable
    ranked = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    return [word for word, _ in ranked[:limit]]


def estimate_tokens(text: str, tokens_per_word: float = TOKENS_PER_WORD) -> int:
    """Rough model token count: whitespace words scaled by a fixed factor."""
    return math.ceil(len(text.split()) * tokens_per_word)
