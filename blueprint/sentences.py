from __future__ import annotations

import re
from typing import List

# Whitespace after terminal punctuation, followed by an uppercase letter or digit.
# Lowercase continuations ("e.g. this") are deliberately left joined.
_SENTENCE_BOUNDARY = re.compile(r"(?<=[.!?])\s+(?=[A-Z0-9])")


def split_sentences(text: str) -> List[str]:
    """
    Split normalized text into trimmed, non-empty sentence-like units.
    """
    if not text or not text.strip():
        return []
    parts = (p.strip() for p in _SENTENCE_BOUNDARY.split(text))
    return [p for p in parts if p]
