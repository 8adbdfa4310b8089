from __future__ import annotations

from typing import List, NamedTuple

from blueprint.cleaners import normalize_text
from blueprint.document_models import Chunk, ChunkMetadata
from blueprint.hash_utils import random_id, sha1_text
from blueprint.sentences import split_sentences
from blueprint.text_stats import (
    KEYWORD_LIMIT,
    TOKENS_PER_WORD,
    estimate_tokens,
    extract_keywords,
)


class PackedSpan(NamedTuple):
    content: str
    start_offset: int
    end_offset: int


def pack_sentences(text: str, chunk_size: int) -> List[PackedSpan]:
    """
    Greedily pack the sentences of normalized `text` into spans of about
    `chunk_size` characters.

    A sentence is never split: one that is longer than `chunk_size` becomes
    its own span, and the sentence that fills a buffer may push it past the
    budget. Offsets assume a single separator between consecutive spans.
    """
    spans: List[PackedSpan] = []
    buf = ""
    start = 0

    def flush() -> None:
        nonlocal buf, start
        piece = buf.strip()
        if not piece:
            return
        end = start + len(piece)
        spans.append(PackedSpan(piece, start, end))
        start = end + 1
        buf = ""

    for sentence in split_sentences(text):
        candidate = f"{buf} {sentence}" if buf else sentence
        if len(candidate) > chunk_size and buf:
            flush()
            candidate = sentence
        buf = candidate
        if len(buf) >= chunk_size:
            flush()
    # flush last buffer
    flush()
    return spans


def chunk_kcs(
    text: str,
    chunk_size: int,
    *,
    keyword_limit: int = KEYWORD_LIMIT,
    tokens_per_word: float = TOKENS_PER_WORD,
    stable_ids: bool = True,
) -> List[Chunk]:
    """
    Turn raw knowledge text into indexed chunks with token estimates,
    source offsets and keywords.

    With `stable_ids` the chunk id is derived from its position and content,
    so re-running on unchanged input yields identical chunks. Otherwise each
    run mints fresh random ids.
    """
    normalized = normalize_text(text)
    if not normalized:
        return []

    out: List[Chunk] = []
    for idx, span in enumerate(pack_sentences(normalized, chunk_size)):
        cid = (
            sha1_text(f"{idx}::{span.start_offset}::{span.content}")
            if stable_ids
            else random_id()
        )
        out.append(
            Chunk(
                id=cid,
                chunk_index=idx,
                content=span.content,
                token_estimate=estimate_tokens(span.content, tokens_per_word),
                metadata=ChunkMetadata(
                    start_offset=span.start_offset,
                    end_offset=span.end_offset,
                    keywords=tuple(extract_keywords(span.content, keyword_limit)),
                ),
            )
        )
    return out
