"""
Entry points of the synthesis pipeline.

    raw KCS text -> chunk() -> serialize()   (retrieval chunks)
    raw IR text  -> to_markdown()             (ruleset document)
"""
from __future__ import annotations

from typing import List, Sequence

from blueprint.chunkers import chunk_kcs
from blueprint.document_models import Chunk
from blueprint.markdown import convert_ir_to_markdown
from blueprint.payload import serialize_chunks


def chunk(text: str, chunk_size: int) -> List[Chunk]:
    return chunk_kcs(text, chunk_size)


def to_markdown(text: str) -> str:
    return convert_ir_to_markdown(text)


def serialize(chunks: Sequence[Chunk], fmt: str) -> str:
    return serialize_chunks(chunks, fmt)
