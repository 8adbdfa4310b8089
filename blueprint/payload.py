from __future__ import annotations

from typing import List, Sequence

import orjson

from blueprint.document_models import KCS_FORMATS, Chunk


def _check_format(fmt: str) -> None:
    if fmt not in KCS_FORMATS:
        raise ValueError(f"Unknown KCS format: {fmt!r} (expected one of {KCS_FORMATS})")


def serialize_chunks(chunks: Sequence[Chunk], fmt: str) -> str:
    """
    Render chunks as one pretty JSON document (`json`) or one record per
    line (`jsonl`), keeping index order.
    """
    _check_format(fmt)
    records = [c.to_record() for c in chunks]
    if fmt == "json":
        return orjson.dumps({"chunks": records}, option=orjson.OPT_INDENT_2).decode("utf-8")
    return "\n".join(orjson.dumps(r).decode("utf-8") for r in records)


def parse_chunks(payload: str, fmt: str) -> List[Chunk]:
    _check_format(fmt)
    if fmt == "json":
        return [Chunk.from_record(r) for r in orjson.loads(payload)["chunks"]]
    return [Chunk.from_record(orjson.loads(line)) for line in payload.splitlines() if line.strip()]
