from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

KCSFormat = Literal["json", "jsonl"]
KCS_FORMATS: Tuple[str, ...] = ("json", "jsonl")


@dataclass(frozen=True)
class ChunkMetadata:
    start_offset: int  # into the normalized source text
    end_offset: int
    keywords: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Chunk:
    id: str
    chunk_index: int
    content: str
    token_estimate: int
    metadata: ChunkMetadata

    def to_record(self) -> Dict[str, Any]:
        """Wire shape shared by exports and persisted blueprints."""
        return {
            "id": self.id,
            "chunkIndex": self.chunk_index,
            "content": self.content,
            "tokenEstimate": self.token_estimate,
            "metadata": {
                "startOffset": self.metadata.start_offset,
                "endOffset": self.metadata.end_offset,
                "keywords": list(self.metadata.keywords),
            },
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Chunk":
        meta = record["metadata"]
        return cls(
            id=str(record["id"]),
            chunk_index=int(record["chunkIndex"]),
            content=str(record["content"]),
            token_estimate=int(record["tokenEstimate"]),
            metadata=ChunkMetadata(
                start_offset=int(meta["startOffset"]),
                end_offset=int(meta["endOffset"]),
                keywords=tuple(str(k) for k in meta.get("keywords", [])),
            ),
        )


@dataclass
class Blueprint:
    ir_raw: str = ""
    ir_markdown: str = ""  # derived from ir_raw
    kcs_raw: str = ""
    kcs_format: KCSFormat = "json"
    chunk_size: int = 600
    kcs_chunks: List[Chunk] = field(default_factory=list)  # derived from kcs_raw + chunk_size
    last_updated: Optional[str] = None  # ISO-8601, set by snapshots

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {
            "irRaw": self.ir_raw,
            "irMarkdown": self.ir_markdown,
            "kcsRaw": self.kcs_raw,
            "kcsFormat": self.kcs_format,
            "chunkSize": self.chunk_size,
            "kcsChunks": [c.to_record() for c in self.kcs_chunks],
        }
        if self.last_updated is not None:
            record["lastUpdated"] = self.last_updated
        return record

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Blueprint":
        fmt = record.get("kcsFormat", "json")
        if fmt not in KCS_FORMATS:
            raise ValueError(f"Unknown KCS format: {fmt!r}")
        return cls(
            ir_raw=str(record.get("irRaw", "")),
            ir_markdown=str(record.get("irMarkdown", "")),
            kcs_raw=str(record.get("kcsRaw", "")),
            kcs_format=fmt,
            chunk_size=int(record.get("chunkSize", 600)),
            kcs_chunks=[Chunk.from_record(c) for c in record.get("kcsChunks", [])],
            last_updated=record.get("lastUpdated"),
        )
