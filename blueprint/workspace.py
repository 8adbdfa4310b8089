from __future__ import annotations

import math
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, List, Literal, Optional

from blueprint.chunkers import chunk_kcs
from blueprint.document_models import KCS_FORMATS, Blueprint, Chunk
from blueprint.exports import JSON_MEDIA_TYPE, MARKDOWN_MEDIA_TYPE, ExportArtifact
from blueprint.markdown import convert_ir_to_markdown
from blueprint.payload import serialize_chunks
from common.config import BlueprintConfig, yaml_config
from common.logger import get_logger
from persistence.local_store import KeyValueStore, PersistentState

log = get_logger(__name__)

UploadTarget = Literal["ir", "kcs"]


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def blueprint_state(store: KeyValueStore, key: Optional[str] = None) -> PersistentState[Blueprint]:
    return PersistentState(
        store,
        key or yaml_config.storage.blueprint_key,
        default=lambda: Blueprint(
            kcs_format=yaml_config.blueprint.default_format,
            chunk_size=yaml_config.blueprint.chunk_size,
        ),
        serializer=Blueprint.to_record,
        deserializer=Blueprint.from_record,
    )


class BlueprintWorkspace:
    """
    Owns a Blueprint and keeps its derived fields (`ir_markdown`,
    `kcs_chunks`) in step with the raw inputs.

    Recompute trigger points:
    - `update_ir`, `update_kcs`, `set_chunk_size`: recompute the affected
      field right away when `recompute_on_write` is set, otherwise mark it
      dirty.
    - `refresh()`: recompute whatever is dirty.
    - `snapshot()`: recompute everything and stamp `last_updated`.
    - `export_ir()` / `export_kcs()`: refresh first, so exports never
      carry stale output.

    The held Blueprint is replaced on every change, never mutated.
    """

    def __init__(
        self,
        blueprint: Optional[Blueprint] = None,
        *,
        recompute_on_write: bool = True,
        config: Optional[BlueprintConfig] = None,
    ):
        self.config = config or yaml_config.blueprint
        self.recompute_on_write = recompute_on_write
        self._blueprint = blueprint or Blueprint(
            kcs_format=self.config.default_format, chunk_size=self.config.chunk_size
        )
        self._ir_dirty = False
        self._kcs_dirty = False

    @property
    def blueprint(self) -> Blueprint:
        return self._blueprint

    @property
    def is_dirty(self) -> bool:
        return self._ir_dirty or self._kcs_dirty

    # --- derivations ---

    def _chunk(self, raw: str, chunk_size: int) -> List[Chunk]:
        return chunk_kcs(
            raw,
            chunk_size,
            keyword_limit=self.config.keyword_limit,
            tokens_per_word=self.config.tokens_per_word,
            stable_ids=self.config.stable_ids,
        )

    def _recompute_ir(self) -> None:
        self._blueprint = replace(
            self._blueprint, ir_markdown=convert_ir_to_markdown(self._blueprint.ir_raw)
        )
        self._ir_dirty = False

    def _recompute_kcs(self) -> None:
        bp = self._blueprint
        self._blueprint = replace(bp, kcs_chunks=self._chunk(bp.kcs_raw, bp.chunk_size))
        self._kcs_dirty = False

    # --- raw input changes ---

    def update_ir(self, raw: str) -> None:
        self._blueprint = replace(self._blueprint, ir_raw=raw)
        if self.recompute_on_write:
            self._recompute_ir()
        else:
            self._ir_dirty = True

    def update_kcs(self, raw: str) -> None:
        self._blueprint = replace(self._blueprint, kcs_raw=raw)
        if self.recompute_on_write:
            self._recompute_kcs()
        else:
            self._kcs_dirty = True

    def coerce_chunk_size(self, value: Any) -> int:
        """Fall back to the default for unusable input, then clamp to the allowed range."""
        try:
            size = int(value)
        except (TypeError, ValueError):
            size = 0
        if size <= 0:
            size = self.config.chunk_size
        return max(self.config.min_chunk_size, min(self.config.max_chunk_size, size))

    def set_chunk_size(self, value: Any) -> int:
        size = self.coerce_chunk_size(value)
        self._blueprint = replace(self._blueprint, chunk_size=size)
        if self.recompute_on_write:
            self._recompute_kcs()
        else:
            self._kcs_dirty = True
        return size

    def set_format(self, fmt: str) -> None:
        if fmt not in KCS_FORMATS:
            raise ValueError(f"Unknown KCS format: {fmt!r}")
        self._blueprint = replace(self._blueprint, kcs_format=fmt)

    def append_upload(self, target: UploadTarget, text: str) -> None:
        """Append uploaded text to the IR or KCS input, after a blank line."""
        if target == "ir":
            current = self._blueprint.ir_raw
            self.update_ir(f"{current}\n\n{text}" if current else text)
        elif target == "kcs":
            current = self._blueprint.kcs_raw
            self.update_kcs(f"{current}\n\n{text}" if current else text)
        else:
            raise ValueError(f"Unknown upload target: {target!r}")
        log.info("Appended %d characters to %s", len(text), target)

    # --- explicit recompute ---

    def refresh(self) -> None:
        if self._ir_dirty:
            self._recompute_ir()
        if self._kcs_dirty:
            self._recompute_kcs()

    def snapshot(self, now: Optional[str] = None) -> Blueprint:
        self._recompute_ir()
        self._recompute_kcs()
        self._blueprint = replace(self._blueprint, last_updated=now or _utc_now())
        log.info(
            "Snapshot: %d markdown chars, %d chunks",
            len(self._blueprint.ir_markdown),
            len(self._blueprint.kcs_chunks),
        )
        return self._blueprint

    # --- views ---

    @property
    def chunks(self) -> List[Chunk]:
        bp = self._blueprint
        if bp.kcs_chunks and not self._kcs_dirty:
            return bp.kcs_chunks
        return self._chunk(bp.kcs_raw, bp.chunk_size)

    def chunk_summary(self) -> str:
        return "\n".join(
            f"{c.chunk_index + 1}. {', '.join(c.metadata.keywords)}" for c in self.chunks
        )

    def average_tokens(self) -> int:
        chunks = self.chunks
        if not chunks:
            return 0
        mean = sum(c.token_estimate for c in chunks) / len(chunks)
        return math.floor(mean + 0.5)

    # --- exports ---

    def export_ir(self) -> Optional[ExportArtifact]:
        self.refresh()
        markdown = self._blueprint.ir_markdown or convert_ir_to_markdown(self._blueprint.ir_raw)
        if not markdown:
            return None
        return ExportArtifact(self.config.ir_filename, MARKDOWN_MEDIA_TYPE, markdown)

    def export_kcs(self) -> Optional[ExportArtifact]:
        self.refresh()
        fmt = self._blueprint.kcs_format
        payload = serialize_chunks(self.chunks, fmt)
        if not payload:
            return None
        return ExportArtifact(f"{self.config.kcs_basename}.{fmt}", JSON_MEDIA_TYPE, payload)
