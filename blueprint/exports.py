from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from common.logger import get_logger

log = get_logger(__name__)

MARKDOWN_MEDIA_TYPE = "text/markdown"
JSON_MEDIA_TYPE = "application/json"


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    media_type: str
    content: str

    def to_bytes(self) -> bytes:
        return self.content.encode("utf-8")

    def write(self, directory: Path | str) -> Path:
        """Write the artifact as UTF-8 under `directory`, creating it if needed."""
        out = Path(directory) / self.filename
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_bytes(self.to_bytes())
        log.info("Wrote %s (%s, %d bytes)", out, self.media_type, len(self.to_bytes()))
        return out
