from __future__ import annotations

from pathlib import Path
from typing import Iterable

from common.config import yaml_config
from common.logger import get_logger

log = get_logger(__name__)

UPLOAD_TYPES = tuple(ext.lower() for ext in yaml_config.app.upload_types)


def is_supported(name: str, allowed: Iterable[str] = UPLOAD_TYPES) -> bool:
    return Path(name).suffix.lower() in tuple(allowed)


def decode_upload(name: str, data: bytes) -> str | None:
    """Decode an uploaded plain-text file. Unsupported types yield None."""
    if not is_supported(name):
        log.warning("Skipping unsupported upload: %s", name)
        return None
    return data.decode("utf-8-sig", errors="ignore")


def load_upload(path: Path) -> str | None:
    """Read a local plain-text file (.txt, .md, .json, .jsonl)."""
    path = Path(path)
    if not is_supported(path.name):
        log.warning("Skipping unsupported file: %s", path)
        return None
    try:
        data = path.read_bytes()
    except OSError as e:
        log.error("Failed to read %s: %s", path, e)
        return None
    return data.decode("utf-8-sig", errors="ignore")
