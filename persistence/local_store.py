from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, Generic, Optional, Protocol, TypeVar, runtime_checkable

import orjson

from common.logger import get_logger

log = get_logger(__name__)

T = TypeVar("T")


@runtime_checkable
class KeyValueStore(Protocol):
    """Durable string storage scoped by a stable key per logical document."""

    def load(self, key: str) -> Optional[str]: ...

    def save(self, key: str, raw: str) -> bool: ...

    def remove(self, key: str) -> None: ...


class MemoryStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def save(self, key: str, raw: str) -> bool:
        self._data[key] = raw
        return True

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore:
    def __init__(self, directory: Path | str):
        """
        One UTF-8 file per key under `directory`.
        Keys are sanitized into file names ("agentic-blueprint:v1" -> "agentic-blueprint_v1.json").
        Sanitizing is lossy: "a:b" and "a_b" share a file, so keys must differ
        in their alphanumeric characters.
        """
        self.directory = Path(directory)

    def _path(self, key: str) -> Path:
        return self.directory / f"{re.sub(r'[^A-Za-z0-9._-]', '_', key)}.json"

    def load(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def save(self, key: str, raw: str) -> bool:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        # atomic replace
        tmp = path.with_suffix(".tmp")
        tmp.write_text(raw, encoding="utf-8")
        tmp.replace(path)
        return True

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


def _dumps(value) -> str:
    return orjson.dumps(value).decode("utf-8")


class PersistentState(Generic[T]):
    """
    A value persisted whole under one key.

    Reads that fail (missing backend, corrupt or incompatible record) are
    logged, the bad entry is dropped and the default is used. Writes that
    fail are logged and reported as False; the in-memory value stays
    authoritative.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        default: Callable[[], T],
        serializer: Callable[[T], object] = lambda v: v,
        deserializer: Callable[[object], T] = lambda raw: raw,
    ):
        self.store = store
        self.key = key
        self._default = default
        self._serializer = serializer
        self._deserializer = deserializer
        self.ready = False

    def load(self) -> T:
        try:
            raw = self.store.load(self.key)
            if raw is None:
                return self._default()
            return self._deserializer(orjson.loads(raw))
        except Exception as e:
            log.error("Failed to read persistent state '%s': %s", self.key, e)
            try:
                self.store.remove(self.key)
            except Exception as remove_err:
                log.error("Failed to discard state '%s': %s", self.key, remove_err)
            return self._default()
        finally:
            self.ready = True

    def save(self, value: T) -> bool:
        if not self.ready:
            # never overwrite a stored record before it was read
            log.warning("Skipping write of '%s' before first load", self.key)
            return False
        try:
            return self.store.save(self.key, _dumps(self._serializer(value)))
        except Exception as e:
            log.error("Failed to write persistent state '%s': %s", self.key, e)
            return False
