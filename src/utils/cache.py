import hashlib
import json
import os
import tempfile
import time
from typing import Callable, Dict, List, Optional, Tuple
from src.core.cache import CacheStore
from src.core.errors import CacheError
from src.models.transcript import TranscriptEntry
from src.utils.logger import logger

def _expires_at(now: float, expiration_seconds: Optional[int]) -> Optional[float]:
    if expiration_seconds is None:
        return None
    return now + expiration_seconds

class MemoryCacheStore(CacheStore):
    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._items: Dict[str, Tuple[Optional[float], List[TranscriptEntry]]] = {}

    def get(self, key: str) -> Optional[List[TranscriptEntry]]:
        item = self._items.get(key)
        if item is None:
            return None
        expires_at, entries = item
        if expires_at is not None and self._clock() >= expires_at:
            return None
        return list(entries)

    def put(self, key: str, entries: List[TranscriptEntry], expiration_seconds: Optional[int] = None) -> None:
        self._items[key] = (_expires_at(self._clock(), expiration_seconds), list(entries))

class FileCacheStore(CacheStore):
    """One JSON document per key; expired documents read as a miss."""

    def __init__(self, cache_dir: str, clock: Callable[[], float] = time.time):
        self.cache_dir = cache_dir
        self._clock = clock
        os.makedirs(self.cache_dir, exist_ok=True)

    def _get_hash(self, key_data: str) -> str:
        return hashlib.sha256(key_data.encode()).hexdigest()

    def _path(self, key: str) -> str:
        return os.path.join(self.cache_dir, f"{self._get_hash(key)}.json")

    def get(self, key: str) -> Optional[List[TranscriptEntry]]:
        path = self._path(key)
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                doc = json.load(f)
            expires_at = doc.get("expires_at")
            if expires_at is not None and self._clock() >= float(expires_at):
                return None
            return [TranscriptEntry.model_validate(item) for item in doc["entries"]]
        except (OSError, ValueError, TypeError, KeyError, AttributeError) as e:
            raise CacheError(f"Unreadable cache document for {key}: {e}") from e

    def put(self, key: str, entries: List[TranscriptEntry], expiration_seconds: Optional[int] = None) -> None:
        doc = {
            "key": key,
            "expires_at": _expires_at(self._clock(), expiration_seconds),
            "entries": [e.model_dump() for e in entries],
        }
        # readers only ever see complete documents
        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.cache_dir, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self._path(key))
        except OSError as e:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise CacheError(f"Failed to write cache document for {key}: {e}") from e

def open_cache_store(binding: Optional[str]) -> Optional[CacheStore]:
    if not binding:
        logger.warning("No TRANSCRIPT_CACHE binding configured. Caching will be disabled.")
        return None
    if binding == "memory":
        return MemoryCacheStore()
    try:
        return FileCacheStore(binding)
    except OSError as e:
        logger.warning(f"TRANSCRIPT_CACHE directory {binding!r} is unusable ({e}). Caching will be disabled.")
        return None
