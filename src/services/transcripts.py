from typing import List, Optional
from src.config import Settings, settings as default_settings
from src.core.cache import CacheStore
from src.core.errors import ConfigurationError, TranscriptError
from src.models.transcript import CacheEvent, ResolutionStatus, TranscriptEntry, TranscriptResolution
from src.providers.supadata import SupadataProvider
from src.utils.cache import open_cache_store
from src.utils.logger import logger

class TranscriptResolver:
    """Cache-first transcript lookup.

    Cache population is best-effort: read errors fall through to the
    provider and write errors only show up in ``cache_events``.
    """

    def __init__(self, provider: SupadataProvider, cache: Optional[CacheStore] = None, not_found_ttl: int = 3600):
        self.provider = provider
        self.cache = cache
        self.not_found_ttl = not_found_ttl

    def resolve(self, video_id: str) -> TranscriptResolution:
        events: List[CacheEvent] = []

        try:
            self.provider.ensure_configured()
        except ConfigurationError as e:
            logger.error(f"{e} Cannot resolve transcript for {video_id}.")
            return self._failed(video_id, events)

        cached = self._read_cache(video_id, events)
        if cached is not None:
            return TranscriptResolution(video_id=video_id, status=ResolutionStatus.CACHE_HIT, entries=cached, cache_events=events)

        try:
            entries = self.provider.fetch(video_id)
        except TranscriptError as e:
            logger.error(f"Failed to get transcript for {video_id}: {e}")
            return self._failed(video_id, events)

        if not entries:
            self._write_cache(video_id, [], self.not_found_ttl, events)
            return TranscriptResolution(video_id=video_id, status=ResolutionStatus.NOT_FOUND, entries=[], cache_events=events)

        self._write_cache(video_id, entries, None, events)
        return TranscriptResolution(video_id=video_id, status=ResolutionStatus.FETCHED, entries=entries, cache_events=events)

    def _failed(self, video_id: str, events: List[CacheEvent]) -> TranscriptResolution:
        return TranscriptResolution(video_id=video_id, status=ResolutionStatus.FAILED, entries=None, cache_events=events)

    def _read_cache(self, video_id: str, events: List[CacheEvent]) -> Optional[List[TranscriptEntry]]:
        if self.cache is None:
            events.append(CacheEvent.DISABLED)
            return None
        try:
            cached = self.cache.get(video_id)
        except Exception as e:
            # Any store failure degrades to a miss.
            logger.error(f"Error reading from transcript cache for {video_id}: {e}")
            events.append(CacheEvent.READ_FAILED)
            return None
        if cached is None:
            logger.info(f"Cache miss for videoId: {video_id}")
        else:
            logger.info(f"Cache hit for videoId: {video_id}")
        return cached

    def _write_cache(self, video_id: str, entries: List[TranscriptEntry], expiration_seconds: Optional[int], events: List[CacheEvent]):
        if self.cache is None:
            return
        try:
            self.cache.put(video_id, entries, expiration_seconds)
        except Exception as e:
            logger.error(f"Error writing transcript to cache for {video_id}: {e}")
            events.append(CacheEvent.WRITE_FAILED)
            return
        events.append(CacheEvent.STORED)
        logger.info(f"Cached {len(entries)} entries for videoId: {video_id} (ttl={expiration_seconds})")

def build_resolver(config: Optional[Settings] = None, use_cache: bool = True) -> TranscriptResolver:
    config = config or default_settings
    provider = SupadataProvider(
        api_key=config.SUPADATA_API_KEY,
        base_url=config.SUPADATA_BASE_URL,
        timeout=config.REQUEST_TIMEOUT,
    )
    cache = open_cache_store(config.TRANSCRIPT_CACHE) if use_cache else None
    return TranscriptResolver(provider, cache=cache, not_found_ttl=config.NOT_FOUND_TTL)
