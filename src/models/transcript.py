from enum import Enum
from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict

class TranscriptEntry(BaseModel):
    # provider fields beyond offset/text (duration, lang) are kept as-is
    model_config = ConfigDict(extra="allow")

    offset: Union[int, float]  # milliseconds from video start
    text: str

class ProviderPayload(BaseModel):
    """JSON body returned by the transcript endpoint."""
    model_config = ConfigDict(extra="ignore")

    transcript: Optional[List[TranscriptEntry]] = None
    error: Optional[str] = None

class ResolutionStatus(str, Enum):
    CACHE_HIT = "cache_hit"
    FETCHED = "fetched"
    NOT_FOUND = "not_found"
    FAILED = "failed"

class CacheEvent(str, Enum):
    DISABLED = "disabled"
    READ_FAILED = "read_failed"
    WRITE_FAILED = "write_failed"
    STORED = "stored"

class TranscriptResolution(BaseModel):
    video_id: str
    status: ResolutionStatus
    entries: Optional[List[TranscriptEntry]] = None  # None only when failed
    cache_events: List[CacheEvent] = []

    @property
    def failed(self) -> bool:
        return self.status == ResolutionStatus.FAILED

    @property
    def is_empty(self) -> bool:
        return not self.failed and not self.entries
