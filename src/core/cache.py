from abc import ABC, abstractmethod
from typing import List, Optional
from src.models.transcript import TranscriptEntry

class CacheStore(ABC):
    @abstractmethod
    def get(self, key: str) -> Optional[List[TranscriptEntry]]:
        """Return cached entries, or None when absent or expired. An empty list is a hit."""
        pass

    @abstractmethod
    def put(self, key: str, entries: List[TranscriptEntry], expiration_seconds: Optional[int] = None) -> None:
        """Store entries under key, optionally expiring after expiration_seconds."""
        pass
