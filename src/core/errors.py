class TranscriptError(Exception):
    """Base class for failures while resolving a transcript."""

class ConfigurationError(TranscriptError):
    """A required setting (the provider credential) is missing."""

class RemoteProviderError(TranscriptError):
    """The provider answered, but not with a usable transcript."""

class NetworkError(TranscriptError):
    """Transport failure, or a body that could not be decoded."""

class CacheError(TranscriptError):
    """Cache read or write failed. Always recovered by the caller."""
