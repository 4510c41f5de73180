import logging
from src.models.transcript import CacheEvent, TranscriptEntry, TranscriptResolution, ResolutionStatus
from src.services.transcripts import TranscriptResolver, build_resolver
from src.providers.supadata import SupadataProvider
from src.config import Settings

def test_imports():
    entry = TranscriptEntry(offset=0, text="Hello")
    assert entry.model_dump() == {"offset": 0, "text": "Hello"}

def test_build_resolver_without_cache_binding():
    resolver = build_resolver(Settings(_env_file=None, SUPADATA_API_KEY="k", TRANSCRIPT_CACHE=None))
    assert isinstance(resolver, TranscriptResolver)
    assert isinstance(resolver.provider, SupadataProvider)
    assert resolver.cache is None
    assert resolver.not_found_ttl == 3600

def test_build_resolver_memory_binding():
    resolver = build_resolver(Settings(_env_file=None, SUPADATA_API_KEY="k", TRANSCRIPT_CACHE="memory"))
    assert resolver.cache is not None
    assert build_resolver(Settings(_env_file=None, TRANSCRIPT_CACHE="memory"), use_cache=False).cache is None

def test_resolution_helpers():
    failed = TranscriptResolution(video_id="x", status=ResolutionStatus.FAILED)
    empty = TranscriptResolution(video_id="x", status=ResolutionStatus.NOT_FOUND, entries=[])
    assert failed.failed and not failed.is_empty
    assert empty.is_empty and not empty.failed

def test_build_resolver_unusable_cache_dir_disables_cache(tmp_path, session, make_response):
    afile = tmp_path / "afile"
    afile.write_text("", encoding="utf-8")
    resolver = build_resolver(Settings(_env_file=None, SUPADATA_API_KEY="k", TRANSCRIPT_CACHE=str(afile)))
    assert resolver.cache is None
    resolver.provider.session = session
    session.responses.append(make_response(body={"transcript": [{"offset": 0, "text": "Hello"}]}))
    result = resolver.resolve("abc123")
    assert result.status == ResolutionStatus.FETCHED
    assert result.cache_events == [CacheEvent.DISABLED]

def test_urllib3_logging_quieted():
    assert logging.getLogger("urllib3").level == logging.WARNING
