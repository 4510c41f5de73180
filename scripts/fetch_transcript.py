import sys
from src.services.transcripts import build_resolver
from src.utils.logger import logger

if __name__ == "__main__":
    video_id = sys.argv[1] if len(sys.argv) > 1 else "dQw4w9WgXcQ"
    resolver = build_resolver()
    r = resolver.resolve(video_id)
    logger.info(f"status: {r.status.value}, cache events: {[e.value for e in r.cache_events]}")
    if r.failed:
        sys.exit(1)
    print("entries:", len(r.entries))
    for e in r.entries[:5]:
        print(f"[{e.offset:.0f}ms] {e.text}")
