from typing import List, Optional
import requests
from pydantic import ValidationError
from src.core.errors import ConfigurationError, NetworkError, RemoteProviderError
from src.models.transcript import ProviderPayload, TranscriptEntry
from src.utils.logger import logger

class SupadataProvider:
    """Fetches transcripts from the Supadata YouTube transcript endpoint.

    ``fetch`` returns an empty list for a confirmed absence (HTTP 404, or a
    success body with no transcript) and raises a ``TranscriptError`` for
    everything else that is not a usable transcript.
    """

    def __init__(self, api_key: Optional[str], base_url: str, session: Optional[requests.Session] = None, timeout: Optional[float] = 30):
        self.api_key = api_key
        self.base_url = base_url
        self.session = session or requests.Session()
        self.timeout = timeout

    def ensure_configured(self):
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("SUPADATA_API_KEY is not set.")

    def fetch(self, video_id: str) -> List[TranscriptEntry]:
        self.ensure_configured()
        headers = {
            "X-API-Key": self.api_key,
            "Accept": "application/json",
        }
        logger.info(f"Fetching transcript from Supadata for videoId: {video_id}")
        try:
            resp = self.session.get(self.base_url, params={"videoId": video_id}, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise NetworkError(f"Request to Supadata failed for {video_id}: {e}") from e

        if not resp.ok:
            logger.error(f"Supadata API error for {video_id}: {resp.status_code} {resp.reason}. Body: {resp.text}")
            if resp.status_code == 404:
                logger.info(f"Transcript not found via Supadata for videoId: {video_id}")
                return []
            raise RemoteProviderError(f"Supadata returned HTTP {resp.status_code} for {video_id}")

        content_type = resp.headers.get("content-type") or ""
        if "application/json" not in content_type:
            logger.error(f"Unexpected content-type from Supadata API for {video_id}: {content_type or None}")
            raise RemoteProviderError(f"Unexpected content-type {content_type!r} for {video_id}")

        try:
            body = resp.json()
        except ValueError as e:
            raise NetworkError(f"Could not decode Supadata response for {video_id}: {e}") from e

        try:
            payload = ProviderPayload.model_validate(body)
        except ValidationError as e:
            raise RemoteProviderError(f"Malformed Supadata response for {video_id}: {e}") from e

        if payload.error:
            logger.error(f"Supadata API returned error in JSON for {video_id}: {payload.error}")
            raise RemoteProviderError(payload.error)

        if not payload.transcript:
            logger.info(f"No transcript data in Supadata response for videoId: {video_id}")
            return []
        return payload.transcript
