import json
import pytest
import requests
from src.providers.supadata import SupadataProvider

class FakeSession:
    """Stands in for requests.Session; returns queued responses and records calls."""

    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

def build_response(status=200, body=None, content_type="application/json", text=None):
    resp = requests.Response()
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Error"
    if content_type:
        resp.headers["Content-Type"] = content_type
    if text is None:
        text = json.dumps(body) if body is not None else ""
    resp._content = text.encode("utf-8")
    resp.encoding = "utf-8"
    return resp

@pytest.fixture
def make_response():
    return build_response

@pytest.fixture
def session():
    return FakeSession()

@pytest.fixture
def provider(session):
    return SupadataProvider(api_key="test-key", base_url="https://api.example.test/transcript", session=session)
