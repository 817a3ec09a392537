import httpx
import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app
from services.cache_service import TTLCache
from services.geonames_service import get_city_cache
from utils import http_client


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def city_cache():
    cache = TTLCache()
    app.dependency_overrides[get_city_cache] = lambda: cache
    yield cache
    app.dependency_overrides.pop(get_city_cache, None)


class UpstreamRecorder:
    """Serves canned upstream responses and records every outbound request."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload = {}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.payload, (dict, list)):
            return httpx.Response(self.status_code, json=self.payload)
        return httpx.Response(self.status_code, text=self.payload)


@pytest.fixture
def upstream(monkeypatch):
    recorder = UpstreamRecorder()
    mock_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler))
    monkeypatch.setattr(http_client, "_client", mock_client)
    return recorder


@pytest.fixture
def geonames_user(monkeypatch):
    monkeypatch.setattr(settings, "geonames_user", "demo")


@pytest.fixture
def openai_key(monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-test")
