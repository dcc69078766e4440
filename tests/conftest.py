import json

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import get_settings
from app.core.deps import get_manifest_source
from app.main import create_app
from app.services.cache import TTLCache
from app.services.manifest_source import ManifestSource

CH2_URL = "https://manifests.test/manifest_ch2.tsv"
CH3_URL = "https://manifests.test/manifest_ch3.json"


class FakeClock:
    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeRemote:
    """
    Serveur distant simulé : url -> (status, content-type, corps).
    Chaque appel réseau est enregistré dans `calls`.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []
        self.failures = {}

    def serve(self, url, body, content_type="text/tab-separated-values", status=200):
        self.routes[url] = (status, content_type, body)

    def fail(self, url, exc_type=httpx.ConnectError, message="connection refused"):
        self.failures[url] = (exc_type, message)

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.calls.append(url)
        if url in self.failures:
            exc_type, message = self.failures[url]
            raise exc_type(message, request=request)
        status, content_type, body = self.routes.get(url, (404, "text/plain", "missing"))
        return httpx.Response(
            status,
            content=body.encode("utf-8"),
            headers={"content-type": content_type},
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def remote():
    return FakeRemote()


@pytest.fixture
def source(remote, clock):
    cache = TTLCache(ttl_seconds=300, clock=clock)
    return ManifestSource(cache=cache, transport=remote.transport())


@pytest.fixture
def make_client(monkeypatch, source):
    """
    Construit un TestClient avec des settings de test et une source
    distante simulée (pas de réseau).
    """

    def _make(webhook_key: str = "", raise_server_exceptions: bool = True) -> TestClient:
        monkeypatch.setenv("APP_ENV", "test")
        monkeypatch.setenv("APP_NAME", "Manifest Lookup API (tests)")
        monkeypatch.setenv("WEBHOOK_KEY", webhook_key)
        monkeypatch.setenv("CHAPTER_MAP", json.dumps({"ch2": CH2_URL, "ch3": CH3_URL}))

        # IMPORTANT: vider le cache des settings pour prendre en compte les env
        get_settings.cache_clear()

        app = create_app()
        app.dependency_overrides[get_manifest_source] = lambda: source
        return TestClient(app, raise_server_exceptions=raise_server_exceptions)

    yield _make
    get_settings.cache_clear()


@pytest.fixture
def test_client(make_client):
    return make_client()
