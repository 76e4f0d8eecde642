"""Shared fixtures: isolated environment, fake registry, recording notifier."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from sectiongen.config import SectiongenConfig, get_config
from sectiongen.notify import Notifier
from sectiongen.registry import RegistryClient

REGISTRY = "https://registry.test"


class RecordingNotifier(Notifier):
    """Notifier that keeps messages in memory instead of printing them."""

    def __init__(self) -> None:
        super().__init__()
        self.infos: list[str] = []
        self.successes: list[tuple[str, list[str]]] = []

    def info(self, message: str) -> None:
        with self._lock:
            self.infos.append(message)

    def success(self, headline: str, items=()) -> None:
        with self._lock:
            self.successes.append((headline, list(items)))


class FakeRegistry:
    """Maps request paths to (status, body) and records every request."""

    def __init__(self, routes: dict[str, tuple[int, Any]] | None = None):
        self.routes = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body: Any, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        status, body = self.routes.get(request.url.path, (404, {"error": "not found"}))
        if isinstance(body, (bytes, str)):
            content = body.encode() if isinstance(body, str) else body
        else:
            content = json.dumps(body).encode()
        return httpx.Response(status, content=content, headers={"content-type": "application/json"})


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch, tmp_path):
    """Keep tests away from the user's shell, .env file and log directory."""
    for var in (
        "SECTIONGEN_REGISTRY_URL",
        "HYDROGEN_UI_URL",
        "SECTIONGEN_TIMEOUT",
        "SECTIONGEN_MAX_WORKERS",
        "SECTIONGEN_LOG_LEVEL",
        "SHOPIFY_HYDROGEN_ARG_SECTION",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("SECTIONGEN_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("SECTIONGEN_HOME_DIR", str(tmp_path / "home"))
    monkeypatch.chdir(tmp_path)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def config() -> SectiongenConfig:
    return SectiongenConfig(registry_url=REGISTRY)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def fake_registry() -> FakeRegistry:
    return FakeRegistry()


@pytest.fixture
def make_client(fake_registry, notifier) -> Callable[[SectiongenConfig], RegistryClient]:
    """Build a RegistryClient whose HTTP traffic goes to ``fake_registry``."""
    clients: list[httpx.Client] = []

    def _make(cfg: SectiongenConfig) -> RegistryClient:
        http = httpx.Client(transport=httpx.MockTransport(fake_registry.handler))
        clients.append(http)
        return RegistryClient(cfg, http_client=http, notifier=notifier)

    yield _make
    for http in clients:
        http.close()


@pytest.fixture
def project(tmp_path):
    path = tmp_path / "project"
    path.mkdir()
    return path
