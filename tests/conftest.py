"""Fixtures compartidas: una API falsa servida por `httpx.MockTransport`."""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest

from multiapi.adapters.http_client import HttpxTransport, build_client
from multiapi.adapters.session import ApiSession
from multiapi.core.config import AppSettings
from multiapi.core.services.client import MultiApiClient

TEST_BASE_URL = "https://api.test"


class FakeApi:
    """Responde respuestas enlatadas por path y registra cada request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: dict[str, Any] = {}

    def route(
        self,
        path: str,
        *,
        json_body: Any = None,
        content: bytes | None = None,
        status_code: int = 200,
    ) -> None:
        if content is None:
            content = json.dumps(json_body).encode("utf-8")
        self._routes[path] = (status_code, content)

    def fail(self, path: str, exc_type: type[httpx.TransportError] = httpx.ConnectError) -> None:
        self._routes[path] = exc_type

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self._routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, content=b"not found")
        if isinstance(route, type):
            raise route("connection refused", request=request)
        status_code, content = route
        return httpx.Response(status_code, content=content)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_params(self) -> dict[str, str]:
        return dict(self.last_request.url.params)

    def transport(self, settings: AppSettings) -> HttpxTransport:
        client = build_client(settings, transport=httpx.MockTransport(self.handler))
        return HttpxTransport(settings, client=client)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(base_url=TEST_BASE_URL)


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def session(settings: AppSettings, fake_api: FakeApi) -> ApiSession:
    api_session = ApiSession(settings, transport=fake_api.transport(settings))
    yield api_session
    api_session.close()


@pytest.fixture
def client(settings: AppSettings, fake_api: FakeApi) -> MultiApiClient:
    with MultiApiClient(settings, transport=fake_api.transport(settings)) as api:
        yield api


@pytest.fixture
def client_factory(fake_api: FakeApi):
    """Reemplazo de `MultiApiClient` para módulos que lo instancian ellos mismos."""

    def factory(settings: AppSettings | None = None, *, base_url: str | None = None, transport=None) -> MultiApiClient:
        settings = settings or AppSettings(base_url=TEST_BASE_URL)
        return MultiApiClient(settings, base_url=base_url, transport=fake_api.transport(settings))

    return factory
