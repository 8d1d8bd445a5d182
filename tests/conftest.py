from __future__ import annotations

import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from ventas.application.services.session import SessionService
from ventas.infrastructure.api.gateway import ApiGateway
from ventas.infrastructure.api.token_issuer import VentasTokenIssuer
from ventas.infrastructure.api.ventas_api import VentasApi
from ventas.infrastructure.navigation.recording_navigator import RecordingNavigator
from ventas.infrastructure.store.memory_token_store import MemoryTokenStore

BASE_URL = "https://ventas.test/api"


class FakeClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now = self.now + timedelta(**kwargs)


class Backend:
    """
    Stand-in for the ventas REST API behind httpx.MockTransport.
    Handlers are keyed by (method, path relative to /api); every request is recorded.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.routes: dict[tuple[str, str], Callable] = {}

    def on(self, method: str, path: str, handler: Callable) -> None:
        self.routes[(method, path)] = handler

    def json(self, method: str, path: str, status: int, body) -> None:
        self.on(method, path, lambda request: httpx.Response(status, json=body))

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and _relative(r) == path]

    def bodies(self, method: str, path: str) -> list[dict]:
        return [json.loads(r.content) for r in self.calls(method, path)]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, _relative(request)))
        if handler is None:
            return httpx.Response(404, json={"detail": "Not found."})
        response = handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response


def _relative(request: httpx.Request) -> str:
    path = request.url.path
    return path[len("/api"):] if path.startswith("/api") else path


def make_client(backend: Backend) -> httpx.AsyncClient:
    return httpx.AsyncClient(base_url=BASE_URL, transport=httpx.MockTransport(backend))


@pytest.fixture
def backend() -> Backend:
    b = Backend()
    b.json("POST", "/token/", 200, {"access": "token-1", "refresh": "r-1"})
    return b


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def navigator() -> RecordingNavigator:
    return RecordingNavigator()


@pytest.fixture
def client(backend: Backend) -> httpx.AsyncClient:
    return make_client(backend)


@pytest.fixture
def session(client: httpx.AsyncClient, navigator: RecordingNavigator, clock: FakeClock) -> SessionService:
    return SessionService(
        store=MemoryTokenStore(),
        issuer=VentasTokenIssuer(client),
        navigator=navigator,
        ttl=timedelta(hours=24),
        login_path="/",
        clock=clock,
    )


@pytest.fixture
def gateway(client: httpx.AsyncClient, session: SessionService) -> ApiGateway:
    return ApiGateway(client=client, session=session)


@pytest.fixture
def api(gateway: ApiGateway) -> VentasApi:
    return VentasApi(gateway)
