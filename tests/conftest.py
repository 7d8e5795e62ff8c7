"""Shared fixtures: a fake Proxmox API behind an httpx mock transport."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from pvelxc.api.client import ProxmoxClient
from pvelxc.commands import CommandFacade
from pvelxc.models.config import DisplayConfig

HOST = "pve.example.invalid:8006"
NODE = "pve"
TOKEN_ID = "root@pam!pvelxc"
TOKEN_SECRET = "0b6d1e2a-secret"

Route = tuple[int, Any] | Exception | Callable[[httpx.Request], httpx.Response]


class FakeProxmox:
    """Serve canned responses keyed by (method, path) and record requests."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Route] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, endpoint: str, route: Route) -> None:
        self.routes[(method, f"/api2/json{endpoint}")] = route

    def add_json(self, method: str, endpoint: str, data: Any, status: int = 200) -> None:
        self.add(method, endpoint, (status, {"data": data}))

    def calls(self, method: str, endpoint: str) -> list[httpx.Request]:
        path = f"/api2/json{endpoint}"
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"data": None})
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return route(request)
        status, body = route
        if isinstance(body, (bytes, str)):
            return httpx.Response(status, content=body)
        return httpx.Response(status, content=json.dumps(body).encode())

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def fake_api() -> FakeProxmox:
    return FakeProxmox()


@pytest.fixture
def make_client(fake_api: FakeProxmox) -> Callable[..., ProxmoxClient]:
    def _make(**overrides: Any) -> ProxmoxClient:
        kwargs = {
            "host": HOST,
            "node": NODE,
            "token_id": TOKEN_ID,
            "token_secret": TOKEN_SECRET,
        }
        kwargs.update(overrides)
        return ProxmoxClient(**kwargs, transport=fake_api.transport())

    return _make


@pytest.fixture
def client(make_client: Callable[..., ProxmoxClient]) -> ProxmoxClient:
    return make_client()


@pytest.fixture
def facade(client: ProxmoxClient) -> CommandFacade:
    return CommandFacade(client, DisplayConfig(host=HOST, node=NODE))
