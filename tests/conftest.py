"""Pytest shared fixtures for the Keycloak admin client."""
import functools
import json
import pathlib
import sys
import time
from types import SimpleNamespace
from typing import Any, Optional

# Add project root to Python path
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import jwt
import pytest
import requests

from keycloak_admin import Keycloak

KC_URL = "http://keycloak.test"
TOKEN_SIGNING_KEY = "unit-test-signing-key-0123456789abcdef"


def make_token(lifetime: int = 300, **claims: Any) -> str:
    """Signed JWT with an exp claim `lifetime` seconds from now."""
    payload = {"sub": "admin", "exp": int(time.time()) + lifetime, **claims}
    return jwt.encode(payload, TOKEN_SIGNING_KEY, algorithm="HS256")


def make_response(
    status_code: int = 200,
    payload: Any = None,
    headers: Optional[dict] = None,
    url: str = "",
) -> requests.Response:
    """Build a real requests.Response carrying a JSON (or text) body."""
    resp = requests.Response()
    resp.status_code = status_code
    if payload is None:
        resp._content = b""
    elif isinstance(payload, str):
        resp._content = payload.encode()
    else:
        resp._content = json.dumps(payload).encode()
        resp.headers["Content-Type"] = "application/json"
    resp.headers.update(headers or {})
    resp.url = url
    return resp


# ─────────────────────────────────────────────────────────────────────────────
# Network Guard Rails
# ─────────────────────────────────────────────────────────────────────────────
@pytest.fixture(autouse=True)
def _block_network(monkeypatch, request):
    """
    Prevent unit tests from reaching a real server.

    Integration tests are explicitly marked with @pytest.mark.integration and
    are allowed to perform real HTTP calls by skipping this fixture.
    """
    if request.node.get_closest_marker("integration"):
        return

    def _refuse(verb):
        def _stub(url, *args, **kwargs):
            raise RuntimeError(f"Unexpected HTTP {verb} in unit test: {url}")
        return _stub

    for verb in ("get", "post", "put", "delete"):
        monkeypatch.setattr(requests, verb, _refuse(verb.upper()))


# ─────────────────────────────────────────────────────────────────────────────
# Fake Keycloak server
# ─────────────────────────────────────────────────────────────────────────────
class FakeKeycloak:
    """Routes requests.* calls to canned responses and records them.

    Routes are keyed by (METHOD, path) where path is relative to the server
    root, e.g. ("GET", "/admin/realms/master/users"). Registering a route
    several times queues the responses; the last one repeats.
    """

    def __init__(self):
        self.routes: dict = {}
        self.calls: list = []
        self.token_requests: list = []
        self.token_lifetime = 300

    def route(self, method: str, path: str, payload: Any = None, status: int = 200, headers: Optional[dict] = None):
        self.routes.setdefault((method.upper(), path), []).append((status, payload, headers))
        return self

    def handle(self, method: str, url: str, **kwargs) -> requests.Response:
        if url.endswith("/protocol/openid-connect/token"):
            self.token_requests.append(kwargs.get("data"))
            token = make_token(self.token_lifetime)
            return make_response(200, {"access_token": token, "expires_in": self.token_lifetime}, url=url)

        path = url[len(KC_URL):]
        self.calls.append(SimpleNamespace(
            method=method,
            path=path,
            params=kwargs.get("params"),
            json=kwargs.get("json"),
            data=kwargs.get("data"),
            headers=kwargs.get("headers") or {},
        ))
        queued = self.routes.get((method, path))
        if not queued:
            return make_response(404, {"error": f"No route for {method} {path}"}, url=url)
        status, payload, headers = queued.pop(0) if len(queued) > 1 else queued[0]
        return make_response(status, payload, headers, url=url)

    @property
    def last(self) -> SimpleNamespace:
        return self.calls[-1]


@pytest.fixture()
def fake_keycloak(monkeypatch):
    """Fake Keycloak server wired into requests.get/post/put/delete."""
    fake = FakeKeycloak()
    for verb in ("get", "post", "put", "delete"):
        monkeypatch.setattr(requests, verb, functools.partial(fake.handle, verb.upper()))
    return fake


@pytest.fixture()
def keycloak(fake_keycloak):
    """Keycloak facade talking to the fake server."""
    return Keycloak(KC_URL, "admin", "admin-password")


@pytest.fixture()
def token_factory():
    """Factory for signed access tokens: token_factory(lifetime=300, **claims)."""
    return make_token


@pytest.fixture()
def response_factory():
    """Factory for requests.Response objects: response_factory(status, payload, headers)."""
    return make_response


# ─────────────────────────────────────────────────────────────────────────────
# Pytest Configuration
# ─────────────────────────────────────────────────────────────────────────────
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (requires a running Keycloak)"
    )
