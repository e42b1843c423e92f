import json
from urllib.parse import urlparse

import pytest

BASE = "https://police.test/api"


class FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str | None = None):
        self.status_code = status_code
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """
    Stands in for requests.Session. routes maps a relative path to either a
    FakeResponse or a callable(path, params) -> FakeResponse.
    """
    def __init__(self, routes=None, default=None):
        self.routes = routes or {}
        self.default = default
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, **kwargs):
        path = urlparse(url).path[len(urlparse(BASE).path) + 1:]
        self.calls.append({"url": url, "path": path, "params": params, "headers": headers, **kwargs})
        route = self.routes.get(path, self.default)
        if route is None:
            return FakeResponse(404, text="Not Found")
        if callable(route):
            return route(path, params)
        return route

    def close(self):
        self.closed = True


@pytest.fixture
def make_client():
    from police_api import Client

    def _make(routes=None, default=None, **kwargs):
        session = FakeSession(routes, default)
        return Client(BASE, session=session, **kwargs), session

    return _make
