import httpx
import pytest

from npm_plus.config import NPMPlusConfig
from npm_plus.packages.npm_client import NPMClient


class FakeUpstream:
    """Routes requests by URL path to canned responses and records them."""

    def __init__(self):
        self.routes = {}
        self.requests = []

    def add(self, path, json=None, status_code=200, text=None):
        self.routes[path] = (status_code, json, text)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode().split("?")[0]
        if path not in self.routes:
            return httpx.Response(404, text=f"no route for {path}")
        status_code, json, text = self.routes[path]
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json)


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def config():
    return NPMPlusConfig()


@pytest.fixture
def client(upstream, config):
    return NPMClient(config=config, transport=httpx.MockTransport(upstream.handler))
