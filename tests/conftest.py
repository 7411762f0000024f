"""Test configuration for the httpcaller package."""

import sys
from pathlib import Path
from typing import Callable, List

import httpx
import pytest

# Ensure the package root is importable when tests are executed from the tests directory.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from httpcaller.config import get_settings  # noqa: E402

DEFAULT_BODY = {"test": "data", "status": "error"}


class RecordingTransport(httpx.MockTransport):
    """Mock transport that keeps every request it receives."""

    def __init__(self, handler: Callable) -> None:
        self.requests: List[httpx.Request] = []

        def record(request: httpx.Request):
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


class FailingStream(httpx.AsyncByteStream):
    def __init__(self) -> None:
        self.closed = False

    async def __aiter__(self):
        raise httpx.ReadError("read error")
        yield b""  # pragma: no cover

    async def aclose(self) -> None:
        self.closed = True


def json_handler(body=None, status_code: int = 200):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=DEFAULT_BODY if body is None else body)

    return handler


def text_handler(text: str):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text=text)

    return handler


def network_error_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("network error", request=request)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_client():
    """Return a factory building an ``AsyncClient`` over a recording transport."""

    def factory(handler=None):
        transport = RecordingTransport(handler or json_handler())
        return httpx.AsyncClient(transport=transport), transport

    return factory
