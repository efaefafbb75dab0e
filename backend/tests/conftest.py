import os
import sys
from pathlib import Path
from typing import Any, Optional

import httpx
import pytest
import requests

# Tests always start in mock mode; empty values also mask any local .env file.
os.environ["KOLOSAL_API_KEY"] = ""
os.environ["KOLOSAL_API_URL"] = ""

# Add the backend directory so `inclusive_hub` imports resolve during tests
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.append(str(BACKEND_DIR))

from inclusive_hub.main import create_app  # noqa: E402
from inclusive_hub.services.mock_data import MockDataGenerator  # noqa: E402
from inclusive_hub.services.store import PersonaStore  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def generator() -> MockDataGenerator:
    return MockDataGenerator(seed=42069)


@pytest.fixture
def app(generator):
    store = PersonaStore(generator.personas(50))
    return create_app(generator=generator, store=store)


@pytest.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Stands in for ``requests.Session``; records calls and replays a canned outcome."""

    def __init__(self, response: Optional[FakeResponse] = None, error: Optional[Exception] = None):
        self.response = response
        self.error = error
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    def post(self, url, **kwargs):
        self.calls.append({"method": "POST", "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def timeout_session() -> FakeSession:
    return FakeSession(error=requests.Timeout("read timed out"))
